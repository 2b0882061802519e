"""
Takes a RangeMessage XML (plain or .zst) and generates the built-in range data
module, range_data.py
"""

import argparse
from pathlib import Path
import sys

from common import setup_logging
from range_errors import SourceUnavailable, StructureError
from range_message import RangeMessageParser
from range_table import RangeTable

HEADER = '''"""
Built-in ISBN range data, used when no RangeMessage.xml can be loaded.

Generated by generate_range_data.py, do not edit by hand.
"""
'''

def render_module(table: RangeTable) -> str:
    data = table.to_data()
    lines = [
        HEADER,
        f"SERIAL = {table.serial!r}",
        f"DATE = {table.date!r}",
        "",
        "RANGE_DATA = {",
    ]

    for prefix in table.prefixes():
        lines.append(f"    {prefix!r}: {{")
        for code, (agency, ranges) in data[prefix].items():
            ranges_repr = ', '.join(f"({low!r}, {high!r})" for low, high in ranges)
            lines.append(f"        {code!r}: ({agency!r}, [{ranges_repr}]),")
        lines.append("    },")

    lines.append("}")
    return '\n'.join(lines) + '\n'

def process_data(input_path: Path, output_path: Path) -> None:
    print(f"### Processing {input_path}")

    parser = RangeMessageParser()
    table = parser.parse_file(input_path)
    if parser.skipped:
        print(f"### Skipped {len(parser.skipped)} malformed groups")

    print(f"### Serial {table.serial}, date {table.date}, {len(table)} groups")

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(render_module(table))

    print(f"### Output written to {output_path}")

def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('input', type=Path, help='RangeMessage file path')
    parser.add_argument('output', type=Path, help='Output path, usually range_data.py')
    args = parser.parse_args()

    setup_logging()

    try:
        process_data(args.input, args.output)
    except (SourceUnavailable, StructureError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == '__main__':
    main()
