"""
Takes the ISBN range table and generates a JSON of:
{ [ISBN prefix]: "country/language/agency" }
"""

import argparse
import json
from pathlib import Path

from common import join_prefix, normalize_isbn, setup_logging
from range_source import ENV_VAR, load_range_table
from range_table import RangeTable

def process_data(table: RangeTable, output_path: Path) -> None:
    print(f"### Processing {table.source}")

    isbn_map = {}

    for prefix, group_code, entry in table:
        isbn_map[normalize_isbn(join_prefix(prefix, group_code))] = entry.agency

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(isbn_map, f, separators=(',', ':'), sort_keys=True, ensure_ascii=False)

    print(f"### Output written to {output_path}")

def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('output', type=Path, help='Output path')
    parser.add_argument('--range-message', type=Path,
                        help=f'RangeMessage file to use instead of ${ENV_VAR} and the default locations')
    args = parser.parse_args()

    setup_logging()

    environ = {ENV_VAR: str(args.range_message)} if args.range_message else None
    process_data(load_range_table(environ=environ), args.output)

if __name__ == '__main__':
    main()
