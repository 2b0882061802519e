#!/usr/bin/env python3
import argparse
import sys
from typing import Optional, Tuple

from rich.console import Console
from rich.table import Table

from common import PREFIXES, join_prefix, setup_logging, split_prefix
from range_source import ENV_VAR, load_range_table
from range_table import RangeTable

def display_source(console: Console, table: RangeTable):
    """Display where the range data came from and how much of it there is."""
    info = Table(title="ISBN Range Data")
    info.add_column("Field")
    info.add_column("Value")

    info.add_row("Source", table.source)
    info.add_row("Serial", table.serial or "")
    info.add_row("Date", table.date or "")
    for prefix in table.prefixes():
        info.add_row(f"Groups ({prefix})", f"{len(table.groups(prefix)):,}")
    info.add_row("Max Group Code Length", str(table.max_group_code_length()))

    console.print(info)

def resolve_group(table: RangeTable, query: str, default_prefix: str) -> Optional[Tuple[str, str]]:
    """
    Turn '979-12', '2' or ISBN digits such as '978-2-07-040850' into a
    registered (prefix, group code) pair.
    """
    query = query.replace(' ', '')
    if query[:4] in ('978-', '979-'):
        prefix, rest = query[:3], query[4:]
    else:
        prefix, rest = default_prefix, query

    split = split_prefix(join_prefix(prefix, rest.replace('-', '')))
    if split is None:
        return None
    prefix, digits = split

    if table.agency_name(prefix, digits) is not None:
        return prefix, digits

    group_code = table.find_group(prefix, digits)
    if group_code is None:
        return None
    return prefix, group_code

def display_group(console: Console, table: RangeTable, prefix: str, group_code: str):
    agency = table.agency_name(prefix, group_code)
    ranges = table.publisher_ranges(prefix, group_code)

    if not ranges:
        console.print(f"[yellow]{join_prefix(prefix, group_code)} {agency}: no publisher ranges assigned[/yellow]")
        return

    rules = Table(title=f"{join_prefix(prefix, group_code)} {agency}")
    rules.add_column("Low", justify="right")
    rules.add_column("High", justify="right")
    rules.add_column("Length", justify="right")

    for publisher_range in ranges:
        rules.add_row(publisher_range.low, publisher_range.high, str(publisher_range.length))

    console.print(rules)

def main():
    parser = argparse.ArgumentParser(description="Show the ISBN range data in use")
    parser.add_argument("group", nargs="?",
                        help="Registration group to show, e.g. 979-12, 2 or a whole ISBN")
    parser.add_argument("--prefix", choices=PREFIXES, default="978",
                        help="Prefix for a group given without one (default: 978)")
    parser.add_argument("--range-message",
                        help=f"RangeMessage file to use instead of ${ENV_VAR} and the default locations")
    args = parser.parse_args()

    setup_logging()
    console = Console()

    environ = {ENV_VAR: args.range_message} if args.range_message else None
    table = load_range_table(environ=environ)

    display_source(console, table)

    if args.group is None:
        return

    resolved = resolve_group(table, args.group, args.prefix)
    if resolved is None:
        console.print(f"[red]No registration group matches '{args.group}'[/red]")
        sys.exit(1)

    display_group(console, table, *resolved)

if __name__ == "__main__":
    main()
