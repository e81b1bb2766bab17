# tabletest/cli.py
"""tabletest CLI

Usage)
    $ tabletest check tables/leap_year.table -D
    $ tabletest dump --input tables/leap_year.table --with-quotes
    $ tabletest dump --text "a | [x, y] | {1, 2}"

Commands
--------
- check : parse a table file and report its row/column counts
- dump  : parse a table and print headers and rows back in table syntax

Debug mode (-D/--debug) prints per-stage details to stderr.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .errors import TableParseError
from .grammar.loader import load_table_text
from .grammar.table import Table, parse_table
from .parser.values import to_text

# ------------------------------
# Helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _load(text: Optional[str], path: Optional[str], debug: bool) -> Table:
    if text is None:
        text = load_table_text(path)
        if debug: _eprint(f"[DEBUG] loaded {path} | chars={len(text)}")
    table = parse_table(text)
    if debug: _eprint("[DEBUG] table ready | header=%d rows=%d" %
                      (table.column_count, table.row_count))
    return table


def _print_table_summary(table: Table) -> None:
    _eprint("\n[Headers]")
    _eprint("  " + ", ".join(table.headers(with_quotes=True)))
    _eprint(f"Rows: {table.row_count}")
    for i, row in enumerate(table):
        if row.value_count != table.column_count:
            _eprint(f"  row {i}: {row.value_count} values, header has {table.column_count}")


def _render_row(values, with_quotes: bool) -> str:
    return " | ".join(to_text(v, with_quotes=with_quotes) for v in values)

# ------------------------------
# Commands
# ------------------------------

def cmd_check(args) -> int:
    try:
        table = _load(None, args.file, args.debug)
    except TableParseError as e:
        _eprint("[PARSE ERROR]")
        _eprint(str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if args.debug:
        _print_table_summary(table)

    print(f"[CHECK OK] rows={table.row_count} columns={table.column_count}")
    return 0


def cmd_dump(args) -> int:
    try:
        table = _load(args.text, args.input, args.debug)
    except TableParseError as e:
        _eprint("[PARSE ERROR]")
        _eprint(str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    print(_render_row(table.header.values, args.with_quotes))
    for row in table:
        print(_render_row(row.values, args.with_quotes))
    return 0

# ------------------------------
# Entry point
# ------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="tabletest", description="tabletest table parser CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="parse a table file and report its shape")
    p_check.add_argument("file", help="table file")
    p_check.add_argument("-D", "--debug", action="store_true", help="print debug details to stderr")
    p_check.set_defaults(func=cmd_check)

    p_dump = sub.add_parser("dump", help="parse a table and print it back in table syntax")
    src_group = p_dump.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="table text")
    src_group.add_argument("--input", help="table file path")
    p_dump.add_argument("--with-quotes", action="store_true", help="keep the quotes values were written with")
    p_dump.add_argument("-D", "--debug", action="store_true", help="print debug details to stderr")
    p_dump.set_defaults(func=cmd_dump)

    args = ap.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
