"""Command-line interface for fluentsql.

Usage::

    fluentsql update TABLE --set COL=TEXT --set-int COL=N [--where TEXT ...] [--any]
    fluentsql select TABLE [--columns a,b] [--where TEXT ...] [--order-by COL] [--limit N]
    fluentsql delete TABLE [--where TEXT ...]
    fluentsql insert TABLE --set COL=TEXT ...
    python -m fluentsql ...

Global options ``--config FILE`` or ``--legacy`` (not both) select render options;
``-v`` turns on debug logging.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from .config import RenderOptions, options_from_config
from .exc import FluentSQLError
from .query.base import Statement
from .query.delete import DeleteStatement
from .query.insert import InsertStatement
from .query.select import SelectStatement
from .query.update import UpdateStatement

_TRUE = ('true', '1', 'yes', 'on')
_FALSE = ('false', '0', 'no', 'off')


# ── Argument types ────────────────────────────────────────────────

def _split_pair(text: str) -> tuple[str, str]:
    column, sep, value = text.partition('=')
    column = column.strip()
    if not sep or not column:
        raise argparse.ArgumentTypeError(f"expected COL=VALUE, got {text!r}")
    return column, value


def _text_pair(text: str) -> tuple[str, Any]:
    return _split_pair(text)


def _int_pair(text: str) -> tuple[str, Any]:
    column, value = _split_pair(text)
    try:
        return column, int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{column}: {value!r} is not an integer")


def _bool_pair(text: str) -> tuple[str, Any]:
    column, value = _split_pair(text)
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return column, True
    if lowered in _FALSE:
        return column, False
    raise argparse.ArgumentTypeError(f"{column}: {value!r} is not a boolean")


# ── Parser ────────────────────────────────────────────────────────

def _add_value_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("values")
    group.add_argument(
        "--set", dest="values", action="append", type=_text_pair, default=[],
        metavar="COL=TEXT", help="Quoted text value.",
    )
    group.add_argument(
        "--set-int", dest="values", action="append", type=_int_pair,
        metavar="COL=N", help="Integer value.",
    )
    group.add_argument(
        "--set-bool", dest="values", action="append", type=_bool_pair,
        metavar="COL=BOOL", help="Boolean value, rendered as 1 or 0.",
    )


def _add_where_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("filter")
    group.add_argument(
        "--where", action="append", default=[], metavar="TEXT",
        help="Raw WHERE condition; repeat to add more.",
    )
    group.add_argument(
        "--any", action="store_true", default=False,
        help="Join conditions with OR instead of AND.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fluentsql",
        description="fluentsql CLI — render SQL statements from the command line.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    options = parser.add_mutually_exclusive_group()
    options.add_argument("--config", help="Render options file (.json, .toml, .yaml).")
    options.add_argument(
        "--legacy", action="store_true", default=False,
        help="Omit the SET keyword and keep assignments on clear.",
    )
    sub = parser.add_subparsers(dest="command")

    upd = sub.add_parser("update", help="Render an UPDATE statement.")
    upd.add_argument("table")
    _add_value_args(upd)
    _add_where_args(upd)

    sel = sub.add_parser("select", help="Render a SELECT statement.")
    sel.add_argument("table")
    sel.add_argument("--columns", default="", help="Comma-separated column names.")
    sel.add_argument("--distinct", action="store_true", default=False)
    sel.add_argument("--order-by", action="append", default=[], metavar="COL")
    sel.add_argument("--desc", action="store_true", default=False,
                     help="Sort --order-by columns descending.")
    sel.add_argument("--limit", type=int)
    _add_where_args(sel)

    dele = sub.add_parser("delete", help="Render a DELETE statement.")
    dele.add_argument("table")
    _add_where_args(dele)

    ins = sub.add_parser("insert", help="Render an INSERT statement.")
    ins.add_argument("table")
    _add_value_args(ins)

    return parser


# ── Commands ──────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = _options(args)
        statement = _build_statement(args, options)
        print(statement.render())
    except (FluentSQLError, OSError, ValueError, ImportError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def _options(args: argparse.Namespace) -> RenderOptions:
    if args.legacy:
        return RenderOptions.legacy()
    if args.config:
        return options_from_config(args.config)
    return RenderOptions()


def _build_statement(args: argparse.Namespace, options: RenderOptions) -> Statement:
    if args.command == "update":
        upd = UpdateStatement(args.table, options)
        for column, value in args.values:
            upd.set(column, value)
        return _apply_where(upd, args)

    if args.command == "insert":
        ins = InsertStatement(args.table, options)
        for column, value in args.values:
            ins.value(column, value)
        return ins

    if args.command == "select":
        sel = SelectStatement(args.table, options)
        sel.columns(*[c.strip() for c in args.columns.split(",") if c.strip()])
        if args.distinct:
            sel.distinct()
        for column in args.order_by:
            sel.order_by(column, desc=args.desc)
        if args.limit is not None:
            sel.limit(args.limit)
        return _apply_where(sel, args)

    return _apply_where(DeleteStatement(args.table, options), args)


def _apply_where(statement: Any, args: argparse.Namespace) -> Statement:
    for condition in args.where:
        if not condition.strip():
            continue
        if args.any:
            statement.or_()
        else:
            statement.and_()
        statement.where(condition)
    return statement


if __name__ == "__main__":
    sys.exit(main())
