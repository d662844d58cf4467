from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional, TextIO

from dotenv import load_dotenv

from config import AppConfig, configure_logging, load_config
from patternkit.exceptions import PatternKitError
from patternkit.parsing import ParserFactory
from patternkit.sorting import DataSorter, SortStrategyFactory


logger = logging.getLogger(__name__)


class InputError(Exception):
    """An input file could not be read."""


class UsageError(Exception):
    """Invalid command-line input detected after argument parsing."""


def _single_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"must be a single character, got {value!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured argparse parser with the sort, parse and list subcommands.
    """

    parser = argparse.ArgumentParser(
        prog="patternkit", description="Sort values and parse data files"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config (defaults to PATTERNKIT_CONFIG or patternkit.yaml)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sort_p = sub.add_parser("sort", help="Sort values with a pluggable strategy")
    sort_p.add_argument(
        "--strategy",
        default=None,
        help="Strategy name (default: config.default_strategy)",
    )
    sort_p.add_argument(
        "--numeric",
        action="store_true",
        help="Compare values as numbers instead of strings",
    )
    sort_p.add_argument(
        "values",
        nargs="*",
        help="Values to sort; read one per line from stdin when omitted",
    )

    parse_p = sub.add_parser("parse", help="Parse a data file and print its records as JSON")
    parse_p.add_argument(
        "--type",
        dest="type_tag",
        default=None,
        help="Parser type tag (default: from file extension, else config.default_parser)",
    )
    parse_p.add_argument(
        "--delimiter",
        type=_single_char,
        default=None,
        help="CSV delimiter (default: config.csv_delimiter)",
    )
    parse_p.add_argument(
        "--no-header",
        action="store_true",
        help="Treat the first CSV row as data instead of a header",
    )
    parse_p.add_argument("path", help="File to parse, or '-' for stdin")

    sub.add_parser("list", help="List registered sort strategies and parser types")

    return parser


def _to_number(value: str) -> Any:
    try:
        return int(value)
    except ValueError:
        return float(value)


def run_sort(args: argparse.Namespace, config: AppConfig, *, stdin: TextIO, stdout: TextIO) -> None:
    values: List[str] = list(args.values) or [line.strip() for line in stdin if line.strip()]

    data: List[Any] = values
    if args.numeric:
        try:
            data = [_to_number(v) for v in values]
        except ValueError as e:
            raise UsageError(f"--numeric given but a value is not a number: {e}") from e

    strategy = SortStrategyFactory.get_strategy(args.strategy or config.default_strategy)
    sorter = DataSorter(strategy)
    for item in sorter.sort(data):
        print(item, file=stdout)


def _resolve_type(args: argparse.Namespace, config: AppConfig) -> str:
    if args.type_tag:
        return args.type_tag
    if args.path != "-":
        _, ext = os.path.splitext(args.path)
        if ext:
            return ParserFactory.type_for_file(args.path)
    return config.default_parser


def run_parse(args: argparse.Namespace, config: AppConfig, *, stdin: TextIO, stdout: TextIO) -> None:
    type_tag = _resolve_type(args, config)

    options = {}
    if type_tag.strip().lower() == "csv":
        options = {
            "delimiter": args.delimiter or config.csv_delimiter,
            "has_header": config.csv_has_header and not args.no_header,
        }
    parser = ParserFactory.create_parser(type_tag, **options)

    if args.path == "-":
        content, source = stdin.read(), "<stdin>"
    else:
        try:
            with open(args.path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Cannot read {args.path}: {e}") from e
        source = args.path

    logger.info("%s from %s", parser.describe(), source)
    document = parser.parse(content, source=source)
    json.dump(document.records, stdout, indent=2, ensure_ascii=False, default=str)
    stdout.write("\n")


def run_list(stdout: TextIO) -> None:
    print("Sort strategies:", file=stdout)
    for name in SortStrategyFactory.get_supported_strategies():
        print(f"  {name}", file=stdout)
    print("Parser types:", file=stdout)
    for tag in ParserFactory.get_supported_types():
        print(f"  {tag}", file=stdout)


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    load_dotenv(override=False)

    parser = _build_parser()
    args = parser.parse_args(argv)
    config_path = args.config or os.getenv("PATTERNKIT_CONFIG")
    config = load_config(config_path)
    configure_logging(config.debug_level)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        if args.command == "sort":
            run_sort(args, config, stdin=stdin, stdout=stdout)
        elif args.command == "parse":
            run_parse(args, config, stdin=stdin, stdout=stdout)
        else:
            run_list(stdout)
    except UsageError as e:
        parser.error(str(e))
    except (PatternKitError, InputError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
