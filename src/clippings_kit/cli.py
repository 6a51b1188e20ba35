#!/usr/bin/env python3
"""
Clippings Parser - CLI Entry Point
==================================
Parses an e-reader clippings export and prints the result.

Usage:
    clippings-kit "My Clippings.txt"
    clippings-kit "My Clippings.txt" --json
    clippings-kit "My Clippings.txt" --json --sorted
    clippings-kit "My Clippings.txt" --log-level INFO
"""

import argparse
import logging
import sys
from pathlib import Path
from pprint import pformat

from .config import ParserConfig
from .errors import ClippingsParseError
from .models import sort_clippings_list
from .parsing import ClippingsParser
from .serialization import dump_groups

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clippings-kit",
        description="Parse an e-reader clippings export.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "My Clippings.txt"
  %(prog)s "My Clippings.txt" --json --sorted
        """,
    )

    parser.add_argument("input_file", type=Path, help="Clippings file path")

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON wire format instead of a debug dump",
    )

    parser.add_argument(
        "--sorted",
        action="store_true",
        help="Sort books by (author, title)",
    )

    parser.add_argument(
        "--keep-bom",
        action="store_true",
        help="Do not strip a leading byte-order mark",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s",
    )

    try:
        text = args.input_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.input_file}: {e}", file=sys.stderr)
        return 1

    parser = ClippingsParser(ParserConfig(strip_bom=not args.keep_bom))
    try:
        document = parser.parse(text)
    except ClippingsParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.partial:
            print(
                f"({len(e.partial)} books parsed before the error)",
                file=sys.stderr,
            )
        return 1

    groups = document.to_list()
    if args.sorted:
        sort_clippings_list(groups)

    if args.json:
        print(dump_groups(groups))
    else:
        print(pformat(groups))

    logger.debug("Printed %d books", len(groups))
    return 0


if __name__ == "__main__":
    sys.exit(main())
