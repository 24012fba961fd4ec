#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyATHYG command-line interface

Provides quick checks on ATHYG catalog files:

1. **load**    - Parse files and report how many records they hold
2. **summary** - Parse files and report, per column, how many records
   carry a value

Usage
-----
::

    # Parse both halves of the V3 catalog
    python -m pyathyg.cli load --schema 3 athyg_v31-1.csv athyg_v31-2.csv

    # Column fill rates of a V2 file, parsed with four threads
    python -m pyathyg.cli summary --schema 2 --workers 4 athyg_v24.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pyathyg.converters.columns import present_counts
from pyathyg.exceptions import PyATHYGError
from pyathyg.readers.athyg import load_catalog
from pyathyg.readers.schemas import SUPPORTED_VERSIONS
from pyathyg.utils.constants import DEFAULT_ENCODING

logger = logging.getLogger("pyathyg.cli")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _load(args):
    logger.debug(
        "Loading %d V%d file(s) with %d worker(s)",
        len(args.files),
        args.schema,
        args.workers,
    )
    return load_catalog(
        args.schema,
        args.files,
        workers=args.workers,
        encoding=args.encoding,
    )


def cmd_load(args):
    """Parse catalog files and print the record count."""
    records = _load(args)
    print(f"V{args.schema}: {len(records)} records from {len(args.files)} file(s)")
    return 0


def cmd_summary(args):
    """Parse catalog files and print per-column fill counts."""
    records = _load(args)
    counts = present_counts(records, schema=args.schema)
    total = len(records)

    width = max(len(name) for name in counts)
    print(f"{'column':<{width}}  {'present':>10}  {'fill':>7}")
    print("-" * (width + 21))
    for name, n in counts.items():
        fill = 100.0 * n / total if total else 0.0
        print(f"{name:<{width}}  {n:>10d}  {fill:>6.1f}%")
    print(f"\n{total} records")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyathyg",
        description="PyATHYG catalog tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pyathyg.cli load --schema 1 athyg_v1.csv
    python -m pyathyg.cli load --schema 3 athyg_v31-1.csv athyg_v31-2.csv
    python -m pyathyg.cli summary --schema 2 --workers 4 athyg_v24.csv
""",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--schema", "-s",
        type=int,
        required=True,
        choices=list(SUPPORTED_VERSIONS),
        help="ATHYG version of the files",
    )
    common.add_argument(
        "--workers", "-w",
        type=int,
        default=1,
        help="Files parsed concurrently (default: 1)",
    )
    common.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Text encoding of the files (default: {DEFAULT_ENCODING})",
    )
    common.add_argument("files", nargs="+", help="ATHYG CSV files")

    sub = parser.add_subparsers(dest="command", help="Command to run")
    sub.add_parser("load", parents=[common], help="Parse files and count records")
    sub.add_parser("summary", parents=[common], help="Per-column fill counts")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    t0 = time.time()

    commands = {
        "load": cmd_load,
        "summary": cmd_summary,
    }

    try:
        rc = commands[args.command](args)
    except PyATHYGError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    elapsed = time.time() - t0
    print(f"\nCompleted in {elapsed:.1f}s")
    return rc


if __name__ == "__main__":
    sys.exit(main())
