# -*- coding: utf-8 -*-
"""
PhotoDex CLI - Headless catalog validation.

Usage::

    python -m photodex data.json
    python -m photodex https://example.org/data.json --expected 1025
    python -m photodex data.json --summary --log-level INFO

Exit status is 0 when the document passes every check, 1 when any
discrepancy is found, and 2 when the document cannot be read.

License
-------
MIT License
Copyright (c) 2026 PhotoDex contributors
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import argparse
import logging
import sys
from typing import List, Optional


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photodex",
        description="PhotoDex — Validate the integrity of a catalog document.",
    )
    parser.add_argument(
        "data",
        nargs="?",
        default=None,
        help="Path or URL of the catalog document (default: PHOTODEX_DATA, "
        "then ~/.photodex/config.json, then data.json).",
    )
    parser.add_argument(
        "--expected",
        type=int,
        default=None,
        help="Expected number of entries (default: from config, 1025).",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Also print the number of captured entries.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    from photodex.catalog.fetcher import CatalogLoadError, ResourceFetcher
    from photodex.catalog.models import Catalog
    from photodex.catalog.resolver import resolve_data_source
    from photodex.core.config import load_config
    from photodex.core.summary import captured_count, count_label
    from photodex.core.validation import validate_document

    config = load_config()
    source = resolve_data_source(args.data)
    expected = args.expected if args.expected is not None else config.entry_count

    try:
        data = ResourceFetcher(timeout=config.request_timeout).fetch_document(source)
    except CatalogLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    report = validate_document(data, expected_count=expected)
    for discrepancy in report.discrepancies:
        print(f"✗ {discrepancy.message}")

    if args.summary:
        print(count_label(captured_count(Catalog.from_document(data))))

    if report.ok:
        print(f"✓ {report.checked} entries passed all checks")
    else:
        print(
            f"\nValidation failed: {len(report.discrepancies)} discrepancies",
            file=sys.stderr,
        )
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
