from __future__ import annotations

import argparse
import logging

from ...core.errors import CatalogueError
from ...infra.ts_reader import read_catalogue
from .checks import validate_catalogue

log = logging.getLogger(__name__)


def check(args: argparse.Namespace) -> int:
    """Validate each catalogue and print a report; 1 if any has errors."""
    failed = 0
    for path in args.files:
        try:
            catalogue = read_catalogue(path)
        except CatalogueError as e:
            failed += 1
            print(f"FAIL {path}")
            print(f"  Unreadable: {e}")
            continue
        report = validate_catalogue(catalogue)

        if report.errors:
            failed += 1
            print(f"FAIL {path}")
            print(f"  Errors ({len(report.errors)}):")
            for e in report.errors[: args.limit]:
                print(f"    - {e}")
            if len(report.errors) > args.limit:
                print(f"    ... and {len(report.errors) - args.limit} more errors")
        else:
            print(f"OK   {path} ({len(catalogue)} messages)")

        if report.warnings and not args.quiet:
            print(f"  Warnings ({len(report.warnings)}):")
            for w in report.warnings[: args.limit]:
                print(f"    - {w}")
            if len(report.warnings) > args.limit:
                print(f"    ... and {len(report.warnings) - args.limit} more warnings")

    log.debug("Checked %d catalogue(s), %d failed", len(args.files), failed)
    return 1 if failed else 0
