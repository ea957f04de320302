from __future__ import annotations

import argparse

from .checks import ValidationReport, validate_catalogue
from .handlers import check

__all__ = ["ValidationReport", "validate_catalogue", "register"]


def register(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("check", help="Validate catalogues (placeholders, duplicates, empty sources)")
    p.add_argument("files", nargs="+", help="Catalogue (.ts) files")
    p.add_argument("--quiet", "-q", action="store_true", help="Hide warnings")
    p.add_argument("--limit", type=int, default=30, help="Max lines per section (default: 30)")
    p.set_defaults(func=check)
