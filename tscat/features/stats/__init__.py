from __future__ import annotations

import argparse

from .handlers import stats
from .report import CatalogueStats, ContextStats, catalogue_stats

__all__ = ["CatalogueStats", "ContextStats", "catalogue_stats", "register"]


def register(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("stats", help="Show translation completion per context")
    p.add_argument("file", help="Catalogue (.ts) file")
    p.set_defaults(func=stats)
