from __future__ import annotations

import argparse

from ...infra.models import Status
from ...infra.ts_reader import read_catalogue
from .report import ContextStats, catalogue_stats


def _row(cs: ContextStats) -> str:
    return (
        f"  {cs.name:<20} {cs.finished:>4}/{cs.total:<4} "
        f"{cs.percent:5.1f}%  "
        f"obsolete={cs.counts[Status.OBSOLETE] + cs.counts[Status.VANISHED]}"
    )


def stats(args: argparse.Namespace) -> int:
    catalogue = read_catalogue(args.file)
    result = catalogue_stats(catalogue)
    lang = catalogue.language or "?"
    print(f"{args.file} (language={lang}, version={catalogue.version})")
    for cs in result.contexts:
        print(_row(cs))
    print(_row(result.overall))
    return 0
