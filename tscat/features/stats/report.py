from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ...infra.models import Catalogue, Context, Status


@dataclass
class ContextStats:
    name: str
    counts: Dict[Status, int] = field(default_factory=lambda: {s: 0 for s in Status})

    @property
    def total(self) -> int:
        # obsolete and vanished entries are no longer shown by the host
        return self.counts[Status.FINISHED] + self.counts[Status.UNFINISHED]

    @property
    def finished(self) -> int:
        return self.counts[Status.FINISHED]

    @property
    def unfinished(self) -> int:
        return self.counts[Status.UNFINISHED]

    @property
    def percent(self) -> float:
        return (self.finished / self.total) * 100 if self.total else 0.0


@dataclass
class CatalogueStats:
    contexts: List[ContextStats]
    overall: ContextStats


def _count(ctx: Context, into: ContextStats) -> None:
    for msg in ctx.messages:
        status = msg.status
        # a finished entry with no text is still untranslated for the host
        if status is Status.FINISHED and not msg.has_text:
            status = Status.UNFINISHED
        into.counts[status] += 1


def catalogue_stats(catalogue: Catalogue) -> CatalogueStats:
    overall = ContextStats(name="TOTAL")
    per_context: List[ContextStats] = []
    for ctx in catalogue.contexts:
        cs = ContextStats(name=ctx.name)
        _count(ctx, cs)
        _count(ctx, overall)
        per_context.append(cs)
    return CatalogueStats(contexts=per_context, overall=overall)
