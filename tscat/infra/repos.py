from __future__ import annotations

import re
from collections import Counter
from typing import Dict, List, Optional, Set, Tuple

from .models import Catalogue, Message, Status

# %ZOOM% style tokens and Qt's numbered %1 / %L1 arguments
PLACEHOLDER_RE = re.compile(r"%[A-Za-z_][A-Za-z0-9_]*%|%L?\d+")


def placeholders(text: str) -> Set[str]:
    if not text:
        return set()
    return set(PLACEHOLDER_RE.findall(text))


class CatalogueRepo:
    """Read-only queries over a loaded catalogue."""

    def __init__(self, catalogue: Catalogue) -> None:
        self.c = catalogue

    def context_names(self) -> Tuple[str, ...]:
        return self.c.context_names()

    def get(self, context: str, source: str, comment: str = "") -> Optional[Message]:
        ctx = self.c.context(context)
        if ctx is None:
            return None
        for msg in ctx.messages:
            if msg.source == source and msg.comment == comment:
                return msg
        return None

    def by_status(self, status: Status) -> List[Tuple[str, Message]]:
        return [(ctx.name, msg) for ctx, msg in self.c.messages() if msg.status is status]

    def find(self, source: str) -> List[Tuple[str, Message]]:
        return [(ctx.name, msg) for ctx, msg in self.c.messages() if msg.source == source]

    def duplicates(self) -> Dict[str, List[str]]:
        """Sources that occur more than once within the same context."""
        out: Dict[str, List[str]] = {}
        for ctx in self.c.contexts:
            counts = Counter(msg.key for msg in ctx.messages)
            dups = [source for (source, _comment), n in counts.items() if n > 1]
            if dups:
                out[ctx.name] = dups
        return out
