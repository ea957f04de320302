from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

log = logging.getLogger(__name__)


class Status(str, Enum):
    FINISHED = "finished"
    UNFINISHED = "unfinished"
    OBSOLETE = "obsolete"
    VANISHED = "vanished"

    @classmethod
    def from_type(cls, value: Optional[str]) -> "Status":
        """Map the ``type`` attribute of a ``<translation>`` element."""
        if not value:
            return cls.FINISHED
        return cls(value)


@dataclass(frozen=True)
class Location:
    filename: str
    line: Optional[int] = None


@dataclass(frozen=True)
class Message:
    source: str
    translation: str = ""
    status: Status = Status.UNFINISHED
    locations: Tuple[Location, ...] = ()
    comment: str = ""
    extracomment: str = ""
    translatorcomment: str = ""
    numerus: bool = False
    numerus_forms: Tuple[str, ...] = ()

    @property
    def is_finished(self) -> bool:
        # plural entries need a count to pick a form, so never answer lookup
        if self.numerus:
            return False
        return self.status is Status.FINISHED and bool(self.translation)

    @property
    def has_text(self) -> bool:
        if self.numerus:
            return any(self.numerus_forms)
        return bool(self.translation)

    @property
    def key(self) -> Tuple[str, str]:
        return (self.source, self.comment)


@dataclass(frozen=True)
class Context:
    name: str
    messages: Tuple[Message, ...] = ()

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


@dataclass(frozen=True)
class Catalogue:
    """An immutable TS catalogue.

    Messages are indexed by ``(context, source, comment)`` on construction.
    Where several messages share a key, the first finished one is kept in
    the index, so lookups are stable regardless of duplicates.
    """

    contexts: Tuple[Context, ...] = ()
    version: str = "2.1"
    language: str = ""
    source_language: str = ""
    _index: Dict[Tuple[str, str, str], str] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        index: Dict[Tuple[str, str, str], str] = {}
        for ctx in self.contexts:
            for msg in ctx.messages:
                if not msg.is_finished:
                    continue
                index.setdefault((ctx.name, msg.source, msg.comment), msg.translation)
        object.__setattr__(self, "_index", index)

    def lookup(self, context: str, source: str, disambiguation: Optional[str] = None) -> str:
        comment = disambiguation or ""
        found = self._index.get((context, source, comment))
        if found is None and comment:
            found = self._index.get((context, source, ""))
        if found is None:
            log.debug("No finished translation for %s/%r, using source", context, source)
            return source
        return found

    def context(self, name: str) -> Optional[Context]:
        for ctx in self.contexts:
            if ctx.name == name:
                return ctx
        return None

    def context_names(self) -> Tuple[str, ...]:
        return tuple(ctx.name for ctx in self.contexts)

    def messages(self) -> Iterator[Tuple[Context, Message]]:
        for ctx in self.contexts:
            for msg in ctx.messages:
                yield ctx, msg

    def __len__(self) -> int:
        return sum(len(ctx) for ctx in self.contexts)
