"""Consistency checks for translation catalogues.

Errors:
1. Empty source strings
2. Finished translations that drop a placeholder of their source

Warnings:
1. Finished translations that add placeholders the source does not have
2. Finished messages with an empty translation
3. Duplicate sources within one context
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ...infra.models import Catalogue, Status
from ...infra.repos import CatalogueRepo, placeholders


@dataclass
class ValidationReport:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_catalogue(catalogue: Catalogue) -> ValidationReport:
    report = ValidationReport()

    for ctx, msg in catalogue.messages():
        if not msg.source:
            report.errors.append(f"[{ctx.name}] Empty source string")
            continue
        if msg.status is not Status.FINISHED:
            continue
        if not msg.has_text:
            report.warnings.append(f"[{ctx.name}] Finished but empty translation for {msg.source!r}")
            continue

        src_ph = placeholders(msg.source)
        texts = msg.numerus_forms if msg.numerus else (msg.translation,)
        for text in texts:
            tr_ph = placeholders(text)
            missing = src_ph - tr_ph
            extra = tr_ph - src_ph
            if missing:
                report.errors.append(
                    f"[{ctx.name}] Placeholder mismatch for {msg.source!r}: "
                    f"translation lacks {', '.join(sorted(missing))}"
                )
            if extra:
                report.warnings.append(
                    f"[{ctx.name}] Translation of {msg.source!r} adds {', '.join(sorted(extra))}"
                )

    for ctx_name, sources in CatalogueRepo(catalogue).duplicates().items():
        for source in sources:
            report.warnings.append(f"[{ctx_name}] Duplicate source {source!r}")

    return report
