"""Serialize catalogues in the layout Qt Linguist tools produce."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .models import Catalogue, Context, Location, Message, Status

INDENT = "    "

_TEXT_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
    ("\r", "&#13;"),
)


def escape(text: str) -> str:
    for raw, entity in _TEXT_ESCAPES:
        text = text.replace(raw, entity)
    return text


def dump_catalogue(catalogue: Catalogue) -> str:
    attrs = [f'version="{escape(catalogue.version)}"']
    if catalogue.language:
        attrs.append(f'language="{escape(catalogue.language)}"')
    if catalogue.source_language:
        attrs.append(f'sourcelanguage="{escape(catalogue.source_language)}"')

    lines: List[str] = [
        '<?xml version="1.0" encoding="utf-8"?>',
        f"<!DOCTYPE TS><TS {' '.join(attrs)}>",
    ]
    for ctx in catalogue.contexts:
        lines.extend(_context_lines(ctx))
    lines.append("</TS>")
    return "\n".join(lines) + "\n"


def write_catalogue(catalogue: Catalogue, path: Union[str, Path]) -> None:
    Path(path).write_text(dump_catalogue(catalogue), encoding="utf-8")


def _context_lines(ctx: Context) -> List[str]:
    lines = ["<context>", f"{INDENT}<name>{escape(ctx.name)}</name>"]
    for msg in ctx.messages:
        lines.extend(_message_lines(msg))
    lines.append("</context>")
    return lines


def _message_lines(msg: Message) -> List[str]:
    pad = INDENT * 2
    if msg.numerus:
        lines = [f'{INDENT}<message numerus="yes">']
    else:
        lines = [f"{INDENT}<message>"]
    lines.extend(pad + _location(loc) for loc in msg.locations)
    lines.append(f"{pad}<source>{escape(msg.source)}</source>")
    for tag in ("comment", "extracomment", "translatorcomment"):
        value = getattr(msg, tag)
        if value:
            lines.append(f"{pad}<{tag}>{escape(value)}</{tag}>")
    marker = "" if msg.status is Status.FINISHED else f' type="{msg.status.value}"'
    if msg.numerus:
        lines.append(f"{pad}<translation{marker}>")
        lines.extend(
            f"{pad}{INDENT}<numerusform>{escape(form)}</numerusform>" for form in msg.numerus_forms
        )
        lines.append(f"{pad}</translation>")
    else:
        lines.append(f"{pad}<translation{marker}>{escape(msg.translation)}</translation>")
    lines.append(f"{INDENT}</message>")
    return lines


def _location(loc: Location) -> str:
    if loc.line is None:
        return f'<location filename="{escape(loc.filename)}"/>'
    return f'<location filename="{escape(loc.filename)}" line="{loc.line}"/>'
