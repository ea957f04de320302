"""Read Qt Linguist ``.ts`` documents into :class:`Catalogue` objects."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Union

from ..core.errors import CatalogueFormatError, CatalogueParseError
from .models import Catalogue, Context, Location, Message, Status

log = logging.getLogger(__name__)


def read_catalogue(path: Union[str, Path]) -> Catalogue:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        raise CatalogueParseError(f"cannot read catalogue: {e.strerror or e}", p) from e
    catalogue = parse_catalogue(data, path=p)
    log.debug(
        "Read %s: %d contexts, %d messages", p.name, len(catalogue.contexts), len(catalogue)
    )
    return catalogue


def parse_catalogue(data: Union[str, bytes], path: Union[str, Path, None] = None) -> Catalogue:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        line, column = e.position
        raise CatalogueParseError(f"malformed markup: {e}", path, line, column) from e

    if root.tag != "TS":
        raise CatalogueFormatError(f"root element is <{root.tag}>, expected <TS>", path)

    contexts = [_parse_context(el, path) for el in root.findall("context")]
    return Catalogue(
        contexts=tuple(contexts),
        version=root.get("version", ""),
        language=root.get("language", ""),
        source_language=root.get("sourcelanguage", ""),
    )


def _parse_context(el: ET.Element, path) -> Context:
    name_el = el.find("name")
    if name_el is None:
        raise CatalogueFormatError("<context> without <name>", path)
    name = name_el.text or ""
    messages = [_parse_message(m, name, path) for m in el.findall("message")]
    return Context(name=name, messages=tuple(messages))


def _parse_message(el: ET.Element, context: str, path) -> Message:
    source_el = el.find("source")
    if source_el is None:
        raise CatalogueFormatError(f"<message> without <source> in context {context!r}", path)
    source = source_el.text or ""
    if not source:
        raise CatalogueFormatError(f"empty <source> in context {context!r}", path)

    numerus = el.get("numerus") == "yes"
    forms: List[str] = []
    tr_el = el.find("translation")
    if tr_el is None:
        translation, status = "", Status.UNFINISHED
    else:
        if numerus:
            # plural entries keep their text in <numerusform> children only
            translation = ""
            forms = [f.text or "" for f in tr_el.findall("numerusform")]
        else:
            translation = tr_el.text or ""
        try:
            status = Status.from_type(tr_el.get("type"))
        except ValueError:
            raise CatalogueFormatError(
                f"unknown translation type {tr_el.get('type')!r} for {source!r}", path
            ) from None

    return Message(
        source=source,
        translation=translation,
        status=status,
        locations=tuple(_parse_locations(el, path)),
        comment=_text(el, "comment"),
        extracomment=_text(el, "extracomment"),
        translatorcomment=_text(el, "translatorcomment"),
        numerus=numerus,
        numerus_forms=tuple(forms),
    )


def _parse_locations(el: ET.Element, path) -> List[Location]:
    out: List[Location] = []
    for loc in el.findall("location"):
        line: Optional[int] = None
        raw = loc.get("line")
        if raw is not None:
            try:
                line = int(raw)
            except ValueError:
                raise CatalogueFormatError(f"bad location line {raw!r}", path) from None
        out.append(Location(filename=loc.get("filename", ""), line=line))
    return out


def _text(el: ET.Element, tag: str) -> str:
    child = el.find(tag)
    return (child.text or "") if child is not None else ""
