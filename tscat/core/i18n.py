from __future__ import annotations

import logging
import re
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

from ..infra.models import Catalogue
from ..infra.ts_reader import parse_catalogue, read_catalogue
from .config import settings
from .errors import CatalogueError


log = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"%([A-Za-z_][A-Za-z0-9_]*)%")


def normalize_lang(code: Optional[str]) -> str:
    if not code:
        return ""
    return str(code).strip().replace("-", "_").lower()


def lang_from_filename(name: str, prefix: str) -> Optional[str]:
    """``mythbrowser_hu.ts`` -> ``hu``; None when the name does not match."""
    stem, dot, ext = name.rpartition(".")
    if not dot or ext != "ts" or not stem.startswith(prefix + "_"):
        return None
    return normalize_lang(stem[len(prefix) + 1:]) or None


class I18N:
    _catalogues: Dict[str, Catalogue] = {}
    _loaded: bool = False

    @classmethod
    def load_locales(cls, catalogue_dir: Optional[Path] = None) -> None:
        """Load packaged catalogues, then overrides from ``catalogue_dir``.

        A catalogue that fails to load is skipped; lookups for its language
        fall back to source text.
        """
        prefix = settings.CATALOGUE_PREFIX
        loaded: Dict[str, Catalogue] = {}

        for entry in resources.files("tscat.locales").iterdir():
            lang = lang_from_filename(entry.name, prefix)
            if lang is None:
                continue
            try:
                loaded[lang] = parse_catalogue(entry.read_bytes(), path=entry.name)
            except CatalogueError as e:
                log.warning("Failed to load packaged locale %s: %s", lang, e)

        directory = catalogue_dir if catalogue_dir is not None else settings.catalogue_dir
        if directory is not None:
            if not directory.is_dir():
                log.warning("Catalogue directory %s does not exist", directory)
            else:
                for path in sorted(directory.glob(f"{prefix}_*.ts")):
                    lang = lang_from_filename(path.name, prefix)
                    if lang is None:
                        continue
                    try:
                        loaded[lang] = read_catalogue(path)
                    except CatalogueError as e:
                        log.warning("Failed to load locale %s from %s: %s", lang, path, e)

        cls._catalogues = loaded
        cls._loaded = True
        log.info("Loaded %d catalogue(s): %s", len(loaded), ", ".join(sorted(loaded)) or "-")

    @classmethod
    def load_file(cls, path: str | Path, lang: Optional[str] = None) -> Catalogue:
        p = Path(path)
        catalogue = read_catalogue(p)
        code = normalize_lang(lang) or lang_from_filename(p.name, settings.CATALOGUE_PREFIX)
        if not code:
            code = normalize_lang(catalogue.language)
        if not code:
            raise CatalogueError("cannot tell the catalogue language, pass it explicitly", p)
        catalogues = dict(cls._catalogues)
        catalogues[code] = catalogue
        cls._catalogues = catalogues
        cls._loaded = True
        return catalogue

    @classmethod
    def reset(cls) -> None:
        cls._catalogues = {}
        cls._loaded = False

    @classmethod
    def languages(cls) -> list[str]:
        return sorted(cls._catalogues)

    @classmethod
    def catalogue(cls, lang: str) -> Optional[Catalogue]:
        return cls._catalogues.get(normalize_lang(lang))

    @classmethod
    def pick_lang(cls, code: Optional[str], fallback: Optional[str] = None) -> str:
        lc = normalize_lang(code)
        if lc:
            if lc in cls._catalogues:
                return lc
            base = lc.split("_")[0]
            if base in cls._catalogues:
                return base
        fallback = normalize_lang(fallback or settings.DEFAULT_LANG)
        return fallback if fallback in cls._catalogues else settings.DEFAULT_LANG


def substitute(text: str, /, **kwargs: Any) -> str:
    """Replace ``%NAME%`` tokens; tokens without a value stay as they are."""
    if not kwargs:
        return text

    def repl(m: re.Match) -> str:
        name = m.group(1)
        return str(kwargs[name]) if name in kwargs else m.group(0)

    return _TOKEN_RE.sub(repl, text)


def tr(
    lang: str,
    context: str,
    source: str,
    disambiguation: Optional[str] = None,
    /,
    **kwargs: Any,
) -> str:
    if not I18N._loaded:
        I18N.load_locales()
    catalogue = I18N.catalogue(lang)
    msg = source if catalogue is None else catalogue.lookup(context, source, disambiguation)
    return substitute(msg, **kwargs)
