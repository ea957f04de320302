from __future__ import annotations

import argparse
import logging
from typing import Dict, List

from ...core.config import settings
from ...core.i18n import I18N, substitute, tr
from ...infra.ts_reader import read_catalogue

log = logging.getLogger(__name__)


def parse_args_kv(pairs: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Invalid --arg {pair!r}. Use NAME=VALUE")
        out[name] = value
    return out


def lookup(args: argparse.Namespace) -> int:
    try:
        values = parse_args_kv(args.arg)
    except ValueError as e:
        log.error("%s", e)
        return 2

    if args.file:
        catalogue = read_catalogue(args.file)
        text = catalogue.lookup(args.context, args.source, args.comment)
        print(substitute(text, **values))
        return 0

    I18N.load_locales()
    lang = I18N.pick_lang(args.lang, fallback=settings.DEFAULT_LANG)
    print(tr(lang, args.context, args.source, args.comment, **values))
    return 0
