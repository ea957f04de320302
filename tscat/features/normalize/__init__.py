from __future__ import annotations

import argparse

from .handlers import normalize


def register(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("normalize", help="Parse a catalogue and write it back in canonical layout")
    p.add_argument("file", help="Catalogue (.ts) file")
    p.add_argument("--output", "-o", default=None, help="Output file (default: stdout)")
    p.set_defaults(func=normalize)
