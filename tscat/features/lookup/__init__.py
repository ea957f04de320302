from __future__ import annotations

import argparse

from .handlers import lookup


def register(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("lookup", help="Translate one string, falling back to the source text")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--lang", "-l", default=None, help="Language of a loaded catalogue (e.g. hu)")
    src.add_argument("--file", "-f", default=None, help="Look up in this catalogue file instead")
    p.add_argument("context", help="Context name, e.g. MythBrowser")
    p.add_argument("source", help="Source string, matched exactly")
    p.add_argument("--comment", "-c", default=None, help="Disambiguation comment")
    p.add_argument(
        "--arg", "-a", action="append", default=[], metavar="NAME=VALUE",
        help="Placeholder value for %%NAME%%, may be repeated",
    )
    p.set_defaults(func=lookup)
