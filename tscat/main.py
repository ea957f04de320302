from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .core.config import settings
from .core.errors import CatalogueError
from .core.logging_config import setup_logging, get_logger
from .features.lookup import register as register_lookup
from .features.normalize import register as register_normalize
from .features.stats import register as register_stats
from .features.validation import register as register_validation

log = get_logger(__name__)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tscat",
        description="Qt Linguist translation catalogue tools",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Verbose logging")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    # Feature registrations
    register_lookup(sub)
    register_validation(sub)
    register_stats(sub)
    register_normalize(sub)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    debug_mode = settings.DEBUG if args.debug is None else args.debug
    setup_logging(log_file=settings.LOG_FILE, debug=debug_mode, log_dir=settings.LOG_DIR)

    try:
        return args.func(args)
    except CatalogueError as e:
        log.error("%s", e)
        if debug_mode:
            log.debug("Traceback:", exc_info=True)
        return 1
    except BrokenPipeError:
        # Output piped into something that stopped reading
        logging.shutdown()
        return 1


if __name__ == "__main__":
    sys.exit(main())
