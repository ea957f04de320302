from __future__ import annotations

import argparse
import logging
import sys

from ...infra.ts_reader import read_catalogue
from ...infra.ts_writer import dump_catalogue, write_catalogue

log = logging.getLogger(__name__)


def normalize(args: argparse.Namespace) -> int:
    catalogue = read_catalogue(args.file)
    if args.output:
        write_catalogue(catalogue, args.output)
        log.info("Wrote %d messages to %s", len(catalogue), args.output)
    else:
        sys.stdout.write(dump_catalogue(catalogue))
    return 0
