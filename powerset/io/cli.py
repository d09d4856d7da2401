"""Command-line interface: stream the powerset of N items as JSON lines."""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import os
import sys
from pathlib import Path

from ..core.errors import PowersetError
from ..core.pipeline import fixed_size, variable_size
from ..logging_utils import parse_level, setup_logging
from .config import MODES, load_config

logger = logging.getLogger(__name__)


def _silence_stdout() -> None:
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        sys.stdout = open(os.devnull, "w")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Enumerate the powerset of N items in tree order")
    ap.add_argument("items", nargs="?", type=int, default=None, help="Number of items")
    ap.add_argument("--mode", choices=MODES, default=None, help="fixed: bool vectors, variable: index lists")
    ap.add_argument("--limit", type=int, default=None, help="Stop after this many combinations")
    ap.add_argument("--config", type=Path, default=None, help="Path to a YAML run file")
    ap.add_argument("--log-level", default=None, help="Console log level")
    ap.add_argument("--log-file", default=None, help="Also write DEBUG logs to this file")
    args = ap.parse_args(argv)

    try:
        cfg = load_config(
            args.config,
            items=args.items,
            mode=args.mode,
            limit=args.limit,
            log_level=args.log_level,
            log_file=args.log_file,
        )
        setup_logging(console_level=parse_level(cfg.log_level), file_path=cfg.log_file)
    except (PowersetError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    produce = fixed_size if cfg.mode == "fixed" else variable_size
    count = 0
    try:
        with produce(cfg.items) as stream:
            for combination in itertools.islice(stream, cfg.limit):
                print(json.dumps(combination), flush=True)
                count += 1
    except BrokenPipeError:
        # The reader closed stdout (e.g. `| head`); point it at devnull so the
        # final flush at exit does not raise again.
        _silence_stdout()
        logger.info("stdout closed after %d combination(s)", count)
        return 1
    logger.info("printed %d %s-size combination(s) of %d items", count, cfg.mode, cfg.items)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
