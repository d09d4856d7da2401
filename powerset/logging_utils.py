"""Logging setup shared by the command line front ends."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(
    *,
    console_level: int = logging.WARNING,
    file_path: Optional[Union[str, Path]] = None,
    file_level: int = logging.DEBUG,
    replace_existing: bool = True,
) -> None:
    """Send log records to stderr and, optionally, to a file."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if replace_existing:
        root.handlers.clear()

    formatter = logging.Formatter(FORMAT)
    console = next(
        (h for h in root.handlers if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)),
        None,
    )
    if console is None:
        console = logging.StreamHandler(sys.stderr)
        root.addHandler(console)
    console.setLevel(console_level)
    console.setFormatter(formatter)

    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="w" if replace_existing else "a", encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def parse_level(name: Union[str, int]) -> int:
    """Turn ``"debug"``, ``"INFO"`` or a numeric level into a logging level."""
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {name}")
    return level
