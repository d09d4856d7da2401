from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.errors import InvalidArgument

MODES = ("fixed", "variable")


@dataclass
class RunConfig:
    items: int
    mode: str = "fixed"
    limit: Optional[int] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.items, bool) or not isinstance(self.items, int) or self.items < 0:
            raise InvalidArgument(f"items must be a non-negative int, got {self.items!r}")
        if self.mode not in MODES:
            raise InvalidArgument(f"mode must be one of {', '.join(MODES)}, got {self.mode!r}")
        if self.limit is not None and (not isinstance(self.limit, int) or self.limit < 0):
            raise InvalidArgument(f"limit must be a non-negative int, got {self.limit!r}")


def read_run_file(path: str | Path) -> Dict[str, Any]:
    """Load a YAML run file into a plain mapping."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidArgument(f"{path}: expected a mapping at the top level")
    return data


def load_config(path: str | Path | None = None, **overrides: Any) -> RunConfig:
    """Build a RunConfig from an optional YAML file plus non-None overrides."""
    data = read_run_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    if "items" not in data:
        raise InvalidArgument("number of items not given (set 'items' in the run file or pass it)")

    return RunConfig(
        items=data["items"],
        mode=str(data.get("mode", "fixed")).lower(),
        limit=data.get("limit"),
        log_level=str(data.get("log_level", "WARNING")),
        log_file=data.get("log_file"),
    )
