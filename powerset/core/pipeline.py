"""Two-stage lazy enumeration of every combination of ``n`` items.

Stage A walks the decision tree and hands each leaf path to stage B; stage B
turns the path into the public combination shape and hands it to the caller.
"""

from __future__ import annotations

import logging
from typing import Callable, List, TypeVar

from .channel import Channel
from .model import Path, check_items
from .stream import ResultStream, run_stage
from .tree import walk

logger = logging.getLogger(__name__)

T = TypeVar("T")


def path_to_fixed(n: int, path: Path) -> List[bool]:
    """Bool vector of length ``n``, true where the item is included."""
    flags = [False] * n
    for decision in path:
        if decision.included:
            flags[decision.index] = True
    return flags


def path_to_variable(path: Path) -> List[int]:
    """Included indices, most recently decided first."""
    return [decision.index for decision in path if decision.included]


def _pipeline(n: int, convert: Callable[[Path], T], name: str) -> ResultStream[T]:
    check_items(n)
    paths = Channel(name=f"{name}[{n}].paths")
    out = Channel(name=f"{name}[{n}]")

    def visit(path: Path, is_leaf: bool) -> None:
        paths.check()
        if is_leaf:
            paths.send(path)

    def walk_leaves() -> None:
        walk(n, visit)
        logger.debug("%s: walk over %d items finished", name, n)

    def forward() -> None:
        for path in paths:
            out.send(convert(path))

    stages = [
        lambda: run_stage(paths, walk_leaves),
        lambda: run_stage(out, forward, upstream=[paths]),
    ]
    return ResultStream(out, [paths, out], stages, name=f"{name}-{n}")


def fixed_size(n: int) -> ResultStream[List[bool]]:
    """Stream every combination of ``n`` items as a bool vector of length ``n``.

    Results come in tree order: ``[F, F, F]``, ``[F, F, T]``, ... ``[T, T, T]``.
    """
    return _pipeline(n, lambda path: path_to_fixed(n, path), "fixed")


def variable_size(n: int) -> ResultStream[List[int]]:
    """Stream every combination of ``n`` items as a list of included indices.

    Indices within a combination are most recently decided first, so for three
    items the order is ``[], [2], [1], [2, 1], [0], [2, 0], [1, 0], [2, 1, 0]``.
    """
    return _pipeline(n, path_to_variable, "variable")
