"""Depth-first walk over the binary decision tree of a powerset."""

from __future__ import annotations

from typing import Callable, List, Tuple

from .model import Decision, Path, check_items

Visitor = Callable[[Path, bool], None]


def walk(n: int, visit: Visitor) -> None:
    """Call ``visit(path, is_leaf)`` once for every node of the depth-``n`` tree.

    Nodes come in depth-first order with the excluded child ahead of the
    included one, so the leaves appear in the order of their bit vectors read
    with item 0 as the most significant bit.  Exceptions raised by ``visit``
    abort the walk and propagate to the caller.

    The walk keeps its own stack of pending nodes, so the tree depth is not
    bounded by the interpreter's recursion limit.
    """
    check_items(n)
    pending: List[Tuple[int, Path]] = [(0, ())]
    while pending:
        depth, path = pending.pop()
        is_leaf = depth == n
        visit(path, is_leaf)
        if is_leaf:
            continue
        # Pushed in reverse so the excluded child is visited first.
        pending.append((depth + 1, (Decision(depth, True),) + path))
        pending.append((depth + 1, (Decision(depth, False),) + path))


def count_nodes(n: int) -> int:
    """Number of nodes in the full tree, 2^(n+1) - 1."""
    return (1 << (check_items(n) + 1)) - 1
