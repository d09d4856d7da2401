"""Solve N-Queens with the backtracking powerset engine.

Every cell of the board is one item of the powerset (cell ``i`` sits at
column ``i % size``, row ``i // size``).  Including an item places a queen.
Whenever a placement is attacked by a queen already on the board, the decision
function backtracks to the parent node, so the whole subtree under the bad
placement is never visited.

Running ``python nqueens.py 6`` prints every solution followed by a summary
such as::

    solutions = 4, visited = ..., skipped = ...

The board size can also come from a YAML run file (``--config``) with a
``size`` key (``items`` is accepted as an alias).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Set, Tuple

import yaml

from powerset import Directive, count_nodes, callback
from powerset.core.model import Path as DecisionPath

logger = logging.getLogger(__name__)

Board = List[List[bool]]


@dataclass
class BoardState:
    """Queens placed so far, with occupancy sets for constant-time attack checks."""

    size: int
    queens: List[Tuple[int, int]] = field(default_factory=list)
    rows: Set[int] = field(default_factory=set)
    cols: Set[int] = field(default_factory=set)
    ldiags: Set[int] = field(default_factory=set)
    rdiags: Set[int] = field(default_factory=set)

    def fork(self) -> "BoardState":
        return BoardState(
            self.size,
            list(self.queens),
            set(self.rows),
            set(self.cols),
            set(self.ldiags),
            set(self.rdiags),
        )

    def attacked(self, x: int, y: int) -> bool:
        return x in self.cols or y in self.rows or (x + y) in self.ldiags or (y - x) in self.rdiags

    def place(self, x: int, y: int) -> None:
        self.queens.append((x, y))
        self.cols.add(x)
        self.rows.add(y)
        self.ldiags.add(x + y)
        self.rdiags.add(y - x)

    def board(self) -> Board:
        board = [[False] * self.size for _ in range(self.size)]
        for x, y in self.queens:
            board[x][y] = True
        return board


@dataclass
class Stats:
    visited: int = 0
    skipped: int = 0


def idx_to_pos(i: int, width: int) -> Tuple[int, int]:
    return i % width, i // width


def solve(size: int) -> Tuple[List[Board], Stats]:
    """Return every N-Queens solution for a ``size`` board plus search stats."""
    cells = size * size
    stats = Stats()

    def decide(path: DecisionPath, is_leaf: bool, state: BoardState, emit) -> Directive:
        stats.visited += 1
        if path and path[0].included:
            x, y = idx_to_pos(path[0].index, size)
            if state.attacked(x, y):
                # Everything below this node is skipped.
                stats.skipped += count_nodes(cells - len(path)) - 1
                return Directive.backtrack(len(path) - 1)
            state.place(x, y)
        if is_leaf and len(state.queens) == size:
            emit(state.board())
        return Directive.proceed(state)

    with callback(cells, decide, BoardState(size)) as stream:
        solutions = list(stream)
    logger.debug("size %d: %d solutions, visited %d, skipped %d", size, len(solutions), stats.visited, stats.skipped)
    return solutions, stats


def format_board(board: Board) -> str:
    size = len(board)
    return "\n".join(" ".join("1" if board[x][y] else "0" for x in range(size)) for y in range(size))


def _size_from_file(path: Path) -> int:
    from powerset.io.config import read_run_file

    try:
        data = read_run_file(path)
        return int(data.get("size", data.get("items", 0)))
    except (ValueError, TypeError, OSError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid run file {path}: {exc}") from exc


def main(argv: List[str] | None = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Solve N-Queens by backtracking over the powerset of board cells.")
    parser.add_argument("size", type=int, nargs="?", default=None, help="Board width")
    parser.add_argument("--config", type=Path, default=None, help="YAML run file with a 'size' key")
    parser.add_argument("--quiet", action="store_true", help="Only print the summary")

    args = parser.parse_args(argv)
    size = args.size if args.size is not None else (_size_from_file(args.config) if args.config else None)
    if not size or size < 1:
        raise SystemExit("Board size must be a positive integer")

    solutions, stats = solve(size)
    if not args.quiet:
        for board in solutions:
            print(format_board(board))
            print("")
    print(f"solutions = {len(solutions)}, visited = {stats.visited}, skipped = {stats.skipped}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
