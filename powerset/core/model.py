"""Decisions, paths and termination directives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Protocol, Tuple, runtime_checkable

from .errors import InvalidArgument


@dataclass(frozen=True)
class Decision:
    """Whether item ``index`` belongs to the candidate set at a tree node."""
    index: int
    included: bool

    def __str__(self) -> str:
        return f"{'+' if self.included else '-'}{self.index}"


# Most recent decision first, the root-most decision last.  Empty at the root.
Path = Tuple[Decision, ...]


def validate_path(path: Path, check: Path) -> bool:
    """Structural equality of two paths: same length, same pairs in order."""
    if len(path) != len(check):
        return False
    return all(a == b for a, b in zip(path, check))


def format_path(path: Path) -> str:
    if not path:
        return "{}"
    return ",".join(str(d) for d in path)


def check_items(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"number of items must be an int, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgument(f"number of items must be >= 0, got {n}")
    return n


@runtime_checkable
class Forkable(Protocol):
    """State that knows how to produce an independent copy of itself."""

    def fork(self) -> "Forkable":
        ...


def fork_state(state: Any) -> Any:
    """Return the copy of ``state`` handed to one child subtree.

    States implementing :class:`Forkable` are forked; anything else is passed
    through untouched and must be treated as immutable by the caller.
    """
    if isinstance(state, Forkable):
        return state.fork()
    return state


class Directive(NamedTuple):
    """What a decision function wants the engine to do after a node.

    ``resume_level`` is an absolute depth (root is 0), or -1 for "before the
    root".  It is only read when ``stop`` is true.
    """
    stop: bool
    resume_level: int
    state: Any

    @classmethod
    def proceed(cls, state: Any = None) -> "Directive":
        return cls(False, 0, state)

    @classmethod
    def backtrack(cls, resume_level: int, state: Any = None) -> "Directive":
        return cls(True, resume_level, state)

    @classmethod
    def coerce(cls, value: Any) -> "Directive":
        if isinstance(value, cls):
            return value
        if isinstance(value, tuple) and len(value) == 3:
            return cls._make(value)
        raise InvalidArgument(
            f"decision function must return a Directive or a (stop, resume_level, state) tuple, got {value!r}"
        )

    def check(self, depth: int) -> None:
        """Reject a stop whose resume level is not -1 or an ancestor-or-self depth."""
        if not self.stop:
            return
        level = self.resume_level
        if isinstance(level, bool) or not isinstance(level, int) or not -1 <= level <= depth:
            raise InvalidArgument(f"resume level {level!r} outside [-1, {depth}] at depth {depth}")
