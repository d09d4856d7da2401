"""Powerset traversal driven by a caller's decision function.

The decision function is called at every node of the decision tree, root and
leaves included, as ``decide(path, is_leaf, state, emit)``.  It returns a
:class:`~powerset.core.model.Directive`; a stop abandons the rest of the
current subtree and unwinds to the ancestor at ``resume_level``, which then
carries on with its unexplored branch.  Values passed to ``emit`` come out of
the returned :class:`~powerset.core.stream.ResultStream` in traversal order.

A decision function that backtracks one level on every infeasible node::

    def decide(path, is_leaf, state, emit):
        if path and not feasible(path, state):
            return Directive.backtrack(len(path) - 1)
        if is_leaf:
            emit(path)
        return Directive.proceed(state)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from .channel import Channel
from .model import Decision, Directive, Path, check_items, fork_state, format_path
from .stream import ResultStream, run_stage

logger = logging.getLogger(__name__)

Emit = Callable[[Any], None]
DecisionFn = Callable[[Path, bool, Any, Emit], Any]


@dataclass
class _Traversal:
    n: int
    decide: DecisionFn
    channel: Channel
    visited: int = 0
    pruned: int = 0

    def run(self, state: Any) -> None:
        """Visit the tree depth-first, honouring every directive.

        ``pending`` holds the nodes still to visit; each entry is a child whose
        parent sits one level above it.  A stop that resumes at level ``r``
        discards the pending children of every frame deeper than ``r``.
        """
        pending: List[Tuple[int, Path, Any]] = [(0, (), state)]
        while pending:
            self.channel.check()
            depth, path, state = pending.pop()
            is_leaf = depth == self.n
            self.visited += 1
            directive = Directive.coerce(self.decide(path, is_leaf, state, self.channel.send))
            if directive.stop:
                directive.check(depth)
                if depth > directive.resume_level:
                    self.pruned += 1
                    logger.debug("stop at %s, resuming at level %d", format_path(path), directive.resume_level)
                    while pending and pending[-1][0] - 1 > directive.resume_level:
                        pending.pop()
                    continue
            if is_leaf:
                continue

            excluded, included = fork_state(directive.state), fork_state(directive.state)
            pending.append((depth + 1, (Decision(depth, True),) + path, included))
            pending.append((depth + 1, (Decision(depth, False),) + path, excluded))


def callback(n: int, decide: DecisionFn, state: Any = None) -> ResultStream[Any]:
    """Walk the powerset of ``n`` items in the background, consulting ``decide`` at each node.

    Raises :class:`~powerset.core.errors.InvalidArgument` right away for a bad
    ``n``.  Faults raised by ``decide`` end the stream and are re-raised from
    the consumer's ``next()``.
    """
    check_items(n)
    channel = Channel(name=f"callback[{n}]")
    traversal = _Traversal(n, decide, channel)

    def produce() -> None:
        logger.debug("callback walk over %d items started", n)
        traversal.run(state)
        logger.debug(
            "callback walk over %d items finished: %d visited, %d stops",
            n,
            traversal.visited,
            traversal.pruned,
        )

    return ResultStream(channel, [channel], [lambda: run_stage(channel, produce)], name=f"callback-{n}")
