"""One-slot handoff between a producer thread and its consumer.

The producer blocks in :meth:`Channel.send` until the consumer has taken the
previous value, which keeps it at most one value ahead.  Cancelling the
channel wakes both sides: the producer gets :class:`Cancelled` from its next
``send`` or ``check`` and any value left in the slot is dropped.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterator

from .errors import Cancelled

logger = logging.getLogger(__name__)

_EMPTY = object()
END = object()


class Channel:
    """Bounded single-producer/single-consumer channel with a cancel token."""

    def __init__(self, name: str = "channel") -> None:
        self.name = name
        self._cond = threading.Condition()
        self._slot: Any = _EMPTY
        self._closed = False
        self._cancelled = False
        self._error: BaseException | None = None
        self.fault: BaseException | None = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def check(self) -> None:
        """Raise :class:`Cancelled` if the consumer asked to stop."""
        if self._cancelled:
            raise Cancelled(self.name)

    def send(self, item: Any) -> None:
        with self._cond:
            while True:
                self.check()
                if self._slot is _EMPTY:
                    break
                self._cond.wait()
            self._slot = item
            self._cond.notify_all()

    def close(self, error: BaseException | None = None) -> None:
        """Mark the end of the stream, optionally carrying the producer's fault."""
        with self._cond:
            self._closed = True
            self._error = self.fault = error
            self._cond.notify_all()

    def cancel(self) -> None:
        with self._cond:
            if self._slot is not _EMPTY:
                logger.debug("%s: dropping in-flight value on cancel", self.name)
            self._cancelled = True
            self._slot = _EMPTY
            self._cond.notify_all()

    def take(self) -> Any:
        """Return the next value, or :data:`END` once the producer closed.

        A fault recorded by :meth:`close` is raised once, after every value
        sent before it.  Raises :class:`Cancelled` if the channel is cancelled.
        """
        with self._cond:
            while self._slot is _EMPTY and not self._closed:
                self.check()
                self._cond.wait()
            self.check()
            if self._slot is not _EMPTY:
                item, self._slot = self._slot, _EMPTY
                self._cond.notify_all()
                return item
            if self._error is not None:
                error, self._error = self._error, None
                raise error
            return END

    def __iter__(self) -> Iterator[Any]:
        while True:
            item = self.take()
            if item is END:
                return
            yield item
