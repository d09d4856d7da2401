"""Lazy, cancelable result handle shared by every producer in the package."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Iterator, Sequence, TypeVar

from .channel import END, Channel
from .errors import Cancelled

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_stage(channel: Channel, body: Callable[[], None], upstream: Sequence[Channel] = ()) -> None:
    """Run one producer stage and close ``channel`` however it ends.

    A cancelled stage just exits; any other fault, ``SystemExit`` and other
    ``BaseException`` subclasses included, is handed to the consumer through
    the channel.  Faults are logged by the stage they started in; a fault
    passed on from an ``upstream`` channel is not logged again.  ``upstream``
    channels are cancelled on the way out so a stage feeding this one never
    blocks on a reader that is gone.
    """
    try:
        body()
    except Cancelled:
        logger.debug("%s: producer cancelled", channel.name)
    except BaseException as exc:
        if any(source.fault is exc for source in upstream):
            logger.debug("%s: passing on upstream fault %r", channel.name, exc)
        else:
            logger.exception("%s: producer failed", channel.name)
        channel.close(exc)
    else:
        channel.close()
    finally:
        for source in upstream:
            source.cancel()


class ResultStream(Iterator[T], Generic[T]):
    """Iterator over values handed off by background producer threads.

    ``output`` is the channel the consumer reads; ``channels`` are all the
    channels to cancel (``output`` included); ``stages`` are the thread bodies,
    started immediately.
    """

    def __init__(
        self,
        output: Channel,
        channels: Sequence[Channel],
        stages: Sequence[Callable[[], None]],
        name: str = "powerset",
    ) -> None:
        self.name = name
        self._output = output
        self._channels = tuple(channels)
        self._lock = threading.Lock()
        self._cancelled = False
        self._threads = [
            threading.Thread(target=stage, name=f"{name}-{i}", daemon=True)
            for i, stage in enumerate(stages)
        ]
        for thread in self._threads:
            thread.start()

    def __iter__(self) -> "ResultStream[T]":
        return self

    def __next__(self) -> T:
        try:
            item = self._output.take()
        except Cancelled:
            raise StopIteration
        except BaseException as exc:
            if exc is self._output.fault:
                self._join()
            raise
        if item is END:
            self._join()
            raise StopIteration
        return item

    def cancel(self) -> None:
        """Stop every stage and wait for their threads to exit.

        Safe to call repeatedly, after exhaustion, or from a producer thread.
        """
        with self._lock:
            first, self._cancelled = not self._cancelled, True
        if first:
            logger.debug("%s: cancelling", self.name)
            for channel in self._channels:
                channel.cancel()
        self._join()

    def _join(self) -> None:
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    @property
    def alive(self) -> bool:
        return any(thread.is_alive() for thread in self._threads)

    def __enter__(self) -> "ResultStream[T]":
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()
