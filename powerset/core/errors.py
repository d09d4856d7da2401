"""Exception types raised by the enumeration engine."""

from __future__ import annotations


class PowersetError(Exception):
    """Base class for engine errors."""


class InvalidArgument(PowersetError, ValueError):
    """Raised for caller misuse: bad item counts, resume levels or directives."""


class Cancelled(BaseException):
    """Raised inside a producer once its stream has been cancelled.

    Derives from ``BaseException`` so that ``except Exception`` in a decision
    function does not swallow it.
    """
