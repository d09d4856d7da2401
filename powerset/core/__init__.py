"""Enumeration engine: tree walk, backtracking protocol and pipelines."""

from .backtrack import callback
from .channel import Channel
from .errors import Cancelled, InvalidArgument, PowersetError
from .model import Decision, Directive, Forkable, Path, fork_state, format_path, validate_path
from .pipeline import fixed_size, path_to_fixed, path_to_variable, variable_size
from .stream import ResultStream
from .tree import count_nodes, walk

__all__ = [
    "Cancelled",
    "Channel",
    "Decision",
    "Directive",
    "Forkable",
    "InvalidArgument",
    "Path",
    "PowersetError",
    "ResultStream",
    "callback",
    "count_nodes",
    "fixed_size",
    "fork_state",
    "format_path",
    "path_to_fixed",
    "path_to_variable",
    "validate_path",
    "variable_size",
    "walk",
]
