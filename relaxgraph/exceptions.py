"""Exceptions raised by relaxgraph.

Only precondition failures of the relaxation engine are exceptions. Graph
mutations never raise, and a negative cycle is reported through the return
value of a run rather than raised.
"""

from __future__ import annotations

from typing import Hashable


class RelaxGraphError(Exception):
    """Base class for all relaxgraph errors."""


class UnknownSourceError(RelaxGraphError, KeyError):
    """The requested source vertex is not part of the graph.

    Attributes:
        source: The vertex id that was requested.
    """

    def __init__(self, source: Hashable) -> None:
        super().__init__(source)
        self.source = source

    def __str__(self) -> str:
        return f"Source vertex '{self.source}' is not in the graph."


class EmptyGraphError(RelaxGraphError, ValueError):
    """A run was requested on a graph with no vertices."""

    def __init__(self, message: str = "Cannot run on a graph with no vertices.") -> None:
        super().__init__(message)
