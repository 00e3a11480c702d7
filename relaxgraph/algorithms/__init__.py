"""Shortest-path algorithms over `WeightedDiGraph`."""

from relaxgraph.algorithms.bellman_ford import BellmanFord, bellman_ford
from relaxgraph.algorithms.paths import resolve_path
from relaxgraph.algorithms.types import BellmanFordResult, Step

__all__ = [
    "BellmanFord",
    "BellmanFordResult",
    "Step",
    "bellman_ford",
    "resolve_path",
]
