"""relaxgraph: Bellman-Ford shortest paths with a replayable relaxation trace.

relaxgraph provides a mutable directed weighted graph and a Bellman-Ford engine
that records every edge-relaxation decision, so a viewer can replay the
computation step by step.

Primary API:
    WeightedDiGraph - Mutable graph over integer vertex ids
    BellmanFord - Relaxation engine bound to a graph and a source
    bellman_ford() - One-shot run returning a BellmanFordResult
    StepCursor - Forward/backward navigation over a recorded trace

Example:
    from relaxgraph import WeightedDiGraph, bellman_ford

    g = WeightedDiGraph()
    g.add_edge(0, 1, 4)
    g.add_edge(0, 2, 5)
    g.add_edge(1, 2, -3)
    g.add_edge(2, 3, 4)

    result = bellman_ford(g, 0)
    result.success         # True
    result.distances       # {0: 0.0, 1: 4.0, 2: 1.0, 3: 5.0}
    result.path_to(3)      # [0, 1, 2, 3]
    len(result.steps)      # 12
"""

from __future__ import annotations

from relaxgraph import logging
from relaxgraph._version import __version__
from relaxgraph.algorithms.bellman_ford import BellmanFord, bellman_ford
from relaxgraph.algorithms.paths import resolve_path
from relaxgraph.algorithms.types import BellmanFordResult, Step
from relaxgraph.config import BELLMAN_FORD_CONFIG, BellmanFordConfig
from relaxgraph.exceptions import EmptyGraphError, RelaxGraphError, UnknownSourceError
from relaxgraph.graph.convert import from_networkx, to_networkx
from relaxgraph.graph.digraph import Edge, WeightedDiGraph
from relaxgraph.graph.samples import demo_graph
from relaxgraph.trace import StepCursor

__all__ = [
    # Version
    "__version__",
    # Model
    "WeightedDiGraph",
    "Edge",
    "demo_graph",
    # Algorithms
    "BellmanFord",
    "bellman_ford",
    "resolve_path",
    # Results
    "BellmanFordResult",
    "Step",
    "StepCursor",
    # Errors
    "RelaxGraphError",
    "UnknownSourceError",
    "EmptyGraphError",
    # Configuration
    "BellmanFordConfig",
    "BELLMAN_FORD_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
