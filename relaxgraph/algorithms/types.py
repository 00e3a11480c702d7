"""Types and data structures for relaxation results.

Defines immutable containers for individual relaxation steps and for the
outcome of a complete run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from relaxgraph.algorithms.paths import resolve_path
from relaxgraph.graph.digraph import Edge, VertexID

Distance = float
DistanceMap = Dict[VertexID, Distance]
PredecessorMap = Dict[VertexID, Optional[VertexID]]

# Read-only views held by recorded Steps
DistanceSnapshot = Mapping[VertexID, Distance]
PredecessorSnapshot = Mapping[VertexID, Optional[VertexID]]


@dataclass(frozen=True)
class Step:
    """One relaxation attempt recorded during a run.

    The maps are read-only views over private copies taken right after the
    attempt. Neither later relaxations nor callers can change a recorded Step;
    item assignment on them raises ``TypeError``.

    Attributes:
        iteration: 1-based outer iteration number.
        edge: The edge that was examined.
        distances: Distance per vertex after the attempt (``inf`` if unreached).
        predecessors: Predecessor per vertex after the attempt.
        relaxed: Whether the attempt improved ``distances[edge.target]``.
    """

    iteration: int
    edge: Edge
    distances: DistanceSnapshot
    predecessors: PredecessorSnapshot
    relaxed: bool


@dataclass(frozen=True)
class BellmanFordResult:
    """Outcome of a Bellman-Ford run from a single source.

    When ``success`` is False a negative cycle was detected and the maps hold
    the state reached after the last iteration, which is not final.

    Attributes:
        source: Source vertex of the run.
        success: True when no negative cycle is reachable from ``source``.
        distances: Distance per vertex.
        predecessors: Predecessor per vertex; None for the source and for
            unreached vertices.
        steps: Recorded trace, empty for trace-free runs.
    """

    source: VertexID
    success: bool
    distances: DistanceMap
    predecessors: PredecessorMap
    steps: Tuple[Step, ...] = ()

    @property
    def has_negative_cycle(self) -> bool:
        return not self.success

    def path_to(self, target: VertexID) -> Optional[List[VertexID]]:
        """Vertices on the shortest path from the source to ``target``.

        Returns None when ``target`` is unreachable. See
        `relaxgraph.algorithms.paths.resolve_path` for error cases.
        """
        return resolve_path(self.predecessors, self.source, target)
