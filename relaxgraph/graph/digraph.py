"""Mutable directed weighted graph used by the relaxation engine.

`WeightedDiGraph` keeps at most one weighted edge per ordered vertex pair and
stores it in a `networkx.DiGraph`. NetworkX preserves insertion order for both
nodes and adjacency, which gives `vertices()` and `edges()` the stable order
that makes relaxation traces reproducible.

Unlike a strict graph, every mutation here is total: adding an existing vertex,
removing a missing vertex or edge, or re-adding an edge are all accepted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import networkx as nx

VertexID = int
EdgeKey = Tuple[VertexID, VertexID]

WEIGHT_ATTR = "weight"


@dataclass(frozen=True)
class Edge:
    """A directed edge ``source -> target`` with its weight.

    Attributes:
        source: Tail vertex.
        target: Head vertex.
        weight: Edge weight; any finite float, including negative and zero.
    """

    source: VertexID
    target: VertexID
    weight: float

    @property
    def key(self) -> EdgeKey:
        """Identity of the edge for trace and highlight purposes."""
        return (self.source, self.target)

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


class WeightedDiGraph:
    """Directed graph over integer vertex ids with one weight per ordered pair.

    Invariants:
      - Every edge endpoint is a vertex; `add_edge` inserts missing endpoints.
      - Removing a vertex removes all edges incident to it, inbound and outbound.
      - Re-adding ``(u, v)`` overwrites the weight without moving the edge in
        the edge order.
    """

    def __init__(self) -> None:
        self._g = nx.DiGraph()

    #
    # Vertex management
    #
    def add_vertex(self, v: VertexID) -> None:
        """Ensure ``v`` is a vertex. Existing vertices keep their position."""
        self._g.add_node(v)

    def remove_vertex(self, v: VertexID) -> None:
        """Remove ``v`` and every edge where it is the source or the target.

        Absent vertices are ignored.
        """
        if v in self._g:
            self._g.remove_node(v)

    #
    # Edge management
    #
    def add_edge(self, source: VertexID, target: VertexID, weight: float) -> None:
        """Add the edge ``source -> target`` or overwrite its weight.

        Missing endpoints are added as vertices.
        """
        self._g.add_edge(source, target, **{WEIGHT_ATTR: float(weight)})

    def remove_edge(self, source: VertexID, target: VertexID) -> None:
        """Remove ``source -> target`` if present."""
        if self._g.has_edge(source, target):
            self._g.remove_edge(source, target)

    #
    # Queries
    #
    def vertices(self) -> List[VertexID]:
        """Return vertices in insertion order."""
        return list(self._g.nodes)

    def edges(self) -> List[Edge]:
        """Return all edges in relaxation order.

        Sources are visited in `vertices()` order; within one source, targets
        follow the order in which their edges were first added.
        """
        return [
            Edge(u, v, data[WEIGHT_ATTR])
            for u, v, data in self._g.edges(data=True)
        ]

    def out_edges(self, v: VertexID) -> List[Edge]:
        """Return the outgoing edges of ``v`` (empty for unknown vertices)."""
        if v not in self._g:
            return []
        return [
            Edge(v, target, data[WEIGHT_ATTR])
            for target, data in self._g.adj[v].items()
        ]

    def has_vertex(self, v: VertexID) -> bool:
        return v in self._g

    def has_edge(self, source: VertexID, target: VertexID) -> bool:
        return self._g.has_edge(source, target)

    def weight(self, source: VertexID, target: VertexID) -> Optional[float]:
        """Return the weight of ``source -> target``, or None if there is no such edge."""
        if not self._g.has_edge(source, target):
            return None
        return self._g.adj[source][target][WEIGHT_ATTR]

    def number_of_vertices(self) -> int:
        return self._g.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._g.number_of_edges()

    def copy(self) -> WeightedDiGraph:
        """Return an independent copy with the same vertex and edge order."""
        clone = WeightedDiGraph()
        clone._g = self._g.copy()
        return clone

    def __contains__(self, v: object) -> bool:
        return v in self._g

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __iter__(self) -> Iterator[VertexID]:
        return iter(self._g.nodes)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.number_of_vertices()}, "
            f"edges={self.number_of_edges()})"
        )
