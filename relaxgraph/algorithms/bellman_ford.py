"""Bellman-Ford single-source shortest paths with a replayable trace.

The engine performs ``n - 1`` passes over the graph's edges, where ``n`` is the
number of vertices, and records a `Step` for every relaxation attempt whether
or not it improved a distance. A final pass over the edges detects negative
cycles reachable from the source.

Notes:
    Edges are examined in ``WeightedDiGraph.edges()`` order, captured once at
    the start of a run. The graph must not be mutated while a run is in
    progress.

    Each Step owns read-only copies of the distance and predecessor maps, so a
    recorded trace costs ``O(V * E)`` memory per pass. Pass
    ``record_steps=False`` when only the final maps are needed.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import List, Optional

from relaxgraph.algorithms.types import (
    BellmanFordResult,
    DistanceMap,
    PredecessorMap,
    Step,
)
from relaxgraph.config import BELLMAN_FORD_CONFIG, BellmanFordConfig
from relaxgraph.exceptions import EmptyGraphError, UnknownSourceError
from relaxgraph.graph.digraph import Edge, VertexID, WeightedDiGraph
from relaxgraph.logging import get_logger

logger = get_logger(__name__)


class BellmanFord:
    """Relaxation engine bound to one graph and a source vertex.

    Example:
        >>> g = WeightedDiGraph()
        >>> g.add_edge(0, 1, 4)
        >>> g.add_edge(1, 2, -3)
        >>> engine = BellmanFord(g, 0)
        >>> engine.run()
        True
        >>> engine.distances()
        {0: 0.0, 1: 4.0, 2: 1.0}
    """

    def __init__(
        self,
        graph: WeightedDiGraph,
        source: VertexID,
        record_steps: Optional[bool] = None,
        config: Optional[BellmanFordConfig] = None,
    ) -> None:
        """Bind the engine to a graph.

        No validation happens here; the graph may still change before `run`.

        Args:
            graph: Graph to read on every run.
            source: Source vertex for the next run.
            record_steps: Record a Step per relaxation attempt. Defaults to
                ``config.record_steps``.
            config: Engine defaults. Defaults to the global
                ``BELLMAN_FORD_CONFIG``.
        """
        self._graph = graph
        self._source = source
        self._config = config if config is not None else BELLMAN_FORD_CONFIG
        self._record_steps = (
            self._config.record_steps if record_steps is None else record_steps
        )
        self._distance: DistanceMap = {}
        self._predecessor: PredecessorMap = {}
        self._steps: List[Step] = []
        self._success: Optional[bool] = None
        self._last_source: Optional[VertexID] = None

    @property
    def source(self) -> VertexID:
        return self._source

    @property
    def record_steps(self) -> bool:
        return self._record_steps

    def set_source(self, source: VertexID) -> None:
        """Use ``source`` for the next run. Nothing is recomputed until then."""
        self._source = source

    def run(self) -> bool:
        """Compute shortest paths from the current source.

        Returns:
            True if no negative cycle is reachable from the source, False
            otherwise. On False the distance and predecessor maps keep the
            state reached after the last pass.

        Raises:
            EmptyGraphError: If the graph has no vertices.
            UnknownSourceError: If the source is not a vertex of the graph.
        """
        vertices = self._graph.vertices()
        n = len(vertices)
        if n == 0:
            raise EmptyGraphError()
        if self._source not in self._graph:
            raise UnknownSourceError(self._source)

        source = self._source
        distance: DistanceMap = {v: math.inf for v in vertices}
        predecessor: PredecessorMap = {v: None for v in vertices}
        distance[source] = 0.0
        steps: List[Step] = []

        self._distance = distance
        self._predecessor = predecessor
        self._steps = steps
        self._success = None
        self._last_source = source

        edges = self._graph.edges()
        logger.debug(
            "Bellman-Ford from %s: %d vertices, %d edges, %d passes, "
            "%d steps to record",
            source,
            n,
            len(edges),
            max(n - 1, 0),
            self._config.estimate_trace_length(
                n, len(edges), record_steps=self._record_steps
            ),
        )

        for iteration in range(1, n):
            relaxed_count = 0
            for edge in edges:
                relaxed = self._relax(edge, distance, predecessor)
                if relaxed:
                    relaxed_count += 1
                if self._config.log_steps:
                    logger.debug(
                        "pass %d: %s -> %s (%g) %s",
                        iteration,
                        edge.source,
                        edge.target,
                        edge.weight,
                        "relaxed" if relaxed else "unchanged",
                    )
                if self._record_steps:
                    steps.append(
                        Step(
                            iteration=iteration,
                            edge=edge,
                            distances=MappingProxyType(dict(distance)),
                            predecessors=MappingProxyType(dict(predecessor)),
                            relaxed=relaxed,
                        )
                    )
            logger.debug("pass %d relaxed %d edge(s)", iteration, relaxed_count)

        self._success = not any(
            self._can_relax(edge, distance) for edge in edges
        )
        if not self._success:
            logger.debug("Negative cycle reachable from %s", source)
        return self._success

    @staticmethod
    def _can_relax(edge: Edge, distance: DistanceMap) -> bool:
        return distance[edge.source] + edge.weight < distance[edge.target]

    def _relax(
        self, edge: Edge, distance: DistanceMap, predecessor: PredecessorMap
    ) -> bool:
        # inf + w stays inf and inf < inf is False, so edges leaving
        # unreached vertices never relax
        candidate = distance[edge.source] + edge.weight
        if candidate < distance[edge.target]:
            distance[edge.target] = candidate
            predecessor[edge.target] = edge.source
            return True
        return False

    def distances(self) -> DistanceMap:
        """Copy of the distances from the most recent run."""
        return dict(self._distance)

    def predecessors(self) -> PredecessorMap:
        """Copy of the predecessors from the most recent run."""
        return dict(self._predecessor)

    def steps(self) -> List[Step]:
        """Trace of the most recent run, in recording order."""
        return list(self._steps)

    def result(self) -> BellmanFordResult:
        """Package the most recent run.

        Raises:
            RuntimeError: If `run` has not completed yet.
        """
        if self._success is None or self._last_source is None:
            raise RuntimeError("run() has not completed; no result available.")
        return BellmanFordResult(
            source=self._last_source,
            success=self._success,
            distances=dict(self._distance),
            predecessors=dict(self._predecessor),
            steps=tuple(self._steps),
        )


def bellman_ford(
    graph: WeightedDiGraph,
    source: VertexID,
    record_steps: Optional[bool] = None,
    config: Optional[BellmanFordConfig] = None,
) -> BellmanFordResult:
    """Run Bellman-Ford once and return the packaged result.

    Args:
        graph: Graph to search.
        source: Source vertex.
        record_steps: Record the relaxation trace. Defaults to
            ``config.record_steps``.
        config: Engine defaults; the global ``BELLMAN_FORD_CONFIG`` if omitted.

    Returns:
        BellmanFordResult with ``success``, distances, predecessors and steps.

    Raises:
        EmptyGraphError: If the graph has no vertices.
        UnknownSourceError: If ``source`` is not a vertex of the graph.
    """
    engine = BellmanFord(graph, source, record_steps=record_steps, config=config)
    engine.run()
    return engine.result()
