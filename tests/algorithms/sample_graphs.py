"""Sample graphs shared across the test suite.

Registered as a pytest plugin from ``tests/conftest.py``. Each fixture builds a
fresh WeightedDiGraph so tests may mutate it freely.
"""

from __future__ import annotations

import pytest

from relaxgraph.graph.digraph import WeightedDiGraph


def make_graph(edges, vertices=()) -> WeightedDiGraph:
    """Build a graph from ``(source, target, weight)`` triples plus extra vertices."""
    g = WeightedDiGraph()
    for u, v, w in edges:
        g.add_edge(u, v, w)
    for v in vertices:
        g.add_vertex(v)
    return g


@pytest.fixture
def graph_factory():
    return make_graph


@pytest.fixture
def negative_edge_graph():
    #  0 --4--> 1 --(-3)--> 2 --4--> 3
    #  0 --5--------------> 2
    return make_graph([(0, 1, 4), (0, 2, 5), (1, 2, -3), (2, 3, 4)])


@pytest.fixture
def negative_cycle_graph():
    #  0 --1--> 1 --(-1)--> 2 --(-1)--> 0   (cycle weight -1)
    return make_graph([(0, 1, 1), (1, 2, -1), (2, 0, -1)])


@pytest.fixture
def single_vertex_graph():
    return make_graph([], vertices=[0])


@pytest.fixture
def disconnected_graph():
    #  0 --5--> 1      2 (isolated)
    return make_graph([(0, 1, 5)], vertices=[2])


@pytest.fixture
def self_loop_graph():
    #  0 --2--> 0,  0 --3--> 1
    return make_graph([(0, 0, 2), (0, 1, 3)])


@pytest.fixture
def diamond_graph():
    #      1
    #    /   \
    #  0       3    every edge weight 1
    #    \   /
    #      2
    return make_graph([(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)])


@pytest.fixture
def reverse_chain_graph():
    # Edges listed against the direction of travel, so each pass only
    # settles one more vertex: 3 <- 2 <- 1 <- 0
    return make_graph([(2, 3, 1), (1, 2, 1), (0, 1, 1)])
