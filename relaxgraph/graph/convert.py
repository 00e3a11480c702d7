"""Conversion between WeightedDiGraph and NetworkX graphs.

Both directions preserve node order and per-source edge order, so a graph that
makes a round trip relaxes its edges in the same sequence.
"""

from __future__ import annotations

import networkx as nx

from relaxgraph.graph.digraph import WEIGHT_ATTR, WeightedDiGraph


def to_networkx(graph: WeightedDiGraph, weight: str = WEIGHT_ATTR) -> nx.DiGraph:
    """Convert a WeightedDiGraph to an independent NetworkX DiGraph.

    Args:
        graph: The graph to convert.
        weight: Name of the edge attribute that receives the weight.

    Returns:
        A new `networkx.DiGraph`; mutating it does not affect ``graph``.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.vertices())
    for edge in graph.edges():
        nx_graph.add_edge(edge.source, edge.target, **{weight: edge.weight})
    return nx_graph


def from_networkx(
    nx_graph: nx.DiGraph,
    weight: str = WEIGHT_ATTR,
    default_weight: float = 1.0,
) -> WeightedDiGraph:
    """Build a WeightedDiGraph from a NetworkX DiGraph.

    Args:
        nx_graph: Source graph. Nodes are expected to be integer ids.
        weight: Edge attribute holding the weight.
        default_weight: Weight for edges without the ``weight`` attribute.

    Returns:
        A new WeightedDiGraph.

    Raises:
        TypeError: If ``nx_graph`` is a multigraph or is undirected.
    """
    if nx_graph.is_multigraph():
        raise TypeError(
            "Multigraphs are not supported; at most one edge per ordered pair."
        )
    if not nx_graph.is_directed():
        raise TypeError("Expected a directed graph; got an undirected one.")

    graph = WeightedDiGraph()
    for node in nx_graph.nodes:
        graph.add_vertex(node)
    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(u, v, data.get(weight, default_weight))
    return graph
