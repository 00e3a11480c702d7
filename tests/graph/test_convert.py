import networkx as nx
import pytest

from relaxgraph.graph.convert import from_networkx, to_networkx
from relaxgraph.graph.digraph import Edge, WeightedDiGraph


def build_sample_graph() -> WeightedDiGraph:
    graph = WeightedDiGraph()
    graph.add_edge(0, 1, 4)
    graph.add_edge(1, 2, -3)
    graph.add_vertex(9)
    return graph


def test_to_networkx_basic():
    nxg = to_networkx(build_sample_graph())

    assert isinstance(nxg, nx.DiGraph)
    assert list(nxg.nodes) == [0, 1, 2, 9]
    assert nxg.edges[0, 1]["weight"] == 4.0
    assert nxg.edges[1, 2]["weight"] == -3.0


def test_to_networkx_custom_attribute():
    nxg = to_networkx(build_sample_graph(), weight="cost")
    assert nxg.edges[0, 1] == {"cost": 4.0}


def test_to_networkx_is_independent():
    g = build_sample_graph()
    nxg = to_networkx(g)
    nxg.add_edge(2, 0, weight=1.0)
    nxg.remove_node(9)

    assert not g.has_edge(2, 0)
    assert 9 in g


def test_roundtrip_preserves_order():
    g = WeightedDiGraph()
    g.add_edge(3, 1, 1.0)
    g.add_edge(3, 0, 2.0)
    g.add_edge(0, 3, -1.0)

    roundtrip = from_networkx(to_networkx(g))

    assert roundtrip.vertices() == g.vertices()
    assert roundtrip.edges() == g.edges()


def test_from_networkx_default_weight():
    nxg = nx.DiGraph()
    nxg.add_edge(0, 1)
    nxg.add_edge(1, 2, weight=2.5)

    g = from_networkx(nxg, default_weight=7.0)

    assert g.edges() == [Edge(0, 1, 7.0), Edge(1, 2, 2.5)]


def test_from_networkx_isolated_nodes():
    nxg = nx.DiGraph()
    nxg.add_nodes_from([4, 2])
    g = from_networkx(nxg)
    assert g.vertices() == [4, 2]
    assert g.edges() == []


def test_from_networkx_rejects_multigraph():
    with pytest.raises(TypeError, match="Multigraphs"):
        from_networkx(nx.MultiDiGraph())


def test_from_networkx_rejects_undirected():
    with pytest.raises(TypeError, match="directed"):
        from_networkx(nx.Graph())
