"""Ready-made graphs for demonstrations and quick experiments."""

from relaxgraph.graph.digraph import WeightedDiGraph


def demo_graph() -> WeightedDiGraph:
    """Return the four-vertex demonstration graph.

    Edges (weight in brackets)::

        0 -> 1 [4]     0 -> 2 [5]     1 -> 2 [-3]
        2 -> 3 [4]     3 -> 1 [6]

    The cycle 1 -> 2 -> 3 -> 1 has total weight 7, so a run from 0 finds no
    negative cycle and settles at distances 0, 4, 1, 5.
    """
    g = WeightedDiGraph()
    g.add_edge(0, 1, 4)
    g.add_edge(0, 2, 5)
    g.add_edge(1, 2, -3)
    g.add_edge(2, 3, 4)
    g.add_edge(3, 1, 6)
    return g
