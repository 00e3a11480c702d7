"""Graph model and helpers.

This package provides the mutable weighted digraph `WeightedDiGraph`, its
`Edge` record, NetworkX conversion (`convert`) and sample graphs (`samples`).
"""

from relaxgraph.graph.convert import from_networkx, to_networkx
from relaxgraph.graph.digraph import Edge, EdgeKey, VertexID, WeightedDiGraph
from relaxgraph.graph.samples import demo_graph

__all__ = [
    "Edge",
    "EdgeKey",
    "VertexID",
    "WeightedDiGraph",
    "demo_graph",
    "from_networkx",
    "to_networkx",
]
