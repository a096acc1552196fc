"""Registry graph indexing and classification."""

from impgraph.graph.adjacency import AdjacencyIndex, index_adjacency
from impgraph.graph.core import NodeView, RegistryGraph
from impgraph.graph.sinks import SINK_GROUPS, classify_sinks, is_sink, node_radius

__all__ = [
    "AdjacencyIndex",
    "NodeView",
    "RegistryGraph",
    "SINK_GROUPS",
    "classify_sinks",
    "index_adjacency",
    "is_sink",
    "node_radius",
]
