"""In-memory directed, weighted graph with classical graph algorithms."""

__all__ = [
    "DEFAULT_EDGE_WEIGHT",
    "CycleError",
    "Graph",
    "GraphError",
    "NoPathError",
    "NodeNotInGraphError",
    "SerializedGraph",
    "SerializedLink",
    "SerializedNode",
    "ShortestPath",
    "Traversal",
    "VisitState",
    "depth_first_search",
    "load_graph",
    "lowest_common_ancestors",
    "save_graph",
    "shortest_path",
    "walk",
]

from ._errors import CycleError, GraphError, NodeNotInGraphError, NoPathError
from ._graph import (
    DEFAULT_EDGE_WEIGHT,
    Graph,
    ShortestPath,
    Traversal,
    VisitState,
    depth_first_search,
    lowest_common_ancestors,
    shortest_path,
    walk,
)
from ._io import load_graph, save_graph
from ._serialize import SerializedGraph, SerializedLink, SerializedNode
