"""Graph module providing the directed graph and its algorithms.

This module contains:
- Graph: A mutable directed, weighted graph
- depth_first_search / walk: Traversal primitives
- lowest_common_ancestors: Common-descendant query
- shortest_path: Dijkstra's algorithm
"""

from ._ancestors import lowest_common_ancestors
from ._digraph import DEFAULT_EDGE_WEIGHT, Graph
from ._shortest_path import ShortestPath, shortest_path
from ._traversal import Traversal, VisitState, depth_first_search, walk

__all__ = [
    "DEFAULT_EDGE_WEIGHT",
    "Graph",
    "ShortestPath",
    "Traversal",
    "VisitState",
    "depth_first_search",
    "lowest_common_ancestors",
    "shortest_path",
    "walk",
]
