"""Graph query functions for CLI commands.

This module provides pure functions for querying a graph.
These are the functional core - no I/O, no Rich rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphds._graph import Graph
    from graphds._serialize import SerializedLink


@dataclass(frozen=True, slots=True)
class NodeInfo:
    """Basic information about a node for listing."""

    id: str
    indegree: int
    outdegree: int


@dataclass(slots=True)
class TreeNode:
    """A node in a reachability tree for rendering."""

    id: str
    children: list[TreeNode]


def list_nodes(
    graph: Graph,
    *,
    roots_only: bool = False,
    leaves_only: bool = False,
) -> list[NodeInfo]:
    """List nodes with their degrees, in graph order.

    Args:
        graph: The Graph to query.
        roots_only: If True, only return nodes without incoming edges.
        leaves_only: If True, only return nodes without outgoing edges.

    Returns:
        List of NodeInfo matching the filters.

    """
    infos = [NodeInfo(id=node, indegree=graph.indegree(node), outdegree=graph.outdegree(node)) for node in graph.nodes()]

    if roots_only:
        infos = [info for info in infos if info.indegree == 0]
    if leaves_only:
        infos = [info for info in infos if info.outdegree == 0]

    return infos


def list_links(graph: Graph) -> list[SerializedLink]:
    """List every edge occurrence with its weight and identifier."""
    return graph.serialize().links


def walk_order(graph: Graph) -> list[str]:
    """Collect the nodes in the order ``Graph.walk`` reports them."""
    order: list[str] = []
    graph.walk(order.append)
    return order


def get_reachability_tree(graph: Graph, root: str, *, max_depth: int | None = None) -> TreeNode:
    """Build the depth-first tree of nodes reachable from ``root``.

    Each node appears once, under the first parent that reaches it.

    Args:
        graph: The Graph to query.
        root: The root node of the tree.
        max_depth: Maximum depth to traverse (None for unlimited).

    Returns:
        TreeNode representing the tree.

    Raises:
        KeyError: If the node is not found.

    """
    if root not in graph:
        msg = f"Node not found: {root}"
        raise KeyError(msg)

    tree = TreeNode(id=root, children=[])
    visited: set[str] = {root}
    # (tree node, depth, remaining successors)
    stack: list[tuple[TreeNode, int, Iterator[str]]] = [(tree, 0, iter(graph.adjacent(root)))]

    while stack:
        parent, depth, neighbors = stack[-1]
        if max_depth is not None and depth >= max_depth:
            stack.pop()
            continue

        for neighbor in neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                child = TreeNode(id=neighbor, children=[])
                parent.children.append(child)
                stack.append((child, depth + 1, iter(graph.adjacent(neighbor))))
                break
        else:
            stack.pop()

    return tree
