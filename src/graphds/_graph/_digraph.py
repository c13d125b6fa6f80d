"""Directed, weighted graph with a bundled set of algorithms."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Self

from graphds._errors import CycleError
from graphds._serialize import SerializedGraph, SerializedLink, SerializedNode

from ._ancestors import lowest_common_ancestors
from ._shortest_path import ShortestPath, shortest_path
from ._traversal import depth_first_search, walk

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

DEFAULT_EDGE_WEIGHT: float = 1


class Graph:
    """A mutable directed graph with weighted, optionally identified edges.

    Nodes are strings and are created implicitly by any operation that names
    them. Edges live in an adjacency list; weights and identifiers live in side
    tables keyed by the ordered pair (u, v). Adding the same edge twice creates
    two adjacency entries that share one weight and one identifier.

    Mutating methods return the graph itself so calls can be chained::

        graph = Graph().add_edge("a", "b", 2).add_edge("b", "c")

    The graph is not thread-safe.
    """

    def __init__(self, serialized: SerializedGraph | Mapping[str, object] | None = None) -> None:
        """Create a graph, optionally populated from its serialized form."""
        self._edges: dict[str, list[str]] = {}
        self._edge_weights: dict[tuple[str, str], float] = {}
        self._edge_ids: dict[tuple[str, str], str] = {}

        if serialized is not None:
            self.deserialize(serialized)

    # -- Nodes -----------------------------------------------------------------

    def add_node(self, node: str) -> Self:
        """Add a node. Does nothing if the node already exists."""
        self._edges.setdefault(node, [])
        return self

    def remove_node(self, node: str) -> Self:
        """Remove a node together with its incoming and outgoing edges.

        Scans every adjacency list, so this costs O(E). Unknown nodes are ignored.
        """
        for u, targets in list(self._edges.items()):
            if node in targets:
                self.remove_edge(u, node)

        for v in self._edges.pop(node, []):
            self._edge_ids.pop((node, v), None)

        return self

    def nodes(self) -> list[str]:
        """List every node, in order of first appearance.

        A node counts as present if it has an adjacency entry or is the target
        of some edge.
        """
        node_set: dict[str, None] = {}
        for u, targets in self._edges.items():
            node_set[u] = None
            for v in targets:
                node_set[v] = None
        return list(node_set)

    def adjacent(self, node: str) -> list[str]:
        """Get the direct successors of a node, or an empty list for unknown nodes."""
        return list(self._edges.get(node, []))

    def indegree(self, node: str) -> int:
        """Count the edges pointing at a node. Costs O(E)."""
        return sum(targets.count(node) for targets in self._edges.values())

    def outdegree(self, node: str) -> int:
        """Count the edges leaving a node."""
        return len(self._edges.get(node, []))

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self.nodes())

    def __contains__(self, node: object) -> bool:
        """Check if a node is in the graph."""
        return node in self._edges or any(node in targets for targets in self._edges.values())

    # -- Edges -----------------------------------------------------------------

    def add_edge(self, u: str, v: str, weight: float | None = None, edge_id: str | None = None) -> Self:
        """Add an edge from ``u`` to ``v``, adding both nodes if needed.

        Args:
            u: Source node.
            v: Target node.
            weight: Edge weight. Left unchanged when omitted.
            edge_id: Edge identifier. Left unchanged when omitted.

        """
        self.add_node(u)
        self.add_node(v)
        self._edges[u].append(v)

        if weight is not None:
            self.set_edge_weight(u, v, weight)
        if edge_id is not None:
            self.set_edge_id(u, v, edge_id)

        return self

    def remove_edge(self, u: str, v: str) -> Self:
        """Remove every edge from ``u`` to ``v`` and forget its identifier.

        Nodes are kept. The edge weight is kept as well, so re-adding the edge
        without a weight brings the old weight back.
        """
        if u in self._edges:
            self._edges[u] = [target for target in self._edges[u] if target != v]
            self._edge_ids.pop((u, v), None)
        return self

    def get_edges(self) -> dict[str, list[str]]:
        """Get a copy of the adjacency lists."""
        return {u: list(targets) for u, targets in self._edges.items()}

    def has_edge(self, u: str, v: str) -> bool:
        """Check if there is an edge from ``u`` to ``v``."""
        return v in self._edges.get(u, [])

    def set_edge_weight(self, u: str, v: str, weight: float) -> Self:
        """Set the weight of the edge (u, v)."""
        self._edge_weights[u, v] = weight
        return self

    def get_edge_weight(self, u: str, v: str) -> float:
        """Get the weight of the edge (u, v), or 1 if none was set."""
        return self._edge_weights.get((u, v), DEFAULT_EDGE_WEIGHT)

    def set_edge_id(self, u: str, v: str, edge_id: str) -> Self:
        """Set the identifier of the edge (u, v)."""
        self._edge_ids[u, v] = edge_id
        return self

    def get_edge_id(self, u: str, v: str) -> str | None:
        """Get the identifier of the edge (u, v), or None if none was set."""
        return self._edge_ids.get((u, v))

    # -- Algorithms ------------------------------------------------------------

    def depth_first_search(
        self,
        source_nodes: Iterable[str] | None = None,
        *,
        include_source_nodes: bool = True,
        error_on_cycle: bool = False,
    ) -> list[str]:
        """List the nodes reachable from the sources in depth-first post-order.

        Args:
            source_nodes: Nodes to start from. Defaults to every node.
            include_source_nodes: Whether the sources themselves may appear.
            error_on_cycle: Raise CycleError if a cycle is found.

        Raises:
            CycleError: If ``error_on_cycle`` is set and a cycle is found.

        """
        traversal = depth_first_search(
            self._edges,
            self.nodes() if source_nodes is None else source_nodes,
            include_source_nodes=include_source_nodes,
            stop_on_cycle=error_on_cycle,
        )
        if traversal.cycle_found:
            raise CycleError
        return traversal.order

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle, self-loops included."""
        return depth_first_search(self._edges, self.nodes(), stop_on_cycle=True).cycle_found

    def get_cycles(self, source_nodes: Iterable[str] | None = None) -> list[tuple[str, str]]:
        """List one back edge per node that closes a cycle.

        Each pair is ordered as (smaller, larger) by string comparison. Only
        the last back edge found from a given node is reported, so this gives a
        representative cycle per node, not every cycle in the graph.

        Args:
            source_nodes: Nodes to start from. Defaults to every node.

        """
        traversal = depth_first_search(
            self._edges,
            self.nodes() if source_nodes is None else source_nodes,
            collect_cycles=True,
        )
        return [(u, v) if u < v else (v, u) for u, v in traversal.back_edges.items()]

    def walk(self, on_node: Callable[[str], object]) -> None:
        """Call ``on_node`` once for every node, each before its successors."""
        walk(self._edges, self.nodes(), on_node)

    def lowest_common_ancestors(self, node1: str, node2: str) -> list[str]:
        """Find the most specific nodes reachable from both ``node1`` and ``node2``."""
        return lowest_common_ancestors(self._edges, node1, node2)

    def topological_sort(self, source_nodes: Iterable[str] | None = None, include_source_nodes: bool = True) -> list[str]:
        """Order nodes so that for every edge (u, v), u comes before v.

        This is the reversed depth-first post-order (Cormen et al.,
        "Introduction to Algorithms" 3rd Ed. p. 613).

        Args:
            source_nodes: Nodes to start from. Defaults to every node.
            include_source_nodes: If False, only the descendants of the sources
                are ordered.

        Raises:
            CycleError: If a cycle is found.

        """
        order = self.depth_first_search(
            source_nodes,
            include_source_nodes=include_source_nodes,
            error_on_cycle=True,
        )
        order.reverse()
        return order

    def shortest_path(self, source: str, destination: str) -> ShortestPath[str]:
        """Find the lightest path from ``source`` to ``destination``.

        Raises:
            NodeNotInGraphError: If either endpoint is not in the graph.
            NoPathError: If no path exists.

        """
        return shortest_path(self._edges, self.nodes(), self.get_edge_weight, source, destination)

    # -- Serialization ---------------------------------------------------------

    def serialize(self) -> SerializedGraph:
        """Export every node and every edge occurrence."""
        nodes = self.nodes()
        links = [
            SerializedLink(
                source=source,
                target=target,
                weight=self.get_edge_weight(source, target),
                id=self.get_edge_id(source, target),
            )
            for source in nodes
            for target in self._edges.get(source, [])
        ]
        return SerializedGraph(nodes=[SerializedNode(id=node) for node in nodes], links=links)

    def deserialize(self, serialized: SerializedGraph | Mapping[str, object]) -> Self:
        """Add the nodes and edges of a serialized graph to this graph.

        Existing nodes and edges are kept, so deserializing into a non-empty
        graph merges the two.

        Raises:
            pydantic.ValidationError: If a mapping does not have the serialized shape.

        """
        if isinstance(serialized, Mapping):
            serialized = SerializedGraph.model_validate(serialized)

        for node in serialized.nodes:
            self.add_node(node.id)
        for link in serialized.links:
            self.add_edge(link.source, link.target, link.weight, link.id)

        logger.debug(f"Deserialized {len(serialized.nodes)} nodes and {len(serialized.links)} links")
        return self
