"""Dijkstra's single-pair shortest path."""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graphds._errors import NodeNotInGraphError, NoPathError

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ShortestPath[T]:
    """A path from source to destination, inclusive, with its total weight."""

    nodes: list[T] = field(default_factory=list)
    weight: float = 0

    def __iter__(self) -> Iterator[T]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


def shortest_path[T: Hashable](
    successors: Mapping[T, Sequence[T]],
    nodes: Iterable[T],
    weight: Callable[[T, T], float],
    source: T,
    destination: T,
) -> ShortestPath[T]:
    """Compute the lightest path between two nodes with Dijkstra's algorithm.

    Cormen et al., "Introduction to Algorithms" 3rd Ed. p. 658. Edge weights
    must be non-negative. Among frontier nodes at equal distance, the one that
    comes first in ``nodes`` is settled first.

    Args:
        successors: Mapping from node to its ordered direct successors.
        nodes: Every node of the graph, in enumeration order.
        weight: Returns the weight of the edge (u, v).
        source: Start node.
        destination: End node.

    Returns:
        The path and its accumulated weight.

    Raises:
        NodeNotInGraphError: If the source or destination is not in ``nodes``.
        NoPathError: If the destination is unreachable from the source.

    """
    # Upper bounds on the distance from source, and enumeration order for ties.
    distance: dict[T, float] = {}
    rank: dict[T, int] = {}
    for index, node in enumerate(nodes):
        distance[node] = math.inf
        rank[node] = index

    if source not in distance:
        raise NodeNotInGraphError(str(source), "Source")
    if destination not in distance:
        raise NodeNotInGraphError(str(destination), "Destination")

    predecessor: dict[T, T] = {}
    settled: set[T] = set()
    distance[source] = 0
    queue: list[tuple[float, int, T]] = [(0, rank[source], source)]

    while queue:
        d, _, u = heapq.heappop(queue)
        if u in settled or d > distance[u]:
            continue
        settled.add(u)
        for v in successors.get(u, ()):
            candidate = d + weight(u, v)
            if distance[v] > candidate:
                distance[v] = candidate
                predecessor[v] = u
                heapq.heappush(queue, (candidate, rank[v], v))

    # Walk the predecessor subgraph back from the destination.
    path: list[T] = []
    total: float = 0
    node = destination
    while node in predecessor:
        path.append(node)
        total += weight(predecessor[node], node)
        node = predecessor[node]
    if node != source:
        raise NoPathError(str(source), str(destination))
    path.append(node)
    path.reverse()

    logger.debug(f"Shortest path {source!r} -> {destination!r}: {path} (weight {total})")
    return ShortestPath(nodes=path, weight=total)
