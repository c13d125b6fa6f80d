"""Depth-first traversal primitives.

Every traversal here runs on an explicit stack of ``(node, successor iterator)``
frames, so graph depth is bounded by memory rather than by the interpreter's
recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence


class VisitState(StrEnum):
    """Per-node state of a depth-first traversal."""

    UNVISITED = "unvisited"
    VISITING = "visiting"
    VISITED = "visited"


@dataclass(frozen=True, slots=True)
class Traversal[T]:
    """Outcome of a depth-first traversal.

    Attributes:
        order: Nodes in post-order (a node appears after all its descendants).
        cycle_found: True if the traversal stopped on a back edge.
        back_edges: Back edges keyed by their origin. Only the last back edge
            met from a given node is kept.

    """

    order: list[T] = field(default_factory=list)
    cycle_found: bool = False
    back_edges: dict[T, T] = field(default_factory=dict)


def depth_first_search[T: Hashable](  # noqa: C901
    successors: Mapping[T, Sequence[T]],
    source_nodes: Iterable[T],
    *,
    include_source_nodes: bool = True,
    stop_on_cycle: bool = False,
    collect_cycles: bool = False,
) -> Traversal[T]:
    """Run a post-order depth-first search from the given sources.

    Follows Cormen et al., "Introduction to Algorithms" 3rd Ed. p. 604, with
    each node moving through UNVISITED -> VISITING -> VISITED. Meeting a
    VISITING node means the edge just followed is a back edge.

    Args:
        successors: Mapping from node to its ordered direct successors.
        source_nodes: Nodes to start from, in order.
        include_source_nodes: If False, the sources are marked visited up front
            so they never appear in the result, but their successors are still
            explored.
        stop_on_cycle: Abort on the first back edge and report
            ``cycle_found``. Takes precedence over ``collect_cycles``.
        collect_cycles: Record back edges in ``back_edges`` and keep going.

    Returns:
        A Traversal with the post-order and cycle information.

    Example:
        >>> depth_first_search({"a": ["b"], "b": ["c"], "c": []}, ["a"]).order
        ['c', 'b', 'a']

    """
    state: dict[T, VisitState] = {}
    order: list[T] = []
    back_edges: dict[T, T] = {}

    sources = list(source_nodes)
    if include_source_nodes:
        roots = sources
    else:
        for node in sources:
            state[node] = VisitState.VISITED
        roots = [child for node in sources for child in successors.get(node, ())]

    for root in roots:
        if state.get(root, VisitState.UNVISITED) is not VisitState.UNVISITED:
            continue
        state[root] = VisitState.VISITING
        stack: list[tuple[T, Iterator[T]]] = [(root, iter(successors.get(root, ())))]

        while stack:
            node, children = stack[-1]
            for child in children:
                child_state = state.get(child, VisitState.UNVISITED)
                if child_state is VisitState.VISITING:
                    if stop_on_cycle:
                        return Traversal(order=order, cycle_found=True)
                    if collect_cycles:
                        back_edges[node] = child
                elif child_state is VisitState.UNVISITED:
                    state[child] = VisitState.VISITING
                    stack.append((child, iter(successors.get(child, ()))))
                    break
            else:
                stack.pop()
                state[node] = VisitState.VISITED
                order.append(node)

    return Traversal(order=order, back_edges=back_edges)


def walk[T: Hashable](
    successors: Mapping[T, Sequence[T]],
    nodes: Iterable[T],
    on_node: Callable[[T], object],
) -> None:
    """Call ``on_node`` once per node, in depth-first pre-order.

    Unlike ``depth_first_search`` a node is reported before its successors and
    no cycle detection takes place; the visited set alone stops the walk from
    looping.

    Args:
        successors: Mapping from node to its ordered direct successors.
        nodes: Starting nodes, in order.
        on_node: Callback invoked with each node the first time it is reached.

    """
    visited: set[T] = set()

    for start in nodes:
        if start in visited:
            continue
        visited.add(start)
        on_node(start)
        stack: list[Iterator[T]] = [iter(successors.get(start, ()))]

        while stack:
            for child in stack[-1]:
                if child not in visited:
                    visited.add(child)
                    on_node(child)
                    stack.append(iter(successors.get(child, ())))
                    break
            else:
                stack.pop()
