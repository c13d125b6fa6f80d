"""Lowest common ancestors over the forward-reachability relation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator, Mapping, Sequence


def _reach_from[T: Hashable](successors: Mapping[T, Sequence[T]], start: T, target: T) -> tuple[set[T], bool]:
    """Collect every node reachable from ``start``, stopping early at ``target``.

    Returns:
        Tuple of (nodes reached so far, whether ``target`` was reached).

    """
    reached: set[T] = {start}
    if start == target:
        return reached, True

    stack: list[Iterator[T]] = [iter(successors.get(start, ()))]
    while stack:
        for child in stack[-1]:
            if child in reached:
                continue
            reached.add(child)
            if child == target:
                return reached, True
            stack.append(iter(successors.get(child, ())))
            break
        else:
            stack.pop()

    return reached, False


def lowest_common_ancestors[T: Hashable](successors: Mapping[T, Sequence[T]], node1: T, node2: T) -> list[T]:
    """Find the most specific nodes reachable from both ``node1`` and ``node2``.

    The first pass explores everything reachable from ``node1``. If ``node2``
    itself is reached, it is the only answer. Otherwise a second pass explores
    from ``node2``: each node also reached by the first pass is a common
    ancestor, and once one has been found the pass stops descending below the
    nodes it visits afterwards.

    Based on https://github.com/relaxedws/lca (LowestCommonAncestor.php), using
    depth-first rather than breadth-first search.

    Args:
        successors: Mapping from node to its ordered direct successors.
        node1: First node.
        node2: Second node.

    Returns:
        The lowest common ancestors in discovery order; empty if there are none.

    Example:
        >>> lowest_common_ancestors({"a": ["c"], "b": ["c"], "c": []}, "a", "b")
        ['c']

    """
    reached_from_node1, shortcut = _reach_from(successors, node1, node2)
    if shortcut:
        return [node2]

    lcas: list[T] = []
    visited: set[T] = set()

    def enter(node: T) -> bool:
        visited.add(node)
        if node in reached_from_node1:
            lcas.append(node)
            return False
        return not lcas

    stack: list[Iterator[T]] = [iter(successors.get(node2, ()))] if enter(node2) else []
    while stack:
        for child in stack[-1]:
            if child in visited:
                continue
            if enter(child):
                stack.append(iter(successors.get(child, ())))
                break
        else:
            stack.pop()

    return lcas
