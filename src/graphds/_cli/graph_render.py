"""Rich rendering utilities for graph query commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from rich.console import Console

    from graphds._graph import ShortestPath
    from graphds._serialize import SerializedLink

    from .graph_query import NodeInfo, TreeNode


def render_node_table(nodes: list[NodeInfo], console: Console) -> None:
    """Render node list as a Rich table.

    Args:
        nodes: List of NodeInfo to render.
        console: Rich Console to output to.

    """
    if not nodes:
        console.print("[dim]No nodes match the given filters[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Node", style="bold")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")

    for node in nodes:
        table.add_row(escape(node.id), str(node.indegree), str(node.outdegree))

    console.print(table)
    console.print(f"\n[dim]Total: {len(nodes)} nodes[/dim]")


def render_link_table(links: list[SerializedLink], console: Console) -> None:
    """Render edge list as a Rich table.

    Args:
        links: List of SerializedLink to render.
        console: Rich Console to output to.

    """
    if not links:
        console.print("[dim]Graph has no edges[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Source", style="bold")
    table.add_column("Target", style="bold")
    table.add_column("Weight", justify="right")
    table.add_column("Id", style="dim")

    for link in links:
        table.add_row(
            escape(link.source),
            escape(link.target),
            f"{link.weight:g}" if link.weight is not None else "",
            escape(link.id) if link.id is not None else "",
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(links)} edges[/dim]")


def render_cycle_table(cycles: list[tuple[str, str]], console: Console) -> None:
    """Render cycle pairs as a Rich table."""
    if not cycles:
        console.print("[green]No cycles found[/green]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Node", style="bold")
    table.add_column("Node", style="bold")

    for first, second in cycles:
        table.add_row(escape(first), escape(second))

    console.print(table)


def render_node_sequence(nodes: list[str], console: Console) -> None:
    """Render an ordered sequence of nodes, one per line with its position."""
    if not nodes:
        console.print("[dim]No nodes[/dim]")
        return

    width = len(str(len(nodes)))
    for index, node in enumerate(nodes, start=1):
        console.print(f"[dim]{index:>{width}}.[/dim] {escape(node)}")


def render_shortest_path(path: ShortestPath[str], console: Console) -> None:
    """Render a shortest path as an arrow chain with its total weight."""
    chain = " [dim]->[/dim] ".join(escape(node) for node in path)
    console.print(chain)
    console.print(f"[cyan]Weight:[/cyan] {path.weight:g}")


def render_tree(tree_node: TreeNode, console: Console) -> None:
    """Render a reachability tree using Rich Tree.

    Args:
        tree_node: TreeNode root to render.
        console: Rich Console to output to.

    """
    rich_tree = Tree(f"[bold]{escape(tree_node.id)}[/bold]")
    _add_tree_children(rich_tree, tree_node.children)
    console.print(rich_tree)


def _add_tree_children(parent: Tree, children: list[TreeNode]) -> None:
    """Add children, and their descendants, to a Rich Tree.

    Args:
        parent: Parent Tree node to add children to.
        children: List of TreeNode children.

    """
    pending: list[tuple[Tree, list[TreeNode]]] = [(parent, children)]
    while pending:
        rich_parent, nodes = pending.pop()
        for child in nodes:
            pending.append((rich_parent.add(escape(child.id)), child.children))
