import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graphds._errors import GraphError
from graphds._graph import Graph
from graphds._io import load_graph

from .config import ConfigError, get_config
from .graph_query import get_reachability_tree, list_links, list_nodes, walk_order
from .graph_render import (
    render_cycle_table,
    render_link_table,
    render_node_sequence,
    render_node_table,
    render_shortest_path,
    render_tree,
)

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphOption = Annotated[
    Path | None,
    typer.Option("-g", "--graph", help="Path to graph JSON file (defaults to tool.graphds.graph in pyproject.toml)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Graphds CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load(graph_path: Path | None) -> Graph:
    """Load the graph from the given path or from the configured one.

    Exits with code 1 if no path is available or the file cannot be read.
    """
    if graph_path is None:
        try:
            config = get_config()
        except ConfigError as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e
        graph_path = config.graph

    if graph_path is None:
        err_console.print("[red]Error: No graph file given and no \\[tool.graphds].graph configured[/red]")
        raise typer.Exit(code=1)

    logger.debug(f"Loading graph from {graph_path}")
    try:
        return load_graph(graph_path)
    except FileNotFoundError as e:
        err_console.print(f"[red]Error: Graph file not found: {escape(str(graph_path))}[/red]")
        raise typer.Exit(code=1) from e
    except ValidationError as e:
        err_console.print(f"[red]Error: Invalid graph file {escape(str(graph_path))}[/red]")
        err_console.print(escape(str(e)))
        raise typer.Exit(code=1) from e


def _fail(error: GraphError) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(str(error))}[/red]")
    return typer.Exit(code=1)


@app.command()
def nodes(
    *,
    graph: GraphOption = None,
    roots: Annotated[
        bool,
        typer.Option("--roots", help="Only list nodes without incoming edges"),
    ] = False,
    leaves: Annotated[
        bool,
        typer.Option("--leaves", help="Only list nodes without outgoing edges"),
    ] = False,
) -> None:
    """List nodes with their in- and out-degree."""
    loaded = _load(graph)
    render_node_table(list_nodes(loaded, roots_only=roots, leaves_only=leaves), out_console)


@app.command()
def edges(*, graph: GraphOption = None) -> None:
    """List edges with their weight and identifier."""
    loaded = _load(graph)
    render_link_table(list_links(loaded), out_console)


@app.command()
def topo(
    *,
    graph: GraphOption = None,
    sources: Annotated[
        list[str] | None,
        typer.Option("-s", "--source", help="Start from this node (repeatable; defaults to all nodes)"),
    ] = None,
    exclude_sources: Annotated[
        bool,
        typer.Option("--exclude-sources", help="Leave the source nodes out of the order"),
    ] = False,
) -> None:
    """Print the nodes in topological order."""
    loaded = _load(graph)
    try:
        order = loaded.topological_sort(sources, include_source_nodes=not exclude_sources)
    except GraphError as e:
        raise _fail(e) from e
    render_node_sequence(order, out_console)


@app.command()
def cycles(
    *,
    graph: GraphOption = None,
    sources: Annotated[
        list[str] | None,
        typer.Option("-s", "--source", help="Start from this node (repeatable; defaults to all nodes)"),
    ] = None,
) -> None:
    """List one back edge per node that closes a cycle."""
    loaded = _load(graph)
    render_cycle_table(loaded.get_cycles(sources), out_console)


@app.command()
def path(
    source: Annotated[str, typer.Argument(help="Start node")],
    destination: Annotated[str, typer.Argument(help="End node")],
    *,
    graph: GraphOption = None,
) -> None:
    """Find the shortest weighted path between two nodes."""
    loaded = _load(graph)
    try:
        result = loaded.shortest_path(source, destination)
    except GraphError as e:
        raise _fail(e) from e
    render_shortest_path(result, out_console)


@app.command()
def lca(
    node1: Annotated[str, typer.Argument(help="First node")],
    node2: Annotated[str, typer.Argument(help="Second node")],
    *,
    graph: GraphOption = None,
) -> None:
    """Find the lowest common ancestors of two nodes."""
    loaded = _load(graph)
    ancestors = loaded.lowest_common_ancestors(node1, node2)
    if not ancestors:
        err_console.print("[yellow]No common ancestor[/yellow]")
        return
    render_node_sequence(ancestors, out_console)


@app.command()
def walk(*, graph: GraphOption = None) -> None:
    """Print every node once, each before its successors."""
    loaded = _load(graph)
    render_node_sequence(walk_order(loaded), out_console)


@app.command()
def tree(
    root: Annotated[str, typer.Argument(help="Root node")],
    *,
    graph: GraphOption = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", help="Maximum depth to display"),
    ] = None,
) -> None:
    """Show the nodes reachable from a root as a tree."""
    loaded = _load(graph)
    try:
        tree_node = get_reachability_tree(loaded, root, max_depth=max_depth)
    except KeyError as e:
        err_console.print(f"[red]Error: Node not found: {escape(root)}[/red]")
        raise typer.Exit(code=1) from e
    render_tree(tree_node, out_console)


def main() -> None:
    app()
