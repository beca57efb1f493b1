import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graph_algos._algorithms import (
    ShortestPaths,
    bellman_ford,
    bfs_shortest_paths,
    dijkstra,
    topological_sort,
)
from graph_algos._errors import GraphError
from graph_algos._graph import Graph

from .config import ConfigError, GraphAlgosConfig, get_config
from .inputs import (
    GraphInput,
    dag_sample,
    missing_node_message,
    negative_weight_sample,
    resolve_graph_input,
    resolve_node,
    weighted_sample,
)
from .render import render_graph, render_order, render_path, render_shortest_paths

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphFileArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a graph file (node:succ,weight ...). Defaults to the configured or sample graph"),
]
IntNodesOption = Annotated[
    bool,
    typer.Option("--int-nodes", help="Parse node names in the graph file as integers"),
]
SourceOption = Annotated[
    str | None,
    typer.Option("-s", "--source", help="Node to start from"),
]
TargetOption = Annotated[
    str | None,
    typer.Option("-t", "--target", help="Node to print the shortest path to"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Graph algorithms CLI."""
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


def _load_config() -> GraphAlgosConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load_input(graph_file: Path | None, sample: Callable[[], GraphInput], *, int_nodes: bool) -> GraphInput:
    config = _load_config()
    try:
        graph_input = resolve_graph_input(graph_file, config, sample, int_nodes=int_nodes)
    except (typer.BadParameter, GraphError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    err_console.print(f"[cyan]Graph:[/cyan] {escape(graph_input.description)}")
    return graph_input


def _resolve_node(value: str | None, graph_input: GraphInput, role: str) -> Any:
    try:
        return resolve_node(value, graph_input, role)
    except typer.BadParameter as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _run_shortest_paths(
    algorithm: Callable[[Graph[Any], Any], ShortestPaths[Any]],
    sample: Callable[[], GraphInput],
    graph_file: Path | None,
    source: str | None,
    target: str | None,
    *,
    int_nodes: bool,
) -> None:
    graph_input = _load_input(graph_file, sample, int_nodes=int_nodes)

    source_node = _resolve_node(source, graph_input, "source")
    if source_node is None:
        err_console.print(f"[red]Error: {escape(missing_node_message('source'))}[/red]")
        raise typer.Exit(code=1)
    target_node = _resolve_node(target, graph_input, "target")

    err_console.print(f"[cyan]Source:[/cyan] {escape(repr(source_node))}")
    err_console.print()

    try:
        result = algorithm(graph_input.graph, source_node)
        render_shortest_paths(result, out_console)
        if target_node is not None:
            out_console.print()
            render_path(result.path_to(target_node), out_console)
    except GraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command("show")
def show_command(
    graph_file: GraphFileArgument = None,
    *,
    int_nodes: IntNodesOption = False,
) -> None:
    """Print the adjacency lists of a graph."""
    graph_input = _load_input(graph_file, dag_sample, int_nodes=int_nodes)
    render_graph(graph_input.graph, out_console)


@app.command("topo-sort")
def topo_sort_command(
    graph_file: GraphFileArgument = None,
    *,
    start: Annotated[
        str | None,
        typer.Option("--start", help="Only sort the nodes reachable from this node"),
    ] = None,
    int_nodes: IntNodesOption = False,
) -> None:
    """Sort the nodes of a graph topologically."""
    graph_input = _load_input(graph_file, dag_sample, int_nodes=int_nodes)
    start_node = None if start is None else _resolve_node(start, graph_input, "source")

    try:
        order = topological_sort(graph_input.graph, start_node)
    except GraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    render_order(order, out_console)


@app.command("dijkstra")
def dijkstra_command(
    graph_file: GraphFileArgument = None,
    *,
    source: SourceOption = None,
    target: TargetOption = None,
    int_nodes: IntNodesOption = False,
) -> None:
    """Compute shortest paths with Dijkstra's algorithm (non-negative weights)."""
    _run_shortest_paths(dijkstra, weighted_sample, graph_file, source, target, int_nodes=int_nodes)


@app.command("bellman-ford")
def bellman_ford_command(
    graph_file: GraphFileArgument = None,
    *,
    source: SourceOption = None,
    target: TargetOption = None,
    int_nodes: IntNodesOption = False,
) -> None:
    """Compute shortest paths with Bellman-Ford (negative weights allowed)."""
    _run_shortest_paths(bellman_ford, negative_weight_sample, graph_file, source, target, int_nodes=int_nodes)


@app.command("bfs")
def bfs_command(
    graph_file: GraphFileArgument = None,
    *,
    source: SourceOption = None,
    target: TargetOption = None,
    int_nodes: IntNodesOption = False,
) -> None:
    """Compute fewest-edge paths with a breadth-first search."""
    _run_shortest_paths(bfs_shortest_paths, dag_sample, graph_file, source, target, int_nodes=int_nodes)


def main() -> None:
    app()
