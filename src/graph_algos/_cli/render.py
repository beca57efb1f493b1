"""Rich rendering utilities for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from graph_algos._algorithms import UNREACHABLE

if TYPE_CHECKING:
    from rich.console import Console

    from graph_algos._algorithms import Path, ShortestPaths
    from graph_algos._graph import Graph


def render_graph(graph: Graph[Any], console: Console) -> None:
    """Render the adjacency lists of a graph as a Rich table.

    Args:
        graph: The graph to render.
        console: Rich Console to output to.

    """
    if graph.is_empty():
        console.print("[dim]Graph has no nodes[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Node", style="bold")
    table.add_column("Successors")

    for node in graph.nodes():
        successors = ", ".join(f"{edge.target!r} ({edge.weight})" for edge in graph.succs(node))
        table.add_row(escape(repr(node)), escape(successors) or "[dim]-[/dim]")

    console.print(table)
    console.print(f"\n[dim]Total: {len(graph)} nodes, {graph.edge_count()} edges[/dim]")


def render_order(order: list[Any], console: Console) -> None:
    """Render a topological order on one line."""
    console.print(escape(" -> ".join(repr(node) for node in order)))


def render_shortest_paths(result: ShortestPaths[Any], console: Console) -> None:
    """Render shortest path distances as a Rich table, closest nodes first.

    Args:
        result: The result of a shortest path algorithm.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Node", style="bold")
    table.add_column("Distance", justify="right")
    table.add_column("Predecessor")

    rows = sorted(result.distances.items(), key=lambda item: item[1])
    for node, distance in rows:
        if distance == UNREACHABLE:
            table.add_row(escape(repr(node)), "[dim]unreachable[/dim]", "")
            continue
        predecessor = result.predecessors.get(node)
        table.add_row(
            escape(repr(node)),
            str(distance),
            "" if predecessor is None else escape(repr(predecessor)),
        )

    console.print(table)


def render_path(path: Path[Any], console: Console) -> None:
    """Render a path and its total weight."""
    console.print(f"[cyan]Path:[/cyan] {escape(str(path))}")
    console.print(f"[cyan]Total weight:[/cyan] {path.total}")
