"""Graph inputs for CLI commands.

This module resolves which graph a command runs on: a graph file given on the
command line, the file configured in pyproject.toml, or the command's built-in
sample graph. Pure functions only, no Rich rendering.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from graph_algos._errors import GraphParseError
from graph_algos._graph import Graph, graph, parse_graph

from .config import CONFIG_SECTION, GraphAlgosConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphInput:
    """A graph together with how to interpret node names typed by the user."""

    graph: Graph[Any]
    node_type: Callable[[str], Any]
    description: str
    source: Any = None
    target: Any = None


def dag_sample() -> GraphInput:
    """Unweighted acyclic sample graph."""
    return GraphInput(
        graph=graph({
            1: [2, 3],
            2: [4, 6],
            3: [5, 6],
            5: [6],
        }),
        node_type=int,
        description="sample DAG",
        source=1,
        target=6,
    )


def weighted_sample() -> GraphInput:
    """Weighted sample graph with non-negative weights."""
    return GraphInput(
        graph=graph({
            "a": [("c", 2), ("b", 3)],
            "b": [("e", 6), ("d", 5)],
            "c": [("g", 2), ("f", 1)],
            "d": [("i", 2), ("h", 3)],
            "e": [("h", 7)],
            "f": [("e", 6)],
            "i": [("b", 4)],
        }),
        node_type=str,
        description="sample weighted graph",
        source="a",
        target="e",
    )


def negative_weight_sample() -> GraphInput:
    """Weighted sample graph with a negative edge but no negative cycle."""
    return GraphInput(
        graph=graph({
            "a": [("b", 4), ("c", 2)],
            "b": [("d", 3)],
            "c": [("b", -1), ("d", 5)],
            "d": [("e", 2)],
        }),
        node_type=str,
        description="sample graph with negative weights",
        source="a",
        target="e",
    )


def load_graph_file(path: Path, *, int_nodes: bool = False) -> GraphInput:
    """Read a graph file in the adjacency text format.

    Args:
        path: The file to read.
        int_nodes: Parse node names as integers.

    Returns:
        The loaded graph, without default source or target.

    Raises:
        GraphParseError: If the file is not UTF-8 text or its content is malformed.
        typer.BadParameter: If the file cannot be read.

    """
    node_type: Callable[[str], Any] = int if int_nodes else str
    logger.debug(f"Loading graph from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"Graph file is not valid UTF-8 text ({e.reason} at byte {e.start}): {path}"
        raise GraphParseError(msg) from e
    except OSError as e:
        msg = f"Cannot read graph file ({e.strerror or e}): {path}"
        raise typer.BadParameter(msg) from e
    loaded = parse_graph(text, node_type)
    return GraphInput(graph=loaded, node_type=node_type, description=str(path))


def resolve_graph_input(
    graph_file: Path | None,
    config: GraphAlgosConfig,
    sample: Callable[[], GraphInput],
    *,
    int_nodes: bool = False,
) -> GraphInput:
    """Pick the graph for a command.

    The command-line file wins over the configured file, which wins over the
    sample graph. Configured source and target apply to the configured file
    only and fill in the sample's defaults otherwise.

    Raises:
        typer.BadParameter: If the graph file does not exist.

    """
    use_int_nodes = int_nodes or config.int_nodes

    if graph_file is not None:
        path = graph_file
    elif config.graph is not None:
        path = config.graph
    else:
        return sample()

    if not path.is_file():
        msg = f"Graph file not found: {path}"
        raise typer.BadParameter(msg)

    loaded = load_graph_file(path, int_nodes=use_int_nodes)
    if graph_file is None:
        return GraphInput(
            graph=loaded.graph,
            node_type=loaded.node_type,
            description=loaded.description,
            source=_convert(config.source, loaded.node_type),
            target=_convert(config.target, loaded.node_type),
        )
    return loaded


def resolve_node(value: str | None, graph_input: GraphInput, role: str) -> Any:
    """Convert a node name given on the command line, falling back to the input's default.

    Args:
        value: The raw command-line value, if any.
        graph_input: The graph the node belongs to.
        role: ``"source"`` or ``"target"``, used for defaults and messages.

    Returns:
        The node, or None when neither a value nor a default is available.

    Raises:
        typer.BadParameter: If the value cannot be converted to the node type.

    """
    if value is None:
        return getattr(graph_input, role)
    try:
        return graph_input.node_type(value)
    except ValueError as e:
        msg = f"Invalid {role} node {value!r}: {e}"
        raise typer.BadParameter(msg) from e


def missing_node_message(role: str) -> str:
    return f"{role.capitalize()} node required. Use --{role} or configure [tool.{CONFIG_SECTION}].{role}"


def _convert(value: str | None, node_type: Callable[[str], Any]) -> Any:
    if value is None:
        return None
    try:
        return node_type(value)
    except ValueError as e:
        msg = f"Invalid configured node {value!r}: {e}"
        raise typer.BadParameter(msg) from e
