"""Convenience constructors: graph literals and the adjacency text format.

Both are sugar over ``Graph.add_node`` and ``Graph.add_edge`` and add no
semantics of their own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graph_algos._errors import GraphParseError

from ._edge import Edge
from ._graph import Graph

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from ._edge import Weight

logger = logging.getLogger(__name__)


def graph[T](adjacency: Mapping[T, Iterable[Edge[T] | tuple[T, Weight] | T]]) -> Graph[T]:
    """Build a graph from a literal ``node -> successors`` mapping.

    Successors are bare targets (weight 1) or ``(target, weight)`` pairs.
    Successor order is kept.

    Example:
        >>> g = graph({
        ...     "a": [("c", 2), ("b", 3)],
        ...     "b": [("e", 6), ("d", 5)],
        ... })
        >>> [edge.target for edge in g.succs("a")]
        ['c', 'b']
        >>> graph({1: [2, 3], 2: [3]}).is_edge(2, 3)
        True

    """
    return Graph.from_pairs(adjacency.items())


def _parse_weight(text: str) -> Weight:
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_graph[T](text: str, node_type: Callable[[str], T] = str) -> Graph[T]:  # type: ignore[assignment]
    """Parse a graph from the adjacency text format.

    Each line holds a source node, a colon and the space separated successors.
    A successor is ``target`` (weight 1) or ``target,weight``. Blank lines and
    lines starting with ``#`` are skipped.

    Args:
        text: The text to parse.
        node_type: Converter applied to every node token, e.g. ``int``.

    Returns:
        The parsed graph.

    Raises:
        GraphParseError: If a line is malformed or a token cannot be converted.

    Example:
        >>> g = parse_graph("1:2 3\\n2:4,5\\n", node_type=int)
        >>> g.succs(2)
        [Edge(target=4, weight=5)]

    """
    result: Graph[T] = Graph.empty()

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        source_text, sep, successors_text = line.partition(":")
        if not sep:
            msg = f"expected 'node:successors', got {raw_line!r}"
            raise GraphParseError(msg, line_number)

        source = _parse_node(source_text.strip(), node_type, line_number)
        result.add_node(source)

        for token in successors_text.split():
            target_text, comma, weight_text = token.partition(",")
            target = _parse_node(target_text, node_type, line_number)
            if not comma:
                result.add_edge(source, Edge(target))
                continue
            try:
                weight = _parse_weight(weight_text)
            except ValueError:
                msg = f"invalid edge weight {weight_text!r} in {token!r}"
                raise GraphParseError(msg, line_number) from None
            result.add_edge(source, Edge(target, weight))

    logger.debug("Parsed graph with %d nodes and %d edges", len(result), result.edge_count())
    return result


def _parse_node[T](token: str, node_type: Callable[[str], T], line_number: int) -> T:
    if not token:
        msg = "missing node name"
        raise GraphParseError(msg, line_number)
    try:
        return node_type(token)
    except (TypeError, ValueError) as e:
        msg = f"invalid node {token!r}: {e}"
        raise GraphParseError(msg, line_number) from e
