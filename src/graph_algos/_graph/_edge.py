"""Directed, weighted edge type."""

from __future__ import annotations

from typing import NamedTuple

type Weight = int | float

DEFAULT_WEIGHT: Weight = 1


class Edge[T](NamedTuple):
    """An outgoing edge of a node: the target node and the weight of the edge.

    The source node is implicit (the node whose successor list holds the edge).
    Being a named tuple, an edge compares equal to a plain ``(target, weight)``
    pair.

    Example:
        >>> Edge("b", 3) == ("b", 3)
        True
        >>> Edge("b").weight
        1

    """

    target: T
    weight: Weight = DEFAULT_WEIGHT


def as_edge[T](edge: Edge[T] | tuple[T, Weight] | T, weight: Weight | None = None) -> Edge[T]:
    """Normalize the accepted edge spellings into an ``Edge``.

    Accepted forms are an ``Edge``, a ``(target, weight)`` pair or a bare
    target. An explicit ``weight`` always wins and makes ``edge`` the target.
    Nodes that are themselves 2-tuples must be passed with an explicit weight
    or wrapped in ``Edge``.

    Args:
        edge: The edge specification.
        weight: Optional weight overriding any weight in ``edge``.

    Returns:
        The normalized edge.

    Raises:
        TypeError: If the weight is not an int or a float.

    """
    if isinstance(edge, Edge):
        result = edge if weight is None else edge._replace(weight=weight)
    elif weight is not None:
        result = Edge(edge, weight)
    elif isinstance(edge, tuple) and len(edge) == 2:  # noqa: PLR2004
        result = Edge(edge[0], edge[1])
    else:
        result = Edge(edge)

    if isinstance(result.weight, bool) or not isinstance(result.weight, int | float):
        msg = f"Edge weight must be an int or a float, got {type(result.weight).__name__}"
        raise TypeError(msg)
    return result
