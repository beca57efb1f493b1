"""Depth-first topological sort."""

from __future__ import annotations

import logging
from enum import StrEnum, auto
from typing import TYPE_CHECKING

from graph_algos._errors import CycleDetected, NodeNotFound

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graph_algos._graph import Edge, Graph

logger = logging.getLogger(__name__)


class VisitState(StrEnum):
    """Progress of a node during the depth-first traversal."""

    UNVISITED = auto()
    IN_PROGRESS = auto()  # On the current DFS path
    DONE = auto()


def topological_sort[T](graph: Graph[T], start: T | None = None) -> list[T]:
    """Sort the nodes of a graph so that every edge points forward.

    Roots are visited in the graph's node order, so when several orders are
    valid the result depends on insertion order.

    Args:
        graph: The graph to sort.
        start: If given, only the nodes reachable from ``start`` are sorted.
            ``None`` always means "all nodes", so a ``None`` node cannot be
            used as the start.

    Returns:
        List of nodes where for every edge (u, v), u appears before v.

    Raises:
        NodeNotFound: If ``start`` is not in the graph.
        CycleDetected: If the (reachable part of the) graph contains a cycle.

    Example:
        >>> from graph_algos import graph
        >>> topological_sort(graph({"a": ["b"], "b": ["c"]}))
        ['a', 'b', 'c']

    """
    if start is not None and start not in graph:
        raise NodeNotFound(start)

    state = dict.fromkeys(graph.nodes(), VisitState.UNVISITED)
    finished: list[T] = []

    roots = [start] if start is not None else list(graph.nodes())
    for root in roots:
        if state[root] is VisitState.UNVISITED:
            _visit(graph, root, state, finished)

    finished.reverse()
    logger.debug("Topologically sorted %d nodes", len(finished))
    return finished


def _visit[T](graph: Graph[T], root: T, state: dict[T, VisitState], finished: list[T]) -> None:
    """Run an iterative DFS from ``root``, appending nodes to ``finished`` as they complete."""
    state[root] = VisitState.IN_PROGRESS
    path = [root]
    pending: list[Iterator[Edge[T]]] = [iter(graph.succs(root))]

    while pending:
        for edge in pending[-1]:
            target_state = state[edge.target]
            if target_state is VisitState.IN_PROGRESS:
                cycle = path[path.index(edge.target) :]
                logger.debug("Back edge %r -> %r closes a cycle", path[-1], edge.target)
                raise CycleDetected(cycle)
            if target_state is VisitState.UNVISITED:
                state[edge.target] = VisitState.IN_PROGRESS
                path.append(edge.target)
                pending.append(iter(graph.succs(edge.target)))
                break
        else:
            node = path.pop()
            pending.pop()
            state[node] = VisitState.DONE
            finished.append(node)
