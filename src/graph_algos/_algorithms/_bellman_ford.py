"""Bellman-Ford shortest paths with negative cycle detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graph_algos._errors import NegativeCycleReachable, NodeNotFound

from ._results import UNREACHABLE, ShortestPaths

if TYPE_CHECKING:
    from graph_algos._graph import Graph, Weight

logger = logging.getLogger(__name__)


def bellman_ford[T](graph: Graph[T], source: T) -> ShortestPaths[T]:
    """Compute shortest paths from ``source``, allowing negative edge weights.

    Runs at most ``len(graph) - 1`` relaxation rounds over every edge, in the
    order of ``graph.edges()``, stopping early once a round changes nothing.
    A final pass detects negative cycles reachable from the source.

    Args:
        graph: The graph to search.
        source: The start node.

    Returns:
        Distances and predecessors for every node of the graph.

    Raises:
        NodeNotFound: If ``source`` is not in the graph.
        NegativeCycleReachable: If a negative cycle can be reached from ``source``.

    Example:
        >>> from graph_algos import graph
        >>> g = graph({0: [(1, 5), (2, 2)], 2: [(1, 1)]})
        >>> bellman_ford(g, 0).distance(1)
        3

    """
    if source not in graph:
        raise NodeNotFound(source)

    distances: dict[T, Weight] = dict.fromkeys(graph.nodes(), UNREACHABLE)
    distances[source] = 0
    predecessors: dict[T, T] = {}
    edge_weights: dict[T, Weight] = {}

    for round_number in range(1, len(graph)):
        changed = False
        for node, (target, weight) in graph.edges():
            candidate = distances[node] + weight
            if candidate < distances[target]:
                distances[target] = candidate
                predecessors[target] = node
                edge_weights[target] = weight
                changed = True
        if not changed:
            logger.debug("Bellman-Ford from %r converged after %d rounds", source, round_number)
            break

    for node, (target, weight) in graph.edges():
        if distances[node] + weight < distances[target]:
            predecessors[target] = node
            cycle = _find_cycle(predecessors, target, len(graph))
            raise NegativeCycleReachable(source, cycle)

    return ShortestPaths(source, distances, predecessors, edge_weights)


def _find_cycle[T](predecessors: dict[T, T], node: T, node_count: int) -> list[T]:
    """Recover the cycle behind a relaxation that still succeeded after the last round.

    Following predecessors ``node_count`` times from a node that still relaxes
    lands on the cycle. The cycle is returned in edge order.
    """
    current = node
    for _ in range(node_count):
        if current not in predecessors:
            return [node]
        current = predecessors[current]
    if current not in predecessors:
        return [node]

    start = current
    cycle = [start]
    current = predecessors[start]
    while current != start:
        cycle.append(current)
        current = predecessors[current]
    cycle.reverse()
    return cycle
