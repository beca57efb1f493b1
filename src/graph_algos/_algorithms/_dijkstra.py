"""Dijkstra's algorithm for graphs with non-negative edge weights."""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import TYPE_CHECKING

from graph_algos._errors import NegativeWeightViolation, NodeNotFound

from ._results import UNREACHABLE, ShortestPaths

if TYPE_CHECKING:
    from graph_algos._graph import Graph, Weight

logger = logging.getLogger(__name__)


def dijkstra[T](graph: Graph[T], source: T) -> ShortestPaths[T]:
    """Compute shortest paths from ``source`` with Dijkstra's algorithm.

    Args:
        graph: The graph to search. Must not contain negative edge weights.
        source: The start node.

    Returns:
        Distances and predecessors for every node of the graph.

    Raises:
        NodeNotFound: If ``source`` is not in the graph.
        NegativeWeightViolation: If any edge of the graph has a negative weight.

    Example:
        >>> from graph_algos import graph
        >>> g = graph({1: [(2, 1), (3, 4)], 2: [(3, 1)]})
        >>> result = dijkstra(g, 1)
        >>> result.distance(3), result.predecessor(3)
        (2, 2)

    """
    if source not in graph:
        raise NodeNotFound(source)
    negative = next(graph.negative_edges(), None)
    if negative is not None:
        node, edge = negative
        raise NegativeWeightViolation(node, edge.target, edge.weight)

    distances: dict[T, Weight] = dict.fromkeys(graph.nodes(), UNREACHABLE)
    distances[source] = 0
    predecessors: dict[T, T] = {}
    edge_weights: dict[T, Weight] = {}

    visited: set[T] = set()
    # The counter breaks distance ties so node ids are never compared
    counter = itertools.count()
    queue: list[tuple[Weight, int, T]] = [(0, next(counter), source)]

    while queue:
        distance, _, node = heapq.heappop(queue)
        if node in visited:
            # Stale entry left behind by a later improvement
            continue
        visited.add(node)

        for target, weight in graph.succs(node):
            candidate = distance + weight
            if candidate < distances[target]:
                distances[target] = candidate
                predecessors[target] = node
                edge_weights[target] = weight
                heapq.heappush(queue, (candidate, next(counter), target))

    logger.debug("Dijkstra from %r settled %d of %d nodes", source, len(visited), len(graph))
    return ShortestPaths(source, distances, predecessors, edge_weights)
