"""Breadth-first shortest paths for unweighted traversal."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from graph_algos._errors import NodeNotFound

from ._results import UNREACHABLE, ShortestPaths

if TYPE_CHECKING:
    from graph_algos._graph import Graph, Weight

logger = logging.getLogger(__name__)


def bfs_shortest_paths[T](graph: Graph[T], source: T) -> ShortestPaths[T]:
    """Compute fewest-edge paths from ``source``, ignoring edge weights.

    Distances are edge counts. The paths returned by ``path_to`` still report
    the weights of the traversed edges.

    Raises:
        NodeNotFound: If ``source`` is not in the graph.

    """
    if source not in graph:
        raise NodeNotFound(source)

    distances: dict[T, Weight] = dict.fromkeys(graph.nodes(), UNREACHABLE)
    distances[source] = 0
    predecessors: dict[T, T] = {}
    edge_weights: dict[T, Weight] = {}

    queue = deque([source])
    while queue:
        node = queue.popleft()
        for target, weight in graph.succs(node):
            if distances[target] == UNREACHABLE:
                distances[target] = distances[node] + 1
                predecessors[target] = node
                edge_weights[target] = weight
                queue.append(target)

    logger.debug("BFS from %r reached %d nodes", source, len(edge_weights) + 1)
    return ShortestPaths(source, distances, predecessors, edge_weights)
