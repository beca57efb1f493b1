"""Result types shared by the shortest-path algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graph_algos._errors import NoPath, NodeNotFound

if TYPE_CHECKING:
    from graph_algos._graph import Weight

UNREACHABLE: float = math.inf
"""Distance reported for nodes that cannot be reached from the source."""


@dataclass(frozen=True, slots=True)
class Path[T]:
    """A walk through a graph.

    Attributes:
        nodes: The visited nodes, starting at the source.
        weights: The weight of each traversed edge; one fewer than ``nodes``.

    """

    nodes: tuple[T, ...]
    weights: tuple[Weight, ...] = ()

    @property
    def source(self) -> T:
        return self.nodes[0]

    @property
    def target(self) -> T:
        return self.nodes[-1]

    @property
    def total(self) -> Weight:
        """Sum of the edge weights along the path."""
        return sum(self.weights)

    def __len__(self) -> int:
        """Return the number of edges in the path."""
        return len(self.weights)

    def __str__(self) -> str:
        parts = [repr(self.nodes[0])]
        for node, weight in zip(self.nodes[1:], self.weights, strict=True):
            parts.append(f" --({weight})-> {node!r}")
        return "".join(parts)


@dataclass(frozen=True, slots=True)
class ShortestPaths[T]:
    """Single-source shortest path distances and the shortest path tree.

    Attributes:
        source: The node the search started from.
        distances: Distance of every node in the graph from the source.
            Nodes that cannot be reached have distance ``UNREACHABLE``.
        predecessors: For every reachable node other than the source, the
            node preceding it on a shortest path.
        edge_weights: For every node in ``predecessors``, the weight of the
            edge from its predecessor.

    """

    source: T
    distances: dict[T, Weight]
    predecessors: dict[T, T] = field(default_factory=dict)
    edge_weights: dict[T, Weight] = field(default_factory=dict, repr=False)

    def distance(self, node: T) -> Weight:
        """Get the shortest distance to a node (``UNREACHABLE`` if there is no path).

        Raises:
            NodeNotFound: If the node was not in the graph.

        """
        try:
            return self.distances[node]
        except KeyError:
            raise NodeNotFound(node) from None

    def is_reachable(self, node: T) -> bool:
        """Check whether a path from the source to the node exists."""
        return self.distance(node) != UNREACHABLE

    def predecessor(self, node: T) -> T | None:
        """Get the node preceding ``node`` on a shortest path.

        Returns None for the source and for unreachable nodes.

        Raises:
            NodeNotFound: If the node was not in the graph.

        """
        self.distance(node)
        return self.predecessors.get(node)

    def reachable(self) -> dict[T, tuple[Weight, T | None]]:
        """Map every reachable node to its ``(distance, predecessor)`` pair."""
        return {
            node: (distance, self.predecessors.get(node))
            for node, distance in self.distances.items()
            if distance != UNREACHABLE
        }

    def path_to(self, target: T) -> Path[T]:
        """Extract the shortest path from the source to ``target``.

        Args:
            target: The destination node.

        Returns:
            The path, which holds only the source when ``target`` is the source.

        Raises:
            NodeNotFound: If the node was not in the graph.
            NoPath: If the node cannot be reached from the source.

        """
        if not self.is_reachable(target):
            raise NoPath(self.source, target)

        nodes = [target]
        weights: list[Weight] = []
        node = target
        while node != self.source:
            weights.append(self.edge_weights[node])
            node = self.predecessors[node]
            nodes.append(node)

        nodes.reverse()
        weights.reverse()
        return Path(tuple(nodes), tuple(weights))
