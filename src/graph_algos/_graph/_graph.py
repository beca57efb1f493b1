"""Adjacency-list directed graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graph_algos._errors import EdgeNotFound, NodeNotFound

from ._edge import Edge, as_edge

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ._edge import Weight


@dataclass(slots=True)
class Graph[T]:
    """A directed graph with at most one weighted edge per ordered node pair.

    Each node maps to the ordered list of its outgoing edges. The order is the
    order in which each edge was first added and is part of the contract:
    re-adding an edge updates its weight without moving it.

    Every edge target is a node of the graph. Adding an edge creates whichever
    of its endpoints is missing.

    Removal of an absent node or edge is a no-op, while lookups of absent
    nodes or edges raise ``NodeNotFound`` or ``EdgeNotFound``.

    The graph is not synchronized. Mutations must not be interleaved with
    reads from other threads.

    Example:
        >>> graph = Graph.empty()
        >>> graph.add_edge(0, (1, 5))
        >>> graph.add_edge(0, (2, 2))
        >>> graph.is_edge(0, 1)
        True
        >>> graph.succs(0)
        [Edge(target=1, weight=5), Edge(target=2, weight=2)]

    """

    _succs: dict[T, list[Edge[T]]] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Graph[T]:
        """Create a graph with no nodes."""
        return cls()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[T, Iterable[Edge[T] | tuple[T, Weight] | T]]]) -> Graph[T]:
        """Build a graph from ``(node, successors)`` pairs.

        Each successor is either a bare target (weight 1) or a
        ``(target, weight)`` pair. Listed nodes without successors are still
        added to the graph.

        Args:
            pairs: The node/successor-list pairs.

        Returns:
            A new Graph instance.

        Example:
            >>> graph = Graph.from_pairs([(1, [2, 3]), (2, [(3, 7)])])
            >>> graph.edge_weight(2, 3)
            7

        """
        graph = cls()
        for node, successors in pairs:
            graph.add_node(node)
            for edge in successors:
                graph.add_edge(node, edge)
        return graph

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T] | tuple[T, T, Weight]]) -> Graph[T]:
        """Build a graph from ``(source, target)`` or ``(source, target, weight)`` tuples.

        Args:
            edges: The edges to add, in order.

        Returns:
            A new Graph instance.

        """
        graph = cls()
        for source, target, *rest in edges:
            graph.add_edge(source, Edge(target, *rest))
        return graph

    def add_node(self, node: T) -> None:
        """Add a node without edges. Does nothing if the node already exists."""
        self._succs.setdefault(node, [])

    def add_edge(self, source: T, edge: Edge[T] | tuple[T, Weight] | T, weight: Weight | None = None) -> None:
        """Add the edge ``source -> edge.target`` or update its weight.

        Both endpoints are created if missing, the source before the target.
        If the edge already exists its weight is replaced and its position
        among the successors of ``source`` is kept.

        Args:
            source: The source node.
            edge: An ``Edge``, a ``(target, weight)`` pair or a bare target.
            weight: Optional weight; when given, ``edge`` is the target node.

        """
        new_edge = as_edge(edge, weight)
        successors = self._succs.setdefault(source, [])
        self.add_node(new_edge.target)
        for index, existing in enumerate(successors):
            if existing.target == new_edge.target:
                successors[index] = new_edge
                return
        successors.append(new_edge)

    def remove_edge(self, source: T, target: T) -> None:
        """Remove the edge ``source -> target`` if it exists."""
        successors = self._succs.get(source)
        if successors is None:
            return
        for index, existing in enumerate(successors):
            if existing.target == target:
                del successors[index]
                return

    def remove_node(self, node: T) -> None:
        """Remove a node together with its outgoing and incoming edges, if it exists."""
        if self._succs.pop(node, None) is None:
            return
        for source, successors in self._succs.items():
            if any(edge.target == node for edge in successors):
                self._succs[source] = [edge for edge in successors if edge.target != node]

    def is_edge(self, source: T, target: T) -> bool:
        """Check whether the edge ``source -> target`` exists."""
        return any(edge.target == target for edge in self._succs.get(source, ()))

    def edge_weight(self, source: T, target: T) -> Weight:
        """Get the weight of the edge ``source -> target``.

        Raises:
            EdgeNotFound: If there is no such edge.

        """
        for edge in self._succs.get(source, ()):
            if edge.target == target:
                return edge.weight
        raise EdgeNotFound(source, target)

    def succs(self, node: T) -> list[Edge[T]]:
        """Get the outgoing edges of a node, in first-insertion order.

        Args:
            node: The node to query.

        Returns:
            A new list of the node's edges; mutating it does not affect the graph.

        Raises:
            NodeNotFound: If the node is not in the graph.

        """
        try:
            return list(self._succs[node])
        except KeyError:
            raise NodeNotFound(node) from None

    def nodes(self) -> Iterator[T]:
        """Iterate over all nodes, in the order they were added."""
        yield from self._succs

    def edges(self) -> Iterator[tuple[T, Edge[T]]]:
        """Iterate over all ``(source, edge)`` pairs, by node then by successor order."""
        for source, successors in self._succs.items():
            for edge in successors:
                yield source, edge

    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return sum(len(successors) for successors in self._succs.values())

    def negative_edges(self) -> Iterator[tuple[T, Edge[T]]]:
        """Iterate over the ``(source, edge)`` pairs whose weight is negative, in ``edges()`` order."""
        return ((source, edge) for source, edge in self.edges() if edge.weight < 0)

    def has_negative_weight(self) -> bool:
        """Check whether any edge of the graph has a negative weight."""
        return next(self.negative_edges(), None) is not None

    def is_empty(self) -> bool:
        """Check whether the graph has no nodes."""
        return not self._succs

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._succs)

    def __contains__(self, node: object) -> bool:
        """Check if a node is in the graph."""
        return node in self._succs

    def __iter__(self) -> Iterator[T]:
        """Iterate over the nodes of the graph."""
        return self.nodes()
