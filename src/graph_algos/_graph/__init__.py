"""Graph module providing the adjacency-list graph store.

This module contains:
- Graph[T]: A generic, mutable directed graph with weighted edges
- Edge[T]: An outgoing (target, weight) edge
- graph / parse_graph: Convenience constructors
"""

from ._builder import graph, parse_graph
from ._edge import DEFAULT_WEIGHT, Edge, Weight, as_edge
from ._graph import Graph

__all__ = ["DEFAULT_WEIGHT", "Edge", "Graph", "Weight", "as_edge", "graph", "parse_graph"]
