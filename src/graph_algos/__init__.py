"""Adjacency-list directed graphs and classical graph algorithms."""

__all__ = [
    "DEFAULT_WEIGHT",
    "UNREACHABLE",
    "CycleDetected",
    "Edge",
    "EdgeNotFound",
    "Graph",
    "GraphError",
    "GraphParseError",
    "NegativeCycleReachable",
    "NegativeWeightViolation",
    "NoPath",
    "NodeNotFound",
    "Path",
    "ShortestPaths",
    "VisitState",
    "Weight",
    "bellman_ford",
    "bfs_shortest_paths",
    "dijkstra",
    "graph",
    "parse_graph",
    "topological_sort",
]

from ._algorithms import (
    UNREACHABLE,
    Path,
    ShortestPaths,
    VisitState,
    bellman_ford,
    bfs_shortest_paths,
    dijkstra,
    topological_sort,
)
from ._errors import (
    CycleDetected,
    EdgeNotFound,
    GraphError,
    GraphParseError,
    NegativeCycleReachable,
    NegativeWeightViolation,
    NodeNotFound,
    NoPath,
)
from ._graph import DEFAULT_WEIGHT, Edge, Graph, Weight, graph, parse_graph
