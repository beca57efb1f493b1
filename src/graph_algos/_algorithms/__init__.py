"""Path algorithms operating on a read-only Graph.

This module contains:
- topological_sort: Depth-first ordering of nodes along their edges
- dijkstra: Shortest paths for non-negative weights
- bellman_ford: Shortest paths with negative weights and cycle detection
- bfs_shortest_paths: Fewest-edge paths
"""

from ._bellman_ford import bellman_ford
from ._bfs import bfs_shortest_paths
from ._dijkstra import dijkstra
from ._results import UNREACHABLE, Path, ShortestPaths
from ._topological import VisitState, topological_sort

__all__ = [
    "UNREACHABLE",
    "Path",
    "ShortestPaths",
    "VisitState",
    "bellman_ford",
    "bfs_shortest_paths",
    "dijkstra",
    "topological_sort",
]
