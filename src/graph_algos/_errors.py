"""Exceptions raised by the graph store and the path algorithms."""

from collections.abc import Hashable, Sequence


class GraphError(Exception):
    """Base class for all graph errors."""


class NodeNotFound(GraphError, LookupError):  # noqa: N818
    """Raised when a query or an algorithm refers to a node absent from the graph."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Node {node!r} is not in the graph")

    def __str__(self) -> str:
        # LookupError would otherwise repr() the message like KeyError does
        return str(self.args[0])


class EdgeNotFound(GraphError, LookupError):  # noqa: N818
    """Raised when looking up the weight of an edge that does not exist."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No edge from {source!r} to {target!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class NegativeWeightViolation(GraphError, ValueError):  # noqa: N818
    """Raised when Dijkstra is run on a graph containing a negative edge weight."""

    def __init__(self, source: Hashable, target: Hashable, weight: float) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Edge {source!r} -> {target!r} has negative weight {weight}; "
            "use bellman_ford for graphs with negative weights",
        )


class CycleDetected(GraphError, ValueError):  # noqa: N818
    """Raised when a topological order does not exist.

    Attributes:
        cycle: The nodes of the detected cycle, in edge order. The last node
            has an edge back to the first one.

    """

    def __init__(self, cycle: Sequence[Hashable]) -> None:
        self.cycle = list(cycle)
        rendered = " -> ".join(repr(node) for node in [*self.cycle, self.cycle[0]])
        super().__init__(f"Cycle detected in graph: {rendered}")


class NegativeCycleReachable(GraphError, ValueError):  # noqa: N818
    """Raised when Bellman-Ford finds a negative cycle reachable from the source."""

    def __init__(self, source: Hashable, cycle: Sequence[Hashable]) -> None:
        self.source = source
        self.cycle = list(cycle)
        rendered = " -> ".join(repr(node) for node in [*self.cycle, self.cycle[0]])
        super().__init__(f"Negative cycle reachable from {source!r}: {rendered}")


class NoPath(GraphError):  # noqa: N818
    """Raised when a path is requested to a node that cannot be reached."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No path exists from {source!r} to {target!r}")


class GraphParseError(GraphError, ValueError):
    """Raised when the adjacency text format cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
