"""Tests for the depth-first topological sort."""

import pytest

from graph_algos import CycleDetected, Graph, NodeNotFound, graph, topological_sort


def assert_valid_order(g: Graph, order: list) -> None:
    position = {node: index for index, node in enumerate(order)}
    for source, edge in g.edges():
        assert position[source] < position[edge.target], f"{source!r} must precede {edge.target!r}"


class TestTopologicalSort:
    """Tests for topological_sort."""

    def test_empty_graph(self) -> None:
        assert topological_sort(Graph.empty()) == []

    def test_single_node(self) -> None:
        g = Graph.empty()
        g.add_node("a")
        assert topological_sort(g) == ["a"]

    def test_linear_chain(self) -> None:
        g = graph({"a": ["b"], "b": ["c"]})
        assert topological_sort(g) == ["a", "b", "c"]

    def test_diamond_dependency(self) -> None:
        g = graph({"a": ["b", "c"], "b": ["d"], "c": ["d"]})
        order = topological_sort(g)
        assert order[0] == "a"
        assert order[-1] == "d"
        assert_valid_order(g, order)

    def test_sample_dag(self) -> None:
        g = graph({1: [2, 3], 2: [4, 6], 3: [5, 6], 5: [6]})
        order = topological_sort(g)
        assert sorted(order) == [1, 2, 3, 4, 5, 6]
        assert_valid_order(g, order)

    def test_nodes_added_late_still_ordered(self) -> None:
        g = Graph.empty()
        g.add_edge("late", "early")
        g.add_edge("first", "late")
        order = topological_sort(g)
        assert order == ["first", "late", "early"]

    def test_disconnected_components(self) -> None:
        g = graph({"a": ["b"], "x": ["y"]})
        g.add_node("lonely")
        order = topological_sort(g)
        assert set(order) == {"a", "b", "x", "y", "lonely"}
        assert_valid_order(g, order)

    def test_works_with_tuples(self) -> None:
        g = Graph.empty()
        g.add_edge(("a", 1), ("b", 2), 1)
        assert topological_sort(g) == [("a", 1), ("b", 2)]

    def test_deep_chain_does_not_recurse(self) -> None:
        g = Graph.from_edges([(i, i + 1) for i in range(5000)])
        assert topological_sort(g) == list(range(5001))

    def test_start_limits_to_reachable_nodes(self) -> None:
        g = graph({1: [2], 2: [3], 4: [1]})
        assert topological_sort(g, start=1) == [1, 2, 3]

    def test_none_start_sorts_every_node(self) -> None:
        g = graph({None: ["a"], "b": [None]})
        assert topological_sort(g, start=None) == ["b", None, "a"]

    def test_start_missing(self) -> None:
        with pytest.raises(NodeNotFound):
            topological_sort(graph({1: [2]}), start=9)


class TestCycleDetection:
    """Tests for CycleDetected."""

    def test_two_node_cycle(self) -> None:
        with pytest.raises(CycleDetected, match="Cycle"):
            topological_sort(graph({"a": ["b"], "b": ["a"]}))

    def test_self_loop(self) -> None:
        with pytest.raises(CycleDetected) as exc_info:
            topological_sort(graph({"a": ["a"]}))
        assert exc_info.value.cycle == ["a"]

    def test_reports_cycle_nodes(self) -> None:
        g = graph({"start": ["a"], "a": ["b"], "b": ["c"], "c": ["a"]})
        with pytest.raises(CycleDetected) as exc_info:
            topological_sort(g)
        assert exc_info.value.cycle == ["a", "b", "c"]

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError, match="Cycle"):
            topological_sort(graph({1: [2], 2: [3], 3: [1]}))

    def test_cycle_outside_start_reach_is_ignored(self) -> None:
        g = graph({1: [2], 3: [4], 4: [3]})
        assert topological_sort(g, start=1) == [1, 2]

    def test_cross_edge_is_not_a_cycle(self) -> None:
        # c is finished through b before a reaches it directly
        g = graph({"a": ["b", "c"], "b": ["c"]})
        assert topological_sort(g) == ["a", "b", "c"]
