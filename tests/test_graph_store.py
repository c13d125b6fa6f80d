"""Tests for the Graph store: nodes, edges, weights, identifiers and degrees."""

from graphds import DEFAULT_EDGE_WEIGHT, Graph


class TestNodes:
    """Tests for adding, listing and removing nodes."""

    def test_add_nodes_and_list_them(self) -> None:
        graph = Graph()
        graph.add_node("a")
        graph.add_node("b")
        assert graph.nodes() == ["a", "b"]

    def test_chain_add_node(self) -> None:
        graph = Graph().add_node("a").add_node("b")
        assert graph.nodes() == ["a", "b"]

    def test_add_node_is_idempotent(self) -> None:
        graph = Graph().add_edge("a", "b").add_node("a").add_node("a")
        assert graph.nodes().count("a") == 1
        assert graph.adjacent("a") == ["b"]

    def test_remove_nodes(self) -> None:
        graph = Graph().add_node("a").add_node("b").remove_node("a").remove_node("b")
        assert graph.nodes() == []

    def test_remove_unknown_node_is_noop(self) -> None:
        graph = Graph().add_edge("a", "b")
        graph.remove_node("z")
        assert graph.nodes() == ["a", "b"]

    def test_remove_node_removes_outgoing_edges(self) -> None:
        graph = Graph().add_edge("a", "b")
        graph.remove_node("a")
        assert graph.adjacent("a") == []
        assert graph.nodes() == ["b"]

    def test_remove_node_removes_incoming_edges(self) -> None:
        graph = Graph().add_edge("a", "b").add_edge("c", "b").add_edge("a", "c")
        graph.remove_node("b")
        assert graph.adjacent("a") == ["c"]
        assert graph.adjacent("c") == []
        assert all("b" not in graph.adjacent(node) for node in graph.nodes())

    def test_remove_node_with_self_loop(self) -> None:
        graph = Graph().add_edge("a", "a").add_edge("a", "b")
        graph.remove_node("a")
        assert graph.nodes() == ["b"]

    def test_remove_node_clears_edge_ids(self) -> None:
        graph = Graph().add_edge("a", "b", edge_id="in").add_edge("b", "c", edge_id="out")
        graph.remove_node("b")
        assert graph.get_edge_id("a", "b") is None
        assert graph.get_edge_id("b", "c") is None

    def test_nodes_include_edge_targets_once(self) -> None:
        graph = Graph().add_edge("a", "b").add_edge("c", "b").add_edge("b", "a")
        assert graph.nodes() == ["a", "b", "c"]

    def test_len_and_contains(self) -> None:
        graph = Graph().add_edge("a", "b")
        assert len(graph) == 2
        assert "a" in graph
        assert "b" in graph
        assert "c" not in graph


class TestEdges:
    """Tests for adding, querying and removing edges."""

    def test_add_edge_and_query_adjacent(self) -> None:
        graph = Graph().add_node("a").add_node("b").add_edge("a", "b")
        assert graph.adjacent("a") == ["b"]

    def test_add_edge_adds_nodes_implicitly(self) -> None:
        graph = Graph().add_edge("a", "b")
        assert graph.nodes() == ["a", "b"]

    def test_adjacent_of_unknown_node_is_empty(self) -> None:
        graph = Graph()
        assert graph.adjacent("a") == []
        assert graph.nodes() == []

    def test_adjacent_returns_a_copy(self) -> None:
        graph = Graph().add_edge("a", "b")
        graph.adjacent("a").append("z")
        assert graph.adjacent("a") == ["b"]

    def test_remove_edge(self) -> None:
        graph = Graph().add_edge("a", "b").remove_edge("a", "b")
        assert graph.adjacent("a") == []
        assert not graph.has_edge("a", "b")

    def test_remove_edge_keeps_nodes(self) -> None:
        graph = Graph().add_edge("a", "b").remove_edge("a", "b")
        assert graph.nodes() == ["a", "b"]

    def test_remove_missing_edge_is_noop(self) -> None:
        graph = Graph()
        graph.remove_edge("a", "b")
        assert graph.nodes() == []

    def test_has_edge(self) -> None:
        graph = Graph().add_edge("a", "b")
        assert graph.has_edge("a", "b")
        assert not graph.has_edge("b", "a")
        assert not graph.has_edge("c", "a")

    def test_self_loop(self) -> None:
        graph = Graph().add_edge("a", "a")
        assert graph.has_edge("a", "a")
        assert graph.nodes() == ["a"]

    def test_duplicate_edges_are_kept(self) -> None:
        graph = Graph().add_edge("a", "b", 2).add_edge("a", "b", 7)
        assert graph.adjacent("a") == ["b", "b"]
        assert graph.outdegree("a") == 2
        assert graph.get_edge_weight("a", "b") == 7

    def test_remove_edge_removes_every_duplicate(self) -> None:
        graph = Graph().add_edge("a", "b").add_edge("a", "c").add_edge("a", "b")
        graph.remove_edge("a", "b")
        assert graph.adjacent("a") == ["c"]

    def test_get_edges(self) -> None:
        graph = Graph().add_edge("a", "b").add_edge("a", "c").add_edge("b", "c")
        assert graph.get_edges() == {"a": ["b", "c"], "b": ["c"], "c": []}

    def test_get_edges_returns_a_copy(self) -> None:
        graph = Graph().add_edge("a", "b")
        graph.get_edges()["a"].append("z")
        assert graph.adjacent("a") == ["b"]


class TestEdgeWeights:
    """Tests for the edge weight side table."""

    def test_add_edge_with_weight(self) -> None:
        graph = Graph().add_edge("a", "b", 5)
        assert graph.get_edge_weight("a", "b") == 5

    def test_set_edge_weight(self) -> None:
        graph = Graph().add_edge("a", "b").set_edge_weight("a", "b", 5)
        assert graph.get_edge_weight("a", "b") == 5

    def test_default_weight(self) -> None:
        graph = Graph().add_edge("a", "b")
        assert graph.get_edge_weight("a", "b") == 1
        assert graph.get_edge_weight("x", "y") == DEFAULT_EDGE_WEIGHT

    def test_zero_weight_is_kept(self) -> None:
        graph = Graph().add_edge("a", "b", 0)
        assert graph.get_edge_weight("a", "b") == 0

    def test_weight_survives_edge_removal(self) -> None:
        graph = Graph().add_edge("a", "b", 5).remove_edge("a", "b")
        graph.add_edge("a", "b")
        assert graph.get_edge_weight("a", "b") == 5


class TestEdgeIds:
    """Tests for the edge identifier side table."""

    def test_add_ids_to_edges(self) -> None:
        graph = (
            Graph()
            .add_edge("a", "b", edge_id="123")
            .add_edge("b", "a", edge_id="456")
            .add_edge("b", "c", edge_id="789")
        )
        assert graph.get_edge_id("a", "b") == "123"
        assert graph.get_edge_id("b", "a") == "456"
        assert graph.get_edge_id("b", "c") == "789"

    def test_missing_id_is_none(self) -> None:
        graph = Graph().add_edge("a", "b")
        assert graph.get_edge_id("a", "b") is None

    def test_set_edge_id_overwrites(self) -> None:
        graph = Graph().add_edge("a", "b", edge_id="first").set_edge_id("a", "b", "second")
        assert graph.get_edge_id("a", "b") == "second"

    def test_remove_edge_clears_id(self) -> None:
        graph = Graph().add_edge("a", "b", edge_id="123").remove_edge("a", "b")
        assert graph.get_edge_id("a", "b") is None


class TestDegrees:
    """Tests for indegree and outdegree."""

    def test_indegree(self) -> None:
        graph = Graph().add_edge("a", "b")
        assert graph.indegree("a") == 0
        assert graph.indegree("b") == 1

        graph.add_edge("c", "b")
        assert graph.indegree("b") == 2

    def test_outdegree(self) -> None:
        graph = Graph().add_edge("a", "b")
        assert graph.outdegree("a") == 1
        assert graph.outdegree("b") == 0

        graph.add_edge("a", "c")
        assert graph.outdegree("a") == 2

    def test_unknown_node_degrees_are_zero(self) -> None:
        graph = Graph()
        assert graph.indegree("z") == 0
        assert graph.outdegree("z") == 0
