"""Tests for graph storage and the relationship file builder."""

from __future__ import annotations

from pathlib import Path

import pytest

from relgraph.config import LoaderConfig
from relgraph.exceptions import LoaderError
from relgraph.graph.builder import GraphBuilder
from relgraph.graph.models import Edge
from relgraph.graph.store import GraphStore


class TestGraphStore:
    def test_add_node_is_idempotent(self):
        store = GraphStore()
        first = store.add_node("x")
        second = store.add_node("x")

        assert len(store) == 1
        assert first == second
        assert store.node_names() == ["x"]

    def test_add_node_keeps_existing_edges(self):
        store = GraphStore()
        store.add_edge("x", "y", "hasChild")
        node = store.add_node("x")
        assert [str(e) for e in node.edges] == ["x hasChild y"]

    def test_add_edge_creates_endpoints(self):
        store = GraphStore()
        edge = store.add_edge("a", "b", "hasChild")

        assert edge == Edge(source="a", target="b", label="hasChild")
        assert store.get_node("a") is not None
        assert store.get_node("b") is not None
        assert store.get_node("b").edges == ()

    def test_no_reciprocal_edge_inferred(self):
        store = GraphStore()
        store.add_edge("a", "b", "hasChild")
        assert store.out_edges("b") == []

    def test_get_node_missing(self):
        store = GraphStore()
        assert store.get_node("nobody") is None
        assert "nobody" not in store
        assert store.out_edges("nobody") == []

    def test_out_edges_keep_insertion_order(self):
        store = GraphStore()
        store.add_edge("a", "b", "first")
        store.add_edge("a", "c", "second")
        store.add_edge("a", "b", "third")

        edges = store.out_edges("a")
        assert [(e.target, e.label) for e in edges] == [
            ("b", "first"),
            ("c", "second"),
            ("b", "third"),
        ]

    def test_out_edges_filtered_by_label(self):
        store = GraphStore()
        store.add_edge("a", "b", "hasChild")
        store.add_edge("a", "p", "hasParent")
        store.add_edge("a", "c", "hasChild")

        assert store.targets("a", "hasChild") == ["b", "c"]
        assert store.targets("a", "hasParent") == ["p"]

    def test_parallel_edges_and_self_loops(self):
        store = GraphStore()
        store.add_edge("a", "b", "hasChild")
        store.add_edge("a", "b", "hasChild")
        store.add_edge("a", "a", "knows")

        assert store.number_of_edges() == 3
        assert len(store) == 2
        assert store.has_edge("a", "a", "knows")
        assert not store.has_edge("a", "b", "knows")

    def test_node_names_in_creation_order(self, example_store: GraphStore):
        assert example_store.node_names() == ["A", "B", "C", "D"]

    def test_dump(self, example_store: GraphStore):
        example_store.add_node("Z")
        lines = example_store.dump()

        assert lines[0] == "A: A hasChild B, A hasChild C"
        assert lines[1] == "B: B hasParent A, B hasChild D"
        assert lines[-1] == "Z:"

    def test_stats(self, example_store: GraphStore):
        stats = example_store.get_stats()
        assert stats["total_nodes"] == 4
        assert stats["total_edges"] == 6
        assert stats["edge_labels"] == {"hasChild": 3, "hasParent": 3}

    def test_edge_description(self):
        assert str(Edge(source="D", target="B", label="hasParent")) == "D hasParent B"


class TestGraphBuilder:
    def test_build_from_file(self, family_file: Path):
        builder = GraphBuilder()
        store = builder.build_from_file(family_file)

        assert store.node_names() == [
            "Gran", "Pat", "Sam", "Cal", "Cora", "Cy", "Gia", "Gil", "Max", "Loner",
        ]
        stats = builder.get_stats()
        assert stats["total_edges"] == 16
        assert stats["lines_read"] == 7
        assert stats["edge_labels"] == {"hasChild": 6, "hasParent": 6, "hasSpouse": 2}

    def test_reciprocal_edges(self, family_store: GraphStore):
        assert family_store.targets("Cal", "hasParent") == ["Pat"]
        assert family_store.targets("Max", "hasSpouse") == ["Pat"]

    def test_multiple_targets_in_order(self, family_store: GraphStore):
        assert family_store.targets("Gran", "hasChild") == ["Pat", "Sam"]

    def test_single_name_declares_node(self, family_store: GraphStore):
        node = family_store.get_node("Loner")
        assert node is not None
        assert node.edges == ()

    def test_explicit_reverse_edge_not_duplicated(self):
        store = GraphBuilder().build_from_lines([
            "A hasChild B",
            "B hasParent A",
        ])
        assert store.number_of_edges() == 2

    def test_reverse_listed_first_not_duplicated(self):
        store = GraphBuilder().build_from_lines([
            "B hasParent A",
            "A hasChild B",
        ])
        assert store.number_of_edges() == 2

    def test_repeated_lines_add_parallel_edges(self):
        builder = GraphBuilder()
        store = builder.build_from_lines([
            "A knows B",
            "A knows B",
            "A hasChild C",
            "A hasChild C",
        ])

        assert store.targets("A", "knows") == ["B", "B"]
        assert store.targets("A", "hasChild") == ["C", "C"]
        # The reciprocal of the repeat already exists.
        assert store.targets("C", "hasParent") == ["A"]
        assert builder.get_stats()["skipped_edges"] == 1

    def test_duplicates_allowed_when_configured(self):
        builder = GraphBuilder(LoaderConfig(allow_duplicate_edges=True))
        store = builder.build_from_lines([
            "A hasChild B",
            "B hasParent A",
        ])
        assert store.number_of_edges() == 3

    def test_no_reciprocals(self):
        builder = GraphBuilder(LoaderConfig(reciprocal_labels={}))
        store = builder.build_from_lines(["A hasChild B"])
        assert store.out_edges("B") == []

    def test_comments_and_blank_lines_skipped(self):
        builder = GraphBuilder()
        store = builder.build_from_lines(["", "   ", "# A hasChild B", "C likes D"])
        assert store.node_names() == ["C", "D"]
        assert builder.get_stats()["lines_read"] == 1

    def test_two_token_line_is_an_error(self):
        with pytest.raises(LoaderError) as exc_info:
            GraphBuilder().build_from_lines(["A hasChild B", "", "A hasChild"], source="f.txt")
        assert exc_info.value.line_number == 3
        assert "f.txt:3" in str(exc_info.value)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(LoaderError):
            GraphBuilder().build_from_file(tmp_path / "missing.txt")

    def test_rebuild_resets_state(self):
        """Regression: reusing a builder must not accumulate stale nodes."""
        builder = GraphBuilder()
        builder.build_from_lines(["A hasChild B"])
        store = builder.build_from_lines(["C hasChild D"])

        assert "A" not in store
        assert store.node_names() == ["C", "D"]
