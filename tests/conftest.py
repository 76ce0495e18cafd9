"""Shared test fixtures for relgraph."""

from __future__ import annotations

from pathlib import Path

import pytest

from relgraph.graph.builder import GraphBuilder
from relgraph.graph.query import GraphQuery
from relgraph.graph.store import GraphStore

FAMILY = """\
# Three generations below Gran.
Gran hasChild Pat Sam
Pat hasChild Cal Cora
Sam hasChild Cy
Cy hasChild Gia
Cal hasChild Gil
Pat hasSpouse Max
Loner
"""


@pytest.fixture
def example_store() -> GraphStore:
    """A-B-C-D family with every edge added explicitly in both directions."""
    store = GraphStore()
    store.add_edge("A", "B", "hasChild")
    store.add_edge("B", "A", "hasParent")
    store.add_edge("A", "C", "hasChild")
    store.add_edge("C", "A", "hasParent")
    store.add_edge("B", "D", "hasChild")
    store.add_edge("D", "B", "hasParent")
    return store


@pytest.fixture
def example_query(example_store: GraphStore) -> GraphQuery:
    return GraphQuery(example_store)


@pytest.fixture
def family_file(tmp_path: Path) -> Path:
    """A relationship file on disk; parent edges come from reciprocals."""
    path = tmp_path / "family.txt"
    path.write_text(FAMILY)
    return path


@pytest.fixture
def family_store(family_file: Path) -> GraphStore:
    return GraphBuilder().build_from_file(family_file)


@pytest.fixture
def family_query(family_store: GraphStore) -> GraphQuery:
    return GraphQuery(family_store)
