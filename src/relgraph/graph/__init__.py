"""Relationship graph storage and family queries."""

from relgraph.graph.builder import GraphBuilder
from relgraph.graph.models import (
    CousinResult,
    Descendant,
    DescendantResult,
    Edge,
    Node,
    PathResult,
    QueryStatus,
    SiblingResult,
)
from relgraph.graph.query import GraphQuery
from relgraph.graph.store import GraphStore
from relgraph.graph.traversal import (
    CousinFinder,
    DescendantWalker,
    ShortestPathFinder,
    TraversalState,
    generation_label,
)

__all__ = [
    "CousinFinder",
    "CousinResult",
    "Descendant",
    "DescendantResult",
    "DescendantWalker",
    "Edge",
    "GraphBuilder",
    "GraphQuery",
    "GraphStore",
    "Node",
    "PathResult",
    "QueryStatus",
    "ShortestPathFinder",
    "SiblingResult",
    "TraversalState",
    "generation_label",
]
