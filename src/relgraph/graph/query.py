"""High-level query interface for the relationship graph."""

from __future__ import annotations

import logging

from relgraph.config import RelationshipConfig
from relgraph.graph.models import (
    CousinResult,
    DescendantResult,
    Node,
    PathResult,
    QueryStatus,
    SiblingResult,
)
from relgraph.graph.store import GraphStore
from relgraph.graph.traversal import CousinFinder, DescendantWalker, ShortestPathFinder

logger = logging.getLogger("relgraph.graph")


class GraphQuery:
    """Query engine for family relationships.

    Provides orphans, siblings, descendants, shortest relationship path
    and cousins over an already-built GraphStore. Absent names and empty
    outcomes come back as result statuses, never as exceptions.
    """

    def __init__(self, store: GraphStore, config: RelationshipConfig | None = None) -> None:
        self.store = store
        self.config = config or RelationshipConfig()

    @property
    def parent_label(self) -> str:
        return self.config.parent_label

    @property
    def child_label(self) -> str:
        return self.config.child_label

    def get_node(self, name: str) -> Node | None:
        return self.store.get_node(name)

    def orphans(self) -> list[str]:
        """Names of nodes without a parent edge, in creation order."""
        return [
            name
            for name in self.store.node_names()
            if not self.store.out_edges(name, self.parent_label)
        ]

    def siblings(self, name: str) -> SiblingResult:
        """Other children of every parent of `name`, first-discovered order."""
        result = SiblingResult(name=name)
        if not self.store.has_node(name):
            result.status = QueryStatus.NOT_FOUND
            return result

        for parent in self.store.targets(name, self.parent_label):
            for child in self.store.targets(parent, self.child_label):
                if child != name and child not in result.siblings:
                    result.siblings.append(child)
        return result

    def descendants(self, name: str) -> DescendantResult:
        result = DescendantWalker(self.store, self.child_label).walk(name)
        if result.cycle_detected:
            logger.warning(
                "Cycle found below %s after %d descendants", name, len(result.descendants)
            )
        return result

    def shortest_path(self, name1: str, name2: str) -> PathResult:
        """Fewest-edges relationship path from `name1` to `name2`."""
        return ShortestPathFinder(self.store).find(name1, name2)

    bingo = shortest_path

    def cousins(self, name: str, number: int, removed: int) -> CousinResult:
        """Cousins of `name` of degree `number`, `removed` generations apart.

        Siblings are 0th cousins; 0th cousins once removed are aunts,
        uncles, nieces and nephews.
        """
        result = CousinResult(name=name, number=number, removed=removed)
        if not self.store.has_node(name):
            result.status = QueryStatus.NOT_FOUND
            return result
        if number < 0 or removed < 0:
            logger.warning(
                "Ignoring cousin query for %s with negative degree (%d, %d)",
                name, number, removed,
            )
            return result

        finder = CousinFinder(self.store, self.parent_label, self.child_label)
        result.cousins = finder.find(name, number, removed)
        return result
