"""In-memory storage for the relationship graph.

Nodes live in a NetworkX multigraph keyed by name, so parallel edges and
self loops are allowed. Every edge carries a ``seq`` number so outgoing
edges can be reported in insertion order regardless of how the adjacency
dict groups them by neighbour.
"""

from __future__ import annotations

import logging
from collections import Counter

import networkx as nx

from relgraph.graph.models import Edge, Node

logger = logging.getLogger("relgraph.graph")


class GraphStore:
    """Owns the nodes and outgoing edges of a relationship graph.

    The store is built once and then queried; it offers no deletion and
    is not safe to mutate while a query is running.
    """

    def __init__(self) -> None:
        self.graph = nx.MultiDiGraph()
        self._seq = 0

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.graph.has_node(name)

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, name: str) -> Node:
        """Create a node named `name` unless one already exists."""
        self._ensure_node(name)
        return self.get_node(name)

    def add_edge(self, from_name: str, to_name: str, label: str) -> Edge:
        """Append an edge to `from_name`, creating either endpoint if needed."""
        self._ensure_node(from_name)
        self._ensure_node(to_name)
        self._seq += 1
        self.graph.add_edge(from_name, to_name, label=label, seq=self._seq)
        return Edge(source=from_name, target=to_name, label=label)

    def _ensure_node(self, name: str) -> None:
        if not self.graph.has_node(name):
            self.graph.add_node(name)
            logger.debug("Added node %s", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def has_node(self, name: str) -> bool:
        return self.graph.has_node(name)

    def get_node(self, name: str) -> Node | None:
        """Return a snapshot of the node, or None if it does not exist."""
        if not self.graph.has_node(name):
            return None
        return Node(name=name, edges=tuple(self.out_edges(name)))

    def node_names(self) -> list[str]:
        """All node names in creation order."""
        return list(self.graph.nodes)

    def out_edges(self, name: str, label: str | None = None) -> list[Edge]:
        """Outgoing edges of `name` in insertion order, optionally by label."""
        if not self.graph.has_node(name):
            return []
        rows = sorted(
            self.graph.out_edges(name, data=True),
            key=lambda row: row[2]["seq"],
        )
        return [
            Edge(source=src, target=tgt, label=data["label"])
            for src, tgt, data in rows
            if label is None or data["label"] == label
        ]

    def targets(self, name: str, label: str) -> list[str]:
        """Names reached from `name` through edges labeled `label`."""
        return [e.target for e in self.out_edges(name, label)]

    def has_edge(self, from_name: str, to_name: str, label: str) -> bool:
        """Whether an edge with exactly this source, target and label exists."""
        if not self.graph.has_edge(from_name, to_name):
            return False
        return any(
            data.get("label") == label
            for data in self.graph.get_edge_data(from_name, to_name).values()
        )

    def number_of_edges(self) -> int:
        return self.graph.number_of_edges()

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def dump(self) -> list[str]:
        """One line per node: its name followed by its outgoing edges."""
        return [str(self.get_node(name)) for name in self.graph.nodes]

    def get_stats(self) -> dict:
        labels = Counter(data["label"] for _, _, data in self.graph.edges(data=True))
        return {
            "total_nodes": self.graph.number_of_nodes(),
            "total_edges": self.graph.number_of_edges(),
            "edge_labels": dict(labels),
        }
