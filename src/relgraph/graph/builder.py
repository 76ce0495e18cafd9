"""Build a relationship graph from a relationship file."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from relgraph.config import LoaderConfig, ProjectConfig
from relgraph.exceptions import LoaderError
from relgraph.graph.store import GraphStore

logger = logging.getLogger("relgraph.loader")


class GraphBuilder:
    """Reads relationship lines into a GraphStore.

    Each non-blank line is ``<from> <label> <to> [<to> ...]``. A line with a
    single name declares a node with no edges. Lines starting with the
    comment prefix are skipped. Labels listed in
    ``LoaderConfig.reciprocal_labels`` also get the opposite edge, so
    ``A hasChild B`` implies ``B hasParent A``.

    Lines repeated in the file add parallel edges. A reciprocal edge is
    skipped when the same edge already exists, and an explicit line that
    restates an edge already implied by a reciprocal is skipped once, so a
    file listing both directions does not double them. Set
    ``LoaderConfig.allow_duplicate_edges`` to add every edge as written.
    """

    def __init__(self, config: LoaderConfig | None = None) -> None:
        self.config = config or LoaderConfig()
        self.store = GraphStore()
        self._lines_read = 0
        self._skipped_edges = 0
        self._implied: Counter[tuple[str, str, str]] = Counter()

    def build_from_file(
        self,
        path: str | Path,
        config: ProjectConfig | None = None,
    ) -> GraphStore:
        """Build the graph from a relationship file.

        Args:
            path: The relationship file to read.
            config: Project configuration; its loader section overrides
                the one given to the constructor.

        Returns:
            The constructed GraphStore.
        """
        path = Path(path)
        if config is not None:
            self.config = config.loader
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise LoaderError(f"Cannot read relationship file: {e.strerror or e}", path) from e

        logger.info("Loading relationships from %s", path)
        return self.build_from_lines(text.splitlines(), source=path)

    def build_from_lines(
        self,
        lines: Iterable[str],
        source: str | Path | None = None,
    ) -> GraphStore:
        """Build the graph from relationship lines (any iterable of str)."""
        # Reset state so reusing a builder doesn't accumulate stale data
        self.store = GraphStore()
        self._lines_read = 0
        self._skipped_edges = 0
        self._implied = Counter()

        for line_number, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line or (self.config.comment_prefix and line.startswith(self.config.comment_prefix)):
                continue
            self._lines_read += 1
            self._add_line(line.split(), line_number, source)

        stats = self.get_stats()
        logger.info(
            "Built graph with %d nodes and %d edges from %d lines",
            stats["total_nodes"], stats["total_edges"], stats["lines_read"],
        )
        return self.store

    def _add_line(self, words: list[str], line_number: int, source: str | Path | None) -> None:
        if len(words) == 1:
            self.store.add_node(words[0])
            return
        if len(words) == 2:
            raise LoaderError(
                f"Expected '<from> <label> <to>', got {' '.join(words)!r}",
                source,
                line_number,
            )

        name, label, *targets = words
        reciprocal = self.config.reciprocal_labels.get(label)
        for target in targets:
            self._add_explicit_edge(name, target, label)
            if reciprocal:
                self._add_reciprocal_edge(target, name, reciprocal)

    def _add_explicit_edge(self, from_name: str, to_name: str, label: str) -> None:
        key = (from_name, label, to_name)
        if not self.config.allow_duplicate_edges and self._implied[key] > 0:
            logger.debug("Edge %s %s %s already implied by a reciprocal", *key)
            self._implied[key] -= 1
            self._skipped_edges += 1
            return
        self.store.add_edge(from_name, to_name, label)

    def _add_reciprocal_edge(self, from_name: str, to_name: str, label: str) -> None:
        if not self.config.allow_duplicate_edges and self.store.has_edge(from_name, to_name, label):
            logger.debug("Skipping duplicate reciprocal %s %s %s", from_name, label, to_name)
            self._skipped_edges += 1
            return
        self.store.add_edge(from_name, to_name, label)
        self._implied[(from_name, label, to_name)] += 1

    def get_stats(self) -> dict:
        """Get statistics about the built graph."""
        stats = self.store.get_stats()
        stats["lines_read"] = self._lines_read
        stats["skipped_edges"] = self._skipped_edges
        return stats
