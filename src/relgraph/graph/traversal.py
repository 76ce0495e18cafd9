"""Traversal algorithms over a GraphStore.

All walkers use explicit stacks or queues, so graph depth is bounded by
memory rather than by the interpreter's recursion limit. Visitation state
lives in a TraversalState owned by each traversal, never on the graph.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from relgraph.config import CHILD_LABEL, PARENT_LABEL
from relgraph.graph.models import (
    Descendant,
    DescendantResult,
    Edge,
    PathResult,
    QueryStatus,
)
from relgraph.graph.store import GraphStore

logger = logging.getLogger("relgraph.graph")


def generation_label(depth: int) -> str:
    """Name the generation at `depth` below the root: child, grandchild,
    great grandchild, great great grandchild, ..."""
    if depth <= 0:
        return "child"
    return "great " * (depth - 1) + "grandchild"


class TraversalState:
    """Unvisited/visited bookkeeping for a single traversal pass."""

    def __init__(self) -> None:
        self._visited: set[str] = set()

    def reset(self) -> None:
        self._visited.clear()

    def visit(self, name: str) -> bool:
        """Mark `name` visited. Returns False if it already was."""
        if name in self._visited:
            return False
        self._visited.add(name)
        return True

    def is_visited(self, name: str) -> bool:
        return name in self._visited

    def __len__(self) -> int:
        return len(self._visited)


class DescendantWalker:
    """Depth-first, generation-labeled listing of everything below a node.

    Any node reached twice in one pass is reported as a cycle. Output
    produced before the revisit is kept.
    """

    def __init__(self, store: GraphStore, child_label: str = CHILD_LABEL) -> None:
        self.store = store
        self.child_label = child_label
        self.state = TraversalState()

    def walk(self, name: str) -> DescendantResult:
        self.state.reset()
        result = DescendantResult(root=name)
        if not self.store.has_node(name):
            result.status = QueryStatus.NOT_FOUND
            return result

        self.state.visit(name)
        # Each frame is (depth of the children, iterator over their names).
        stack: list[tuple[int, Iterator[str]]] = [
            (0, iter(self.store.targets(name, self.child_label)))
        ]
        while stack:
            depth, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                continue

            result.descendants.append(
                Descendant(depth=depth, generation=generation_label(depth), name=child)
            )
            if not self.state.visit(child):
                logger.debug("Cycle below %s: %s revisited at depth %d", name, child, depth)
                result.status = QueryStatus.CYCLE_DETECTED
                break
            stack.append((depth + 1, iter(self.store.targets(child, self.child_label))))

        return result


class ShortestPathFinder:
    """Breadth-first search for the fewest-edges path between two nodes.

    Every outgoing edge counts regardless of its label.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store
        self.state = TraversalState()

    def find(self, source: str, target: str) -> PathResult:
        result = PathResult(source=source, target=target)
        result.missing = [n for n in (source, target) if not self.store.has_node(n)]
        if result.missing:
            result.status = QueryStatus.NOT_FOUND
            return result

        predecessors = self._search(source, target)
        if predecessors is None:
            result.status = QueryStatus.NO_PATH
            return result

        result.edges = self._reconstruct(predecessors, target)
        return result

    def _search(self, source: str, target: str) -> dict[str, str | None] | None:
        """Run BFS from `source` until `target` is discovered.

        Returns the predecessor map, or None if `target` was never
        discovered. The source starts visited, so it cannot be its own
        target.
        """
        self.state.reset()
        self.state.visit(source)
        predecessors: dict[str, str | None] = {source: None}
        queue = deque([source])

        while queue:
            current = queue.popleft()
            for edge in self.store.out_edges(current):
                if not self.state.visit(edge.target):
                    continue
                predecessors[edge.target] = current
                if edge.target == target:
                    logger.debug("Reached %s from %s after %d visits", target, source, len(self.state))
                    return predecessors
                queue.append(edge.target)

        return None

    def _reconstruct(self, predecessors: dict[str, str | None], target: str) -> list[Edge]:
        nodes = [target]
        while predecessors[nodes[-1]] is not None:
            nodes.append(predecessors[nodes[-1]])
        nodes.reverse()

        edges = []
        for src, dst in zip(nodes, nodes[1:]):
            # Parallel edges: the first one inserted wins.
            edges.append(next(e for e in self.store.out_edges(src) if e.target == dst))
        return edges


class CousinFinder:
    """Find nth cousins, r times removed, by ascending then descending."""

    def __init__(
        self,
        store: GraphStore,
        parent_label: str = PARENT_LABEL,
        child_label: str = CHILD_LABEL,
    ) -> None:
        self.store = store
        self.parent_label = parent_label
        self.child_label = child_label

    def find(self, name: str, number: int, removed: int) -> list[str]:
        """Merge both ascend/descend orders into one deduplicated list.

        The near line climbs number+1 generations and descends
        removed+number+1; the far line does the opposite.
        """
        near = number + 1
        far = removed + number + 1
        collected: list[str] = []
        self.collect(name, near, far, collected, excluded=name)
        self.collect(name, far, near, collected, excluded=name)
        return collected

    def collect(
        self,
        name: str,
        up_steps: int,
        down_steps: int,
        collected: list[str],
        excluded: str | None = None,
    ) -> list[str]:
        """Climb `up_steps` parent edges, then descend `down_steps` child edges.

        While climbing, `excluded` follows the node just left so the
        descent never walks straight back down the line it came up. Nodes
        where both counters reach zero are appended to `collected` once.
        Visit order matches a recursive preorder walk.
        """
        stack = [(name, up_steps, down_steps, excluded)]
        while stack:
            current, up, down, skip = stack.pop()
            if up > 0:
                frames = [
                    (parent, up - 1, down, current)
                    for parent in self.store.targets(current, self.parent_label)
                ]
            elif down > 0:
                frames = [
                    (child, up, down - 1, skip)
                    for child in self.store.targets(current, self.child_label)
                    if child != skip
                ]
            else:
                if current not in collected:
                    collected.append(current)
                continue
            stack.extend(reversed(frames))
        return collected
