"""Data models for graph nodes, edges and query results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QueryStatus(str, Enum):
    """Outcome of a relationship query."""

    OK = "ok"
    NOT_FOUND = "not_found"
    CYCLE_DETECTED = "cycle_detected"
    NO_PATH = "no_path"


class Edge(BaseModel):
    """A directed, labeled relationship owned by its source node."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    label: str

    def __str__(self) -> str:
        return f"{self.source} {self.label} {self.target}"


class Node(BaseModel):
    """Read-only view of a node and its outgoing edges in insertion order."""

    model_config = ConfigDict(frozen=True)

    name: str
    edges: tuple[Edge, ...] = ()

    def __str__(self) -> str:
        if not self.edges:
            return f"{self.name}:"
        return f"{self.name}: " + ", ".join(str(e) for e in self.edges)


class SiblingResult(BaseModel):
    name: str
    status: QueryStatus = QueryStatus.OK
    siblings: list[str] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status != QueryStatus.NOT_FOUND


class Descendant(BaseModel):
    """One emitted descendant: `depth` 0 is a child of the root."""

    depth: int
    generation: str
    name: str

    def __str__(self) -> str:
        return f"{self.generation} {self.name}"


class DescendantResult(BaseModel):
    """Descendant listing.

    With CYCLE_DETECTED the listing holds everything emitted before the
    revisit, including the revisited node itself.
    """

    root: str
    status: QueryStatus = QueryStatus.OK
    descendants: list[Descendant] = Field(default_factory=list)

    @property
    def cycle_detected(self) -> bool:
        return self.status == QueryStatus.CYCLE_DETECTED


class PathResult(BaseModel):
    """Shortest relationship path between two nodes."""

    source: str
    target: str
    status: QueryStatus = QueryStatus.OK
    edges: list[Edge] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)  # absent names, argument order

    @property
    def descriptions(self) -> list[str]:
        return [str(e) for e in self.edges]


class CousinResult(BaseModel):
    name: str
    number: int
    removed: int
    status: QueryStatus = QueryStatus.OK
    cousins: list[str] = Field(default_factory=list)
