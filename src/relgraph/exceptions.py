"""Custom exceptions for relgraph."""

from __future__ import annotations

from pathlib import Path


class RelGraphError(Exception):
    """Base exception for all relgraph errors."""


class ConfigError(RelGraphError):
    """Configuration-related errors."""


class GraphError(RelGraphError):
    """Relationship graph errors."""


class LoaderError(GraphError):
    """Raised when a relationship file cannot be read or parsed."""

    def __init__(self, message: str, path: str | Path | None = None, line_number: int = 0):
        self.path = str(path) if path is not None else None
        self.line_number = line_number
        location = ""
        if self.path:
            location = f"{self.path}:{line_number}: " if line_number else f"{self.path}: "
        elif line_number:
            location = f"line {line_number}: "
        super().__init__(f"{location}{message}")
