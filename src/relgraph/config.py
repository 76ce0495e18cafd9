"""Configuration management for relgraph."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from relgraph.exceptions import ConfigError

RELGRAPH_DIR = ".relgraph"
CONFIG_FILE = "config.json"

PARENT_LABEL = "hasParent"
CHILD_LABEL = "hasChild"
SPOUSE_LABEL = "hasSpouse"


class RelationshipConfig(BaseModel):
    """Edge labels the family queries follow."""

    parent_label: str = PARENT_LABEL
    child_label: str = CHILD_LABEL


class LoaderConfig(BaseModel):
    """Relationship file reader configuration."""

    comment_prefix: str = "#"
    allow_duplicate_edges: bool = False
    # label -> label of the edge added in the opposite direction
    reciprocal_labels: dict[str, str] = Field(
        default_factory=lambda: {
            CHILD_LABEL: PARENT_LABEL,
            SPOUSE_LABEL: SPOUSE_LABEL,
        }
    )


class ProjectConfig(BaseModel):
    """Full project configuration."""

    name: str = ""
    root_path: str = "."
    data_file: str = ""
    log_level: str = "WARNING"
    relationships: RelationshipConfig = Field(default_factory=RelationshipConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)

    def resolve_data_file(self, root: Path) -> Path | None:
        """Return the configured relationship file, relative to `root`."""
        if not self.data_file:
            return None
        path = Path(self.data_file)
        if not path.is_absolute():
            path = root / path
        return path


def find_project_root(start: Path | None = None) -> Path | None:
    """Walk up from `start` looking for a .relgraph directory."""
    current = (start or Path.cwd()).resolve()
    while current != current.parent:
        if (current / RELGRAPH_DIR).is_dir():
            return current
        current = current.parent
    if (current / RELGRAPH_DIR).is_dir():
        return current
    return None


def get_relgraph_dir(root: Path) -> Path:
    """Get the .relgraph directory for a project root."""
    return root / RELGRAPH_DIR


def load_config(root: Path) -> ProjectConfig:
    """Load configuration from .relgraph/config.json."""
    config_path = get_relgraph_dir(root) / CONFIG_FILE
    if config_path.exists():
        try:
            data = json.loads(config_path.read_text())
            return ProjectConfig(**data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e
    return ProjectConfig(name=root.name, root_path=str(root))


def save_config(root: Path, config: ProjectConfig) -> None:
    """Save configuration to .relgraph/config.json."""
    rg_dir = get_relgraph_dir(root)
    rg_dir.mkdir(parents=True, exist_ok=True)
    config_path = rg_dir / CONFIG_FILE
    config_path.write_text(json.dumps(config.model_dump(), indent=2))


def set_config_value(config: ProjectConfig, key: str, value: Any) -> ProjectConfig:
    """Set a nested config value using dot notation (e.g., 'relationships.parent_label')."""
    parts = key.split(".")
    data = config.model_dump()
    target = data
    for part in parts[:-1]:
        if part not in target or not isinstance(target[part], dict):
            raise KeyError(f"Invalid config key: {key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Invalid config key: {key}")
    target[parts[-1]] = value
    return ProjectConfig(**data)
