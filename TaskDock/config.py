"""Configuration for graph queries.

Defaults mirror the query parameters of the neighbors endpoint: one hop,
placeholders on, no status filter.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, asdict
from pathlib import Path

from .errors import InvalidArgument

DEFAULT_CONFIG_FILE = "taskdock.json"


@dataclass
class GraphConfig:
    """Defaults applied when a caller leaves a query parameter unset."""
    default_depth: int = 1
    include_placeholders: bool = True
    statuses: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> GraphConfig:
        depth = int(data.get("default_depth", 1))
        if depth < 0:
            raise InvalidArgument(f"default_depth must be >= 0, got {depth}")
        return cls(
            default_depth=depth,
            include_placeholders=bool(data.get("include_placeholders", True)),
            statuses=list(data.get("statuses", [])),
        )


def load_config(path: str = DEFAULT_CONFIG_FILE) -> GraphConfig:
    """Load config from a JSON file. Returns defaults if the file doesn't exist."""
    p = Path(path)
    if not p.exists():
        return GraphConfig()
    try:
        data = json.loads(p.read_text())
    except json.JSONDecodeError as e:
        raise InvalidArgument(f"Config file {path} is not valid JSON: {e}") from e
    return GraphConfig.from_dict(data)
