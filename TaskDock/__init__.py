"""TaskDock — task dependency graph engine.

Turns a flat task list, where each task may depend on others by id, into an
explicit directed graph, flags dependency cycles, and annotates every node
with the task's cached urgency score.

Modules:
    TaskDock.tasks    — Task entity, urgency scoring, store adapters
    TaskDock.graph    — Graph models, cycle detection, builders, output, CLI

Shared infrastructure:
    TaskDock.config   — GraphConfig defaults and JSON loader
    TaskDock.errors   — Exception hierarchy
"""

from .errors import TaskDockError, StoreUnavailable, InvalidArgument
from .config import GraphConfig, load_config

__all__ = [
    "TaskDockError",
    "StoreUnavailable",
    "InvalidArgument",
    "GraphConfig",
    "load_config",
]
