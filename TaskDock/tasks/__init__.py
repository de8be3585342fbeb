"""Tasks — the task entity, urgency scoring, and store adapters.

Usage:
    from TaskDock.tasks import Task, TaskStatus, InMemoryTaskStore

    store = InMemoryTaskStore()
    store.add(Task(id="t1", title="Write docs", priority="H"))
"""

from .enums import TaskStatus, TaskPriority
from .models import Task, TaskAnnotation, parse_statuses
from .urgency import calculate_urgency
from .store import TaskStore, InMemoryTaskStore, JsonTaskStore, load_tasks, save_tasks

__all__ = [
    "TaskStatus",
    "TaskPriority",
    "Task",
    "TaskAnnotation",
    "parse_statuses",
    "calculate_urgency",
    "TaskStore",
    "InMemoryTaskStore",
    "JsonTaskStore",
    "load_tasks",
    "save_tasks",
]
