"""Task store adapters.

The graph builders only read through the :class:`TaskStore` protocol.
Two implementations are provided: an in-memory list and a JSON file.
"""

from __future__ import annotations

import copy
import json
import logging
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Iterable, Protocol

from TaskDock.errors import StoreUnavailable
from .enums import TaskStatus
from .models import Task, parse_statuses

logger = logging.getLogger("taskdock.store")

DEFAULT_TASK_FILE = "output/tasks/tasks.json"


class TaskStore(Protocol):
    """Read access required by the graph builders."""
    def fetch_by_statuses(self, statuses: Iterable[TaskStatus | str] | None = None) -> list[Task]: ...
    def fetch_by_id(self, task_id: str) -> Task | None: ...
    def fetch_all(self) -> list[Task]: ...


def _filter_by_statuses(tasks: list[Task], statuses) -> list[Task]:
    wanted = set(parse_statuses(statuses))
    if not wanted:
        return tasks
    return [t for t in tasks if t.status in wanted]


class InMemoryTaskStore:
    """Thread-safe list-backed store. Fetches return deep copies."""

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._lock = threading.Lock()
        self._tasks: list[Task] = list(tasks or [])

    # ── Reads ─────────────────────────────────────────────────────

    def fetch_by_statuses(self, statuses=None) -> list[Task]:
        return _filter_by_statuses(self.fetch_all(), statuses)

    def fetch_by_id(self, task_id: str) -> Task | None:
        with self._lock:
            for t in self._tasks:
                if t.id == task_id:
                    return copy.deepcopy(t)
        return None

    def fetch_all(self) -> list[Task]:
        with self._lock:
            return copy.deepcopy(self._tasks)

    # ── Writes ────────────────────────────────────────────────────

    def add(self, task: Task) -> Task:
        """Insert a task, assigning an id and timestamps and computing urgency."""
        if not task.id:
            task.id = uuid.uuid4().hex
        now = datetime.now()
        task.created_at = task.created_at or now
        task.updated_at = now
        task.refresh_urgency(now=now)
        with self._lock:
            if any(t.id == task.id for t in self._tasks):
                raise ValueError(f"Task {task.id} already exists")
            self._tasks.append(copy.deepcopy(task))
        logger.info("Created task %s: %s", task.id, task.title)
        return task

    def update(self, task: Task) -> Task:
        """Replace the stored task with the same id, recomputing urgency."""
        task.updated_at = datetime.now()
        task.refresh_urgency()
        with self._lock:
            for i, t in enumerate(self._tasks):
                if t.id == task.id:
                    self._tasks[i] = copy.deepcopy(task)
                    return task
        raise KeyError(task.id)

    def delete(self, task_id: str) -> bool:
        with self._lock:
            before = len(self._tasks)
            self._tasks = [t for t in self._tasks if t.id != task_id]
            return len(self._tasks) != before

    def delete_all(self) -> None:
        with self._lock:
            self._tasks = []


def load_tasks(path: str = DEFAULT_TASK_FILE) -> list[Task]:
    """Load tasks from a JSON file. Returns an empty list if it doesn't exist.

    The file holds either a list of task objects or ``{"tasks": [...]}``.
    """
    p = Path(path)
    if not p.exists():
        return []
    try:
        data = json.loads(p.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise StoreUnavailable(f"Cannot read task file {path}: {e}") from e
    if isinstance(data, dict):
        data = data.get("tasks", [])
    try:
        return [Task.from_dict(t) for t in data]
    except (KeyError, TypeError, ValueError) as e:
        raise StoreUnavailable(f"Malformed task record in {path}: {e}") from e


def save_tasks(tasks: Iterable[Task], path: str = DEFAULT_TASK_FILE) -> str:
    """Save tasks to a JSON file. Returns the path written to."""
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps({"tasks": [t.to_dict() for t in tasks]}, indent=2))
    except OSError as e:
        raise StoreUnavailable(f"Cannot write task file {path}: {e}") from e
    return str(p)


class JsonTaskStore:
    """Store backed by a JSON file, re-read on every fetch."""

    def __init__(self, path: str = DEFAULT_TASK_FILE):
        self.path = path

    def fetch_by_statuses(self, statuses=None) -> list[Task]:
        return _filter_by_statuses(load_tasks(self.path), statuses)

    def fetch_by_id(self, task_id: str) -> Task | None:
        for t in load_tasks(self.path):
            if t.id == task_id:
                return t
        return None

    def fetch_all(self) -> list[Task]:
        return load_tasks(self.path)

    def save(self, tasks: Iterable[Task]) -> str:
        return save_tasks(tasks, self.path)
