"""Data models for tasks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from .enums import TaskPriority, TaskStatus
from .urgency import calculate_urgency


def _parse_datetime(value) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _unique(ids: Iterable[str]) -> list[str]:
    """Drop duplicate ids, keeping first occurrence order."""
    return list(dict.fromkeys(str(i) for i in ids))


def parse_statuses(value: str | Iterable[str | TaskStatus] | None) -> list[TaskStatus]:
    """Parse a status filter such as ``"pending, ACTIVE"``.

    Unknown names are skipped. Returns an empty list (meaning "all
    statuses") for None or blank input.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    statuses: list[TaskStatus] = []
    for item in value:
        if isinstance(item, str) and not item.strip():
            continue
        try:
            status = TaskStatus.parse(item)
        except (KeyError, ValueError):
            continue
        if status not in statuses:
            statuses.append(status)
    return statuses


@dataclass
class TaskAnnotation:
    """A timestamped note attached to a task."""
    entry: datetime
    description: str

    def to_dict(self) -> dict:
        return {"entry": self.entry.isoformat(), "description": self.description}

    @classmethod
    def from_dict(cls, data: dict) -> TaskAnnotation:
        return cls(
            entry=_parse_datetime(data["entry"]),
            description=data.get("description", ""),
        )


@dataclass
class Task:
    """A unit of work, optionally depending on other tasks by id."""
    id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.NONE
    urgency: float | None = None
    assignee: str | None = None
    project: str | None = None  # project display name
    due_date: str | None = None
    wait_until: str | None = None
    tags: list[str] = field(default_factory=list)
    annotations: list[TaskAnnotation] = field(default_factory=list)
    depends: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self):
        self.status = TaskStatus.parse(self.status)
        self.priority = TaskPriority.parse(self.priority)
        self.depends = _unique(self.depends)

    # ── Lifecycle ─────────────────────────────────────────────────

    def start(self) -> None:
        self._transition(TaskStatus.ACTIVE, "Task started")

    def stop(self) -> None:
        """Pause an active task. No-op for any other status."""
        if self.status == TaskStatus.ACTIVE:
            self._transition(TaskStatus.PENDING, "Task paused")

    def done(self) -> None:
        self._transition(TaskStatus.COMPLETED, "Task completed")

    def mark_deleted(self) -> None:
        self._transition(TaskStatus.DELETED, "Task deleted")

    def add_annotation(self, description: str) -> None:
        self.annotations.append(TaskAnnotation(entry=datetime.now(), description=description))

    def _transition(self, status: TaskStatus, note: str) -> None:
        self.status = status
        self.add_annotation(note)
        self.updated_at = datetime.now()
        self.refresh_urgency()

    # ── Urgency ───────────────────────────────────────────────────

    def refresh_urgency(self, now: datetime | None = None) -> float:
        """Recompute and store the urgency score. Returns the new value."""
        self.urgency = calculate_urgency(self, now=now)
        return self.urgency

    # ── Serialization ─────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "urgency": self.urgency,
            "assignee": self.assignee,
            "project": self.project,
            "due_date": self.due_date,
            "wait_until": self.wait_until,
            "tags": list(self.tags),
            "annotations": [a.to_dict() for a in self.annotations],
            "depends": list(self.depends),
            "created_at": _format_datetime(self.created_at),
            "updated_at": _format_datetime(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Task:
        annotations = [
            TaskAnnotation.from_dict(a) if isinstance(a, dict) else a
            for a in data.get("annotations", [])
        ]
        urgency = data.get("urgency")
        return cls(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description", ""),
            status=data.get("status", TaskStatus.PENDING),
            priority=data.get("priority", TaskPriority.NONE),
            urgency=float(urgency) if urgency is not None else None,
            assignee=data.get("assignee"),
            project=data.get("project"),
            due_date=data.get("due_date"),
            wait_until=data.get("wait_until"),
            tags=data.get("tags", []),
            annotations=annotations,
            depends=data.get("depends", []),
            created_at=_parse_datetime(data.get("created_at")),
            updated_at=_parse_datetime(data.get("updated_at")),
        )
