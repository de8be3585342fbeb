"""Task status and priority enumerations."""

from __future__ import annotations

from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle state of a task."""
    PENDING = "pending"
    WAITING = "waiting"
    ACTIVE = "active"
    COMPLETED = "completed"
    DELETED = "deleted"

    @classmethod
    def parse(cls, value: str | TaskStatus) -> TaskStatus:
        """Accept a member, its value ("active") or its name ("ACTIVE")."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls(text.lower())
        except ValueError:
            return cls[text.upper()]


class TaskPriority(str, Enum):
    """Taskwarrior-style priority. Values are the H/M/L letters."""
    HIGH = "H"
    MEDIUM = "M"
    LOW = "L"
    NONE = ""

    @classmethod
    def parse(cls, value: str | TaskPriority | None) -> TaskPriority:
        """Accept a member, a letter ("H") or a name ("HIGH"). None means NONE."""
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls(text.upper())
        except ValueError:
            return cls[text.upper()]
