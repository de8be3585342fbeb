"""Urgency scoring for tasks.

The score is a sum of independent contributions, clamped to [0, 100]:

    priority + due date proximity + age + status + tags

Every contribution takes an explicit ``now`` so it can be evaluated against a
fixed clock. Graph builders never call into this module; they copy the value
already stored on the task.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from .enums import TaskPriority, TaskStatus

MIN_URGENCY = 0.0
MAX_URGENCY = 100.0

PRIORITY_WEIGHTS = {
    TaskPriority.HIGH: 6.0,
    TaskPriority.MEDIUM: 3.9,
    TaskPriority.LOW: 1.8,
    TaskPriority.NONE: 0.0,
}

STATUS_WEIGHTS = {
    TaskStatus.ACTIVE: 4.0,
    TaskStatus.WAITING: -3.0,
}

TAG_WEIGHTS = {
    "urgent": 5.0,
    "important": 3.0,
}

AGE_WEIGHT_PER_DAY = 0.01


def parse_due_date(value: str | date | datetime | None) -> date | None:
    """Parse an ISO-8601 date or datetime into a calendar date.

    Returns None for missing or unparseable values.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    # fromisoformat() before 3.11 does not accept a trailing "Z"
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def priority_contribution(priority: TaskPriority) -> float:
    return PRIORITY_WEIGHTS.get(priority, 0.0)


def due_date_contribution(due_date: str | date | datetime | None, now: datetime) -> float:
    """Score due-date proximity in whole calendar days.

    Overdue tasks grow without bound, tasks due within a week score 12 down
    to 2.2, tasks due in 8-14 days score 2.6 down to 0.8, anything further
    out scores nothing.
    """
    due = parse_due_date(due_date)
    if due is None:
        return 0.0
    days_until_due = (due - now.date()).days
    if days_until_due < 0:
        return 12 + abs(days_until_due) * 0.2
    if days_until_due <= 7:
        return 12 - days_until_due * 1.4
    if days_until_due <= 14:
        return 5 - days_until_due * 0.3
    return 0.0


def age_contribution(created_at: datetime | None, now: datetime) -> float:
    if created_at is None:
        return 0.0
    if (created_at.tzinfo is None) != (now.tzinfo is None):
        created_at = created_at.replace(tzinfo=None)
        now = now.replace(tzinfo=None)
    age_days = (now - created_at).days
    return max(0, age_days) * AGE_WEIGHT_PER_DAY


def status_contribution(status: TaskStatus) -> float:
    return STATUS_WEIGHTS.get(status, 0.0)


def tag_contribution(tags: Iterable[str] | None) -> float:
    if not tags:
        return 0.0
    tag_set = set(tags)
    return sum(weight for tag, weight in TAG_WEIGHTS.items() if tag in tag_set)


def clamp(value: float) -> float:
    return min(MAX_URGENCY, max(MIN_URGENCY, value))


def calculate_urgency(task, now: datetime | None = None) -> float:
    """Compute the urgency score for a task.

    Args:
        task: Any object with priority, status, due_date, created_at and tags
            attributes (normally a :class:`TaskDock.tasks.models.Task`).
        now: Reference time. Defaults to the current local time.

    Returns:
        The clamped score in [0, 100].
    """
    if now is None:
        now = datetime.now()
    score = (
        priority_contribution(task.priority)
        + due_date_contribution(task.due_date, now)
        + age_contribution(task.created_at, now)
        + status_contribution(task.status)
        + tag_contribution(task.tags)
    )
    return clamp(score)
