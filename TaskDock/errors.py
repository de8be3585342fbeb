"""Exception types shared across TaskDock."""

from __future__ import annotations


class TaskDockError(Exception):
    """Base class for all TaskDock errors."""


class StoreUnavailable(TaskDockError):
    """The task store could not be read or written."""


class InvalidArgument(TaskDockError, ValueError):
    """A caller-supplied value is out of range or malformed."""
