# src/tasklist_app/core/errors.py

from __future__ import annotations


class TaskListError(Exception):
    """Base class for task list errors."""


class ValidationError(TaskListError):
    """Rejected user input (empty title on add). Recovered inside the store."""


class PermissionDenied(TaskListError):
    """The media-read permission was refused."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Permission denied: {kind}")
        self.kind = kind


class IndexOutOfRange(TaskListError, IndexError):
    """
    An operation addressed a row that does not exist.

    This is a wiring bug rather than a user error: callers only hold indices
    of rows they can see, so the store fails fast instead of ignoring it.
    """

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Task index {index} out of range (length={length})")
        self.index = index
        self.length = length


class InvalidTransition(TaskListError):
    """A controller transition that is not allowed in its current state."""
