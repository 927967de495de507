# src/tasklist_app/core/store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from .errors import IndexOutOfRange, ValidationError
from .models import Task

logger = logging.getLogger(__name__)


class ChangeKind(StrEnum):
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class StoreChange:
    """
    What a listener receives after a successful mutation.

    index is the position that was added, replaced or removed;
    snapshot is the list as it looks after the change.
    """

    kind: ChangeKind
    index: int
    snapshot: tuple[Task, ...]


StoreListener = Callable[[StoreChange], None]


class TaskListStore:
    """
    In-memory ordered list of tasks.

    Single source of truth for whatever renders the list. Mutations are
    synchronous and visible to the next reader; listeners are notified after
    every successful mutation, in subscription order.

    Index policy: edit_at/delete_at/get fail fast with IndexOutOfRange on an
    index outside [0, len). Negative indices are not wrapped.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._listeners: list[StoreListener] = []

    # ---- read API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.snapshot())

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    # ---- subscribe / notify ----

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, kind: ChangeKind, index: int) -> None:
        change = StoreChange(kind=kind, index=index, snapshot=self.snapshot())
        for listener in list(self._listeners):
            listener(change)

    # ---- mutations ----

    def add(self, title: str, image_ref: str | None = None) -> bool:
        """
        Append a task. An empty title is rejected silently.

        Returns True when the task was appended.
        """
        try:
            _validate_title(title)
        except ValidationError as e:
            logger.debug("add rejected: %s", e)
            return False

        self._tasks.append(Task(title=title, image_ref=image_ref))
        index = len(self._tasks) - 1
        logger.debug("Task added index=%d has_image=%s", index, image_ref is not None)
        self._notify(ChangeKind.ADD, index)
        return True

    def edit_at(self, index: int, new_title: str, new_image_ref: str | None) -> None:
        """
        Replace the task at index.

        Unlike add(), the title is not validated: an empty title is stored as given.
        """
        self._check_index(index)
        self._tasks[index] = Task(title=new_title, image_ref=new_image_ref)
        logger.debug("Task edited index=%d", index)
        self._notify(ChangeKind.EDIT, index)

    def delete_at(self, index: int) -> None:
        """Remove the task at index; later tasks shift down by one."""
        self._check_index(index)
        del self._tasks[index]
        logger.debug("Task deleted index=%d remaining=%d", index, len(self._tasks))
        self._notify(ChangeKind.DELETE, index)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRange(index, len(self._tasks))


def _validate_title(title: str) -> None:
    # Only the exact empty string is rejected; whitespace titles are accepted.
    if title == "":
        raise ValidationError("Task title must not be empty.")
