# src/tasklist_app/core/session.py

from __future__ import annotations

import logging

from .controllers import ComposerController, TaskItemController
from .store import ChangeKind, StoreChange, TaskListStore

logger = logging.getLogger(__name__)


class TaskListSession:
    """
    Top-level owner of the task list.

    Holds the store, the composer and one row controller per task. Row
    controllers follow their task: when a row above is deleted they are
    re-bound to the new index, so an open edit still commits to the right task.
    The controller of a deleted row is disposed and its draft is lost.
    """

    def __init__(self, store: TaskListStore | None = None) -> None:
        self.store = store or TaskListStore()
        self.composer = ComposerController(self.store)
        self._items: list[TaskItemController] = [
            TaskItemController(self.store, i) for i in range(len(self.store))
        ]
        self._unsubscribe = self.store.subscribe(self._on_change)

    def item(self, index: int) -> TaskItemController:
        # Validates the index against the store (IndexOutOfRange).
        self.store.get(index)
        return self._items[index]

    def items(self) -> list[TaskItemController]:
        return list(self._items)

    def delete(self, index: int) -> None:
        self.store.delete_at(index)

    def editing_indices(self) -> list[int]:
        return [c.index for c in self._items if c.is_editing]

    def close(self) -> None:
        self._unsubscribe()
        for c in self._items:
            c.dispose()
        self._items.clear()

    def _on_change(self, change: StoreChange) -> None:
        if change.kind is ChangeKind.ADD:
            self._items.insert(change.index, TaskItemController(self.store, change.index))
        elif change.kind is ChangeKind.DELETE:
            removed = self._items.pop(change.index)
            removed.dispose()
            for i in range(change.index, len(self._items)):
                self._items[i].index = i
        logger.debug("Session synced kind=%s index=%d rows=%d", change.kind, change.index, len(self._items))
