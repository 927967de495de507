# src/tasklist_app/core/controllers.py

"""
Row and composer controllers.

Both keep user input in a staged draft and only touch the store on an
explicit commit (save / submit).
"""

from __future__ import annotations

import logging
from enum import StrEnum

from .errors import InvalidTransition
from .models import ComposerDraft, EditDraft
from .store import TaskListStore

logger = logging.getLogger(__name__)


class ItemMode(StrEnum):
    VIEWING = "viewing"
    EDITING = "editing"


class TaskItemController:
    """
    Viewing/Editing state machine for one row.

    Viewing --enter_edit--> Editing (draft seeded from the live task)
    Editing --change_title/select_image--> Editing
    Editing --save--> Viewing (draft committed with store.edit_at)
    Editing --cancel--> Viewing (draft dropped)

    The owner re-binds `index` when rows above are removed and calls dispose()
    when this row is removed.
    """

    def __init__(self, store: TaskListStore, index: int) -> None:
        self._store = store
        self.index = index
        self._mode = ItemMode.VIEWING
        self._draft: EditDraft | None = None
        self._disposed = False

    @property
    def mode(self) -> ItemMode:
        return self._mode

    @property
    def draft(self) -> EditDraft | None:
        return self._draft

    @property
    def is_editing(self) -> bool:
        return self._mode is ItemMode.EDITING

    @property
    def disposed(self) -> bool:
        return self._disposed

    def enter_edit(self) -> None:
        self._ensure_alive("enter_edit")
        if self.is_editing:
            return
        self._draft = EditDraft.from_task(self._store.get(self.index))
        self._mode = ItemMode.EDITING
        logger.debug("Row %d entered edit mode", self.index)

    def change_title(self, text: str) -> None:
        draft = self._require_draft("change_title")
        draft.staged_title = text

    def select_image(self, image_ref: str) -> None:
        draft = self._require_draft("select_image")
        draft.staged_image_ref = image_ref

    def accepts_image(self) -> bool:
        return self.is_editing and not self._disposed

    def save(self) -> None:
        # No title validation here: an empty staged title is committed as is.
        draft = self._require_draft("save")
        self._store.edit_at(self.index, draft.staged_title, draft.staged_image_ref)
        self._leave_edit()
        logger.debug("Row %d saved", self.index)

    def cancel(self) -> None:
        self._require_draft("cancel")
        self._leave_edit()
        logger.debug("Row %d edit cancelled", self.index)

    def dispose(self) -> None:
        """Row removed from the list: drop any draft without committing."""
        if self._draft is not None:
            logger.debug("Row %d removed while editing; draft discarded", self.index)
        self._leave_edit()
        self._disposed = True

    def _leave_edit(self) -> None:
        self._draft = None
        self._mode = ItemMode.VIEWING

    def _ensure_alive(self, action: str) -> None:
        if self._disposed:
            raise InvalidTransition(f"{action}: row controller was disposed")

    def _require_draft(self, action: str) -> EditDraft:
        self._ensure_alive(action)
        if self._draft is None:
            raise InvalidTransition(f"{action}: row {self.index} is not in edit mode")
        return self._draft


class ComposerController:
    """The "new task" form: always editable, commits with submit()."""

    def __init__(self, store: TaskListStore) -> None:
        self._store = store
        self.draft = ComposerDraft()

    def change_title(self, text: str) -> None:
        self.draft.staged_title = text

    def select_image(self, image_ref: str) -> None:
        self.draft.staged_image_ref = image_ref

    def accepts_image(self) -> bool:
        return True

    def submit(self) -> bool:
        """Add the staged task and clear the form. Empty title -> no-op (False)."""
        if not self.draft.staged_title:
            return False
        added = self._store.add(self.draft.staged_title, self.draft.staged_image_ref)
        if added:
            self.draft.reset()
        return added
