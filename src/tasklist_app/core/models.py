# src/tasklist_app/core/models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Identity is positional (index in the owning list); edits replace the
    instance instead of mutating it.
    """

    title: str
    image_ref: str | None = None


@dataclass(slots=True)
class EditDraft:
    """Staged edit of an existing row. Lives only while the row is editing."""

    staged_title: str
    staged_image_ref: str | None = None

    @classmethod
    def from_task(cls, task: Task) -> EditDraft:
        return cls(staged_title=task.title, staged_image_ref=task.image_ref)


@dataclass(slots=True)
class ComposerDraft:
    """Staged fields of the "new task" form."""

    staged_title: str = ""
    staged_image_ref: str | None = None

    def reset(self) -> None:
        self.staged_title = ""
        self.staged_image_ref = None
