# src/tasklist_app/core/state.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from .permissions import PermissionGate
from .ports import ImageRenderer, ImageSelector, Notifier
from .session import TaskListSession


@dataclass
class AppState:
    # Settings object (or a SimpleNamespace in tests).
    settings: Any

    session: TaskListSession
    image_selector: ImageSelector
    image_renderer: ImageRenderer
    notifier: Notifier

    permission_gate: PermissionGate | None = None

    # Picker tasks started by commands and not finished yet.
    pending_pickers: set[asyncio.Task] = field(default_factory=set)

    @property
    def mime_filter(self) -> str:
        return str(getattr(self.settings, "image_mime_filter", "image/*"))

    def track_picker(self, task: asyncio.Task) -> asyncio.Task:
        self.pending_pickers.add(task)
        task.add_done_callback(self.pending_pickers.discard)
        return task
