# src/tasklist_app/core/ports.py

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the console (or any other front end) swappable and makes testing easier.
"""

from __future__ import annotations

from typing import Awaitable, Protocol


class PermissionRequester(Protocol):
    """Asks the platform for a permission. Resolves to True when granted."""

    def request(self, kind: str) -> Awaitable[bool]: ...


class ImageSelector(Protocol):
    """
    Lets the user choose an image.

    Resolves to an opaque reference (URI-like string), or None when the user
    dismissed the picker without choosing.
    """

    def pick(self, mime_filter: str) -> Awaitable[str | None]: ...


class ImageRenderer(Protocol):
    """Turns an image reference into something displayable. The core never looks inside."""

    def render(self, image_ref: str) -> str: ...


class Notifier(Protocol):
    """Transient user-visible notice (a toast)."""

    def notify(self, text: str) -> None: ...


class ImageTarget(Protocol):
    """Anything that can receive a picked image into its staged state."""

    def accepts_image(self) -> bool: ...
    def select_image(self, image_ref: str) -> None: ...
