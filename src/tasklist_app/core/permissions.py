# src/tasklist_app/core/permissions.py

from __future__ import annotations

import asyncio
import logging

from .errors import PermissionDenied
from .ports import Notifier, PermissionRequester

logger = logging.getLogger(__name__)

READ_MEDIA_IMAGES = "READ_MEDIA_IMAGES"
READ_EXTERNAL_STORAGE = "READ_EXTERNAL_STORAGE"

# Platforms at or above this API level use the narrower media permission.
MEDIA_IMAGES_MIN_API_LEVEL = 33

DENIED_NOTICE = "Permission denied"


def permission_for_api_level(api_level: int) -> str:
    if api_level >= MEDIA_IMAGES_MIN_API_LEVEL:
        return READ_MEDIA_IMAGES
    return READ_EXTERNAL_STORAGE


class PermissionGate:
    """
    Launch-time media permission request.

    Does not block anything: the app works the same whether the permission
    is granted or not. A denial produces one notice per gate.
    """

    def __init__(self, requester: PermissionRequester, notifier: Notifier, *, api_level: int = 33) -> None:
        self._requester = requester
        self._notifier = notifier
        self.kind = permission_for_api_level(api_level)
        self.granted: bool | None = None
        self._notified = False

    async def request_on_launch(self) -> bool:
        granted = bool(await self._requester.request(self.kind))
        self.granted = granted
        if granted:
            logger.info("Permission granted: %s", self.kind)
        else:
            self._on_denied(PermissionDenied(self.kind))
        return granted

    def launch(self) -> asyncio.Task[bool]:
        """Fire the request on the running loop and return immediately."""
        task = asyncio.get_running_loop().create_task(self.request_on_launch())
        task.add_done_callback(_log_request_failure)
        return task

    def _on_denied(self, reason: PermissionDenied) -> None:
        logger.info("%s", reason)
        if self._notified:
            return
        self._notified = True
        self._notifier.notify(DENIED_NOTICE)


def _log_request_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Permission request failed", exc_info=exc)
