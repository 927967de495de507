# src/tasklist_app/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires console implementations of the ports into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_adapters import (
    ConsoleImageRenderer,
    ConsoleImageSelector,
    ConsoleNotifier,
    DirectoryPermissionRequester,
)
from ..core.permissions import PermissionGate
from ..core.session import TaskListSession
from ..core.state import AppState

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    notifier = ConsoleNotifier()
    gate = None
    if settings.request_permission:
        gate = PermissionGate(
            DirectoryPermissionRequester(settings.media_dir),
            notifier,
            api_level=settings.platform_api_level,
        )

    state = AppState(
        settings=settings,
        session=TaskListSession(),
        image_selector=ConsoleImageSelector(settings.media_dir),
        image_renderer=ConsoleImageRenderer(),
        notifier=notifier,
        permission_gate=gate,
    )
    logger.debug("AppState created (permission=%s)", gate.kind if gate else "off")
    return state
