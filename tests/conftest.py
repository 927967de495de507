# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist_app.core.session import TaskListSession
from tasklist_app.core.state import AppState
from tasklist_app.core.store import TaskListStore

from .fakes import FakeImageRenderer, RecordingNotifier, ScriptedImageSelector


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        media_dir=tmp_path / "media",
        image_mime_filter="image/*",
        platform_api_level=33,
        request_permission=False,
    )


@pytest.fixture()
def store() -> TaskListStore:
    return TaskListStore()


@pytest.fixture()
def session() -> TaskListSession:
    return TaskListSession()


@pytest.fixture()
def selector() -> ScriptedImageSelector:
    return ScriptedImageSelector()


@pytest.fixture()
def state(settings: SimpleNamespace, session: TaskListSession, selector: ScriptedImageSelector) -> AppState:
    """AppState wired with deterministic fakes instead of console adapters."""
    return AppState(
        settings=settings,
        session=session,
        image_selector=selector,
        image_renderer=FakeImageRenderer(),
        notifier=RecordingNotifier(),
    )
