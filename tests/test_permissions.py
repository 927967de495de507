# tests/test_permissions.py

from __future__ import annotations

import asyncio

import pytest

from tasklist_app.core.permissions import (
    DENIED_NOTICE,
    READ_EXTERNAL_STORAGE,
    READ_MEDIA_IMAGES,
    PermissionGate,
    permission_for_api_level,
)

from .fakes import FakePermissionRequester, RecordingNotifier


@pytest.mark.parametrize(
    ("level", "kind"),
    [(21, READ_EXTERNAL_STORAGE), (32, READ_EXTERNAL_STORAGE), (33, READ_MEDIA_IMAGES), (34, READ_MEDIA_IMAGES)],
)
def test_permission_kind_follows_api_level(level: int, kind: str) -> None:
    assert permission_for_api_level(level) == kind


@pytest.mark.asyncio
async def test_granted_permission_shows_no_notice() -> None:
    requester = FakePermissionRequester(granted=True)
    notifier = RecordingNotifier()
    gate = PermissionGate(requester, notifier, api_level=33)

    assert await gate.request_on_launch() is True

    assert requester.requested == [READ_MEDIA_IMAGES]
    assert gate.granted is True
    assert notifier.notices == []


@pytest.mark.asyncio
async def test_denied_permission_notifies_once() -> None:
    requester = FakePermissionRequester(granted=False)
    notifier = RecordingNotifier()
    gate = PermissionGate(requester, notifier, api_level=30)

    assert await gate.request_on_launch() is False
    assert await gate.request_on_launch() is False

    assert requester.requested == [READ_EXTERNAL_STORAGE, READ_EXTERNAL_STORAGE]
    assert gate.granted is False
    assert notifier.notices == [DENIED_NOTICE]


@pytest.mark.asyncio
async def test_launch_is_fire_and_forget() -> None:
    notifier = RecordingNotifier()
    gate = PermissionGate(FakePermissionRequester(granted=False), notifier)

    task = gate.launch()
    assert gate.granted is None

    await task
    assert gate.granted is False
    assert notifier.notices == [DENIED_NOTICE]


@pytest.mark.asyncio
async def test_requester_failure_stays_inside_the_task() -> None:
    notifier = RecordingNotifier()
    gate = PermissionGate(FakePermissionRequester(error=RuntimeError("boom")), notifier)

    task = gate.launch()
    await asyncio.wait([task])

    assert isinstance(task.exception(), RuntimeError)
    assert gate.granted is None
    assert notifier.notices == []
