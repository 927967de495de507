# tests/test_commands.py

from __future__ import annotations

import pytest

from tasklist_app.cli.commands import CommandRegistry, registry
from tasklist_app.connectors.console_connector import drain_pickers, handle_line
from tasklist_app.core.models import Task
from tasklist_app.core.permissions import PermissionGate

from .fakes import FakePermissionRequester, RecordingNotifier


def test_command_registry_routes_and_passes_rest(state) -> None:
    reg = CommandRegistry()
    seen: list[str] = []

    def h(state, rest):
        seen.append(rest)
        return "ok"

    reg.register("a", h, "a", aliases=["alias"])

    assert reg.handle(state, "/a  two  words") == "ok"
    assert reg.handle(state, "/ALIAS") == "ok"
    assert seen == ["two  words", ""]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_registered_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/add", "/edit", "/save", "/cancel", "/delete", "/image", "/list"):
        assert name in text


def test_plain_text_sets_composer_title_then_add(state) -> None:
    assert handle_line(state, "Buy milk") is None
    assert state.session.composer.draft.staged_title == "Buy milk"

    reply = handle_line(state, "/add")

    assert reply == "Added: 1. Buy milk"
    assert state.session.store.snapshot() == (Task("Buy milk"),)
    assert state.session.composer.draft.staged_title == ""


def test_add_with_empty_title_is_rejected(state) -> None:
    reply = registry.handle(state, "/add") or ""
    assert "empty" in reply
    assert len(state.session.store) == 0


def test_edit_rename_save_flow(state) -> None:
    registry.handle(state, "/add Buy milk")
    assert "Editing row 1" in (registry.handle(state, "/edit 1") or "")

    registry.handle(state, "/rename 1 Buy oat milk")
    listing = registry.handle(state, "/list") or ""
    assert "1. Buy milk  (editing -> 'Buy oat milk')" in listing

    assert registry.handle(state, "/save 1") == "Saved: 1. Buy oat milk"
    assert state.session.store.get(0) == Task("Buy oat milk")


def test_cancel_flow_keeps_task(state) -> None:
    registry.handle(state, "/add a")
    registry.handle(state, "/edit 1")
    registry.handle(state, "/rename 1 b")
    assert "cancelled" in (registry.handle(state, "/cancel 1") or "")
    assert state.session.store.get(0) == Task("a")


def test_rename_requires_edit_mode(state) -> None:
    registry.handle(state, "/add a")
    assert "not in edit mode" in (registry.handle(state, "/rename 1 b") or "")


def test_delete_and_bad_row_numbers(state) -> None:
    registry.handle(state, "/add a")
    registry.handle(state, "/add b")

    assert registry.handle(state, "/delete 1") == "Deleted: a"
    assert state.session.store.snapshot() == (Task("b"),)

    assert "No row 5" in (registry.handle(state, "/delete 5") or "")
    assert "No row 0" in (registry.handle(state, "/edit 0") or "")
    assert "Not a row number" in (registry.handle(state, "/save x") or "")
    assert registry.handle(state, "/delete") == "Usage: /delete <n>"


def test_status_reports_permission_and_editing_rows(state) -> None:
    registry.handle(state, "/add a")
    registry.handle(state, "/edit 1")
    assert "Media permission: not requested" in (registry.handle(state, "/status") or "")

    state.permission_gate = PermissionGate(FakePermissionRequester(False), RecordingNotifier())
    text = registry.handle(state, "/status") or ""
    assert "Editing rows: 1" in text
    assert "READ_MEDIA_IMAGES: pending" in text


def test_handler_crash_is_reported_not_raised(state, monkeypatch) -> None:
    def boom(rest):
        raise RuntimeError("bug")

    monkeypatch.setattr(state.session.composer, "change_title", boom)
    assert handle_line(state, "/title x") == "Internal error while handling a command."


@pytest.mark.asyncio
async def test_image_command_for_composer(state, selector) -> None:
    selector._results.append("img://cat")

    assert handle_line(state, "/image") == "Choosing image for new task..."
    await drain_pickers(state)

    assert state.session.composer.draft.staged_image_ref == "img://cat"
    assert handle_line(state, "/add Pet cat") == "Added: 1. Pet cat <img://cat>"


@pytest.mark.asyncio
async def test_image_command_for_row_requires_edit_mode(state, selector) -> None:
    selector._results.append("img://new")
    registry.handle(state, "/add a")

    assert "not in edit mode" in (handle_line(state, "/image 1") or "")

    handle_line(state, "/edit 1")
    assert handle_line(state, "/image 1") == "Choosing image for row 1..."
    await drain_pickers(state)
    handle_line(state, "/save 1")

    assert state.session.store.get(0) == Task("a", "img://new")
    assert selector.calls == ["image/*"]
