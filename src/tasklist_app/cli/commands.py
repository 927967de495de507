# src/tasklist_app/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.controllers import TaskItemController
from ..core.errors import IndexOutOfRange
from ..core.image_picking import launch_image_picker
from ..core.models import Task
from ..core.state import AppState

# Handlers get the raw text after the command name (titles keep their spacing).
CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        body = line[1:].strip()
        if not body:
            return "Empty command. Use /help to list available commands."

        name, _, rest = body.partition(" ")
        name = name.lower()
        rest = rest.lstrip()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


class _UsageError(ValueError):
    pass


def _parse_row(state: AppState, raw: str) -> int:
    """1-based row number typed by the user -> 0-based index."""
    try:
        number = int(raw)
    except ValueError:
        raise _UsageError(f"Not a row number: {raw!r}") from None
    total = len(state.session.store)
    if not 1 <= number <= total:
        raise _UsageError(f"No row {number} (list has {total}).")
    return number - 1


def _row_controller(state: AppState, raw: str) -> TaskItemController:
    return state.session.item(_parse_row(state, raw))


def format_task(state: AppState, number: int, task: Task, controller: TaskItemController | None = None) -> str:
    line = f"{number}. {task.title}"
    if task.image_ref:
        line += " " + state.image_renderer.render(task.image_ref)
    if controller is not None and controller.draft is not None:
        draft = controller.draft
        staged = f"'{draft.staged_title}'"
        if draft.staged_image_ref:
            staged += " " + state.image_renderer.render(draft.staged_image_ref)
        line += f"  (editing -> {staged})"
    return line


def cmd_help(state: AppState, rest: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, rest: str) -> str:
    gate = state.permission_gate
    if gate is None:
        perm = "not requested"
    elif gate.granted is None:
        perm = f"{gate.kind}: pending"
    else:
        perm = f"{gate.kind}: {'granted' if gate.granted else 'denied'}"
    editing = [i + 1 for i in state.session.editing_indices()]
    return (
        "Status:\n"
        f"  Tasks: {len(state.session.store)}\n"
        f"  Editing rows: {', '.join(map(str, editing)) or 'none'}\n"
        f"  Media permission: {perm}"
    )


def cmd_list(state: AppState, rest: str) -> str:
    tasks = state.session.store.snapshot()
    if not tasks:
        return "No tasks yet. Type a title and use /add."
    items = state.session.items()
    lines = ["Tasks:"]
    for i, task in enumerate(tasks):
        lines.append("  " + format_task(state, i + 1, task, items[i]))
    return "\n".join(lines)


def cmd_draft(state: AppState, rest: str) -> str:
    draft = state.session.composer.draft
    image = state.image_renderer.render(draft.staged_image_ref) if draft.staged_image_ref else "no image"
    return f"New task: '{draft.staged_title}' ({image})"


def cmd_title(state: AppState, rest: str) -> str:
    state.session.composer.change_title(rest)
    return cmd_draft(state, "")


def cmd_add(state: AppState, rest: str) -> str:
    composer = state.session.composer
    if rest:
        composer.change_title(rest)
    if not composer.submit():
        return "Task title is empty. Type a title first."
    tasks = state.session.store.snapshot()
    return "Added: " + format_task(state, len(tasks), tasks[-1])


def cmd_image(state: AppState, rest: str) -> str:
    """
    /image      -> pick an image for the new task
    /image <n>  -> pick an image for row n (must be in edit mode)
    """
    if not rest:
        target = state.session.composer
        label = "new task"
    else:
        target = _row_controller(state, rest.split()[0])
        if not target.is_editing:
            return f"Row {target.index + 1} is not in edit mode. Use /edit {target.index + 1} first."
        label = f"row {target.index + 1}"
    state.track_picker(launch_image_picker(state.image_selector, target, state.mime_filter))
    logger.debug("Image picker launched for %s", label)
    return f"Choosing image for {label}..."


def cmd_edit(state: AppState, rest: str) -> str:
    if not rest:
        return "Usage: /edit <n>"
    c = _row_controller(state, rest.split()[0])
    c.enter_edit()
    return f"Editing row {c.index + 1}. Use /rename, /image {c.index + 1}, then /save {c.index + 1} or /cancel {c.index + 1}."


def cmd_rename(state: AppState, rest: str) -> str:
    parts = rest.split(maxsplit=1)
    if not parts:
        return "Usage: /rename <n> <new title>"
    c = _row_controller(state, parts[0])
    if not c.is_editing:
        return f"Row {c.index + 1} is not in edit mode. Use /edit {c.index + 1} first."
    c.change_title(parts[1] if len(parts) > 1 else "")
    return f"Row {c.index + 1} staged title: '{c.draft.staged_title}'"


def cmd_save(state: AppState, rest: str) -> str:
    if not rest:
        return "Usage: /save <n>"
    c = _row_controller(state, rest.split()[0])
    if not c.is_editing:
        return f"Row {c.index + 1} is not in edit mode."
    c.save()
    return "Saved: " + format_task(state, c.index + 1, state.session.store.get(c.index))


def cmd_cancel(state: AppState, rest: str) -> str:
    if not rest:
        return "Usage: /cancel <n>"
    c = _row_controller(state, rest.split()[0])
    if not c.is_editing:
        return f"Row {c.index + 1} is not in edit mode."
    c.cancel()
    return f"Edit of row {c.index + 1} cancelled."


def cmd_delete(state: AppState, rest: str) -> str:
    if not rest:
        return "Usage: /delete <n>"
    index = _parse_row(state, rest.split()[0])
    task = state.session.store.get(index)
    state.session.delete(index)
    return f"Deleted: {task.title}"


def _guard(handler: CommandHandler) -> CommandHandler:
    """Turn user-level mistakes (bad row number) into a reply instead of an error."""

    def _wrapped(state: AppState, rest: str) -> str:
        try:
            return handler(state, rest)
        except (_UsageError, IndexOutOfRange) as e:
            return str(e)

    _wrapped.__name__ = handler.__name__
    _wrapped.__doc__ = handler.__doc__
    return _wrapped


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task count, editing rows and permission state.")
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("draft", cmd_draft, help_text="Show the new-task form.")
registry.register("title", cmd_title, help_text="Set the new task title: /title <text>.")
registry.register("add", cmd_add, help_text="Add the new task: /add [title].")
registry.register("image", _guard(cmd_image), help_text="Pick an image: /image (new task) | /image <n> (editing row).")
registry.register("edit", _guard(cmd_edit), help_text="Start editing a row: /edit <n>.")
registry.register("rename", _guard(cmd_rename), help_text="Stage a new title: /rename <n> <text>.")
registry.register("save", _guard(cmd_save), help_text="Commit a row edit: /save <n>.")
registry.register("cancel", _guard(cmd_cancel), help_text="Discard a row edit: /cancel <n>.")
registry.register("delete", _guard(cmd_delete), help_text="Delete a row: /delete <n>.", aliases=["rm"])
