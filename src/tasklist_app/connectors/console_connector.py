# src/tasklist_app/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .console_adapters import read_line_async, ts_local

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _print_ts(text: str) -> None:
    print(f"[{ts_local()}] {text}")


async def drain_pickers(state: AppState) -> None:
    """
    Wait for image pickers started by the last command.

    A terminal has one stdin, so the picker prompt behaves like a modal
    dialog: the next command prompt appears only after it resolves.
    """
    while state.pending_pickers:
        await asyncio.gather(*list(state.pending_pickers), return_exceptions=True)


def handle_line(state: AppState, line: str) -> str | None:
    """
    One console input line -> reply text.

    Slash commands go through the registry; plain text becomes the new
    task title (like typing into the form field).
    """
    if not line.startswith("/"):
        state.session.composer.change_title(line)
        return None

    try:
        return command_registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."


async def run_console_loop(state: AppState, *, read_line: Callable[[str], str] = input) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task title, then /add. Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = (await read_line_async(read_line, ">>> ")).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except asyncio.CancelledError:
            # Ctrl+C under asyncio.run arrives as cancellation of the main task.
            logger.info("Console cancelled, exiting.")
            print()
            raise

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            _print_ts(reply)

        await drain_pickers(state)

    logger.info("Console connector finished.")
