# src/tasklist_app/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, fires the launch-time permission
request in the background, then runs the console loop.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def run_app(state: AppState, *, read_line: Callable[[str], str] = input) -> None:
    """
    Run the console until it exits or is cancelled.

    On the way out, background work (permission request, open pickers) is
    cancelled and the session is closed.
    """
    permission_task = state.permission_gate.launch() if state.permission_gate is not None else None
    try:
        await run_console_loop(state, read_line=read_line)
    finally:
        background = list(state.pending_pickers)
        if permission_task is not None:
            background.append(permission_task)
        for task in background:
            task.cancel()
        for task in background:
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task
        state.session.close()


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        asyncio.run(run_app(state))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
