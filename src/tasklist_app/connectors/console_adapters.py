# src/tasklist_app/connectors/console_adapters.py

"""Terminal implementations of the core ports."""

from __future__ import annotations

import asyncio
import contextlib
import fnmatch
import logging
import mimetypes
import os
import threading
from collections.abc import Callable
from datetime import datetime
from pathlib import Path, PurePosixPath
from urllib.parse import unquote, urlparse

logger = logging.getLogger(__name__)


def ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


async def read_line_async(read_line: Callable[[str], str], prompt: str) -> str:
    """
    Run a blocking line reader (input) on a daemon thread.

    The thread is never joined: a reader still blocked in input() when the
    loop is cancelled (Ctrl+C) does not hold up shutdown.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()

    def _deliver(line: str | None, exc: Exception | None) -> None:
        if fut.done():
            return
        if exc is not None:
            fut.set_exception(exc)
        else:
            fut.set_result(line or "")

    def _worker() -> None:
        line: str | None = None
        error: Exception | None = None
        try:
            line = read_line(prompt)
        except Exception as e:
            error = e
        # The loop may already be closed if the app shut down meanwhile.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(_deliver, line, error)

    threading.Thread(target=_worker, name="console-reader", daemon=True).start()
    return await fut


class DirectoryPermissionRequester:
    """
    Desktop stand-in for the media-read permission.

    Granted when the media directory exists and the process can read it.
    """

    def __init__(self, media_dir: str | Path) -> None:
        self._media_dir = Path(media_dir)

    async def request(self, kind: str) -> bool:
        granted = self._media_dir.is_dir() and os.access(self._media_dir, os.R_OK)
        logger.debug("Permission %s -> %s (media_dir=%s)", kind, granted, self._media_dir)
        return granted


class ConsoleImageSelector:
    """
    Asks for an image path on stdin.

    Blank input is a cancellation. Relative paths are resolved against
    base_dir. Files that do not exist or do not match the MIME filter are
    reported and treated as a cancellation too.
    """

    def __init__(
        self,
        base_dir: str | Path | None = None,
        *,
        read_line: Callable[[str], str] = input,
        emit: Callable[[str], None] = print,
    ) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else None
        self._read_line = read_line
        self._emit = emit

    async def pick(self, mime_filter: str) -> str | None:
        try:
            raw = await read_line_async(self._read_line, f"Image path ({mime_filter}, empty to cancel): ")
        except EOFError:
            return None

        raw = raw.strip()
        if not raw:
            return None

        path = Path(raw).expanduser()
        if not path.is_absolute() and self._base_dir is not None:
            path = self._base_dir / path

        if not path.is_file():
            self._emit(f"[{ts_local()}] No such file: {path}")
            logger.info("Picker: missing file %s", path)
            return None

        mime, _ = mimetypes.guess_type(path.name)
        if not mime or not fnmatch.fnmatch(mime, mime_filter):
            self._emit(f"[{ts_local()}] Not an image ({mime or 'unknown type'}): {path.name}")
            logger.info("Picker: %s rejected by filter %s (mime=%s)", path, mime_filter, mime)
            return None

        return path.resolve().as_uri()


class ConsoleImageRenderer:
    """Shows an image reference as a short text tag."""

    def render(self, image_ref: str) -> str:
        parsed = urlparse(image_ref)
        name = PurePosixPath(unquote(parsed.path)).name if parsed.path else ""
        return f"[image: {name or image_ref}]"


class ConsoleNotifier:
    def __init__(self, emit: Callable[[str], None] = print) -> None:
        self._emit = emit

    def notify(self, text: str) -> None:
        self._emit(f"[{ts_local()}] [NOTICE] {text}")
