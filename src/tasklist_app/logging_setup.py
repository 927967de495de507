# src/tasklist_app/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per-mutation debug chatter; kept in the log file, off the prompt.
_QUIET_ON_CONSOLE = ("tasklist_app.core.store", "tasklist_app.core.session")


class _ConsoleNoiseFilter(logging.Filter):
    """App records pass (store/session only from WARNING); anything else only from ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name in _QUIET_ON_CONSOLE:
            return record.levelno >= logging.WARNING
        if record.name.startswith("tasklist_app."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(*, log_dir: str | Path = ".local/tasklist", console_level: int = logging.INFO) -> Path:
    """
    Send logs to stderr (filtered, console_level) and to <log_dir>/tasklist.log (DEBUG).

    Replaces existing root handlers, so calling it again does not duplicate output.
    Returns the log file path.
    """
    log_file = Path(log_dir) / "tasklist.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
