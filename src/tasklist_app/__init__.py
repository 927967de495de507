"""In-memory task list with staged row edits and an optional image per task."""

__version__ = "0.1.0"
