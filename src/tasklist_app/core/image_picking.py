# src/tasklist_app/core/image_picking.py

"""
Image picker flow.

The picker is fire-and-forget: the caller gets an asyncio.Task back and keeps
handling events. When the user picks something the result is written into the
requesting controller's draft, and only there.
"""

from __future__ import annotations

import asyncio
import logging

from .ports import ImageSelector, ImageTarget

logger = logging.getLogger(__name__)

DEFAULT_MIME_FILTER = "image/*"


async def pick_into(selector: ImageSelector, target: ImageTarget, mime_filter: str = DEFAULT_MIME_FILTER) -> str | None:
    """
    Await the selector and apply the result to target.

    Returns the reference that was applied, or None when the user cancelled or
    the target stopped accepting images while the picker was open.
    """
    image_ref = await selector.pick(mime_filter)
    if image_ref is None:
        logger.debug("Image picker dismissed without a choice.")
        return None

    if not target.accepts_image():
        logger.info("Dropping picked image: target is no longer editing.")
        return None

    target.select_image(image_ref)
    return image_ref


def launch_image_picker(
    selector: ImageSelector,
    target: ImageTarget,
    mime_filter: str = DEFAULT_MIME_FILTER,
) -> asyncio.Task[str | None]:
    """Start pick_into() on the running loop and return immediately."""
    task = asyncio.get_running_loop().create_task(pick_into(selector, target, mime_filter))
    task.add_done_callback(_log_picker_failure)
    return task


def _log_picker_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Image picker failed", exc_info=exc)
