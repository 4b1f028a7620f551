from __future__ import annotations
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional
import asyncio
import logging

NotificationCallback = Optional[Callable[["Notification"], Awaitable[None]]]
_NOTIFICATION_CALLBACK: NotificationCallback = None

_LEVELS = {"info": logging.INFO, "warning": logging.WARNING, "error": logging.ERROR}


@dataclass(frozen=True)
class Notification:
    title: str
    content: str
    level: str = "info"  # "info"|"warning"|"error"


def set_notification_callback(cb: NotificationCallback) -> None:
    """Register an async callback invoked for every notification."""
    global _NOTIFICATION_CALLBACK
    _NOTIFICATION_CALLBACK = cb
    logging.getLogger(__name__).info(
        "Notification callback %s", "registered" if cb else "cleared"
    )


async def notify(title: str, content: str, level: str = "info") -> Notification:
    """Log a user-facing notice and hand it to the registered callback."""
    note = Notification(title, content, level)
    logging.getLogger(__name__).log(
        _LEVELS.get(level, logging.INFO), "%s: %s", title, content
    )

    cb = _NOTIFICATION_CALLBACK
    if cb is not None:
        try:
            asyncio.create_task(cb(note))
        except Exception:
            logging.getLogger(__name__).debug(
                "Failed to dispatch notification callback", exc_info=True
            )
    return note
