from __future__ import annotations
import asyncio
import json
import logging
from typing import Any, Awaitable, Callable

from zendriver import cdp

# Timeout for CDP operations (keep input sends from blocking the loop)
CDP_SEND_TIMEOUT_S: float = 0.35

_FOCUSED = "document.activeElement"


async def _send_cdp_event(
    page, fn: Callable[[], Awaitable[Any]], *, label: str
) -> None:
    """Send a CDP event with a short timeout; fall back to background dispatch."""
    # Create the task once to ensure it runs to completion regardless of timeout
    task = asyncio.create_task(fn())
    try:
        await asyncio.wait_for(asyncio.shield(task), timeout=CDP_SEND_TIMEOUT_S)
    except asyncio.TimeoutError:
        logging.getLogger(__name__).warning(
            "CDP %s stalled >%.0f ms; continuing in background",
            label,
            CDP_SEND_TIMEOUT_S * 1000.0,
        )
    except Exception:
        logging.getLogger(__name__).warning(
            "CDP %s failed (skipped this event)", label, exc_info=True
        )


async def _evaluate(page, expression: str, *, label: str) -> None:
    await _send_cdp_event(
        page,
        lambda: page.send(cdp.runtime.evaluate(expression=expression)),
        label=label,
    )


def _on_focused(body: str) -> str:
    # `el` is the focused <textarea>/<input>
    return f"(el => {{ if (!el) return; {body} }})({_FOCUSED})"


_NOTIFY_INPUT = "el.dispatchEvent(new Event('input', {bubbles: true}));"


class PageSink:
    """
    Types into the focused text field of a zendriver page.
    Use your mouse to focus first.
    """

    def __init__(self, page):
        self.page = page
        # what we believe the field holds, to map code points to UTF-16 units
        self.mirror = ""

    def _js_offset(self, offset: int) -> int:
        """Convert a code-point offset into the UTF-16 offset the DOM expects."""
        offset = int(offset)
        head = self.mirror[:offset]
        units = len(head.encode("utf-16-le")) // 2
        # past the known text, assume BMP characters
        return units + max(0, offset - len(head))

    async def read_text(self) -> str:
        """Current value of the focused field ('' when nothing is focused)."""
        remote, exc = await self.page.send(
            cdp.runtime.evaluate(
                expression=f"({_FOCUSED} && {_FOCUSED}.value) || ''",
                return_by_value=True,
            )
        )
        if exc is not None or remote is None or remote.value is None:
            return ""
        self.mirror = str(remote.value)
        return self.mirror

    async def clear(self) -> None:
        await _evaluate(
            self.page,
            _on_focused("el.value = ''; el.setSelectionRange(0, 0); " + _NOTIFY_INPUT),
            label="clear",
        )
        self.mirror = ""

    async def insert_at(self, offset: int, char: str) -> None:
        await self.move_cursor_to(offset)
        await _send_cdp_event(
            self.page,
            lambda: self.page.send(cdp.input_.insert_text(text=char)),
            label="insertText",
        )
        self.mirror = self.mirror[:offset] + char + self.mirror[offset:]

    async def move_cursor_to(self, offset: int) -> None:
        units = self._js_offset(offset)
        await _evaluate(
            self.page,
            _on_focused(f"el.setSelectionRange({units}, {units});"),
            label="setSelection",
        )

    async def replace_all(self, text: str) -> None:
        await _evaluate(
            self.page,
            _on_focused(
                f"el.value = {json.dumps(text)}; "
                "el.setSelectionRange(el.value.length, el.value.length); "
                + _NOTIFY_INPUT
            ),
            label="replaceAll",
        )
        self.mirror = text
