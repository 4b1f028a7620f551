from __future__ import annotations
import logging
from typing import Optional

from .errors import EmptySourceError
from .notifications import notify
from .scheduler import (
    FakeTypingSettings,
    SessionState,
    SpeedConfig,
    TypingScheduler,
    TypingSession,
    select_speed,
    summarize_typing,
)
from .sinks import PageSink, Sink
from .utils import HiResTimer

# Route debug prints in this module through logging
print = logging.getLogger(__name__).debug

TITLE = "FakeTyping"


class FakeTyping:
    """
    Replays a document into a sink and exposes the pause/continue and
    restore controls. Each instance owns its own scheduler and session.
    """

    def __init__(
        self, settings: Optional[FakeTypingSettings] = None, *, seed: Optional[int] = None
    ):
        self.settings = settings if settings is not None else FakeTypingSettings()
        self.scheduler = TypingScheduler(seed=seed)

    @property
    def session(self) -> Optional[TypingSession]:
        return self.scheduler.session

    async def run(
        self, sink: Sink, text: str, speed: Optional[int] = None
    ) -> TypingSession:
        """Clear `sink` and start typing `text` at `speed` ms/char (or the default)."""
        self.settings.validate()
        base = select_speed(self.settings, speed)
        cfg = SpeedConfig.from_settings(self.settings, base)
        try:
            return await self.scheduler.start(
                text, cfg, sink, on_complete=self._on_complete
            )
        except EmptySourceError:
            await notify(
                f"{TITLE} warning",
                "The document is empty; nothing to type.",
                level="warning",
            )
            raise

    def toggle_pause(self) -> Optional[SessionState]:
        session = self.session
        if session is None:
            return None
        if session.state is SessionState.RUNNING:
            self.scheduler.pause()
        elif session.state is SessionState.PAUSED:
            self.scheduler.resume()
        return session.state

    async def restore(self, sink: Optional[Sink] = None) -> bool:
        restored = await self.scheduler.abort(sink)
        if restored:
            await notify(
                f"{TITLE} restored", "The original content has been restored."
            )
        return restored

    async def wait(self) -> Optional[TypingSession]:
        return await self.scheduler.join()

    async def _on_complete(self) -> None:
        await notify(
            f"{TITLE} finished", "The content has been re-typed successfully."
        )


async def fake_type_in_element(
    page,
    text: Optional[str] = None,
    *,
    speed: Optional[int] = None,
    settings: Optional[FakeTypingSettings] = None,
    seed: Optional[int] = None,
    log_summary: bool = False,
) -> TypingSession:
    """
    Re-type the focused field of `page` like a live typist.
    Use your mouse to focus first.

    - If `text` is omitted, the field's current value is captured and replayed.
    - Returns once the session is completed (or aborted from elsewhere).
    """
    sink = PageSink(page)
    if text is None:
        text = await sink.read_text()

    typer = FakeTyping(settings, seed=seed)
    with HiResTimer():
        await typer.run(sink, text, speed)
        session = await typer.wait()

    if log_summary:
        print(summarize_typing(typer.scheduler.recorder))
    return session
