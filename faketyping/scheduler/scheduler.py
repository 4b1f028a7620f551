from __future__ import annotations
import asyncio
import inspect
import logging
import random
from typing import Any, Awaitable, Callable, Optional, Union

from ..errors import EmptySourceError
from ..sinks.base import Sink
from .config import SpeedConfig
from .delays import next_delay_ms
from .session import SessionState, TypingSession
from .telemetry import KeystrokeRecorder

logger = logging.getLogger(__name__)

# Route debug prints in this module through logging
print = logger.debug

CompletionCallback = Optional[Callable[[], Union[None, Awaitable[Any]]]]


class TypingScheduler:
    """
    Replays a text into a sink one character per event-loop timer tick.

    Only one tick is ever pending. Each scheduled tick carries a generation
    token; pause/abort/reschedule bump the generation so a tick that already
    fired becomes a no-op once it gets the lock.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        recorder: Optional[KeystrokeRecorder] = None,
        seed: Optional[int] = None,
    ):
        self.rng = rng if rng is not None else random.Random(seed)
        self.seed = seed
        self.recorder = recorder if recorder is not None else KeystrokeRecorder()
        self.session: Optional[TypingSession] = None
        self._sink: Optional[Sink] = None
        self._on_complete: CompletionCallback = None
        self._handle: Optional[asyncio.TimerHandle] = None
        self._task: Optional[asyncio.Future] = None
        self._generation = 0
        self._lock = asyncio.Lock()
        self._finished: Optional[asyncio.Event] = None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def start(
        self,
        text: str,
        speed: SpeedConfig,
        sink: Sink,
        on_complete: CompletionCallback = None,
    ) -> TypingSession:
        """Clear `sink` and begin replaying `text` into it."""
        if not text:
            logger.warning("Nothing to type: source text is empty")
            raise EmptySourceError("source text is empty")
        speed.validate()

        previous = self.session
        if previous is not None and not previous.finished:
            self._cancel_pending()
            previous.state = SessionState.ABORTED
            self._set_finished()
            logger.info(
                "Dropped unfinished session at %d/%d chars",
                previous.cursor,
                len(previous.text),
            )

        session = TypingSession(text=text, speed=speed)
        self.session = session
        self._sink = sink
        self._on_complete = on_complete
        self._finished = asyncio.Event()
        self.recorder.reset(seed=self.seed)

        try:
            async with self._lock:
                await sink.clear()
        except Exception:
            session.state = SessionState.ABORTED
            self._set_finished()
            raise

        self.recorder.log("start", "", 0.0)
        print(
            f"Typing {len(text)} chars at {speed.base_delay_ms} ms/char "
            f"(jitter {'on' if speed.jitter_enabled else 'off'})"
        )
        self._schedule(session, 0)
        return session

    def pause(self) -> bool:
        session = self.session
        if session is None or session.state is not SessionState.RUNNING:
            return False
        session.state = SessionState.PAUSED
        self._cancel_pending()
        self.recorder.log("paused", "", 0.0)
        logger.debug("Paused at %d/%d", session.cursor, len(session.text))
        return True

    def resume(self) -> bool:
        session = self.session
        if session is None or session.state is not SessionState.PAUSED:
            return False
        session.state = SessionState.RUNNING
        self.recorder.log("resumed", "", 0.0)
        logger.debug("Resumed at %d/%d", session.cursor, len(session.text))
        self._schedule(session, 0)
        return True

    async def abort(self, restore_sink: Optional[Sink] = None) -> bool:
        """Stop typing and put the original text back into the destination."""
        session = self.session
        if session is None or session.finished:
            return False
        session.state = SessionState.ABORTED
        self._cancel_pending()
        self.recorder.log("abort", "", 0.0)

        target = restore_sink if restore_sink is not None else self._sink
        try:
            async with self._lock:
                await target.replace_all(session.text)
        except Exception:
            logger.error("Restoring original text failed", exc_info=True)
            return False
        finally:
            self._set_finished()
        logger.info(
            "Aborted at %d/%d chars; original text restored",
            session.cursor,
            len(session.text),
        )
        return True

    async def join(self) -> Optional[TypingSession]:
        """Wait until the current session is completed or aborted."""
        session, finished = self.session, self._finished
        if finished is not None:
            await finished.wait()
        return session

    # ------------------------------------------------------------------
    # Timer plumbing
    # ------------------------------------------------------------------

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self, session: TypingSession, delay_ms: int) -> None:
        self._cancel_pending()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(
            delay_ms / 1000.0, self._fire, session, self._generation
        )

    def _fire(self, session: TypingSession, generation: int) -> None:
        self._handle = None
        self._task = asyncio.ensure_future(self._tick(session, generation))

    def _set_finished(self) -> None:
        if self._finished is not None:
            self._finished.set()

    def _is_current(self, session: TypingSession, generation: int) -> bool:
        return (
            session is self.session
            and session.state is SessionState.RUNNING
            and generation == self._generation
        )

    async def _tick(self, session: TypingSession, generation: int) -> None:
        completed = False
        finished = self._finished
        async with self._lock:
            if not self._is_current(session, generation):
                return

            if session.exhausted:
                session.state = SessionState.COMPLETED
                self.recorder.log("complete", "", 0.0)
                completed = True
            else:
                await self._apply(session, generation)

        if completed:
            logger.info("Typed %d chars", len(session.text))
            await self._notify_complete()
            # on_complete may already have started another session
            if finished is not None:
                finished.set()

    async def _apply(self, session: TypingSession, generation: int) -> None:
        # start() may swap self._sink while this edit is awaiting
        sink = self._sink
        offset = session.cursor
        ch = session.text[offset]
        try:
            await sink.insert_at(offset, ch)
        except Exception:
            logger.warning(
                "Inserting %r at offset %d failed; pausing", ch, offset, exc_info=True
            )
            self.recorder.failures += 1
            if session.state is SessionState.RUNNING:
                session.state = SessionState.PAUSED
                self.recorder.log("paused", "<sink-error>", 0.0)
            return

        session.cursor = offset + 1
        self.recorder.log("char", ch, 0.0)

        try:
            await sink.move_cursor_to(session.cursor)
        except Exception:
            logger.warning(
                "Moving caret to %d failed", session.cursor, exc_info=True
            )

        if session.exhausted:
            # nothing left to pace; complete on the next loop turn
            delay = 0
        else:
            delay = next_delay_ms(session.speed, self.rng)
            self.recorder.log("pause", "<char-delay>", delay / 1000.0)

        # a pause or abort issued while the sink was busy wins
        if self._is_current(session, generation):
            self._schedule(session, delay)

    async def _notify_complete(self) -> None:
        cb = self._on_complete
        if cb is None:
            return
        try:
            result = cb()
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.warning("Completion callback failed", exc_info=True)
