from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .config import SpeedConfig


class SessionState(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"
    ABORTED = "aborted"


_TERMINAL = (SessionState.COMPLETED, SessionState.ABORTED)


@dataclass
class TypingSession:
    """One end-to-end replay of a captured text."""

    text: str
    speed: SpeedConfig
    cursor: int = 0  # characters already emitted
    state: SessionState = SessionState.RUNNING

    @property
    def finished(self) -> bool:
        return self.state in _TERMINAL

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.text)

    @property
    def remaining(self) -> int:
        return len(self.text) - self.cursor

    @property
    def progress(self) -> float:
        if not self.text:
            return 1.0
        return self.cursor / len(self.text)
