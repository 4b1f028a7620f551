from .config import FakeTypingSettings, SpeedConfig, select_speed, tcfg
from .delays import next_delay_ms
from .session import SessionState, TypingSession
from .scheduler import TypingScheduler
from .telemetry import KeystrokeRecorder
from .analysis import summarize_typing, print_typing_summary
from .render import save_typing_timeline_jpeg

__all__ = [
    "FakeTypingSettings",
    "SpeedConfig",
    "select_speed",
    "tcfg",
    "next_delay_ms",
    "SessionState",
    "TypingSession",
    "TypingScheduler",
    "KeystrokeRecorder",
    "summarize_typing",
    "print_typing_summary",
    "save_typing_timeline_jpeg",
]
