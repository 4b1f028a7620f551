from __future__ import annotations
from .controller import FakeTyping, fake_type_in_element
from .errors import EmptySourceError, FakeTypingError, InvalidConfigError
from .notifications import Notification, notify, set_notification_callback
from .scheduler import (
    FakeTypingSettings,
    KeystrokeRecorder,
    SessionState,
    SpeedConfig,
    TypingScheduler,
    TypingSession,
    save_typing_timeline_jpeg,
    select_speed,
    summarize_typing,
)
from .sinks import BufferSink, PageSink, Sink

__all__ = [
    "FakeTyping",
    "fake_type_in_element",
    "FakeTypingError",
    "EmptySourceError",
    "InvalidConfigError",
    "Notification",
    "notify",
    "set_notification_callback",
    "FakeTypingSettings",
    "KeystrokeRecorder",
    "SessionState",
    "SpeedConfig",
    "TypingScheduler",
    "TypingSession",
    "save_typing_timeline_jpeg",
    "select_speed",
    "summarize_typing",
    "BufferSink",
    "PageSink",
    "Sink",
]
