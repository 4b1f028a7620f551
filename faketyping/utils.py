from __future__ import annotations
import ctypes
import platform


class HiResTimer:
    """Context manager to request 1ms Windows system timer resolution.

    On Windows this reduces sleep jitter/latency for tight per-character
    timers. On other platforms, it is a no-op.
    """

    def __enter__(self):
        if ctypes and platform.system() == "Windows":
            ctypes.windll.winmm.timeBeginPeriod(1)
        return self

    def __exit__(self, exc_type, exc, tb):
        if ctypes and platform.system() == "Windows":
            ctypes.windll.winmm.timeEndPeriod(1)


def clamp(value: int, min_val: int, max_val: int) -> int:
    """Restrict value to [min_val, max_val]."""
    return max(min_val, min(max_val, value))
