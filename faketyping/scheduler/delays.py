from __future__ import annotations
import random
from typing import Optional

from ..utils import clamp as _clamp
from .config import SpeedConfig, tcfg


def jitter_variation(base_ms: int, percent: int) -> int:
    """Largest +/- offset (ms) applied around `base_ms`."""
    return (base_ms * percent) // 100


def next_delay_ms(speed: SpeedConfig, rng: Optional[random.Random] = None) -> int:
    """
    Delay (ms) to wait after emitting a character that has a successor.

    Never called after the last character: the scheduler completes right away
    there, so the final character is never jittered. Jittered delays are kept
    within [1, max_delay_ms].
    """
    base = max(tcfg.MIN_TICK_MS, speed.base_delay_ms)
    if not speed.jitter_enabled:
        return base

    variation = jitter_variation(base, speed.jitter_percent)
    rnd = rng if rng is not None else random
    delay = base + rnd.randint(-variation, variation)
    return _clamp(delay, tcfg.MIN_TICK_MS, speed.max_delay_ms)
