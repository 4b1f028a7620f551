from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..errors import InvalidConfigError
from ..utils import clamp as _clamp


class tcfg:
    # Per-character delay in milliseconds (smaller = faster)
    TYPING_SPEED_MS = 50
    MIN_TYPING_SPEED_MS = 1
    MAX_TYPING_SPEED_MS = 200

    # Random variation of the per-character delay
    RANDOM_SPEED_VARIATION = True
    RANDOM_VARIATION_PERCENT = 30  # +/- share of the base delay

    # Hard floor for any scheduled tick
    MIN_TICK_MS = 1


def _check_delays(base: int, lo: int, hi: int, percent: int) -> None:
    if base < 1 or lo < 1 or hi < 1:
        raise InvalidConfigError(
            f"typing delays must be >= 1 ms (base={base}, min={lo}, max={hi})"
        )
    if not 0 <= percent <= 100:
        raise InvalidConfigError(
            f"random variation must be within 0..100 percent, got {percent}"
        )
    if lo > hi:
        raise InvalidConfigError(
            f"minimum typing delay {lo} ms exceeds maximum {hi} ms"
        )
    if not lo <= base <= hi:
        raise InvalidConfigError(
            f"typing delay {base} ms must lie within [{lo}, {hi}] ms"
        )


@dataclass
class FakeTypingSettings:
    """User-editable typing preferences."""

    typing_speed: int = tcfg.TYPING_SPEED_MS
    min_typing_speed: int = tcfg.MIN_TYPING_SPEED_MS
    max_typing_speed: int = tcfg.MAX_TYPING_SPEED_MS
    random_speed_variation: bool = tcfg.RANDOM_SPEED_VARIATION
    random_variation_percent: int = tcfg.RANDOM_VARIATION_PERCENT

    def validate(self) -> None:
        _check_delays(
            self.typing_speed,
            self.min_typing_speed,
            self.max_typing_speed,
            self.random_variation_percent,
        )


@dataclass(frozen=True)
class SpeedConfig:
    """Read-only speed snapshot handed to the scheduler at start time."""

    base_delay_ms: int = tcfg.TYPING_SPEED_MS
    min_delay_ms: int = tcfg.MIN_TYPING_SPEED_MS
    max_delay_ms: int = tcfg.MAX_TYPING_SPEED_MS
    jitter_enabled: bool = tcfg.RANDOM_SPEED_VARIATION
    jitter_percent: int = tcfg.RANDOM_VARIATION_PERCENT

    def validate(self) -> None:
        _check_delays(
            self.base_delay_ms,
            self.min_delay_ms,
            self.max_delay_ms,
            self.jitter_percent,
        )

    @classmethod
    def from_settings(
        cls, settings: FakeTypingSettings, base_delay_ms: Optional[int] = None
    ) -> "SpeedConfig":
        return cls(
            base_delay_ms=(
                settings.typing_speed if base_delay_ms is None else base_delay_ms
            ),
            min_delay_ms=settings.min_typing_speed,
            max_delay_ms=settings.max_typing_speed,
            jitter_enabled=settings.random_speed_variation,
            jitter_percent=settings.random_variation_percent,
        )


def select_speed(settings: FakeTypingSettings, requested: Optional[int] = None) -> int:
    """
    Resolve the per-character delay picked by the user.

    - `requested=None` means the choice was cancelled: use the configured default.
    - Any other value is clamped into [min_typing_speed, max_typing_speed].
    """
    if requested is None:
        return settings.typing_speed
    return int(
        _clamp(int(requested), settings.min_typing_speed, settings.max_typing_speed)
    )
