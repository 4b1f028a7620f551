"""Tests for settings validation and speed selection."""

import pytest

from faketyping.errors import InvalidConfigError
from faketyping.scheduler.config import (
    FakeTypingSettings,
    SpeedConfig,
    select_speed,
    tcfg,
)


def test_default_settings_are_valid() -> None:
    """The shipped defaults pass validation."""
    settings = FakeTypingSettings()
    settings.validate()
    assert settings.typing_speed == tcfg.TYPING_SPEED_MS
    assert settings.min_typing_speed == tcfg.MIN_TYPING_SPEED_MS
    assert settings.max_typing_speed == tcfg.MAX_TYPING_SPEED_MS
    assert settings.random_speed_variation is True
    assert settings.random_variation_percent == tcfg.RANDOM_VARIATION_PERCENT


@pytest.mark.parametrize(
    "kwargs",
    [
        {"typing_speed": 0},
        {"min_typing_speed": 0},
        {"max_typing_speed": 0},
        {"random_variation_percent": -1},
        {"random_variation_percent": 101},
        {"min_typing_speed": 100, "max_typing_speed": 50, "typing_speed": 60},
        {"typing_speed": 300},
        {"typing_speed": 5, "min_typing_speed": 10},
    ],
)
def test_invalid_settings_rejected(kwargs) -> None:
    """Each inconsistent combination raises InvalidConfigError."""
    with pytest.raises(InvalidConfigError):
        FakeTypingSettings(**kwargs).validate()


def test_speed_config_validate() -> None:
    """SpeedConfig applies the same rules as the settings."""
    SpeedConfig(base_delay_ms=10, min_delay_ms=1, max_delay_ms=10).validate()
    with pytest.raises(InvalidConfigError):
        SpeedConfig(base_delay_ms=11, min_delay_ms=1, max_delay_ms=10).validate()


def test_speed_config_from_settings() -> None:
    """A snapshot copies the settings and can override the base delay."""
    settings = FakeTypingSettings(
        typing_speed=40,
        min_typing_speed=5,
        max_typing_speed=90,
        random_speed_variation=False,
        random_variation_percent=10,
    )
    cfg = SpeedConfig.from_settings(settings)
    assert cfg == SpeedConfig(40, 5, 90, False, 10)
    assert SpeedConfig.from_settings(settings, 70).base_delay_ms == 70


def test_select_speed() -> None:
    """Cancelled choice falls back to the default; others are clamped."""
    settings = FakeTypingSettings(typing_speed=50, min_typing_speed=10, max_typing_speed=100)
    assert select_speed(settings) == 50
    assert select_speed(settings, 75) == 75
    assert select_speed(settings, 1) == 10
    assert select_speed(settings, 500) == 100
