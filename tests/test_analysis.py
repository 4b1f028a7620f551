"""Tests for typing telemetry, summary and timeline rendering."""

import asyncio

from PIL import Image

from faketyping.scheduler.analysis import summarize_typing
from faketyping.scheduler.config import SpeedConfig
from faketyping.scheduler.render import save_typing_timeline_jpeg
from faketyping.scheduler.scheduler import TypingScheduler
from faketyping.scheduler.telemetry import KeystrokeRecorder
from faketyping.sinks.buffer import BufferSink

SPEED = SpeedConfig(
    base_delay_ms=2, min_delay_ms=1, max_delay_ms=4, jitter_enabled=True, jitter_percent=50
)
TEXT = "typing telemetry"


def _recorded() -> KeystrokeRecorder:
    async def main():
        scheduler = TypingScheduler(seed=5)
        await scheduler.start(TEXT, SPEED, BufferSink())
        await asyncio.wait_for(scheduler.join(), 5.0)
        return scheduler.recorder

    return asyncio.run(main())


def test_recorder_collects_chars_and_delays() -> None:
    """Every emitted char and every planned delay is recorded."""
    rec = _recorded()
    assert rec.chars() == TEXT
    assert len(rec.planned_delays()) == len(TEXT) - 1
    assert rec.events[0].kind == "start"
    assert rec.events[-1].kind == "complete"
    assert rec.seed == 5


def test_summary_reports_session() -> None:
    """The summary includes outcome, character count and seed."""
    summary = summarize_typing(_recorded())
    assert summary.startswith("Typing Summary:")
    assert "Outcome: completed" in summary
    assert f"Chars emitted: {len(TEXT)}" in summary
    assert "Random seed: 5" in summary


def test_summary_without_data() -> None:
    """An empty recorder has nothing to summarize."""
    assert summarize_typing(KeystrokeRecorder()) == "No typing data"


def test_timeline_jpeg_written(tmp_path) -> None:
    """The timeline chart is saved as a JPEG of the requested size."""
    out = tmp_path / "timeline.jpg"
    path = asyncio.run(save_typing_timeline_jpeg(_recorded(), str(out), width=320, height=120))

    assert path == str(out)
    with Image.open(out) as img:
        assert img.format == "JPEG"
        assert img.size == (320, 120)


def test_timeline_jpeg_without_delays(tmp_path) -> None:
    """An empty recorder still produces an annotated image."""
    out = tmp_path / "empty.jpg"
    asyncio.run(save_typing_timeline_jpeg(KeystrokeRecorder(), str(out)))
    with Image.open(out) as img:
        assert img.format == "JPEG"
