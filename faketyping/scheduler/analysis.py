from __future__ import annotations
import logging
from typing import List

from .telemetry import KeystrokeRecorder

# Route debug prints in this module through logging
print = logging.getLogger(__name__).debug


def _wpm(cps: float) -> float:
    return (cps * 60.0) / 5.0


def summarize_typing(rec: KeystrokeRecorder) -> str:
    """
    Reports:
      - Total duration (first to last recorded event)
      - Characters emitted
      - Planned per-char delay (min/avg/max, ms)
      - Effective chars/s and WPM (includes pauses)
      - Pause/resume count and sink failures
    """
    evs = rec.events
    if len(evs) < 2:
        return "No typing data"

    total_time = max(0.0, evs[-1].t - evs[0].t)
    chars = [e for e in evs if e.kind == "char"]
    delays_ms: List[float] = [dt * 1000.0 for dt in rec.planned_delays()]
    pauses = sum(1 for e in evs if e.kind == "paused")

    if delays_ms:
        d_min = min(delays_ms)
        d_avg = sum(delays_ms) / len(delays_ms)
        d_max = max(delays_ms)
    else:
        d_min = d_avg = d_max = 0.0

    cps = (len(chars) / total_time) if total_time > 0 else 0.0

    outcome = "running"
    for e in reversed(evs):
        if e.kind in ("complete", "abort"):
            outcome = "completed" if e.kind == "complete" else "aborted"
            break

    return (
        "Typing Summary:\n"
        f"  Outcome: {outcome}\n"
        f"  Total duration: {total_time:.2f}s\n"
        f"  Chars emitted: {len(chars)}\n"
        f"  Planned delay ms (min/avg/max): {d_min:.1f} / {d_avg:.1f} / {d_max:.1f}\n"
        f"  Effective speed: {cps:.2f} chars/s ({_wpm(cps):.2f} WPM)\n"
        f"  Pauses: {pauses}\n"
        f"  Sink failures: {rec.failures}\n"
        f"  Random seed: {rec.seed if rec.seed is not None else 'N/A'}"
    )


async def print_typing_summary(rec: KeystrokeRecorder) -> None:
    """Async helper that logs the summary."""
    print(summarize_typing(rec))
