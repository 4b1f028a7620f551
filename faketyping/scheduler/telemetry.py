from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import time


@dataclass(frozen=True)
class KeystrokeEvent:
    t: float
    kind: str  # 'char' | 'pause' (planned delay) | lifecycle: 'start', 'paused', 'resumed', 'complete', 'abort'
    value: str  # character, pause tag or empty
    dt: float  # planned delay after this event (seconds)


@dataclass
class KeystrokeRecorder:
    events: List[KeystrokeEvent] = field(default_factory=list)
    start_ts: float = field(default_factory=lambda: time.perf_counter())
    seed: Optional[int] = None
    failures: int = 0  # sink errors that paused the session

    def _now(self) -> float:
        return time.perf_counter() - self.start_ts

    def log(self, kind: str, value: str = "", dt: float = 0.0) -> None:
        self.events.append(KeystrokeEvent(self._now(), kind, value, dt))

    def reset(self, seed: Optional[int] = None) -> None:
        self.events.clear()
        self.start_ts = time.perf_counter()
        self.seed = seed
        self.failures = 0

    def chars(self) -> str:
        return "".join(e.value for e in self.events if e.kind == "char")

    def planned_delays(self) -> List[float]:
        return [e.dt for e in self.events if e.kind == "pause"]
