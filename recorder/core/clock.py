"""
Timestamp sources for recorded actions.

Recorded timestamps are float seconds since the reference epoch
2001-01-01T00:00:00Z, the same reference the recording format has always used.
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone

REFERENCE_EPOCH = datetime(2001, 1, 1, tzinfo=timezone.utc).timestamp()


class SystemClock:
    """Wall clock measured from the reference epoch."""

    def now(self) -> float:
        return time.time() - REFERENCE_EPOCH


@dataclass
class SteppingClock:
    """
    Deterministic clock for tests and offline replays.

    Every call to now() returns the current value and then advances it by step,
    so consecutive recorded entries get distinct, predictable timestamps.
    """
    current: float = 0.0
    step: float = 1.0

    def now(self) -> float:
        value = self.current
        self.current += self.step
        return value
