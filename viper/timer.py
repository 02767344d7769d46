"""Frame clock tracking total and per-frame elapsed time."""

from __future__ import annotations

import time as _time
from typing import Callable


class Time:
    """Seconds since start (``time``) and since the previous tick (``delta_time``)."""

    def __init__(self, clock: Callable[[], float] = _time.perf_counter) -> None:
        self._clock = clock
        now = clock()
        self._start = now
        self._frame = now
        self.time = 0.0
        self.delta_time = 0.0

    def tick(self) -> None:
        now = self._clock()
        self.time = now - self._start
        self.delta_time = now - self._frame
        self._frame = now

    def reset(self) -> None:
        """Restart the measurement of total time."""
        self._start = self._clock()