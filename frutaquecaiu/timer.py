"""A millisecond interval timer."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO


class Timer:
    """Reports when more than delay_ms milliseconds have passed since the last tick."""

    def __init__(self, delay_ms: int = -1, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.delay_ms = delay_ms
        self._start = clock()

    def reset(self, delay_ms: int) -> None:
        """Set a new delay and restart the interval."""
        self.delay_ms = delay_ms
        self._start = self._clock()

    def destroy(self) -> None:
        self.delay_ms = -1

    def elapsed_ms(self) -> int:
        """Whole milliseconds since the interval started."""
        return int((self._clock() - self._start) * 1000)

    def time_over(self) -> bool:
        """True once the delay has been exceeded; the interval then restarts."""
        if self.elapsed_ms() > self.delay_ms:
            self._start = self._clock()
            return True
        return False

    def report(self, stream: TextIO | None = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(f"Timer:  {self.elapsed_ms()}")