"""Step pacing helpers for the animated search."""

from __future__ import annotations

import time


class TimeManager:
    """Decide when the next search step is due."""

    def __init__(self, tick_rate: float = 60.0) -> None:
        self.tick_rate: float = tick_rate
        self.tick_counter: int = 0
        self._last_tick: float = time.perf_counter()

    @property
    def interval(self) -> float:
        return 1.0 / self.tick_rate

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------
    def tick_due(self) -> bool:
        """Return ``True`` and consume a tick if the interval has elapsed.

        Used by the GUI loop, which must keep pumping window events instead
        of sleeping.
        """

        now = time.perf_counter()
        if now - self._last_tick < self.interval:
            return False
        self._last_tick = now
        self.tick_counter += 1
        return True

    def sleep_until_next_tick(self) -> None:
        """Block until the next tick should occur."""

        target = self._last_tick + self.interval
        now = time.perf_counter()
        remaining = target - now
        if remaining > 0:
            time.sleep(remaining)
            self._last_tick = target
        else:
            # Behind schedule; start from the current time
            self._last_tick = now
        self.tick_counter += 1


__all__ = ["TimeManager"]
