"""Frame timing helpers for the FPS overlay."""

from __future__ import annotations

import time
from collections import deque
from typing import Any, Deque

# Rolling history of the last 240 frame durations in seconds
_TICK_HISTORY_LEN = 240
_tick_durations: Deque[float] = deque(maxlen=_TICK_HISTORY_LEN)

# Whether to print FPS every time a duration is recorded
_live_fps: bool = False


def record_tick(duration: float) -> None:
    """Append a frame ``duration`` in seconds to the rolling history."""

    _tick_durations.append(duration)
    if _live_fps:
        print_fps()


def average_fps() -> float | None:
    """Return the mean frames per second, or ``None`` with no samples."""

    if not _tick_durations:
        return None
    avg = sum(_tick_durations) / len(_tick_durations)
    return 1.0 / avg if avg > 0 else float("inf")


def print_fps() -> None:
    """Print average FPS based on recorded durations."""

    fps = average_fps()
    if fps is None:
        print("FPS: --")
        return
    print(f"{fps:.1f} FPS (avg {1000.0 / fps:.1f} ms)")


def toggle_live_fps() -> bool:
    """Toggle live FPS printing. Returns ``True`` if enabled after toggle."""

    global _live_fps
    _live_fps = not _live_fps
    return _live_fps


def live_fps_enabled() -> bool:
    return _live_fps


def install_tick_observer(tm: Any) -> None:
    """Wrap ``tm.sleep_until_next_tick`` to record tick durations."""

    if tm is None or hasattr(tm, "_observer_wrapped"):
        return

    original = tm.sleep_until_next_tick
    last = time.perf_counter()

    def wrapper() -> None:
        nonlocal last
        original()
        now = time.perf_counter()
        record_tick(now - last)
        last = now

    tm.sleep_until_next_tick = wrapper  # type: ignore[assignment]
    setattr(tm, "_observer_wrapped", True)


__all__ = [
    "record_tick",
    "average_fps",
    "print_fps",
    "toggle_live_fps",
    "live_fps_enabled",
    "install_tick_observer",
    "_tick_durations",
]
