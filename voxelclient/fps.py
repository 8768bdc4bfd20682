"""Frames-per-second counter over a sliding window."""

from __future__ import annotations

import time
from collections import deque

WINDOW_SECONDS = 2


class FpsCounter:
    """Counts frames recorded during the last few seconds."""

    def __init__(self) -> None:
        self._frames: deque[float] = deque()

    def add_frame(self, now: float | None = None) -> None:
        """Record a frame at ``now`` (monotonic seconds; defaults to the current time)."""
        if now is None:
            now = time.monotonic()
        while self._frames and now - self._frames[0] >= WINDOW_SECONDS:
            self._frames.popleft()
        self._frames.append(now)

    def fps(self) -> int:
        """Average frames per second over the window."""
        return len(self._frames) // WINDOW_SECONDS