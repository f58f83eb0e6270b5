"""Resilience – OccurrenceLog, the sliding window of trip-eligible failures."""
from __future__ import annotations

import threading
from collections import deque


class OccurrenceLog:
    """Time-ordered record of recent failure timestamps (integer nanoseconds).

    Timestamps and horizons are integers so an entry exactly one window old
    compares equal to the cutoff and is kept.

    Pruning walks from the oldest entry and stops at the first one still
    inside the window, so timestamps must be recorded in non-decreasing order.
    With a clock that steps backwards an older entry can sit behind a newer
    one and survive pruning until everything ahead of it expires.
    """

    def __init__(self) -> None:
        self._times: deque[int] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._times)

    def record(self, now: int, horizon: int) -> int:
        """Append *now*, drop entries older than ``now - horizon``, return the count."""
        with self._lock:
            self._times.append(now)
            return self._prune(now - horizon)

    def _prune(self, cutoff: int) -> int:
        times = self._times
        while times and times[0] < cutoff:
            times.popleft()
        return len(times)

    def clear(self) -> None:
        with self._lock:
            self._times.clear()

    def snapshot(self) -> tuple[int, ...]:
        """Copy of the recorded timestamps, oldest first, for inspection and diagnostics."""
        with self._lock:
            return tuple(self._times)


__all__ = ["OccurrenceLog"]
