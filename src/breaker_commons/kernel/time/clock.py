"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def monotonic_ns(self) -> int: ...


class SystemClock:
    """Production clock backed by :func:`time.monotonic_ns`."""

    def monotonic_ns(self) -> int:
        """Integer nanoseconds; only differences are meaningful."""
        return time.monotonic_ns()


class FrozenClock:
    """Test clock pinned to a fixed point in time.

    ``monotonic_ns()`` follows the frozen time exactly (integer arithmetic on
    the datetime), so a negative :meth:`advance` simulates a clock that steps
    backwards.
    """

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def monotonic_ns(self) -> int:
        epoch = _EPOCH if self._fixed.tzinfo is not None else _EPOCH.replace(tzinfo=None)
        delta = self._fixed - epoch
        return ((delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds) * 1_000

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
