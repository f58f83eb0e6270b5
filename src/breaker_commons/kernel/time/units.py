"""Kernel time – TimeUnit enum for durations expressed as (value, unit)."""
from __future__ import annotations

from enum import Enum


class TimeUnit(str, Enum):
    NANOSECONDS = "NANOSECONDS"
    MICROSECONDS = "MICROSECONDS"
    MILLISECONDS = "MILLISECONDS"
    SECONDS = "SECONDS"
    MINUTES = "MINUTES"
    HOURS = "HOURS"
    DAYS = "DAYS"

    def to_nanos(self, value: float) -> int:
        """Convert *value* expressed in this unit to integer nanoseconds.

        Integral values convert exactly; fractional ones round to the nearest
        nanosecond.
        """
        nanos = _NANOS_PER_UNIT[self]
        if isinstance(value, int):
            return value * nanos
        return round(value * nanos)

    @classmethod
    def parse(cls, name: str) -> TimeUnit:
        """Look a unit up by name, case-insensitively (``"seconds"`` → ``SECONDS``)."""
        if isinstance(name, cls):
            return name
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown time unit {name!r}") from None


_NANOS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.NANOSECONDS: 1,
    TimeUnit.MICROSECONDS: 1_000,
    TimeUnit.MILLISECONDS: 1_000_000,
    TimeUnit.SECONDS: 1_000_000_000,
    TimeUnit.MINUTES: 60_000_000_000,
    TimeUnit.HOURS: 3_600_000_000_000,
    TimeUnit.DAYS: 86_400_000_000_000,
}


__all__ = ["TimeUnit"]
