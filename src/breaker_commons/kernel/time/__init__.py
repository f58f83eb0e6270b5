"""Kernel time – Clock port + implementations, TimeUnit."""
from breaker_commons.kernel.time.clock import Clock, FrozenClock, SystemClock
from breaker_commons.kernel.time.units import TimeUnit

__all__ = ["Clock", "FrozenClock", "SystemClock", "TimeUnit"]
