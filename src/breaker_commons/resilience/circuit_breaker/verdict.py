"""Resilience – FailureVerdict enum."""
from __future__ import annotations
from enum import Enum


class FailureVerdict(str, Enum):
    IGNORED = "IGNORED"
    TRIP = "TRIP"
    NEUTRAL = "NEUTRAL"


__all__ = ["FailureVerdict"]
