"""Resilience – circuit-breaker failure classification."""

from breaker_commons.resilience.circuit_breaker import (
    ANY_FAILURE,
    BreakerShouldStayClosed,
    ClassifierPolicy,
    ClassifierSettings,
    FailureClassifier,
    FailureKind,
    FailureVerdict,
    ShadowedTripKindError,
    guarded,
)

__all__ = [
    "ANY_FAILURE",
    "BreakerShouldStayClosed",
    "ClassifierPolicy",
    "ClassifierSettings",
    "FailureClassifier",
    "FailureKind",
    "FailureVerdict",
    "ShadowedTripKindError",
    "guarded",
]
