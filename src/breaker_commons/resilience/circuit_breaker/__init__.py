"""Resilience – failure classification for the Circuit Breaker pattern."""
from breaker_commons.resilience.circuit_breaker.errors import BreakerShouldStayClosed, ShadowedTripKindError
from breaker_commons.resilience.circuit_breaker.kinds import (
    ANY_FAILURE,
    FailureKind,
    as_kind,
    kind_for_type,
    kind_of,
    resolve_kind,
)
from breaker_commons.resilience.circuit_breaker.verdict import FailureVerdict
from breaker_commons.resilience.circuit_breaker.policy import ClassifierPolicy
from breaker_commons.resilience.circuit_breaker.window import OccurrenceLog
from breaker_commons.resilience.circuit_breaker.settings import ClassifierSettings
from breaker_commons.resilience.circuit_breaker.classifier import FailureClassifier, guarded

__all__ = [
    "ANY_FAILURE",
    "BreakerShouldStayClosed",
    "ClassifierPolicy",
    "ClassifierSettings",
    "FailureClassifier",
    "FailureKind",
    "FailureVerdict",
    "OccurrenceLog",
    "ShadowedTripKindError",
    "as_kind",
    "guarded",
    "kind_for_type",
    "kind_of",
    "resolve_kind",
]
