"""Resilience – failure-classification errors and signals."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from breaker_commons.config.validation import ConfigurationError

if TYPE_CHECKING:
    from breaker_commons.resilience.circuit_breaker.kinds import FailureKind


class ShadowedTripKindError(ConfigurationError):
    """A trip kind is a more specific form of an ignored kind and could never trip.

    Attributes
    ----------
    trip_kind:
        The unreachable trip kind.
    ignore_kind:
        The ignored kind that shadows it.
    """

    default_code = "shadowed_trip_kind"

    def __init__(self, trip_kind: FailureKind, ignore_kind: FailureKind) -> None:
        super().__init__(
            f"Tripping kind '{trip_kind.name}' is a subkind of ignored kind '{ignore_kind.name}'"
        )
        self.trip_kind = trip_kind
        self.ignore_kind = ignore_kind

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["trip_kind"] = self.trip_kind.name
        base["ignore_kind"] = self.ignore_kind.name
        return base


class BreakerShouldStayClosed(Exception):
    """Signal raised by ``guard`` when a failure must not count against the breaker.

    The guarded operation still failed; ``failure`` (also ``__cause__``) holds
    the original exception.
    """

    def __init__(self, failure: Exception) -> None:
        super().__init__(f"{type(failure).__name__} should not trip the breaker: {failure}")
        self.failure = failure
        self.__cause__ = failure


__all__ = ["BreakerShouldStayClosed", "ShadowedTripKindError"]
