"""Resilience – ClassifierPolicy, the immutable classifier configuration."""
from __future__ import annotations

import dataclasses
from typing import Iterable

from breaker_commons.kernel.time import TimeUnit
from breaker_commons.resilience.circuit_breaker.errors import ShadowedTripKindError
from breaker_commons.resilience.circuit_breaker.kinds import ANY_FAILURE, FailureKind, KindSpec, as_kind


@dataclasses.dataclass(frozen=True)
class ClassifierPolicy:
    """Configuration snapshot for a :class:`FailureClassifier`.

    Construction rejects trip kinds shadowed by an ignore kind, and so does
    every ``dataclasses.replace`` copy.  ``frequency`` and ``window`` are not
    range-checked; a non-positive value simply disables the frequency policy.
    """

    trip_kinds: frozenset[FailureKind] = frozenset({ANY_FAILURE})
    ignore_kinds: frozenset[FailureKind] = frozenset()
    frequency: int = 0
    window: float = 0
    unit: TimeUnit = TimeUnit.MILLISECONDS

    def __post_init__(self) -> None:
        for ignored in self.ignore_kinds:
            for tripping in self.trip_kinds:
                if tripping.is_a(ignored):
                    raise ShadowedTripKindError(tripping, ignored)

    @classmethod
    def build(
        cls,
        ignore: Iterable[KindSpec] = (),
        trip: Iterable[KindSpec] = (ANY_FAILURE,),
        frequency: int = 0,
        window: float = 0,
        unit: TimeUnit | str = TimeUnit.MILLISECONDS,
    ) -> ClassifierPolicy:
        """Build a policy from kinds given as :class:`FailureKind` or exception classes.

        *unit* may be a unit name such as ``"seconds"``.
        """
        return cls(
            trip_kinds=frozenset(as_kind(k) for k in trip),
            ignore_kinds=frozenset(as_kind(k) for k in ignore),
            frequency=frequency,
            window=window,
            unit=TimeUnit.parse(unit),
        )

    @property
    def has_frequency_policy(self) -> bool:
        return self.frequency > 0 and self.window > 0

    @property
    def window_nanos(self) -> int:
        return self.unit.to_nanos(self.window)

    def ignores(self, kind: FailureKind) -> bool:
        return any(kind.is_a(ignored) for ignored in self.ignore_kinds)

    def trips(self, kind: FailureKind) -> bool:
        return any(kind.is_a(tripping) for tripping in self.trip_kinds)


__all__ = ["ClassifierPolicy"]
