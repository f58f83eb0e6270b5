"""Resilience – FailureClassifier implementation."""
from __future__ import annotations

import dataclasses
import functools
import inspect
import logging
import threading
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Iterable, Mapping, TypeVar

from breaker_commons.kernel.time import Clock, SystemClock, TimeUnit
from breaker_commons.resilience.circuit_breaker.errors import BreakerShouldStayClosed
from breaker_commons.resilience.circuit_breaker.kinds import (
    ANY_FAILURE,
    FailureKind,
    KindSpec,
    as_kind,
    kind_of,
    resolve_kind,
)
from breaker_commons.resilience.circuit_breaker.policy import ClassifierPolicy
from breaker_commons.resilience.circuit_breaker.verdict import FailureVerdict
from breaker_commons.resilience.circuit_breaker.window import OccurrenceLog

if TYPE_CHECKING:
    from breaker_commons.resilience.circuit_breaker.settings import ClassifierSettings

T = TypeVar("T")
logger = logging.getLogger(__name__)


class FailureClassifier:
    """Decides whether failures of a protected operation should trip a breaker.

    Failures whose kind is-a an ignore kind never trip.  Failures whose kind
    is-a a trip kind trip immediately, or, when both ``frequency`` and
    ``window`` are positive, only once more than ``frequency`` of them were
    seen within the last ``window`` (in ``unit``).

    The configuration is an immutable :class:`ClassifierPolicy` replaced as a
    whole on every change, so concurrent readers always see a consistent
    snapshot.  Safe to share between threads.
    """

    def __init__(
        self,
        ignore: Iterable[KindSpec] = (),
        trip: Iterable[KindSpec] = (ANY_FAILURE,),
        frequency: int = 0,
        window: float = 0,
        unit: TimeUnit | str = TimeUnit.MILLISECONDS,
        *,
        name: str = "default",
        clock: Clock | None = None,
    ) -> None:
        self.name = name
        self._policy = ClassifierPolicy.build(ignore, trip, frequency, window, unit)
        self._clock: Clock = clock or SystemClock()
        self._log = OccurrenceLog()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: ClassifierSettings,
        *,
        registry: Mapping[str, FailureKind] | None = None,
        clock: Clock | None = None,
    ) -> FailureClassifier:
        """Build a classifier from loaded :class:`ClassifierSettings`.

        Kind names are resolved with :func:`resolve_kind`; *registry* supplies
        application-defined kinds by name.
        """
        return cls(
            ignore=[resolve_kind(n, registry) for n in settings.ignore],
            trip=[resolve_kind(n, registry) for n in settings.trip],
            frequency=settings.frequency,
            window=settings.window,
            unit=TimeUnit.parse(settings.unit),
            name=settings.name,
            clock=clock,
        )

    def __repr__(self) -> str:
        p = self._policy
        return (
            f"FailureClassifier(name={self.name!r}, trip={sorted(k.name for k in p.trip_kinds)}, "
            f"ignore={sorted(k.name for k in p.ignore_kinds)}, frequency={p.frequency}, "
            f"window={p.window}, unit={p.unit.value})"
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def classify(self, failure: BaseException) -> FailureVerdict:
        """Classify *failure* without recording it."""
        return self._verdict(self._policy, kind_of(failure))

    def should_trip(self, failure: BaseException) -> bool:
        """Return ``True`` if *failure* should open the breaker.

        Trip-eligible failures are recorded in the occurrence log when a
        frequency policy is active.
        """
        policy = self._policy
        kind = kind_of(failure)
        verdict = self._verdict(policy, kind)
        if verdict is FailureVerdict.IGNORED:
            logger.debug("failure_classifier.ignored name=%s kind=%s", self.name, kind.name)
            return False
        eligible = verdict is FailureVerdict.TRIP
        if eligible and policy.has_frequency_policy:
            count = self._record(policy)
            tripped = count > policy.frequency
            if tripped:
                logger.warning(
                    "failure_classifier.threshold_exceeded name=%s kind=%s count=%d frequency=%d",
                    self.name, kind.name, count, policy.frequency,
                )
            else:
                logger.debug(
                    "failure_classifier.recorded name=%s kind=%s count=%d frequency=%d",
                    self.name, kind.name, count, policy.frequency,
                )
            return tripped
        return eligible

    def guard(self, operation: Callable[[], T]) -> T:
        """Run *operation*; translate its failure into a trip or stay-closed signal.

        Re-raises the original exception when it should count against the
        breaker and raises :class:`BreakerShouldStayClosed` otherwise.  Only
        :class:`Exception` subclasses are classified.
        """
        try:
            return operation()
        except Exception as exc:
            if self._stays_closed(exc):
                raise BreakerShouldStayClosed(exc) from exc
            raise

    async def guard_async(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Async counterpart of :meth:`guard`."""
        try:
            return await operation()
        except Exception as exc:
            if self._stays_closed(exc):
                raise BreakerShouldStayClosed(exc) from exc
            raise

    @staticmethod
    def _verdict(policy: ClassifierPolicy, kind: FailureKind) -> FailureVerdict:
        if policy.ignores(kind):
            return FailureVerdict.IGNORED
        if policy.trips(kind):
            return FailureVerdict.TRIP
        return FailureVerdict.NEUTRAL

    def _stays_closed(self, failure: Exception) -> bool:
        policy = self._policy
        kind = kind_of(failure)
        # exact membership: subkinds of an ignored kind fall through to the trip test
        if kind in policy.ignore_kinds:
            return False
        if not policy.trips(kind):
            logger.debug("failure_classifier.neutral name=%s kind=%s", self.name, kind.name)
            return True
        if not policy.has_frequency_policy:
            return False
        count = self._record(policy)
        if count < policy.frequency:
            logger.debug(
                "failure_classifier.recorded name=%s kind=%s count=%d frequency=%d",
                self.name, kind.name, count, policy.frequency,
            )
            return True
        logger.warning(
            "failure_classifier.threshold_reached name=%s kind=%s count=%d frequency=%d",
            self.name, kind.name, count, policy.frequency,
        )
        return False

    def _record(self, policy: ClassifierPolicy) -> int:
        return self._log.record(self._clock.monotonic_ns(), policy.window_nanos)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def policy(self) -> ClassifierPolicy:
        return self._policy

    @property
    def trip_kinds(self) -> frozenset[FailureKind]:
        return self._policy.trip_kinds

    @property
    def ignore_kinds(self) -> frozenset[FailureKind]:
        return self._policy.ignore_kinds

    @property
    def has_frequency_policy(self) -> bool:
        return self._policy.has_frequency_policy

    @property
    def occurrence_count(self) -> int:
        """Entries in the occurrence log as of the last recorded failure."""
        return len(self._log)

    def is_trip(self, kind: KindSpec) -> bool:
        """Exact-match test: is *kind* itself one of the configured trip kinds?"""
        return as_kind(kind) in self._policy.trip_kinds

    def is_ignore(self, kind: KindSpec) -> bool:
        """Exact-match test: is *kind* itself one of the configured ignore kinds?"""
        return as_kind(kind) in self._policy.ignore_kinds

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_trip_kinds(self, *kinds: KindSpec) -> None:
        """Replace the trip kinds; rejected as a whole if any would be shadowed."""
        self._reconfigure(trip_kinds=frozenset(as_kind(k) for k in kinds))

    def set_ignore_kinds(self, *kinds: KindSpec) -> None:
        """Replace the ignore kinds; rejected as a whole if any trip kind would be shadowed."""
        self._reconfigure(ignore_kinds=frozenset(as_kind(k) for k in kinds))

    @property
    def frequency(self) -> int:
        return self._policy.frequency

    @frequency.setter
    def frequency(self, value: int) -> None:
        self._reconfigure(frequency=value)

    @property
    def window(self) -> float:
        return self._policy.window

    @window.setter
    def window(self, value: float) -> None:
        self._reconfigure(window=value)

    @property
    def unit(self) -> TimeUnit:
        return self._policy.unit

    @unit.setter
    def unit(self, value: TimeUnit | str) -> None:
        self._reconfigure(unit=TimeUnit.parse(value))

    def reset(self) -> None:
        """Forget every recorded occurrence."""
        self._log.clear()

    def _reconfigure(self, **changes: Any) -> None:
        with self._lock:
            self._policy = dataclasses.replace(self._policy, **changes)
        logger.info(
            "failure_classifier.reconfigured name=%s %s",
            self.name, " ".join(f"{key}={value!r}" for key, value in changes.items()),
        )


def guarded(classifier: FailureClassifier) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator running the wrapped function through *classifier*'s guard.

    Coroutine functions are guarded with :meth:`FailureClassifier.guard_async`.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await classifier.guard_async(lambda: func(*args, **kwargs))

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return classifier.guard(lambda: func(*args, **kwargs))

        return wrapper

    return decorator


__all__ = ["FailureClassifier", "guarded"]
