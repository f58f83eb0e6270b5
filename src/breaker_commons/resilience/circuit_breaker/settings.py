"""Resilience – ClassifierSettings, environment-driven classifier configuration."""
from __future__ import annotations

import dataclasses

from breaker_commons.config.settings import Settings
from breaker_commons.config.validation import InvalidSettingValueError
from breaker_commons.kernel.time import TimeUnit
from breaker_commons.resilience.circuit_breaker.kinds import ANY_FAILURE_NAME


@dataclasses.dataclass
class ClassifierSettings(Settings):
    """Settings for :meth:`FailureClassifier.from_settings`.

    ``ignore`` and ``trip`` hold kind names understood by
    :func:`~breaker_commons.resilience.circuit_breaker.kinds.resolve_kind`.
    """

    _prefix: dataclasses.ClassVar[str] = "FAILURE_CLASSIFIER"

    name: str = "default"
    ignore: list[str] = dataclasses.field(default_factory=list)
    trip: list[str] = dataclasses.field(default_factory=lambda: [ANY_FAILURE_NAME])
    frequency: int = 0
    window: float = 0.0
    unit: str = TimeUnit.MILLISECONDS.value

    def _validate(self) -> None:
        if self.frequency < 0:
            raise InvalidSettingValueError("frequency", self.frequency, "must be >= 0")
        if self.window < 0:
            raise InvalidSettingValueError("window", self.window, "must be >= 0")
        try:
            TimeUnit.parse(self.unit)
        except ValueError as exc:
            raise InvalidSettingValueError("unit", self.unit, str(exc)) from exc


__all__ = ["ClassifierSettings"]
