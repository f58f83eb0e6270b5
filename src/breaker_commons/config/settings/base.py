"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses are dataclasses whose fields are read from ``<_prefix>_<FIELD>``
    environment variables by :class:`EnvSettingsLoader`.  Field checks go in
    :meth:`_validate`, which runs on every construction and should raise
    :class:`~breaker_commons.config.validation.InvalidSettingValueError`.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
