"""Config – 12-factor settings, loaders, and validation errors."""

from breaker_commons.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from breaker_commons.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigurationError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
