"""Config settings – 12-factor env-based configuration."""
from breaker_commons.config.settings.base import Settings
from breaker_commons.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
