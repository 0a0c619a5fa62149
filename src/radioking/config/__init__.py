"""Configuration – 12-factor settings loaded from the environment."""
from radioking.config.settings import RadioKingSettings, load_settings
from radioking.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RadioKingSettings",
    "load_settings",
]
