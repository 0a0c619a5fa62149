"""Config settings – base class, loaders, validator and the service settings."""
from radioking.config.settings.app import RadioKingSettings, load_settings
from radioking.config.settings.base import Settings
from radioking.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from radioking.config.settings.validator import SettingsValidator

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "RadioKingSettings",
    "Settings",
    "SettingsLoader",
    "SettingsValidator",
    "load_settings",
]
