"""Config settings – SettingsValidator."""
from __future__ import annotations

import dataclasses

from radioking.config.settings.base import Settings


class SettingsValidator:
    """Validate a populated settings instance."""

    def validate(self, settings: Settings) -> list[str]:
        """Return a list of validation error messages."""
        errors: list[str] = []
        non_blank = type(settings)._non_blank
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            if value is None:
                errors.append(f"{field.name} is required but None")
            elif isinstance(value, str) and field.name in non_blank and not value.strip():
                errors.append(f"{field.name} must not be blank")
        return errors


__all__ = ["SettingsValidator"]
