"""Config validation – errors raised while building listing settings."""
from __future__ import annotations

from catalog_query.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Listing settings could not be built."""

    default_code = "config_error"
    default_user_message = "The catalog is misconfigured."


class MissingRequiredSettingError(ConfigError):
    """A setting without a default was not provided."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Set '{setting_name}'; it has no default",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but out of range or of the wrong type.

    ``setting_name`` is the dataclass field when raised by validation and the
    environment variable when raised while coercing loaded text.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"'{setting_name}={value!r}' rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
