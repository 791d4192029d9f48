from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from config_params.params.base import ConfigParameter


class ConfigError(Exception):
    """Base config exception."""


class ConfigFormatError(ConfigError):
    """Raised when a persisted config file exists but is not in the expected XML shape."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigIOError(ConfigError):
    """Raised when a config file cannot be read or written."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigValidationError(ConfigError):
    """Raised when a stored value cannot be converted to the parameter type."""

    def __init__(
        self, errors: Dict[str, str], key: str | None = None, value: object | None = None
    ) -> None:
        self.errors = errors
        self.key = key
        self.value = value
        msg = f"Validation errors: {errors}"
        if key is not None and value is not None:
            msg += f" (key: {key}, value: {value!r})"
        super().__init__(msg)


class ReadOnlyConfigError(ConfigError):
    """Raised when attempting to write to a read-only parameter or storage."""

    def __init__(
        self, message: str = "Attempt to write to read only config", parameter: "ConfigParameter | None" = None
    ) -> None:
        self.parameter = parameter
        super().__init__(message)


class ConfigDuplicateError(ConfigError):
    """Raised when two different parameters are collected under the same name."""
