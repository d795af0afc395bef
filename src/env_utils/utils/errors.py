"""Error handling utilities for env-utils."""

from __future__ import annotations

import re
from typing import Any

from env_utils.models.common import ErrorRecord

ENV_VAR_NAME_PATTERN = re.compile(r"^[A-Z_][A-Z0-9_]*$")


class EnvUtilsError(Exception):
    """Base exception for env-utils."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_record(self) -> ErrorRecord:
        """Convert to ErrorRecord model."""
        return ErrorRecord(code=self.code, message=self.message, details=self.details)


class ValidationError(EnvUtilsError):
    """Validation failed."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class ConfigurationError(EnvUtilsError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)


class FileAccessError(EnvUtilsError):
    """A definition file could not be opened or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Cannot read {path}: {reason}",
            code="FILE_ACCESS_ERROR",
            details={"path": path},
        )
        self.path = path


def validate_env_var_name(name: str) -> None:
    """Validate an environment variable name.

    Names must start with an uppercase letter or underscore and contain
    only uppercase letters, digits and underscores.

    Args:
        name: Environment variable name to validate

    Raises:
        ValidationError: If name is invalid
    """
    if not name:
        raise ValidationError("Environment variable name cannot be empty", field="name")

    if not (("A" <= name[0] <= "Z") or name[0] == "_"):
        raise ValidationError(
            "Environment variable name must start with an uppercase letter or underscore",
            field="name",
        )

    for char in name:
        if not (("A" <= char <= "Z") or ("0" <= char <= "9") or char == "_"):
            raise ValidationError(
                f"Environment variable name contains invalid character: {char}",
                field="name",
            )


def is_valid_env_var_name(name: str) -> bool:
    """Return True if ``name`` is a valid environment variable name."""
    return isinstance(name, str) and ENV_VAR_NAME_PATTERN.fullmatch(name) is not None
