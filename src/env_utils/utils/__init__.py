"""Utility functions for env-utils."""

from env_utils.utils.logging import configure_logging, get_logger, get_logger_with_context, log_duration
from env_utils.utils.errors import (
    EnvUtilsError,
    ValidationError,
    ConfigurationError,
    FileAccessError,
    is_valid_env_var_name,
    validate_env_var_name,
)
from env_utils.utils.globs import expand_braces, is_ignored_dir, matches_any, validate_glob
from env_utils.utils.config import (
    EnvUtilsConfig,
    ScanConfig,
    OutputConfig,
    load_config,
    save_config,
    get_config,
    set_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    "log_duration",
    # Errors
    "EnvUtilsError",
    "ValidationError",
    "ConfigurationError",
    "FileAccessError",
    "is_valid_env_var_name",
    "validate_env_var_name",
    # Globs
    "expand_braces",
    "is_ignored_dir",
    "matches_any",
    "validate_glob",
    # Config
    "EnvUtilsConfig",
    "ScanConfig",
    "OutputConfig",
    "load_config",
    "save_config",
    "get_config",
    "set_config",
]
