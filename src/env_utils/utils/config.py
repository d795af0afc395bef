"""Configuration file support for env-utils."""

from __future__ import annotations

import os
from pathlib import Path

import pydantic
import yaml
from pydantic import BaseModel, Field, field_validator

from env_utils.utils.errors import ConfigurationError
from env_utils.utils.globs import validate_glob

DEFAULT_IGNORE_FOLDERS = ["**/node_modules/**"]
DEFAULT_IGNORE_WORKSPACE_FOLDERS = ["docker-data"]
DEFAULT_DEFINITION_SUFFIX = ".env"


class ScanConfig(BaseModel):
    """Definition scan configuration."""

    ignore_folders: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_FOLDERS),
        description="Glob patterns for paths excluded from scanning",
    )
    ignore_workspace_folders: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_WORKSPACE_FOLDERS),
        description="Names of project roots excluded entirely",
    )
    definition_suffix: str = Field(
        default=DEFAULT_DEFINITION_SUFFIX, description="Suffix of definition files"
    )
    max_workers: int = Field(default=8, ge=1, description="Concurrent file readers")

    @field_validator("ignore_folders")
    @classmethod
    def _check_globs(cls, value: list[str]) -> list[str]:
        for pattern in value:
            try:
                validate_glob(pattern)
            except ConfigurationError as e:
                raise ValueError(e.message) from e
        return value

    @field_validator("definition_suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"Invalid definition file suffix: {value!r}")
        return value


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: str = Field(default="terminal", description="Default output format")
    color: bool = Field(default=True, description="Enable color output")
    verbose: bool = Field(default=False, description="Verbose output")

    @field_validator("default_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        if value not in ("terminal", "json"):
            raise ValueError(f"Unsupported output format: {value!r}")
        return value


class EnvUtilsConfig(BaseModel):
    """Main configuration for env-utils."""

    scan: ScanConfig = Field(default_factory=ScanConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    roots: list[str] = Field(
        default_factory=list, description="Project roots to scan (default: current directory)"
    )


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths.

    Returns:
        List of paths to check for configuration files
    """
    paths = []

    paths.append(Path.cwd() / ".env-utils.yaml")
    paths.append(Path.cwd() / ".env-utils.yml")
    paths.append(Path.cwd() / "env-utils.yaml")

    home = Path.home()
    paths.append(home / ".env-utils.yaml")
    paths.append(home / ".config" / "env-utils" / "config.yaml")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "env-utils" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> EnvUtilsConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        FileNotFoundError: If an explicit config path does not exist
        ConfigurationError: If the file is not valid YAML or fails validation
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return EnvUtilsConfig()


def _load_config_file(path: Path) -> EnvUtilsConfig:
    """Load configuration from a specific file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return EnvUtilsConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    try:
        return EnvUtilsConfig.model_validate(data)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid configuration in {path}: {key}: {first['msg']}", config_key=key
        ) from e


def save_config(config: EnvUtilsConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save to. Defaults to ~/.config/env-utils/config.yaml

    Returns:
        Path where config was saved
    """
    if config_path is None:
        config_path = Path.home() / ".config" / "env-utils" / "config.yaml"
    else:
        config_path = Path(config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_defaults=True)
    config_path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False), encoding="utf-8")

    return config_path


def get_default_config() -> EnvUtilsConfig:
    """Get the default configuration."""
    return EnvUtilsConfig()


_config: EnvUtilsConfig | None = None


def get_config() -> EnvUtilsConfig:
    """Get the global configuration instance.

    Loads from file on first call.

    Returns:
        Global configuration
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: EnvUtilsConfig | None) -> None:
    """Set (or reset, with None) the global configuration instance."""
    global _config
    _config = config
