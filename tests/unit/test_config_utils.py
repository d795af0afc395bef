"""Unit tests for the config module."""

import os

import pytest

from env_utils.utils.config import (
    EnvUtilsConfig,
    OutputConfig,
    ScanConfig,
    get_config,
    get_config_paths,
    get_default_config,
    load_config,
    save_config,
    set_config,
)
from env_utils.utils.errors import ConfigurationError


class TestScanConfig:
    """Tests for ScanConfig model."""

    def test_default_values(self):
        """Test default values."""
        config = ScanConfig()
        assert config.ignore_folders == ["**/node_modules/**"]
        assert config.ignore_workspace_folders == ["docker-data"]
        assert config.definition_suffix == ".env"
        assert config.max_workers == 8

    def test_custom_values(self):
        """Test custom values."""
        config = ScanConfig(
            ignore_folders=["**/{dist,build}/**"],
            ignore_workspace_folders=[],
            definition_suffix=".vars",
            max_workers=2,
        )
        assert config.ignore_folders == ["**/{dist,build}/**"]
        assert config.ignore_workspace_folders == []
        assert config.definition_suffix == ".vars"
        assert config.max_workers == 2

    def test_defaults_are_not_shared(self):
        """Test that default lists are independent per instance."""
        a = ScanConfig()
        a.ignore_folders.append("**/tmp/**")
        assert ScanConfig().ignore_folders == ["**/node_modules/**"]

    @pytest.mark.parametrize("pattern", ["", "**/[abc/**", "**/{a,b/**"])
    def test_invalid_glob_rejected(self, pattern):
        """Test that malformed ignore patterns fail validation."""
        with pytest.raises(ValueError):
            ScanConfig(ignore_folders=[pattern])

    @pytest.mark.parametrize("suffix", ["", "dir/.env"])
    def test_invalid_suffix_rejected(self, suffix):
        """Test that unusable suffixes fail validation."""
        with pytest.raises(ValueError):
            ScanConfig(definition_suffix=suffix)

    def test_max_workers_must_be_positive(self):
        """Test that zero workers is rejected."""
        with pytest.raises(ValueError):
            ScanConfig(max_workers=0)


class TestOutputConfig:
    """Tests for OutputConfig model."""

    def test_default_values(self):
        """Test default values."""
        config = OutputConfig()
        assert config.default_format == "terminal"
        assert config.color is True
        assert config.verbose is False

    def test_custom_values(self):
        """Test custom values."""
        config = OutputConfig(default_format="json", color=False, verbose=True)
        assert config.default_format == "json"
        assert config.color is False
        assert config.verbose is True

    def test_unknown_format_rejected(self):
        """Test that an unsupported format fails validation."""
        with pytest.raises(ValueError):
            OutputConfig(default_format="html")


class TestEnvUtilsConfig:
    """Tests for EnvUtilsConfig model."""

    def test_default_values(self):
        """Test that all defaults are properly set."""
        config = EnvUtilsConfig()
        assert isinstance(config.scan, ScanConfig)
        assert isinstance(config.output, OutputConfig)
        assert config.roots == []

    def test_nested_config(self):
        """Test nested configuration."""
        config = EnvUtilsConfig(
            scan=ScanConfig(max_workers=1),
            output=OutputConfig(color=False),
            roots=["/srv/app"],
        )
        assert config.scan.max_workers == 1
        assert config.output.color is False
        assert config.roots == ["/srv/app"]


class TestConfigPaths:
    """Tests for config path functions."""

    def test_get_config_paths_includes_expected(self):
        """Test that expected config paths are included."""
        paths = get_config_paths()
        path_strs = [str(p) for p in paths]

        assert any(p.endswith(".env-utils.yaml") for p in path_strs)
        assert any(p.endswith(".env-utils.yml") for p in path_strs)

        home = os.path.expanduser("~")
        assert any(home in p for p in path_strs)

    def test_xdg_config_home(self, tmp_path, monkeypatch):
        """Test that XDG_CONFIG_HOME adds a search path."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert tmp_path / "env-utils" / "config.yaml" in get_config_paths()


class TestLoadSaveConfig:
    """Tests for loading and saving configuration."""

    def test_load_config_default(self, tmp_path, monkeypatch):
        """Test loading default config when no file exists."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        config = load_config()
        assert config == EnvUtilsConfig()

    def test_load_config_from_cwd(self, tmp_path, monkeypatch):
        """Test that a config file in the working directory is found."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env-utils.yaml").write_text("roots:\n  - services\n")
        assert load_config().roots == ["services"]

    def test_load_config_from_file(self, tmp_path):
        """Test loading config from a specific file."""
        config_path = tmp_path / "test-config.yaml"
        config_path.write_text("""
scan:
  ignore_folders:
    - "**/node_modules/**"
    - "**/dist/**"
  ignore_workspace_folders: []
  max_workers: 2
output:
  default_format: json
roots:
  - /srv/app
""")

        config = load_config(config_path)
        assert config.scan.ignore_folders == ["**/node_modules/**", "**/dist/**"]
        assert config.scan.ignore_workspace_folders == []
        assert config.scan.max_workers == 2
        assert config.output.default_format == "json"
        assert config.roots == ["/srv/app"]

    def test_load_config_file_not_found(self, tmp_path):
        """Test that loading nonexistent config raises error."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.yaml")

    def test_load_config_invalid_yaml(self, tmp_path):
        """Test that invalid YAML raises error."""
        config_path = tmp_path / "invalid.yaml"
        config_path.write_text("invalid: yaml: content: :")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(config_path)

    def test_load_config_not_a_mapping(self, tmp_path):
        """Test that a top-level list is rejected."""
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(config_path)

    def test_load_config_invalid_value(self, tmp_path):
        """Test that a bad glob surfaces as a configuration error."""
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("scan:\n  ignore_folders:\n    - '**/[oops'\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_path)
        assert exc_info.value.details["config_key"].startswith("scan.ignore_folders")

    def test_load_config_empty_file(self, tmp_path):
        """Test loading empty config file returns default."""
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        config = load_config(config_path)
        assert config == EnvUtilsConfig()

    def test_save_config(self, tmp_path):
        """Test saving configuration to file."""
        config = EnvUtilsConfig(scan=ScanConfig(max_workers=3), roots=["/srv/app"])

        config_path = tmp_path / "saved-config.yaml"
        result_path = save_config(config, config_path)

        assert result_path == config_path
        assert config_path.exists()

        loaded = load_config(config_path)
        assert loaded.scan.max_workers == 3
        assert loaded.roots == ["/srv/app"]

    def test_save_config_creates_directory(self, tmp_path):
        """Test that save_config creates parent directories."""
        config_path = tmp_path / "subdir" / "nested" / "config.yaml"

        save_config(EnvUtilsConfig(), config_path)
        assert config_path.exists()


class TestGlobalConfig:
    """Tests for global config functions."""

    def test_get_default_config(self):
        """Test getting default config."""
        assert get_default_config() == EnvUtilsConfig()

    def test_set_and_get_config(self):
        """Test setting and getting global config."""
        set_config(EnvUtilsConfig(scan=ScanConfig(max_workers=5)))
        assert get_config().scan.max_workers == 5

    def test_get_config_loads_lazily(self, tmp_path, monkeypatch):
        """Test that get_config reads the config file on first use."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "env-utils.yaml").write_text("roots: [a, b]\n")
        assert get_config().roots == ["a", "b"]
