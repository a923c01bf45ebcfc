"""Tests for commitgen.global_config module."""

from pathlib import Path

import pytest
import yaml

from commitgen.global_config import (
    GlobalConfigError,
    ensure_global_config_dir,
    get_config_file_path,
    get_global_config_dir,
    initialize_default_config,
    is_configured,
    load_global_config,
    parse_config_value,
    save_global_config,
    set_config_value,
)


class TestGlobalConfigDir:
    """Tests for global config directory functions."""

    def test_get_global_config_dir_returns_path(self):
        """Test that get_global_config_dir returns a Path."""
        result = get_global_config_dir()
        assert isinstance(result, Path)
        assert ".commitgen" in str(result)

    def test_ensure_global_config_dir_creates_directory(self, config_dir):
        """Test that ensure_global_config_dir creates the directory."""
        result = ensure_global_config_dir()

        assert config_dir.exists()
        assert result == config_dir

    def test_get_config_file_path_returns_yaml(self, config_dir):
        """Test that config file path ends with config.yaml."""
        assert get_config_file_path() == config_dir / "config.yaml"


class TestLoadSaveConfig:
    """Tests for loading and saving config.yaml."""

    def test_load_missing_file(self, config_dir):
        """Test that a missing file loads as an empty dict."""
        assert load_global_config() == {}
        assert not is_configured()

    def test_save_then_load(self, config_dir):
        """Test that saved values are read back."""
        save_global_config({"model": "m", "max_bytes": 10, "review": True})

        assert is_configured()
        assert load_global_config() == {"model": "m", "max_bytes": 10, "review": True}

    def test_empty_file(self, config_dir):
        """Test that an empty file loads as an empty dict."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("")

        assert load_global_config() == {}

    def test_invalid_yaml(self, config_dir):
        """Test that malformed YAML raises GlobalConfigError."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("model: [unclosed\n")

        with pytest.raises(GlobalConfigError):
            load_global_config()

    def test_non_mapping(self, config_dir):
        """Test that a YAML list raises GlobalConfigError."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("- a\n- b\n")

        with pytest.raises(GlobalConfigError, match="mapping"):
            load_global_config()


class TestParseConfigValue:
    """Tests for parse_config_value."""

    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("Yes", True), ("1", True), ("on", True),
        ("false", False), ("NO", False), ("0", False), ("off", False),
    ])
    def test_booleans(self, raw, expected):
        """Test accepted boolean spellings."""
        assert parse_config_value("review", raw) is expected

    def test_integer(self):
        """Test integer parsing."""
        assert parse_config_value("max_bytes", " 16000 ") == 16000

    def test_string(self):
        """Test that strings are stripped."""
        assert parse_config_value("model", " llama3 ") == "llama3"

    def test_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(GlobalConfigError, match="Unknown config key"):
            parse_config_value("provider", "x")

    @pytest.mark.parametrize("raw", ["40s", "1m30s", "45"])
    def test_duration(self, raw):
        """Test that durations are validated and kept as written."""
        assert parse_config_value("timeout", f" {raw} ") == raw

    @pytest.mark.parametrize("raw", ["banana", "0s", "-5", "10 parsecs"])
    def test_invalid_duration(self, raw):
        """Test that unparsable or non-positive durations are rejected."""
        with pytest.raises(GlobalConfigError, match="Invalid duration"):
            parse_config_value("timeout", raw)

    @pytest.mark.parametrize("key,raw", [("review", "maybe"), ("max_bytes", "lots")])
    def test_invalid_values(self, key, raw):
        """Test that unparsable values are rejected."""
        with pytest.raises(GlobalConfigError):
            parse_config_value(key, raw)


class TestSetConfigValue:
    """Tests for set_config_value and initialize_default_config."""

    def test_preserves_other_keys(self, config_dir):
        """Test that setting one key keeps the rest."""
        save_global_config({"model": "m", "endpoint": "http://e"})

        assert set_config_value("max_bytes", "500") == 500

        stored = yaml.safe_load((config_dir / "config.yaml").read_text())
        assert stored == {"model": "m", "endpoint": "http://e", "max_bytes": 500}

    def test_initialize_replaces_file(self, config_dir):
        """Test that init overwrites existing values."""
        save_global_config({"model": "old", "extra": 1})

        initialize_default_config({"model": "new"})

        assert load_global_config() == {"model": "new"}
