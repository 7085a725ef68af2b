"""Unit tests for config loading, validation, and persistence."""

import json
from pathlib import Path

import pytest

from userdash.config import ConfigError, Settings, load_config, load_theme, save_theme
from userdash.constants import DEFAULT_ENDPOINT, DEFAULT_INITIAL_DELAY_MS


def _write(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


class TestSettings:
    def test_defaults(self):
        """
        Given no arguments
        When Settings is constructed
        Then the documented endpoint and 800ms delay are used
        """
        settings = Settings()
        assert settings.endpoint == DEFAULT_ENDPOINT
        assert settings.initial_delay_ms == DEFAULT_INITIAL_DELAY_MS == 800

    def test_negative_delay_rejected(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            Settings(initial_delay_ms=-5)


class TestLoadConfig:
    def test_defaults_when_file_missing(self, isolated_config: Path):
        """
        Given no config file exists
        When load_config is called
        Then default settings are returned and no file is created
        """
        assert load_config() == Settings()
        assert not (isolated_config / "config.json").exists()

    def test_defaults_when_file_empty(self, isolated_config: Path):
        (isolated_config / "config.json").write_text("  \n")
        assert load_config() == Settings()

    def test_reads_values(self, isolated_config: Path):
        """
        Given a config file with both keys
        When load_config is called
        Then both values are used
        """
        _write(
            isolated_config / "config.json",
            {"endpoint": "http://localhost:9000/users", "initial_delay_ms": 0},
        )
        settings = load_config()
        assert settings.endpoint == "http://localhost:9000/users"
        assert settings.initial_delay_ms == 0

    def test_partial_file_keeps_other_defaults(self, isolated_config: Path):
        _write(isolated_config / "config.json", {"initial_delay_ms": 100})
        settings = load_config()
        assert settings.initial_delay_ms == 100
        assert settings.endpoint == DEFAULT_ENDPOINT

    def test_reserved_keys_stripped(self, isolated_config: Path):
        """
        Given a config file with a "_comment" key
        When load_config is called
        Then the reserved key is ignored
        """
        _write(isolated_config / "config.json", {"_comment": "hi", "initial_delay_ms": 5})
        assert load_config().initial_delay_ms == 5

    def test_invalid_json_raises(self, isolated_config: Path):
        (isolated_config / "config.json").write_text("{not json")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config()

    def test_non_object_raises(self, isolated_config: Path):
        _write(isolated_config / "config.json", ["endpoint"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_config()

    def test_negative_delay_raises(self, isolated_config: Path):
        """
        Given a config file with a negative delay
        When load_config is called
        Then ConfigError is raised
        """
        _write(isolated_config / "config.json", {"initial_delay_ms": -1})
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config()


class TestTheme:
    def test_none_when_missing(self):
        assert load_theme() is None

    def test_saved_theme_loaded(self):
        save_theme("nord")
        assert load_theme() == "nord"

    def test_corrupt_theme_file_ignored(self, isolated_config: Path):
        (isolated_config / "theme.json").write_text("[]")
        assert load_theme() is None
