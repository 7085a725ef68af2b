"""Config file loading, validation, and persistence.

Schema on disk (~/.config/userdash/config.json), every key optional:

    {
        "endpoint": "https://jsonplaceholder.typicode.com/users",
        "initial_delay_ms": 800
    }

Keys prefixed with "_" are reserved (e.g. "_comment") and are stripped on load.
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from userdash.constants import DEFAULT_ENDPOINT, DEFAULT_INITIAL_DELAY_MS

CONFIG_PATH = Path("~/.config/userdash/config.json").expanduser()


class Settings(BaseModel):
    """Where users are fetched from and how long to wait before asking."""

    endpoint: str = DEFAULT_ENDPOINT
    initial_delay_ms: int = Field(default=DEFAULT_INITIAL_DELAY_MS, ge=0)


class ConfigError(Exception):
    """Raised when config.json exists but cannot be parsed or validated."""


def load_config() -> Settings:
    """Load and validate the config file.

    Returns default settings if the file does not exist.  Raises ConfigError
    if the file exists but is malformed.
    """
    if not CONFIG_PATH.exists():
        return Settings()

    text = CONFIG_PATH.read_text()
    if not text.strip():
        return Settings()

    try:
        raw: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config.json is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("config.json must be a JSON object at the top level")

    # Strip reserved/comment keys.
    data = {k: v for k, v in raw.items() if not k.startswith("_")}
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config: {exc}") from exc


# Theme persistence
THEME_CONFIG_PATH = Path("~/.config/userdash/theme.json").expanduser()


def load_theme() -> str | None:
    """Load the saved theme preference.

    Returns the theme name if set, None otherwise.
    """
    if not THEME_CONFIG_PATH.exists():
        return None
    try:
        data = json.loads(THEME_CONFIG_PATH.read_text())
        return data.get("theme")
    except (json.JSONDecodeError, AttributeError):
        return None


def save_theme(theme: str) -> None:
    """Save the theme preference to disk."""
    THEME_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    THEME_CONFIG_PATH.write_text(json.dumps({"theme": theme}, indent=2))
