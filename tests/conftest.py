"""Shared fixtures."""

from pathlib import Path

import pytest

from userdash.constants import MOCK_USERS
from userdash.models import User


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Point config and theme persistence at a temp dir for every test."""
    monkeypatch.setattr("userdash.config.CONFIG_PATH", tmp_path / "config.json")
    monkeypatch.setattr("userdash.config.THEME_CONFIG_PATH", tmp_path / "theme.json")
    return tmp_path


@pytest.fixture
def leanne_record() -> dict:
    return {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "company": {"name": "Romaguera-Crona"},
    }


@pytest.fixture
def mock_users() -> list[User]:
    return [User.model_validate(record) for record in MOCK_USERS]
