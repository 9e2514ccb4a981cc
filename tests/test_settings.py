"""Tests for Settings.from_env."""

from pathlib import Path

import pytest

from api.settings import DEFAULT_HOST, DEFAULT_PORT, Settings

_VARS = (
    "CONTACTS_HOST",
    "CONTACTS_PORT",
    "CONTACTS_ASSETS_DIR",
    "CONTACTS_TEMPLATES_DIR",
    "CONTACTS_SEED",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()
    assert settings.host == DEFAULT_HOST == "0.0.0.0"
    assert settings.port == DEFAULT_PORT == 3000
    assert settings.seed is True
    assert settings.log_level == "INFO"
    assert (settings.templates_dir / "index.html").exists()
    assert (settings.assets_dir / "app.css").exists()


def test_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("CONTACTS_HOST", "127.0.0.1")
    monkeypatch.setenv("CONTACTS_PORT", " 8080 ")
    monkeypatch.setenv("CONTACTS_ASSETS_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.assets_dir == tmp_path.resolve()
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["0", "false", "No", "OFF"])
def test_seed_disabled(monkeypatch, value):
    monkeypatch.setenv("CONTACTS_SEED", value)
    assert Settings.from_env().seed is False


def test_bad_port(monkeypatch):
    monkeypatch.setenv("CONTACTS_PORT", "http")
    with pytest.raises(ValueError, match="CONTACTS_PORT"):
        Settings.from_env()
