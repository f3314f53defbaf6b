"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from done_client import DoneClientConfig, DoneSettings


@pytest.fixture
def done_env(monkeypatch):
    monkeypatch.setenv("DONE_BASE_URL", "https://done.example.com")
    monkeypatch.setenv("DONE_AUTH_TOKEN", "env-token")


def test_settings_from_env(done_env, monkeypatch):
    monkeypatch.setenv("DONE_TIMEOUT", "2.5")
    monkeypatch.setenv("DONE_LOG_LEVEL", "DEBUG")

    settings = DoneSettings(_env_file=None)

    assert settings.base_url == "https://done.example.com"
    assert settings.auth_token == "env-token"
    assert settings.timeout == 2.5
    assert settings.log_level == "DEBUG"
    assert settings.log_json_format is True


def test_settings_defaults(done_env, monkeypatch):
    monkeypatch.delenv("DONE_TIMEOUT", raising=False)

    settings = DoneSettings(_env_file=None)

    assert settings.timeout is None
    assert settings.log_level == "INFO"


def test_settings_require_connection(monkeypatch):
    monkeypatch.delenv("DONE_BASE_URL", raising=False)
    monkeypatch.delenv("DONE_AUTH_TOKEN", raising=False)

    with pytest.raises(ValidationError):
        DoneSettings(_env_file=None)


def test_client_config(done_env):
    settings = DoneSettings(_env_file=None)

    assert settings.client_config() == DoneClientConfig(
        base_url="https://done.example.com", auth_token="env-token"
    )
