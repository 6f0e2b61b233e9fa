from __future__ import annotations

import pytest

from scanback_admin_sdk.config import ConfigError, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "SCANBACK_ENV",
        "SCANBACK_API_BASE_URL",
        "SCANBACK_API_BASE_URL_DEV",
        "SCANBACK_API_BASE_URL_STAGING",
        "SCANBACK_TIMEOUT_SECONDS",
        "SCANBACK_VERIFY_SSL",
        "SCANBACK_SESSION_APP_NAME",
        "SCANBACK_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


def test_load_config_requires_base_url() -> None:
    with pytest.raises(ConfigError, match="SCANBACK_API_BASE_URL"):
        load_config()


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCANBACK_API_BASE_URL", "https://api.example.com/")
    cfg = load_config()
    assert cfg.api_base_url == "https://api.example.com"
    assert cfg.env_name == "dev"
    assert cfg.timeout_seconds is None
    assert cfg.verify_ssl is True
    assert cfg.session_app_name == "scanback-admin"
    assert cfg.log_level == "INFO"


def test_load_config_profile(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCANBACK_ENV", "staging")
    monkeypatch.setenv("SCANBACK_API_BASE_URL", "https://fallback.example.com")
    monkeypatch.setenv("SCANBACK_API_BASE_URL_STAGING", "https://staging.example.com")
    cfg = load_config()
    assert cfg.api_base_url == "https://staging.example.com"
    assert cfg.normalized_env == "staging"


def test_load_config_reads_timeout_and_ssl(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCANBACK_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv("SCANBACK_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SCANBACK_VERIFY_SSL", "no")
    cfg = load_config()
    assert cfg.timeout_seconds == 2.5
    assert cfg.verify_ssl is False


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("SCANBACK_TIMEOUT_SECONDS", "0"),
        ("SCANBACK_TIMEOUT_SECONDS", "abc"),
        ("SCANBACK_LOG_LEVEL", "chatty"),
    ],
)
def test_load_config_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    monkeypatch.setenv("SCANBACK_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigError, match=key):
        load_config()
