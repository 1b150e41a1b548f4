"""Tests for environment-driven settings."""

from tuboleto_relay.config import ALLOWED_ORIGINS, API_URL, AUTH_URL, load_settings


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "TUBOLETO_AUTH_URL", "TUBOLETO_API_URL", "TUBOLETO_LOCATION_ID",
                 "TUBOLETO_VERIFY_SSL", "TUBOLETO_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.port == 4000
    assert settings.host == "0.0.0.0"
    assert settings.auth_url == AUTH_URL
    assert settings.api_url == API_URL
    assert settings.location_id == 1
    assert settings.verify_ssl is False
    assert settings.timeout is None
    assert settings.log_level == "INFO"
    assert settings.allowed_origins == ALLOWED_ORIGINS


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_USERNAME", "relay")
    monkeypatch.setenv("API_PASSWORD", "s3cret")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("TUBOLETO_VERIFY_SSL", "true")
    monkeypatch.setenv("TUBOLETO_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.api_username == "relay"
    assert settings.api_password == "s3cret"
    assert settings.port == 8080
    assert settings.verify_ssl is True
    assert settings.timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    assert load_settings().log_level == "INFO"


def test_known_log_level_is_kept(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " warning ")

    assert load_settings().log_level == "WARNING"
