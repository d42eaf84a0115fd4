"""Tests for Settings: PORT from the environment, defaults otherwise."""

from stress_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.service_name == "Stress Test API"
    assert settings.service_version == "1.0.0"


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    assert Settings(_env_file=None).port == 8081


def test_unknown_log_format_falls_back_to_text(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "Pretty")
    assert Settings(_env_file=None).log_format == "text"
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    assert Settings(_env_file=None).log_format == "json"
