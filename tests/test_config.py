import logging

import pytest
from pydantic import ValidationError

from app.core import config
from app.core.config import Settings, load_settings
from app.main import create_app


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ("REALM_NAME", "PORT", "REALM_FLAG", "BADGE_SECRET_KEY", "CORS_ORIGINS",
                 "BADGE_COOKIE_MAX_AGE", "FORGE_COOKIE_MAX_AGE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.realm_name == "Svartalfheim"
    assert settings.port == 8080
    assert settings.api_cookie_max_age == 86400
    assert settings.page_cookie_max_age == 3600
    assert settings.cors_origins == ("http://localhost:4200",)
    assert settings.log_level == "INFO"


def test_missing_secret_generates_ephemeral_key():
    assert load_settings().ephemeral_key is True
    first = load_settings().secret_key
    second = load_settings().secret_key
    assert len(first) >= config.MIN_SECRET_LENGTH
    assert first != second


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("REALM_NAME", "Nidavellir")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("REALM_FLAG", "FLAG{env}")
    monkeypatch.setenv("BADGE_SECRET_KEY", "k" * 40)
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.realm_name == "Nidavellir"
    assert settings.port == 9090
    assert settings.flag == "FLAG{env}"
    assert settings.secret_key == "k" * 40
    assert settings.ephemeral_key is False
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert settings.log_level == "DEBUG"


def test_short_secret_fails_startup(monkeypatch):
    monkeypatch.setenv("BADGE_SECRET_KEY", "too-short")
    with pytest.raises(ValidationError):
        load_settings()


def test_settings_are_read_only():
    settings = Settings(secret_key="s" * 32)
    with pytest.raises(ValidationError):
        settings.flag = "other"


def test_secret_not_in_repr():
    assert "s" * 32 not in repr(Settings(secret_key="s" * 32))


def test_ephemeral_key_is_reported_when_app_is_built(caplog):
    with caplog.at_level(logging.WARNING, logger="main"):
        create_app(Settings(secret_key="e" * 48, ephemeral_key=True))
    assert "ephemeral signing key" in caplog.text


def test_configured_key_builds_app_quietly(caplog):
    with caplog.at_level(logging.WARNING, logger="main"):
        create_app(Settings(secret_key="c" * 48))
    assert "ephemeral" not in caplog.text
