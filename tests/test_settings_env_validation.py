from __future__ import annotations

import pytest

from paystack_client import settings as settings_module


def _set_minimal_valid_env(monkeypatch: pytest.MonkeyPatch) -> None:
    values = {
        "PAYSTACK_SECRET_KEY": "sk_test_123",
        "PAYSTACK_BASE_URL": "https://api.paystack.co",
        "LOG_LEVEL": "info",
    }
    for key, value in values.items():
        monkeypatch.setenv(key, value)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()


def test_collect_missing_required_env_vars_reports_secret_key(monkeypatch: pytest.MonkeyPatch):
    _set_minimal_valid_env(monkeypatch)
    monkeypatch.setenv("PAYSTACK_SECRET_KEY", "   ")

    missing = settings_module.collect_missing_required_env_vars()

    assert missing == ["PAYSTACK_SECRET_KEY"]


def test_collect_invalid_env_values_flags_plain_http_and_unknown_level(monkeypatch: pytest.MonkeyPatch):
    _set_minimal_valid_env(monkeypatch)
    monkeypatch.setenv("PAYSTACK_BASE_URL", "http://api.paystack.co")
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    invalid = settings_module.collect_invalid_env_values()

    assert "PAYSTACK_BASE_URL must be an https:// URL" in invalid
    assert any(message.startswith("LOG_LEVEL must be one of") for message in invalid)


def test_validate_required_environment_raises_with_missing_and_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
):
    _set_minimal_valid_env(monkeypatch)
    monkeypatch.delenv("PAYSTACK_SECRET_KEY", raising=False)
    monkeypatch.setenv("PAYSTACK_BASE_URL", "ftp://example.com")

    with pytest.raises(RuntimeError) as exc_info:
        settings_module.validate_required_environment()

    message = str(exc_info.value)
    assert "Missing required environment variables" in message
    assert "- PAYSTACK_SECRET_KEY" in message
    assert "Invalid environment values" in message


def test_get_settings_applies_defaults(monkeypatch: pytest.MonkeyPatch):
    _set_minimal_valid_env(monkeypatch)
    monkeypatch.delenv("PAYSTACK_BASE_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = settings_module.get_settings()

    assert settings.paystack_secret_key == "sk_test_123"
    assert settings.paystack_base_url == settings_module.DEFAULT_BASE_URL
    assert settings.log_level == "INFO"
