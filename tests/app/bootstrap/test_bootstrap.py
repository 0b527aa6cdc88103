"""Testes da validação de settings no startup."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import validate_runtime_settings
from utils.errors import InfrastructureError, InvalidSettingsError


def test_valid_settings_pass(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("RELAY_TIMEOUT_SECONDS", raising=False)
    validate_runtime_settings()


def test_strict_environment_fails_fast(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")
    monkeypatch.setenv("RELAY_TIMEOUT_SECONDS", "0")
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "0")

    with pytest.raises(InvalidSettingsError) as exc_info:
        validate_runtime_settings()

    assert exc_info.value.environment == "staging"
    assert exc_info.value.errors == [
        "relay: RELAY_TIMEOUT_SECONDS deve ser > 0",
        "security: RATE_LIMIT_MAX_REQUESTS deve ser >= 1",
    ]
    assert isinstance(exc_info.value, InfrastructureError)


def test_development_only_warns(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    caplog.set_level(logging.WARNING, logger="app.bootstrap")
    monkeypatch.setenv("RELAY_TIMEOUT_SECONDS", "0")

    validate_runtime_settings()

    assert any(record.getMessage() == "settings_validation_failed" for record in caplog.records)
