"""Tests for settings loading and environment coercion."""

from __future__ import annotations

import dataclasses

import pytest

from cronparse.errors import CronparseConfigError
from cronparse.logging import DEFAULT_LOG_FORMAT
from cronparse.settings import CronparseSettings, CronparseSettingsKwargs


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without overrides the defaults are used."""
    monkeypatch.delenv("CRONPARSE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CRONPARSE_LOG_FORMAT", raising=False)
    settings = CronparseSettings.load()
    assert settings.log_level == "WARNING"
    assert settings.log_format == DEFAULT_LOG_FORMAT


def test_log_level_env_coercion(monkeypatch: pytest.MonkeyPatch) -> None:
    """log_level should be normalised from the env string."""
    monkeypatch.setenv("CRONPARSE_LOG_LEVEL", " debug ")
    assert CronparseSettings.load().log_level == "DEBUG"


def test_log_level_env_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    """Invalid log_level env should raise configuration error."""
    monkeypatch.setenv("CRONPARSE_LOG_LEVEL", "LOUD")
    with pytest.raises(CronparseConfigError, match="'LOUD' is not a valid value for 'log_level'"):
        CronparseSettings.load()


def test_log_format_env_passthrough(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fields without a coercer are taken verbatim."""
    monkeypatch.setenv("CRONPARSE_LOG_FORMAT", "%(levelname)s %(message)s")
    assert CronparseSettings.load().log_format == "%(levelname)s %(message)s"


def test_kwargs_override_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keyword overrides win over environment variables."""
    monkeypatch.setenv("CRONPARSE_LOG_LEVEL", "DEBUG")
    assert CronparseSettings.load(log_level="ERROR").log_level == "ERROR"


def test_kwargs_cover_every_field(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every field can be overridden through load keyword arguments."""
    monkeypatch.setenv("CRONPARSE_LOG_FORMAT", "%(message)s")
    settings = CronparseSettings.load(log_level="INFO", log_format="%(name)s")
    assert dataclasses.asdict(settings) == {"log_level": "INFO", "log_format": "%(name)s"}


def test_settings_kwargs_matches_settings_fields() -> None:
    """Kwargs TypedDict should stay in sync with CronparseSettings fields."""
    settings_fields = {field.name for field in dataclasses.fields(CronparseSettings)}
    kwargs_fields = set(CronparseSettingsKwargs.__annotations__)
    assert settings_fields == kwargs_fields
