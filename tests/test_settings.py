"""Tests for Settings loading."""

from __future__ import annotations

import pytest

from typed_template.config import Settings, get_settings


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.log_level == "WARNING"
    assert settings.log_file is None
    assert settings.validate_types is True
    assert settings.falsy_is_missing is False
    assert settings.batch_output_column == "rendered"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALSY_IS_MISSING", "true")
    monkeypatch.setenv("BATCH_OUTPUT_COLUMN", "body")

    settings = Settings(_env_file=None)

    assert settings.falsy_is_missing is True
    assert settings.batch_output_column == "body"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
