"""Tests for environment-driven configuration."""

from __future__ import annotations

import importlib

import pytest

from merkle_funnel import config


@pytest.fixture(autouse=True)
def _restore_config(monkeypatch: pytest.MonkeyPatch):
    """Reload the config module with a clean environment after each test."""
    yield
    monkeypatch.delenv("FUNNEL_LOG_LEVEL", raising=False)
    importlib.reload(config)


def test_default_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without the variable the level is WARNING."""
    monkeypatch.delenv("FUNNEL_LOG_LEVEL", raising=False)
    assert importlib.reload(config).FUNNEL_LOG_LEVEL == "WARNING"


@pytest.mark.parametrize("value, expected", [("debug", "DEBUG"), ("Info", "INFO")])
def test_log_level_is_case_insensitive(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: str
) -> None:
    """Levels are normalized to upper case."""
    monkeypatch.setenv("FUNNEL_LOG_LEVEL", value)
    assert importlib.reload(config).FUNNEL_LOG_LEVEL == expected


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unknown levels are rejected at import."""
    monkeypatch.setenv("FUNNEL_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="Invalid FUNNEL_LOG_LEVEL"):
        importlib.reload(config)
