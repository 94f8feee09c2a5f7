"""Tests for environment configuration."""

from __future__ import annotations

import pytest

from chart_tools.config import get_latitude_limit, get_leapsecs_path, get_log_level
from chart_tools.constants import DEFAULT_LATITUDE_LIMIT


def test_latitude_limit_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without the env var the built-in limit is used."""
    monkeypatch.delenv('CHART_TOOLS_LATITUDE_LIMIT', raising=False)
    assert get_latitude_limit() == DEFAULT_LATITUDE_LIMIT


def test_latitude_limit_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """A valid env value overrides the default."""
    monkeypatch.setenv('CHART_TOOLS_LATITUDE_LIMIT', '85.5')
    assert get_latitude_limit() == 85.5


@pytest.mark.parametrize('raw', ['abc', '0', '90', '-10', '120'])
def test_latitude_limit_invalid_env_falls_back(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    """Non-numeric or out-of-range values fall back to the default."""
    monkeypatch.setenv('CHART_TOOLS_LATITUDE_LIMIT', raw)
    assert get_latitude_limit() == DEFAULT_LATITUDE_LIMIT


def test_leapsecs_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """JULIAN_LEAPSECS is returned when set, None otherwise."""
    monkeypatch.delenv('JULIAN_LEAPSECS', raising=False)
    assert get_leapsecs_path() is None
    monkeypatch.setenv('JULIAN_LEAPSECS', '/tmp/naif0012.tls')
    assert get_leapsecs_path() == '/tmp/naif0012.tls'


def test_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """CHART_TOOLS_LOG overrides the default level when valid."""
    monkeypatch.delenv('CHART_TOOLS_LOG', raising=False)
    assert get_log_level() == 'WARNING'
    monkeypatch.setenv('CHART_TOOLS_LOG', 'info')
    assert get_log_level() == 'INFO'
    monkeypatch.setenv('CHART_TOOLS_LOG', 'loud')
    assert get_log_level('DEBUG') == 'DEBUG'
