"""Tests for the ephemeris subcommand."""

from __future__ import annotations

import sys
from typing import Any

import pytest

from chart_tools.cli import main as cli_main


def test_cli_ephemeris_bodies_and_unit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Body names, interval, and unit are parsed into EphemerisParams."""
    captured: dict[str, Any] = {}

    def _fake_generate(params, *_args, **_kwargs):  # type: ignore[no-untyped-def]
        captured['value'] = params
        return None

    monkeypatch.setattr('chart_tools.cli.main.generate_ephemeris', _fake_generate)
    monkeypatch.setattr('chart_tools.cli.main.write_ephemeris_summary', lambda *_: None)
    monkeypatch.setattr(
        sys,
        'argv',
        [
            'chart-tools',
            'ephemeris',
            '--start',
            '2025-01-01 00:00',
            '--stop',
            '2025-01-02 00:00',
            '--interval',
            '6',
            '--time-unit',
            'hour',
            '--bodies',
            'moon',
            'north node',
            'pluto',
        ],
    )
    rc = cli_main.main()
    assert rc == 0
    params = captured['value']
    assert params.bodies == ['Moon', 'N Node', 'Pluto']
    assert params.interval == 6.0
    assert params.time_unit == 'hour'


def test_cli_ephemeris_table(capsys: pytest.CaptureFixture[str]) -> None:
    """The real table has one row per day after the header."""
    rc = cli_main.main(
        [
            'ephemeris',
            '--start',
            '2000-01-01 00:00:00',
            '--stop',
            '2000-01-05 00:00:00',
            '--bodies',
            'sun',
            'mars',
        ]
    )
    assert rc == 0
    out = capsys.readouterr().out
    assert 'Bodies: Sun, Mars' in out
    rows = [line for line in out.splitlines() if line.startswith('24515')]
    assert len(rows) == 5


def test_cli_ephemeris_no_valid_bodies(capsys: pytest.CaptureFixture[str]) -> None:
    """Only unknown bodies gives exit code 1."""
    rc = cli_main.main(
        ['ephemeris', '--start', '2000-01-01', '--stop', '2000-01-02', '--bodies', 'vulcan']
    )
    assert rc == 1
    assert 'no valid bodies' in capsys.readouterr().err


def test_cli_ephemeris_bad_range(capsys: pytest.CaptureFixture[str]) -> None:
    """A stop before start is reported as an error."""
    rc = cli_main.main(['ephemeris', '--start', '2000-01-05', '--stop', '2000-01-01'])
    assert rc == 1
    assert 'Error:' in capsys.readouterr().err
