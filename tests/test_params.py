"""Tests for chart and ephemeris parameter parsing."""

from __future__ import annotations

from datetime import datetime

import pytest

from chart_tools.constants import TIME_BODY_NAMES
from chart_tools.params import (
    ChartParams,
    EphemerisParams,
    _normalize_time_unit,
    parse_body_list,
    parse_latitude,
    parse_longitude,
    parse_utc_offset,
    request_from_params,
)


def test_parse_latitude_forms() -> None:
    """Decimal, DMS, and hemisphere-suffixed latitudes."""
    assert parse_latitude('51.5') == pytest.approx(51.5)
    assert parse_latitude('-33.87') == pytest.approx(-33.87)
    assert parse_latitude('40 42 46 N') == pytest.approx(40.712778, abs=1e-6)
    assert parse_latitude('33 52 S') == pytest.approx(-33.866667, abs=1e-6)
    assert parse_latitude('40°42\'46"N') == pytest.approx(40.712778, abs=1e-6)


def test_parse_longitude_forms() -> None:
    """East is positive; a W suffix negates."""
    assert parse_longitude('23.47') == pytest.approx(23.47)
    assert parse_longitude('73 59 W') == pytest.approx(-73.983333, abs=1e-6)
    assert parse_longitude('151 12 E') == pytest.approx(151.2)


@pytest.mark.parametrize('value', ['95', '-90.5', '10 E', 'north', '-10 N', ''])
def test_parse_latitude_rejects(value: str) -> None:
    """Out-of-range values, wrong hemispheres, and junk raise ValueError."""
    with pytest.raises(ValueError):
        parse_latitude(value)


def test_parse_longitude_rejects() -> None:
    """Longitude is limited to ±180 and to E/W suffixes."""
    with pytest.raises(ValueError):
        parse_longitude('181')
    with pytest.raises(ValueError, match='Hemisphere'):
        parse_longitude('10 N')


@pytest.mark.parametrize(
    ('value', 'expected'),
    [
        ('-5', -5.0),
        ('5.5', 5.5),
        ('+05:30', 5.5),
        ('-03:30', -3.5),
        ('UTC-0800', -8.0),
        ('GMT+1', 1.0),
        ('0', 0.0),
    ],
)
def test_parse_utc_offset(value: str, expected: float) -> None:
    """Decimal hours and clock-style offsets."""
    assert parse_utc_offset(value) == pytest.approx(expected)


@pytest.mark.parametrize('value', ['abc', '15', '-14:30', '5:7'])
def test_parse_utc_offset_rejects(value: str) -> None:
    """Malformed or out-of-range offsets raise ValueError."""
    with pytest.raises(ValueError):
        parse_utc_offset(value)


def test_parse_body_list() -> None:
    """Tokens map to canonical names; duplicates and unknowns are dropped."""
    assert parse_body_list(['mars', 'Sun', 'MARS', 'vulcan', 'node']) == ['Mars', 'Sun', 'N Node']
    assert parse_body_list([]) == list(TIME_BODY_NAMES)
    assert parse_body_list(['moon', 'all']) == list(TIME_BODY_NAMES)


def test_normalize_time_unit() -> None:
    """Unit spellings collapse to sec/min/hour/day."""
    assert _normalize_time_unit('Seconds') == 'sec'
    assert _normalize_time_unit('minutes') == 'min'
    assert _normalize_time_unit('h') == 'hour'
    assert _normalize_time_unit('Days') == 'day'


def test_ephemeris_params_defaults() -> None:
    """Default table is daily and covers every time-dependent body."""
    params = EphemerisParams(start_time='2000-01-01', stop_time='2000-02-01')
    assert params.interval == 1.0
    assert params.time_unit == 'day'
    assert params.bodies == list(TIME_BODY_NAMES)
    assert params.output is None


def test_request_from_params() -> None:
    """Chart params become an ObservationRequest with a parsed moment."""
    params = ChartParams(
        date_str='1969-07-20 16:17:00',
        latitude_deg=0.67,
        longitude_deg=23.47,
        utc_offset_hours=-4.0,
        name='Tranquility',
    )
    request = request_from_params(params)
    assert request.moment == datetime(1969, 7, 20, 16, 17, 0)
    assert request.utc_offset_hours == -4.0
    assert request.name == 'Tranquility'


def test_request_from_params_invalid_date() -> None:
    """Unparseable dates raise ValueError naming the input."""
    params = ChartParams(date_str='yesterday-ish', latitude_deg=0.0, longitude_deg=0.0)
    with pytest.raises(ValueError, match='Invalid date/time'):
        request_from_params(params)
