"""Tests for Julian dates, sidereal time, and rms-julian date parsing."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

import pytest

from chart_tools import time_utils
from chart_tools.time_utils import (
    datetime_from_string,
    gmst,
    interval_seconds,
    julian_centuries,
    julian_date,
    julian_date_from_day_sec,
    local_sidereal_time,
    parse_datetime,
    to_utc,
)


def test_julian_date_at_j2000_and_unix_epoch() -> None:
    """J2000.0 noon is JD 2451545.0; the Unix epoch is JD 2440587.5."""
    assert julian_date(datetime(2000, 1, 1, 12, 0, 0)) == 2451545.0
    assert julian_date(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2440587.5


def test_julian_date_before_unix_epoch() -> None:
    """Dates before 1970 give JDs below the Unix-epoch JD."""
    jd = julian_date(datetime(1969, 7, 20, 20, 17, 0))
    assert jd == pytest.approx(2440423.34514, abs=1e-5)


def test_julian_date_respects_aware_datetimes() -> None:
    """An aware datetime is converted to UTC before counting days."""
    plus_two = timezone(timedelta(hours=2))
    assert julian_date(datetime(2000, 1, 1, 14, 0, 0, tzinfo=plus_two)) == 2451545.0


def test_julian_centuries() -> None:
    """One Julian century is 36525 days from J2000.0."""
    assert julian_centuries(2451545.0) == 0.0
    assert julian_centuries(2451545.0 + 36525.0) == pytest.approx(1.0)
    assert julian_centuries(2451545.0 - 36525.0) == pytest.approx(-1.0)


def test_gmst_at_j2000() -> None:
    """GMST at J2000.0 is 280.46061837 degrees."""
    assert gmst(2451545.0) == pytest.approx(math.radians(280.46061837), abs=1e-12)


def test_local_sidereal_time_adds_longitude() -> None:
    """LST is GMST shifted east by the longitude and kept in [0, 2π)."""
    jd = 2451545.0
    expected = (gmst(jd) + math.pi) % (2 * math.pi)
    assert local_sidereal_time(jd, 180.0) == pytest.approx(expected)
    for lon in (-180.0, -75.5, 0.0, 23.47, 179.9):
        lst = local_sidereal_time(jd + 0.37, lon)
        assert 0.0 <= lst < 2 * math.pi


def test_to_utc_fixed_offset() -> None:
    """Naive local time minus the offset gives UTC."""
    utc = to_utc(datetime(1969, 7, 20, 16, 17), utc_offset_hours=-4.0)
    assert utc == datetime(1969, 7, 20, 20, 17, tzinfo=timezone.utc)


def test_to_utc_rejects_unknown_zone() -> None:
    """An unknown IANA zone raises ValueError."""
    with pytest.raises(ValueError, match='Unknown time zone'):
        to_utc(datetime(2000, 1, 1), tz_name='Not/AZone')


def test_julian_date_from_day_sec() -> None:
    """Day 0, noon is J2000.0."""
    assert julian_date_from_day_sec(0, 43200.0) == 2451545.0
    assert julian_date_from_day_sec(-1, 0.0) == 2451543.5


def test_ensure_leapsecs_falls_back_to_bundled_lsk(monkeypatch: pytest.MonkeyPatch) -> None:
    """An unreadable JULIAN_LEAPSECS file falls back to the rms-julian LSK."""
    calls: list[str | None] = []

    def _load_lsk(path: str | None = None) -> None:
        calls.append(path)
        if path is not None:
            raise OSError('missing')

    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setenv('JULIAN_LEAPSECS', 'dummy.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert calls == ['dummy.tls', None]
    assert time_utils._leapsecs_loaded is True


def test_parse_datetime_accepts_iso_z_suffix() -> None:
    """ISO-8601 trailing Z parses like the same timestamp without Z."""
    with_z = parse_datetime('1969-07-20T20:17:00Z')
    without_z = parse_datetime('1969-07-20T20:17:00')
    assert with_z is not None
    assert with_z == without_z


def test_parse_datetime_invalid_returns_none() -> None:
    """Unparseable text gives None instead of raising."""
    assert parse_datetime('not a date') is None
    assert datetime_from_string('not a date') is None


def test_datetime_from_string_round_trip() -> None:
    """Parsed strings give the same wall-clock datetime and JD."""
    moment = datetime_from_string('1969-07-20 20:17:00')
    assert moment == datetime(1969, 7, 20, 20, 17, 0)
    day_sec = parse_datetime('2000-01-01 12:00:00')
    assert day_sec == (0, 43200.0)


def test_interval_seconds() -> None:
    """Interval conversion for each supported unit."""
    assert interval_seconds(1, 'hour') == 3600.0
    assert interval_seconds(1, 'day') == 86400.0
    assert interval_seconds(2, 'days') == 172800.0
    assert interval_seconds(5, 'min') == 300.0
    assert interval_seconds(0.5, 'sec') == 1.0
    with pytest.raises(ValueError, match='Invalid time_unit'):
        interval_seconds(1, 'fortnight')
