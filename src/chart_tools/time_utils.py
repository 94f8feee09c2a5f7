"""Julian dates, sidereal time, and date parsing around rms-julian."""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import julian

from chart_tools.angle_utils import normalize_degrees, normalize_radians
from chart_tools.config import get_leapsecs_path
from chart_tools.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DEFAULT_MIN_INTERVAL_SECONDS,
    JD_J2000,
    JD_J2000_MIDNIGHT,
    JD_UNIX_EPOCH,
    RPD,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load the leap seconds table used by rms-julian string parsing.

    Uses JULIAN_LEAPSECS when set; otherwise, or when that file cannot be
    read, falls back to the LSK bundled with rms-julian.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info(
                'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
                path,
                e,
            )
    julian.load_lsk()
    _leapsecs_loaded = True


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse a date/time string to UTC (day, sec).

    Parameters:
        string: Date/time string in any format accepted by rms-julian; a
            trailing ISO "Z" and the "YYYY HH:MM:SS" form are also accepted.

    Returns:
        (day, sec) where day counts days since 2000-01-01 and sec is seconds
        within that day; None on parse failure.
    """
    _ensure_leapsecs()
    candidate_strings = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO UTC suffix "Z".
        candidate_strings.append(stripped[:-1])
    year_hms_match = re.fullmatch(r'(\d{4})\s+(\d{1,2}:\d{2}:\d{2})', stripped)
    if year_hms_match is not None:
        year, hms = year_hms_match.groups()
        candidate_strings.append(f'{year}-01-01 {hms}')
    for candidate in candidate_strings:
        try:
            result = julian.day_sec_from_string(candidate)
            day, sec = result[0], result[1]
            return (int(day), float(sec))
        except (ValueError, TypeError, LookupError, OSError):
            continue
    return None


def datetime_from_day_sec(day: int, sec: float) -> datetime:
    """Convert (day, sec) since 2000-01-01 to a naive civil datetime.

    Parameters:
        day: Days since 2000-01-01.
        sec: Seconds within that day.

    Returns:
        Naive datetime with the same wall-clock reading.
    """
    year, month, mday = julian.ymd_from_day(day)
    return datetime(int(year), int(month), int(mday)) + timedelta(seconds=float(sec))


def datetime_from_string(string: str) -> datetime | None:
    """Parse a date/time string to a naive datetime, or None on failure."""
    parsed = parse_datetime(string)
    if parsed is None:
        return None
    return datetime_from_day_sec(*parsed)


def to_utc(
    moment: datetime,
    utc_offset_hours: float = 0.0,
    tz_name: str | None = None,
) -> datetime:
    """Convert a civil moment to an aware UTC datetime.

    Aware datetimes are converted directly. Naive datetimes are localized with
    the IANA zone tz_name when given, otherwise shifted by utc_offset_hours.

    Raises:
        ValueError: If tz_name is not a known IANA zone.
    """
    if moment.tzinfo is not None:
        return moment.astimezone(timezone.utc)
    if tz_name:
        try:
            zone = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f'Unknown time zone {tz_name!r}') from e
        return moment.replace(tzinfo=zone).astimezone(timezone.utc)
    utc = moment - timedelta(hours=utc_offset_hours)
    return utc.replace(tzinfo=timezone.utc)


def julian_date(moment: datetime) -> float:
    """Julian Date of an instant; naive datetimes are taken as UTC.

    Counts civil (UTC) days from the Unix epoch; leap seconds are ignored.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return JD_UNIX_EPOCH + moment.timestamp() / SECONDS_PER_DAY


def julian_date_from_day_sec(day: int, sec: float) -> float:
    """Julian Date from rms-julian (day, sec) since 2000-01-01 00:00."""
    return JD_J2000_MIDNIGHT + day + sec / SECONDS_PER_DAY


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - JD_J2000) / DAYS_PER_JULIAN_CENTURY


def gmst(jd: float) -> float:
    """Greenwich Mean Sidereal Time in radians, [0, 2π).

    IAU expression from Meeus, Astronomical Algorithms (12.4).
    """
    t = julian_centuries(jd)
    theta = (
        280.46061837
        + 360.98564736629 * (jd - JD_J2000)
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )
    return normalize_degrees(theta) * RPD


def local_sidereal_time(jd: float, longitude_deg: float) -> float:
    """Local Sidereal Time in radians, [0, 2π).

    Parameters:
        jd: Julian Date (UT).
        longitude_deg: Geographic longitude in degrees, east positive.
    """
    return normalize_radians(gmst(jd) + longitude_deg * math.pi / 180.0)


def interval_seconds(
    interval: float,
    time_unit: str,
    *,
    min_seconds: float = DEFAULT_MIN_INTERVAL_SECONDS,
) -> float:
    """Convert interval and time_unit to seconds.

    Parameters:
        interval: Numeric interval value.
        time_unit: One of 'sec', 'min', 'hour', 'day' (case-insensitive, first 4 chars).
        min_seconds: Minimum returned value.

    Returns:
        Interval in seconds, at least min_seconds.
    """
    u = time_unit.strip().lower()[:4]
    if u in ('sec', 'seco'):
        dsec = abs(interval)
    elif u in ('min', 'minu'):
        dsec = abs(interval) * SECONDS_PER_MINUTE
    elif u == 'hour':
        dsec = abs(interval) * SECONDS_PER_HOUR
    elif u in ('day', 'days'):
        dsec = abs(interval) * SECONDS_PER_DAY
    else:
        raise ValueError(f'Invalid time_unit {time_unit!r}; expected one of sec, min, hour, day')
    return max(dsec, min_seconds)
