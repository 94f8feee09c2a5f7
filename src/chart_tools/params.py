"""Parameter parsing for the chart and ephemeris commands (CLI and API)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TextIO

from chart_tools.angle_utils import parse_angle
from chart_tools.chart import ObservationRequest
from chart_tools.constants import DEFAULT_INTERVAL, TIME_BODY_NAMES
from chart_tools.planets import parse_body
from chart_tools.time_utils import datetime_from_string

logger = logging.getLogger(__name__)

# Hemisphere letters accepted after a coordinate: letter -> (kind, sign)
_HEMISPHERES: dict[str, tuple[str, int]] = {
    'N': ('latitude', 1),
    'S': ('latitude', -1),
    'E': ('longitude', 1),
    'W': ('longitude', -1),
}

_COORD_LIMITS: dict[str, float] = {'latitude': 90.0, 'longitude': 180.0}

_UTC_OFFSET_RE = re.compile(r'^(?:UTC|GMT)?\s*([+-])?(\d{1,2})(?::?(\d{2}))?$', re.IGNORECASE)


def _parse_coordinate(value: str, kind: str) -> float:
    """Parse decimal or "D M S" degrees with an optional N/S/E/W suffix.

    Raises:
        ValueError: If the text is not an angle, the hemisphere letter does not
            fit kind, or the value is out of range.
    """
    text = value.strip().replace('°', ' ').replace("'", ' ').replace('"', ' ')
    sign = 1
    if text and text[-1].upper() in _HEMISPHERES:
        suffix_kind, sign = _HEMISPHERES[text[-1].upper()]
        if suffix_kind != kind:
            raise ValueError(f'Hemisphere {text[-1]!r} is not valid for {kind} {value!r}')
        text = text[:-1].strip()
        if text.startswith('-'):
            raise ValueError(f'Negative {kind} with hemisphere suffix: {value!r}')
    angle = parse_angle(text)
    if angle is None:
        raise ValueError(f'Invalid {kind} {value!r}')
    angle *= sign
    limit = _COORD_LIMITS[kind]
    if not -limit <= angle <= limit:
        raise ValueError(f'{kind.capitalize()} {angle:g} out of range [-{limit:g}, {limit:g}]')
    return angle


def parse_latitude(value: str) -> float:
    """Parse latitude in degrees, north positive (e.g. "51.5", "40 42 46 N")."""
    return _parse_coordinate(value, 'latitude')


def parse_longitude(value: str) -> float:
    """Parse longitude in degrees, east positive (e.g. "-0.13", "73 59 W")."""
    return _parse_coordinate(value, 'longitude')


def parse_utc_offset(value: str) -> float:
    """Parse a UTC offset in hours.

    Accepts decimal hours ("-5", "5.5") or clock form ("+05:30", "UTC-0800").

    Raises:
        ValueError: If the offset is malformed or beyond ±14 hours.
    """
    v = value.strip()
    try:
        hours = float(v)
    except ValueError:
        match = _UTC_OFFSET_RE.match(v)
        if match is None:
            raise ValueError(f'Invalid UTC offset {value!r}') from None
        sign_s, hh, mm = match.groups()
        hours = int(hh) + int(mm or 0) / 60.0
        if sign_s == '-':
            hours = -hours
    if abs(hours) > 14.0:
        raise ValueError(f'UTC offset {hours:g} h out of range [-14, 14]')
    return hours


def parse_body_list(tokens: list[str]) -> list[str]:
    """Convert body tokens to canonical names, in order, without duplicates.

    'all' (or no tokens) selects every time-dependent chart body. Unknown
    names are skipped (logged).
    """
    if not tokens or any(t.strip().lower() == 'all' for t in tokens):
        return list(TIME_BODY_NAMES)
    out: list[str] = []
    for token in tokens:
        try:
            name = parse_body(token)
        except ValueError as e:
            logger.warning('%s', e)
            continue
        if name not in out:
            out.append(name)
    return out


def _normalize_time_unit(value: str) -> str:
    """Normalize time unit spelling to one of sec/min/hour/day."""
    v = value.strip().lower()
    if v.startswith('sec'):
        return 'sec'
    if v.startswith('min'):
        return 'min'
    if v.startswith('hour') or v == 'h':
        return 'hour'
    if v.startswith('day') or v == 'd':
        return 'day'
    return v


@dataclass
class ChartParams:
    """Inputs for one chart as given on the command line.

    Parameters:
        date_str: Local civil date/time string (rms-julian formats).
        latitude_deg: Latitude in degrees, north positive.
        longitude_deg: Longitude in degrees, east positive.
        utc_offset_hours: Fixed offset of date_str from UTC.
        timezone: IANA zone name; overrides utc_offset_hours when set.
        name: Label for the chart.
        output: Stream for the report.
    """

    date_str: str
    latitude_deg: float
    longitude_deg: float
    utc_offset_hours: float = 0.0
    timezone: str | None = None
    name: str = ''
    output: TextIO | None = None


@dataclass
class EphemerisParams:
    """Parameters for a longitude table over a time range."""

    start_time: str
    stop_time: str
    interval: float = DEFAULT_INTERVAL
    time_unit: str = 'day'
    bodies: list[str] = field(default_factory=lambda: list(TIME_BODY_NAMES))
    output: TextIO | None = None


def request_from_params(params: ChartParams) -> ObservationRequest:
    """Build an ObservationRequest, parsing the date string.

    Raises:
        ValueError: If the date string cannot be parsed.
    """
    moment = datetime_from_string(params.date_str)
    if moment is None:
        raise ValueError(f'Invalid date/time {params.date_str!r}')
    return ObservationRequest(
        moment=moment,
        latitude_deg=params.latitude_deg,
        longitude_deg=params.longitude_deg,
        utc_offset_hours=params.utc_offset_hours,
        timezone=params.timezone,
        name=params.name,
    )
