"""Longitude table generator: geocentric longitudes over a time range."""

from __future__ import annotations

import logging
import math
from typing import TextIO

import numpy as np

from chart_tools.constants import (
    JD_J2000_MIDNIGHT,
    MAX_EPHEMERIS_STEPS,
    SECONDS_PER_DAY,
    SECONDS_PER_MINUTE,
    TIME_BODY_NAMES,
)
from chart_tools.params import EphemerisParams
from chart_tools.positions import body_longitude, is_retrograde
from chart_tools.time_utils import (
    datetime_from_day_sec,
    interval_seconds,
    julian_centuries,
    julian_date_from_day_sec,
    parse_datetime,
)

logger = logging.getLogger(__name__)

RETROGRADE_MARK = 'R'


def longitude_series(name: str, jds: np.ndarray) -> np.ndarray:
    """Geocentric longitude (deg) of one body at each Julian Date in jds.

    Raises:
        KeyError: If name is not a time-dependent chart body.
    """
    jds = np.asarray(jds, dtype=np.float64)
    return np.fromiter(
        (body_longitude(name, julian_centuries(float(jd))) for jd in jds.ravel()),
        dtype=np.float64,
        count=jds.size,
    ).reshape(jds.shape)


def time_grid(params: EphemerisParams) -> np.ndarray:
    """Julian Dates from start to stop (inclusive) in steps of the interval.

    Raises:
        ValueError: For unparseable times, fewer than 2 steps, or more than
            MAX_EPHEMERIS_STEPS steps.
    """
    start_parsed = parse_datetime(params.start_time)
    stop_parsed = parse_datetime(params.stop_time)
    if start_parsed is None or stop_parsed is None:
        raise ValueError('Invalid start or stop time')
    jd1 = julian_date_from_day_sec(*start_parsed)
    jd2 = julian_date_from_day_sec(*stop_parsed)
    dsec = interval_seconds(params.interval, params.time_unit)
    # Small slack so that an exact multiple of the interval includes stop.
    ntimes = int(math.floor((jd2 - jd1) * SECONDS_PER_DAY / dsec + 1e-6)) + 1
    if ntimes < 2:
        raise ValueError('Time range too short or interval too large')
    if ntimes > MAX_EPHEMERIS_STEPS:
        raise ValueError(f'Number of time steps exceeds limit of {MAX_EPHEMERIS_STEPS}')
    return jd1 + np.arange(ntimes, dtype=np.float64) * (dsec / SECONDS_PER_DAY)


def _ymdhm(jd: float) -> str:
    """Calendar date and time rounded to the minute, as 'yyyy mo dy hr mi'."""
    days = jd - JD_J2000_MIDNIGHT
    day = math.floor(days)
    sec = SECONDS_PER_MINUTE * round((days - day) * SECONDS_PER_DAY / SECONDS_PER_MINUTE)
    if sec >= SECONDS_PER_DAY:
        day += 1
        sec = 0.0
    dt = datetime_from_day_sec(int(day), sec)
    return f'{dt.year:4d}{dt.month:3d}{dt.day:3d}{dt.hour:3d}{dt.minute:3d}'


def _write_row(stream: TextIO, fields: list[str]) -> None:
    line = ' '.join(fields).rstrip()
    if line:
        stream.write(line + '\n')


def generate_ephemeris(params: EphemerisParams, output: TextIO | None = None) -> None:
    """Generate the longitude table and write it to output.

    If output is None, uses params.output. If both are None, no output is
    written. Each row holds the Julian Date, the UTC calendar time, and one
    longitude column per body; an R follows the longitude of a planet that is
    retrograde at that time.

    Raises:
        ValueError: For invalid times or body names (see time_grid).
    """
    out = output or params.output
    if out is None:
        return

    bodies = list(params.bodies) or list(TIME_BODY_NAMES)
    unknown = [b for b in bodies if b not in TIME_BODY_NAMES]
    if unknown:
        raise ValueError(f'Unknown bodies: {", ".join(unknown)}')

    jds = time_grid(params)
    logger.debug('Ephemeris table: %d rows x %d bodies', jds.size, len(bodies))
    columns = {name: longitude_series(name, jds) for name in bodies}

    _write_row(out, ['      jd     ', 'year mo dy hr mi'] + [f'{name[:9]:>10}' for name in bodies])
    for i, jd in enumerate(jds):
        t = julian_centuries(float(jd))
        fields = [f'{jd:13.5f}', _ymdhm(float(jd))]
        for name in bodies:
            mark = RETROGRADE_MARK if is_retrograde(name, t) else ' '
            fields.append(f'{columns[name][i]:9.4f}{mark}')
        _write_row(out, fields)
