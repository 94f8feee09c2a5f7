"""Angle normalization, parsing, and formatting."""

from __future__ import annotations

import math
import re

from chart_tools.constants import (
    ARCMIN_PER_DEGREE,
    DEGREES_PER_CIRCLE,
    DPR,
    HALF_CIRCLE_DEGREES,
    OBLIQUITY_RAD,
    TWOPI,
)


def _normalize(value: float, modulus: float) -> float:
    """Reduce value into [0, modulus), handling negative input."""
    result = math.fmod(value, modulus)
    if result < 0.0:
        result += modulus
    # -1e-20 + 360.0 rounds to exactly 360.0
    if result >= modulus:
        result = 0.0
    return result


def normalize_degrees(value: float) -> float:
    """Normalize an angle in degrees to [0, 360)."""
    return _normalize(value, DEGREES_PER_CIRCLE)


def normalize_radians(value: float) -> float:
    """Normalize an angle in radians to [0, 2π)."""
    return _normalize(value, TWOPI)


def signed_difference(from_deg: float, to_deg: float) -> float:
    """Shortest signed rotation from from_deg to to_deg, in (-180, 180].

    Parameters:
        from_deg: Starting longitude in degrees.
        to_deg: Ending longitude in degrees.

    Returns:
        Positive when to_deg lies ahead (counterclockwise) of from_deg.
    """
    diff = normalize_degrees(to_deg - from_deg)
    if diff > HALF_CIRCLE_DEGREES:
        diff -= DEGREES_PER_CIRCLE
    return diff


def equatorial_to_ecliptic_longitude(ra: float, dec: float) -> float:
    """Convert equatorial coordinates to ecliptic longitude.

    Parameters:
        ra: Right ascension in radians.
        dec: Declination in radians.

    Returns:
        Ecliptic longitude in degrees, [0, 360).
    """
    lam = math.atan2(
        math.sin(ra) * math.cos(OBLIQUITY_RAD) + math.tan(dec) * math.sin(OBLIQUITY_RAD),
        math.cos(ra),
    )
    return normalize_degrees(lam * DPR)


def parse_angle(string: str) -> float | None:
    """Parse an angle given as degrees, minutes, and seconds.

    Accepts one to three whitespace-separated numbers ("40.7", "40 42",
    "40 42 46"). Minutes and seconds must be non-negative; a leading minus
    makes the whole angle negative.

    Parameters:
        string: Angle text.

    Returns:
        Angle in degrees, or None on parse failure.
    """
    s = string.strip()
    if not s:
        return None
    parts = re.split(r'\s+', s)
    if len(parts) > 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = abs(values[0])
    for power, v in enumerate(values[1:], start=1):
        angle += v / ARCMIN_PER_DEGREE**power
    if s.startswith('-'):
        angle = -angle
    return angle


def format_degree(value: float) -> str:
    """Format degrees as whole degrees and truncated arcminutes (e.g. "07°25'")."""
    d = int(value)
    m = int((value - d) * ARCMIN_PER_DEGREE)
    return f"{d:02d}°{m:02d}'"
