"""Ascendant and Midheaven from local sidereal time and latitude."""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

from chart_tools.angle_utils import normalize_degrees
from chart_tools.config import get_latitude_limit
from chart_tools.constants import DPR, HALF_CIRCLE_DEGREES, OBLIQUITY_RAD, RPD

logger = logging.getLogger(__name__)


class Angles(NamedTuple):
    """Chart angles in ecliptic longitude (degrees, [0, 360))."""

    ascendant: float
    midheaven: float
    latitude_clamped: bool = False


def clamp_latitude(latitude_deg: float, limit: float | None = None) -> tuple[float, bool]:
    """Clamp latitude to ±limit so that tan(latitude) stays finite.

    Parameters:
        latitude_deg: Geographic latitude in degrees.
        limit: Absolute limit in degrees; None reads config.get_latitude_limit().

    Returns:
        (latitude used, True if it was changed).
    """
    if limit is None:
        limit = get_latitude_limit()
    if latitude_deg > limit:
        return (limit, True)
    if latitude_deg < -limit:
        return (-limit, True)
    return (latitude_deg, False)


def compute_midheaven(lst: float) -> float:
    """Midheaven: ecliptic longitude culminating at local sidereal time lst (radians)."""
    mc = math.atan2(math.sin(lst), math.cos(lst) * math.cos(OBLIQUITY_RAD))
    return normalize_degrees(mc * DPR)


def compute_angles(lst: float, latitude_deg: float) -> Angles:
    """Compute Ascendant and Midheaven.

    The ascendant formula atan2(-cos θ, sin θ cos ε + tan φ sin ε) can land
    on the Descendant. The Ascendant always lies less than 180° ahead of the
    Midheaven, so a raw value more than 180° ahead is rotated by 180°.

    Parameters:
        lst: Local sidereal time in radians.
        latitude_deg: Geographic latitude in degrees (north positive).

    Returns:
        Angles(ascendant, midheaven, latitude_clamped).
    """
    latitude_used, clamped = clamp_latitude(latitude_deg)
    if clamped:
        logger.info('Latitude %.6f clamped to %.6f for ascendant', latitude_deg, latitude_used)

    cos_lst = math.cos(lst)
    sin_lst = math.sin(lst)
    cos_obl = math.cos(OBLIQUITY_RAD)
    sin_obl = math.sin(OBLIQUITY_RAD)
    tan_lat = math.tan(latitude_used * RPD)

    mc = compute_midheaven(lst)

    asc = normalize_degrees(math.atan2(-cos_lst, sin_lst * cos_obl + tan_lat * sin_obl) * DPR)
    if normalize_degrees(asc - mc) > HALF_CIRCLE_DEGREES:
        asc = normalize_degrees(asc + HALF_CIRCLE_DEGREES)
    return Angles(asc, mc, clamped)
