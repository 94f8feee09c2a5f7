"""Geocentric ecliptic longitudes of the chart bodies.

Planets Mercury through Neptune come from Keplerian elements (JPL
"Approximate Positions of the Major Planets"). The Sun is placed opposite
the Earth's heliocentric longitude. The Moon, Pluto, mean lunar node and
mean Lilith use short closed-form series (Meeus, Astronomical Algorithms).
All longitudes are mean-equinox-of-date values in degrees, [0, 360).
"""

from __future__ import annotations

import math
from collections.abc import Callable

from chart_tools.angle_utils import normalize_degrees, normalize_radians, signed_difference
from chart_tools.constants import (
    DPR,
    LILITH,
    MOON,
    MOVING_PLANET_NAMES,
    NORTH_NODE,
    ONE_DAY_CENTURIES,
    PLUTO,
    RPD,
    SUN,
)
from chart_tools.kepler import solve_kepler
from chart_tools.planets import EARTH_ELEMENTS, OrbitalElementSet, get_elements, has_elements


def heliocentric_position(elements: OrbitalElementSet, t: float) -> tuple[float, float, float]:
    """Heliocentric ecliptic coordinates of a planet.

    Parameters:
        elements: Keplerian element set.
        t: Julian centuries from J2000.0.

    Returns:
        (longitude deg in [0, 360), latitude deg, radius AU).
    """
    x, y, z = heliocentric_rectangular(elements, t)
    lon = math.atan2(y, x) * DPR
    lat = math.atan2(z, math.hypot(x, y)) * DPR
    r = math.sqrt(x * x + y * y + z * z)
    return (normalize_degrees(lon), lat, r)


def heliocentric_rectangular(elements: OrbitalElementSet, t: float) -> tuple[float, float, float]:
    """Heliocentric ecliptic rectangular coordinates (AU) of a planet at t centuries."""
    el = elements.propagate(t)
    a = el.a
    e = el.e
    incl = el.incl * RPD
    mean_lon = normalize_degrees(el.mean_lon)
    peri_lon = normalize_degrees(el.peri_lon)
    node_lon = normalize_degrees(el.node_lon)

    arg_peri = (peri_lon - node_lon) * RPD
    mean_anom = normalize_radians((mean_lon - peri_lon) * RPD)
    ecc_anom = solve_kepler(mean_anom, e)

    # Position in the orbital plane, x' toward perihelion
    xp = a * (math.cos(ecc_anom) - e)
    yp = a * math.sqrt(1.0 - e * e) * math.sin(ecc_anom)
    r = math.hypot(xp, yp)
    u = math.atan2(yp, xp) + arg_peri  # argument of latitude

    node = node_lon * RPD
    cos_u = math.cos(u)
    sin_u = math.sin(u)
    x = r * (math.cos(node) * cos_u - math.sin(node) * sin_u * math.cos(incl))
    y = r * (math.sin(node) * cos_u + math.cos(node) * sin_u * math.cos(incl))
    z = r * sin_u * math.sin(incl)
    return (x, y, z)


def geocentric_longitude(elements: OrbitalElementSet, t: float) -> float:
    """Geocentric ecliptic longitude (deg) of a planet: planet minus Earth, projected."""
    px, py, _ = heliocentric_rectangular(elements, t)
    ex, ey, _ = heliocentric_rectangular(EARTH_ELEMENTS, t)
    return normalize_degrees(math.atan2(py - ey, px - ex) * DPR)


def sun_longitude(t: float) -> float:
    """Geocentric longitude of the Sun: Earth's heliocentric longitude + 180°."""
    earth_lon, _, _ = heliocentric_position(EARTH_ELEMENTS, t)
    return normalize_degrees(earth_lon + 180.0)


def moon_longitude(t: float) -> float:
    """Geocentric longitude of the Moon, about 0.5° accuracy.

    Mean longitude plus the 13 largest periodic terms of Meeus chapter 47.
    """
    t2 = t * t
    t3 = t2 * t
    mean_lon = normalize_degrees(218.3164477 + 481267.88123421 * t - 0.0015786 * t2 + t3 / 538841.0)
    elong = normalize_degrees(297.8501921 + 445267.1114034 * t - 0.0018819 * t2 + t3 / 545868.0)
    sun_anom = normalize_degrees(357.5291092 + 35999.0502909 * t - 0.0001536 * t2)
    moon_anom = normalize_degrees(134.9633964 + 477198.8675055 * t + 0.0087414 * t2 + t3 / 69699.0)
    arg_lat = normalize_degrees(93.2720950 + 483202.0175233 * t - 0.0036539 * t2)

    d = elong * RPD
    m = sun_anom * RPD
    mp = moon_anom * RPD
    f = arg_lat * RPD

    lon = mean_lon
    lon += 6.289 * math.sin(mp)
    lon += 1.274 * math.sin(2 * d - mp)
    lon += 0.658 * math.sin(2 * d)
    lon += 0.214 * math.sin(2 * mp)
    lon -= 0.186 * math.sin(m)
    lon -= 0.114 * math.sin(2 * f)
    lon += 0.059 * math.sin(2 * d - 2 * mp)
    lon += 0.057 * math.sin(2 * d - m - mp)
    lon += 0.053 * math.sin(2 * d + mp)
    lon += 0.046 * math.sin(2 * d - m)
    lon -= 0.041 * math.sin(m - mp)
    lon -= 0.035 * math.sin(d)
    lon -= 0.031 * math.sin(m + mp)
    return normalize_degrees(lon)


def pluto_longitude(t: float) -> float:
    """Geocentric longitude of Pluto, about 1° accuracy for 1885-2099.

    Mean longitude with four Jupiter/Saturn perturbation terms, then a
    first-order parallax shift for the Earth's offset from the Sun
    (1 / 39.5 AU mean distance).
    """
    lon = normalize_degrees(238.92903833 + 145.20780515 * t)

    s = (50.03 + 1222.11 * t) * RPD
    p = (238.96 + 144.96 * t) * RPD
    lon += -1.274 * math.sin(p - 2 * s)
    lon += 1.365 * math.sin(p - s)
    lon += -0.327 * math.sin(p)
    lon += 0.331 * math.sin(2 * p - 3 * s)

    earth_lon, _, _ = heliocentric_position(EARTH_ELEMENTS, t)
    parallax = (1.0 / 39.5) * math.sin((earth_lon - lon) * RPD)
    lon += parallax * DPR
    return normalize_degrees(lon)


def north_node_longitude(t: float) -> float:
    """Longitude of the mean ascending node of the lunar orbit."""
    return normalize_degrees(125.0445479 - 1934.1362891 * t + 0.0020754 * t * t + t**3 / 467441.0)


def lilith_longitude(t: float) -> float:
    """Longitude of mean Black Moon Lilith (mean lunar apogee).

    The series gives the mean perigee; the apogee lies opposite.
    """
    perigee = normalize_degrees(83.3532465 + 4069.0137287 * t - 0.0103200 * t * t - t**3 / 80053.0)
    return normalize_degrees(perigee + 180.0)


_SPECIAL_BODIES: dict[str, Callable[[float], float]] = {
    SUN: sun_longitude,
    MOON: moon_longitude,
    PLUTO: pluto_longitude,
    NORTH_NODE: north_node_longitude,
    LILITH: lilith_longitude,
}


def body_longitude(name: str, t: float) -> float:
    """Geocentric longitude (deg) of any time-dependent chart body.

    Parameters:
        name: Canonical body name (see chart_tools.constants.TIME_BODY_NAMES).
        t: Julian centuries from J2000.0.

    Raises:
        KeyError: If name is not a chart body (Earth included).
    """
    func = _SPECIAL_BODIES.get(name)
    if func is not None:
        return func(t)
    if has_elements(name) and name.lower() != 'earth':
        return geocentric_longitude(get_elements(name), t)
    raise KeyError(f'Unknown chart body {name!r}')


def daily_motion(name: str, t: float) -> float:
    """Change in longitude over one day from t, in degrees (-180, 180]."""
    today = body_longitude(name, t)
    tomorrow = body_longitude(name, t + ONE_DAY_CENTURIES)
    return signed_difference(today, tomorrow)


def is_retrograde(name: str, t: float) -> bool:
    """True if a planet's longitude decreases over the next day.

    The Sun, Moon, lunar node and Lilith are never flagged.
    """
    if name not in MOVING_PLANET_NAMES:
        return False
    return daily_motion(name, t) < 0.0
