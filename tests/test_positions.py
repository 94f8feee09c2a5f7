"""Tests for geocentric longitudes of the chart bodies."""

from __future__ import annotations

import math
from datetime import datetime

import pytest

from chart_tools.constants import MOVING_PLANET_NAMES, TIME_BODY_NAMES
from chart_tools.planets import EARTH_ELEMENTS, MERCURY_ELEMENTS
from chart_tools.positions import (
    body_longitude,
    daily_motion,
    heliocentric_position,
    heliocentric_rectangular,
    is_retrograde,
    lilith_longitude,
    moon_longitude,
    north_node_longitude,
    sun_longitude,
)
from chart_tools.time_utils import julian_centuries, julian_date


def _t(*args: int) -> float:
    return julian_centuries(julian_date(datetime(*args)))


def test_earth_distance_near_perihelion() -> None:
    """Early January puts the Earth near perihelion (0.983 AU) in the ecliptic."""
    lon, lat, r = heliocentric_position(EARTH_ELEMENTS, 0.0)
    assert r == pytest.approx(0.9833, abs=0.002)
    assert lat == pytest.approx(0.0, abs=1e-3)
    assert 0.0 <= lon < 360.0


def test_rectangular_and_spherical_agree() -> None:
    """Spherical coordinates are derived from the rectangular ones."""
    x, y, z = heliocentric_rectangular(MERCURY_ELEMENTS, 0.13)
    lon, lat, r = heliocentric_position(MERCURY_ELEMENTS, 0.13)
    assert r == pytest.approx(math.sqrt(x * x + y * y + z * z))
    assert lon == pytest.approx(math.degrees(math.atan2(y, x)) % 360.0)
    assert abs(lat) < 7.1


def test_sun_and_moon_at_j2000() -> None:
    """Sun 280.4° and Moon 223.3° at J2000.0."""
    assert sun_longitude(0.0) == pytest.approx(280.37, abs=0.3)
    assert moon_longitude(0.0) == pytest.approx(223.32, abs=0.5)


@pytest.mark.parametrize(
    ('name', 'expected'),
    [
        ('Mercury', 271.89),
        ('Venus', 241.57),
        ('Mars', 327.96),
        ('Jupiter', 25.24),
        ('Saturn', 40.40),
        ('Uranus', 314.81),
        ('Neptune', 303.19),
    ],
)
def test_planet_longitudes_at_j2000(name: str, expected: float) -> None:
    """Keplerian planets agree with precise positions to within a degree."""
    assert body_longitude(name, 0.0) == pytest.approx(expected, abs=1.0)


def test_node_and_lilith_at_j2000() -> None:
    """Polynomial constant terms give the J2000.0 values."""
    assert north_node_longitude(0.0) == pytest.approx(125.0445479)
    assert lilith_longitude(0.0) == pytest.approx(263.3532465)


def test_all_longitudes_in_range() -> None:
    """Every time-dependent body returns a longitude in [0, 360)."""
    for t in (-1.5, -0.3, 0.0, 0.237, 0.5):
        for name in TIME_BODY_NAMES:
            lon = body_longitude(name, t)
            assert 0.0 <= lon < 360.0


def test_body_longitude_unknown_raises() -> None:
    """Earth and the chart angles are not time-only bodies."""
    with pytest.raises(KeyError):
        body_longitude('Earth', 0.0)
    with pytest.raises(KeyError):
        body_longitude('Ascendant', 0.0)


def test_daily_motion_ranges() -> None:
    """The Sun moves about 1° per day and the Moon 12-15°; the node regresses."""
    assert daily_motion('Sun', 0.0) == pytest.approx(1.0, abs=0.05)
    assert 11.5 < daily_motion('Moon', 0.0) < 15.5
    assert daily_motion('N Node', 0.0) == pytest.approx(-0.053, abs=0.001)


@pytest.mark.parametrize(
    ('name', 'moment'),
    [
        ('Mars', (2022, 12, 8)),
        ('Jupiter', (2023, 11, 3)),
        ('Saturn', (2023, 8, 27)),
    ],
)
def test_retrograde_at_opposition(name: str, moment: tuple[int, int, int]) -> None:
    """Outer planets are retrograde around opposition."""
    assert is_retrograde(name, _t(*moment))


@pytest.mark.parametrize(
    ('name', 'moment'),
    [
        ('Jupiter', (2023, 4, 11)),
        ('Mars', (2023, 11, 18)),
    ],
)
def test_direct_at_conjunction(name: str, moment: tuple[int, int, int]) -> None:
    """Outer planets move direct around solar conjunction."""
    assert not is_retrograde(name, _t(*moment))


def test_luminaries_and_points_never_retrograde() -> None:
    """Sun, Moon, node and Lilith are not flagged even when the node regresses."""
    for name in ('Sun', 'Moon', 'N Node', 'Lilith'):
        assert name not in MOVING_PLANET_NAMES
        assert not is_retrograde(name, 0.0)
