"""Full chart computation: bodies, angles, aspects, moon phase, and balance."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import TypeVar

from chart_tools.angle_utils import format_degree, signed_difference
from chart_tools.aspects import Aspect, detect_aspects
from chart_tools.constants import (
    ASCENDANT,
    ELEMENTS_VALID_YEARS,
    LILITH,
    MIDHEAVEN,
    MOON,
    MOVING_PLANET_NAMES,
    NORTH_NODE,
    PLANET_NAMES,
    RETROGRADE_SYMBOL,
    SUN,
)
from chart_tools.houses import compute_angles
from chart_tools.moon_phase import MoonPhaseInfo, classify, illumination
from chart_tools.positions import body_longitude
from chart_tools.time_utils import julian_centuries, julian_date, local_sidereal_time, to_utc
from chart_tools.zodiac import Element, Modality, ZodiacSign, sign_from_longitude

logger = logging.getLogger(__name__)

_E = TypeVar('_E', Element, Modality)


@dataclass(frozen=True)
class ObservationRequest:
    """Birth data: civil date-time and geographic location.

    A naive moment is local civil time: it is converted with the IANA zone
    in timezone when set, otherwise by subtracting utc_offset_hours. An aware
    moment is used as is.
    """

    moment: datetime
    latitude_deg: float
    longitude_deg: float
    utc_offset_hours: float = 0.0
    timezone: str | None = None
    name: str = ''

    @property
    def utc_moment(self) -> datetime:
        """The instant as an aware UTC datetime."""
        return to_utc(self.moment, self.utc_offset_hours, self.timezone)


@dataclass(frozen=True)
class CelestialBodyPosition:
    """A body or chart point placed in the zodiac."""

    name: str
    sign: ZodiacSign
    degree_in_sign: float
    longitude: float
    retrograde: bool = False

    @classmethod
    def from_longitude(
        cls, name: str, longitude: float, retrograde: bool = False
    ) -> CelestialBodyPosition:
        """Classify a longitude (degrees, [0, 360)) into sign and degree."""
        sign, degree = sign_from_longitude(longitude)
        return cls(name, sign, degree, longitude, retrograde)

    @property
    def element(self) -> Element:
        return self.sign.element

    @property
    def modality(self) -> Modality:
        return self.sign.modality

    @property
    def formatted_degree(self) -> str:
        return format_degree(self.degree_in_sign)

    @property
    def display_name(self) -> str:
        return f'{self.name} {RETROGRADE_SYMBOL}' if self.retrograde else self.name


@dataclass(frozen=True)
class ChartResult:
    """Everything computed for one ObservationRequest.

    elements and modalities list every enum member in declaration order with
    the names of the points falling in it; the dominant entry is the first
    one holding the largest count.
    """

    request: ObservationRequest
    julian_date: float
    planets: tuple[CelestialBodyPosition, ...]
    ascendant: CelestialBodyPosition
    midheaven: CelestialBodyPosition
    north_node: CelestialBodyPosition
    lilith: CelestialBodyPosition
    moon_phase: MoonPhaseInfo
    aspects: tuple[Aspect, ...]
    elements: tuple[tuple[Element, tuple[str, ...]], ...]
    modalities: tuple[tuple[Modality, tuple[str, ...]], ...]
    dominant_element: Element
    dominant_modality: Modality
    warnings: tuple[str, ...] = field(default=())

    def all_points(self) -> tuple[CelestialBodyPosition, ...]:
        """The ten planets followed by Ascendant, Midheaven, North Node, Lilith."""
        return self.planets + (self.ascendant, self.midheaven, self.north_node, self.lilith)

    def body(self, name: str) -> CelestialBodyPosition:
        """Look up a planet or chart point by name.

        Raises:
            KeyError: If no point has that name.
        """
        for point in self.all_points():
            if point.name == name:
                return point
        raise KeyError(f'No chart point named {name!r}')

    def aspects_for(self, name: str) -> list[Aspect]:
        """Aspects involving the named body."""
        return [a for a in self.aspects if a.involves(name)]


def _group(
    points: Sequence[CelestialBodyPosition], members: Iterable[_E], attr: str
) -> tuple[tuple[_E, tuple[str, ...]], ...]:
    return tuple(
        (member, tuple(p.name for p in points if getattr(p, attr) is member))
        for member in members
    )


def _dominant(groups: tuple[tuple[_E, tuple[str, ...]], ...]) -> _E:
    # max() keeps the first of equal keys, so ties go to declaration order.
    return max(groups, key=lambda g: len(g[1]))[0]


def compute_chart(request: ObservationRequest) -> ChartResult:
    """Compute a complete tropical chart.

    Positions are evaluated at the request instant and one day later; the
    second evaluation gives each planet's direction of motion and whether
    the Moon is waxing. Aspects are sought among the ten planets only, while
    the element/modality balance also counts the Ascendant, Midheaven,
    North Node and Lilith.

    Parameters:
        request: Birth data.

    Returns:
        ChartResult; degraded-accuracy conditions are listed in warnings.
    """
    utc = request.utc_moment
    jd = julian_date(utc)
    t = julian_centuries(jd)
    t_tomorrow = julian_centuries(jd + 1.0)
    warnings: list[str] = []

    first_year, last_year = ELEMENTS_VALID_YEARS
    if not first_year <= utc.year <= last_year:
        msg = (
            f'{utc.year} is outside {first_year}-{last_year}; '
            'planet positions are extrapolated'
        )
        logger.warning(msg)
        warnings.append(msg)

    longitudes: dict[str, float] = {}
    planets: list[CelestialBodyPosition] = []
    for name in PLANET_NAMES:
        lon = body_longitude(name, t)
        longitudes[name] = lon
        retrograde = False
        if name in MOVING_PLANET_NAMES:
            motion = signed_difference(lon, body_longitude(name, t_tomorrow))
            retrograde = motion < 0.0
        planets.append(CelestialBodyPosition.from_longitude(name, lon, retrograde))

    lst = local_sidereal_time(jd, request.longitude_deg)
    angles = compute_angles(lst, request.latitude_deg)
    if angles.latitude_clamped:
        warnings.append(
            f'latitude {request.latitude_deg:g} clamped for the ascendant calculation'
        )
    ascendant = CelestialBodyPosition.from_longitude(ASCENDANT, angles.ascendant)
    midheaven = CelestialBodyPosition.from_longitude(MIDHEAVEN, angles.midheaven)
    north_node = CelestialBodyPosition.from_longitude(NORTH_NODE, body_longitude(NORTH_NODE, t))
    lilith = CelestialBodyPosition.from_longitude(LILITH, body_longitude(LILITH, t))

    illum = illumination(longitudes[SUN], longitudes[MOON])
    illum_tomorrow = illumination(body_longitude(SUN, t_tomorrow), body_longitude(MOON, t_tomorrow))
    moon_phase = classify(illum, illum_tomorrow > illum)

    aspects = detect_aspects(planets)

    points = planets + [ascendant, midheaven, north_node, lilith]
    elements = _group(points, Element, 'element')
    modalities = _group(points, Modality, 'modality')

    logger.debug(
        'Chart for JD %.5f: %d points, %d aspects, %s',
        jd,
        len(points),
        len(aspects),
        moon_phase.name,
    )
    return ChartResult(
        request=request,
        julian_date=jd,
        planets=tuple(planets),
        ascendant=ascendant,
        midheaven=midheaven,
        north_node=north_node,
        lilith=lilith,
        moon_phase=moon_phase,
        aspects=tuple(aspects),
        elements=elements,
        modalities=modalities,
        dominant_element=_dominant(elements),
        dominant_modality=_dominant(modalities),
        warnings=tuple(warnings),
    )


def compute_charts(requests: Iterable[ObservationRequest]) -> list[ChartResult]:
    """Compute charts for several requests in order."""
    return [compute_chart(r) for r in requests]
