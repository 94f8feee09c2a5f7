"""Major (Ptolemaic) aspects between pairs of chart bodies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union

from chart_tools.angle_utils import normalize_degrees
from chart_tools.constants import DEGREES_PER_CIRCLE


class AspectType(Enum):
    """Aspect kinds in match priority order: (label, nominal angle, max orb, symbol)."""

    CONJUNCTION = ('Conjunction', 0.0, 8.0, '☌')
    SEXTILE = ('Sextile', 60.0, 6.0, '⚹')
    SQUARE = ('Square', 90.0, 7.0, '□')
    TRINE = ('Trine', 120.0, 8.0, '△')
    OPPOSITION = ('Opposition', 180.0, 8.0, '☍')

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def nominal_angle(self) -> float:
        return self.value[1]

    @property
    def max_orb(self) -> float:
        return self.value[2]

    @property
    def symbol(self) -> str:
        return self.value[3]


@dataclass(frozen=True)
class Aspect:
    """An aspect between two named bodies; orb is degrees from exact."""

    body1: str
    body2: str
    aspect_type: AspectType
    orb: float

    @property
    def formatted_orb(self) -> str:
        return f'{self.orb:.1f}°'

    def involves(self, name: str) -> bool:
        return name in (self.body1, self.body2)


class _HasLongitude(Protocol):
    name: str
    longitude: float


BodyLike = Union[_HasLongitude, tuple[str, float]]


def _name_and_longitude(body: BodyLike) -> tuple[str, float]:
    if isinstance(body, tuple):
        return (body[0], float(body[1]))
    return (body.name, body.longitude)


def angular_separation(lon1: float, lon2: float) -> float:
    """Smallest angle between two ecliptic longitudes, in [0, 180]."""
    diff = abs(normalize_degrees(lon1) - normalize_degrees(lon2))
    return min(diff, DEGREES_PER_CIRCLE - diff)


def match_aspect(separation: float) -> tuple[AspectType, float] | None:
    """First aspect type (priority order) whose orb admits separation, with the orb."""
    for aspect_type in AspectType:
        orb = abs(separation - aspect_type.nominal_angle)
        if orb <= aspect_type.max_orb:
            return (aspect_type, orb)
    return None


def detect_aspects(bodies: Iterable[BodyLike]) -> list[Aspect]:
    """Detect at most one aspect for every unordered pair of bodies.

    Pairs are visited as (i, j) with i < j in input order, so the output order
    is deterministic. O(n^2) in the number of bodies.

    Parameters:
        bodies: Objects with name and longitude attributes, or
            (name, longitude) tuples.

    Returns:
        Aspects found; empty for fewer than two bodies.
    """
    points = [_name_and_longitude(b) for b in bodies]
    aspects: list[Aspect] = []
    for i, (name1, lon1) in enumerate(points):
        for name2, lon2 in points[i + 1 :]:
            match = match_aspect(angular_separation(lon1, lon2))
            if match is not None:
                aspect_type, orb = match
                aspects.append(Aspect(name1, name2, aspect_type, orb))
    return aspects
