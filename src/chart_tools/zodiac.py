"""Tropical zodiac signs with their elements and modalities."""

from __future__ import annotations

import math
from enum import Enum, IntEnum

from chart_tools.angle_utils import normalize_degrees
from chart_tools.constants import DEGREES_PER_SIGN


class Element(Enum):
    """Classical element; declaration order is the dominance tie-break order."""

    FIRE = 'Fire'
    EARTH = 'Earth'
    AIR = 'Air'
    WATER = 'Water'

    @property
    def symbol(self) -> str:
        return _ELEMENT_SYMBOLS[self]


class Modality(Enum):
    """Sign quality; declaration order is the dominance tie-break order."""

    CARDINAL = 'Cardinal'
    FIXED = 'Fixed'
    MUTABLE = 'Mutable'


_ELEMENT_SYMBOLS = {
    Element.FIRE: '🔥',
    Element.EARTH: '🌍',
    Element.AIR: '💨',
    Element.WATER: '💧',
}

# Element cycles with period 4 from Aries, modality with period 3.
_ELEMENT_CYCLE = (Element.FIRE, Element.EARTH, Element.AIR, Element.WATER)
_MODALITY_CYCLE = (Modality.CARDINAL, Modality.FIXED, Modality.MUTABLE)


class ZodiacSign(IntEnum):
    """The twelve 30° signs of the tropical zodiac, Aries = 0."""

    ARIES = 0
    TAURUS = 1
    GEMINI = 2
    CANCER = 3
    LEO = 4
    VIRGO = 5
    LIBRA = 6
    SCORPIO = 7
    SAGITTARIUS = 8
    CAPRICORN = 9
    AQUARIUS = 10
    PISCES = 11

    @property
    def label(self) -> str:
        """Display name, e.g. 'Sagittarius'."""
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return chr(0x2648 + self.value)

    @property
    def element(self) -> Element:
        return _ELEMENT_CYCLE[self.value % 4]

    @property
    def modality(self) -> Modality:
        return _MODALITY_CYCLE[self.value % 3]

    @property
    def start_longitude(self) -> float:
        """Ecliptic longitude of the sign's first degree."""
        return self.value * DEGREES_PER_SIGN


def sign_from_longitude(longitude: float) -> tuple[ZodiacSign, float]:
    """Zodiac sign and degree within the sign for an ecliptic longitude.

    Parameters:
        longitude: Ecliptic longitude in degrees (any range).

    Returns:
        (sign, degree) with degree in [0, 30).
    """
    lon = normalize_degrees(longitude)
    index = int(lon // DEGREES_PER_SIGN) % 12
    degree = math.fmod(lon, DEGREES_PER_SIGN)
    return (ZodiacSign(index), degree)


def longitude_from_sign(sign: ZodiacSign, degree: float) -> float:
    """Inverse of sign_from_longitude: ecliptic longitude in [0, 360)."""
    return normalize_degrees(sign.start_longitude + degree)
