"""Moon phase from Sun-Moon elongation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from chart_tools.aspects import angular_separation
from chart_tools.constants import RPD

# Illumination bucket edges in percent; comparisons are strict (<).
NEW_MOON_MAX = 1.0
CRESCENT_MAX = 49.0
QUARTER_MAX = 51.0
GIBBOUS_MAX = 99.0


class MoonPhase(Enum):
    """Eight named phases: (label, symbol)."""

    NEW_MOON = ('New Moon', '🌑')
    WAXING_CRESCENT = ('Waxing Crescent', '🌒')
    FIRST_QUARTER = ('First Quarter', '🌓')
    WAXING_GIBBOUS = ('Waxing Gibbous', '🌔')
    FULL_MOON = ('Full Moon', '🌕')
    WANING_GIBBOUS = ('Waning Gibbous', '🌖')
    LAST_QUARTER = ('Last Quarter', '🌗')
    WANING_CRESCENT = ('Waning Crescent', '🌘')

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def symbol(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class MoonPhaseInfo:
    """Named phase with illumination percentage and waxing flag."""

    phase: MoonPhase
    illumination_pct: float
    waxing: bool

    @property
    def name(self) -> str:
        return self.phase.label

    @property
    def symbol(self) -> str:
        return self.phase.symbol


def illumination(sun_lon: float, moon_lon: float) -> float:
    """Illuminated fraction of the Moon's disk in percent, [0, 100].

    Uses the elongation as the phase angle: k = (1 - cos ψ) / 2.
    """
    psi = angular_separation(sun_lon, moon_lon) * RPD
    return (1.0 - math.cos(psi)) / 2.0 * 100.0


def classify(illumination_pct: float, waxing: bool) -> MoonPhaseInfo:
    """Name the phase for an illumination percentage and direction of change."""
    if illumination_pct < NEW_MOON_MAX:
        phase = MoonPhase.NEW_MOON
    elif illumination_pct < CRESCENT_MAX:
        phase = MoonPhase.WAXING_CRESCENT if waxing else MoonPhase.WANING_CRESCENT
    elif illumination_pct < QUARTER_MAX:
        phase = MoonPhase.FIRST_QUARTER if waxing else MoonPhase.LAST_QUARTER
    elif illumination_pct < GIBBOUS_MAX:
        phase = MoonPhase.WAXING_GIBBOUS if waxing else MoonPhase.WANING_GIBBOUS
    else:
        phase = MoonPhase.FULL_MOON
    return MoonPhaseInfo(phase, illumination_pct, waxing)
