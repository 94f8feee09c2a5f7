"""Orbital element table: lookup by name and stable iteration order."""

from __future__ import annotations

import logging

from chart_tools.constants import EARTH, TIME_BODY_NAMES
from chart_tools.planets.base import OrbitalElementSet, PropagatedElements
from chart_tools.planets.elements import (
    EARTH_ELEMENTS,
    JUPITER_ELEMENTS,
    MARS_ELEMENTS,
    MERCURY_ELEMENTS,
    NEPTUNE_ELEMENTS,
    SATURN_ELEMENTS,
    URANUS_ELEMENTS,
    VENUS_ELEMENTS,
)

logger = logging.getLogger(__name__)

# Heliocentric order, Earth included for geocentric subtraction.
ORBITAL_ELEMENTS: tuple[OrbitalElementSet, ...] = (
    MERCURY_ELEMENTS,
    VENUS_ELEMENTS,
    EARTH_ELEMENTS,
    MARS_ELEMENTS,
    JUPITER_ELEMENTS,
    SATURN_ELEMENTS,
    URANUS_ELEMENTS,
    NEPTUNE_ELEMENTS,
)

# Planets placed in a chart from their elements (Earth excluded).
CHART_PLANETS: tuple[OrbitalElementSet, ...] = tuple(
    el for el in ORBITAL_ELEMENTS if el.name != EARTH
)

_ELEMENTS_BY_NAME: dict[str, OrbitalElementSet] = {
    el.name.lower(): el for el in ORBITAL_ELEMENTS
}

# Case-insensitive body name -> canonical name, with a few CLI aliases.
_BODY_ALIASES: dict[str, str] = {name.lower(): name for name in TIME_BODY_NAMES}
_BODY_ALIASES.update(
    {
        'node': 'N Node',
        'north node': 'N Node',
        'nnode': 'N Node',
        'mean node': 'N Node',
        'black moon': 'Lilith',
    }
)


def get_elements(name: str) -> OrbitalElementSet:
    """Return the element set for a planet (case-insensitive).

    Raises:
        KeyError: If no element set is tabulated for name.
    """
    try:
        return _ELEMENTS_BY_NAME[name.strip().lower()]
    except KeyError:
        raise KeyError(f'No orbital elements for {name!r}') from None


def has_elements(name: str) -> bool:
    """True if name has a tabulated element set."""
    return name.strip().lower() in _ELEMENTS_BY_NAME


def parse_body(value: str) -> str:
    """Resolve a body name given on the command line to its canonical form.

    Parameters:
        value: Body name, case-insensitive (e.g. 'mars', 'north node').

    Returns:
        Canonical name (e.g. 'Mars', 'N Node').

    Raises:
        ValueError: If value names no chart body.
    """
    key = ' '.join(value.strip().lower().split())
    canonical = _BODY_ALIASES.get(key)
    if canonical is None:
        logger.debug('Unknown body name %r', value)
        raise ValueError(
            f'Unknown body {value!r}; expected one of {", ".join(TIME_BODY_NAMES)}'
        )
    return canonical


__all__ = [
    'CHART_PLANETS',
    'EARTH_ELEMENTS',
    'JUPITER_ELEMENTS',
    'MARS_ELEMENTS',
    'MERCURY_ELEMENTS',
    'NEPTUNE_ELEMENTS',
    'ORBITAL_ELEMENTS',
    'OrbitalElementSet',
    'PropagatedElements',
    'SATURN_ELEMENTS',
    'URANUS_ELEMENTS',
    'VENUS_ELEMENTS',
    'get_elements',
    'has_elements',
    'parse_body',
]
