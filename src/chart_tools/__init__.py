"""Natal chart computation from closed-form orbital mechanics.

This package computes a tropical birth chart for a date, time and place:
- Planet positions from Keplerian elements (Mercury through Neptune)
- Low-precision series for the Sun, Moon, Pluto, mean lunar node and Lilith
- Ascendant and Midheaven from local sidereal time
- Aspects, moon phase, and element/modality balance

No ephemeris files or network services are used; rms-julian handles date
string parsing and numpy backs the longitude time series.
"""

from chart_tools.chart import (
    CelestialBodyPosition,
    ChartResult,
    ObservationRequest,
    compute_chart,
    compute_charts,
)

__all__: list[str] = [
    'CelestialBodyPosition',
    'ChartResult',
    'ObservationRequest',
    'compute_chart',
    'compute_charts',
]
