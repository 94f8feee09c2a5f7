"""Kepler's equation M = E - e sin(E), solved by Newton-Raphson iteration."""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

from chart_tools.constants import KEPLER_MAX_ITERATIONS, KEPLER_TOLERANCE

logger = logging.getLogger(__name__)


class KeplerSolution(NamedTuple):
    """Eccentric anomaly with the iteration count and convergence flag."""

    eccentric_anomaly: float
    iterations: int
    converged: bool


def solve_kepler_detailed(
    mean_anomaly: float,
    eccentricity: float,
    *,
    tolerance: float = KEPLER_TOLERANCE,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
) -> KeplerSolution:
    """Solve Kepler's equation and report whether the iteration converged.

    The starting value M + e sin(M)(1 + e cos(M)) is the second-order series
    solution; for planetary eccentricities (e < 0.21) the update falls below
    tolerance within three to five steps.

    Parameters:
        mean_anomaly: Mean anomaly M in radians.
        eccentricity: Orbital eccentricity e (0 <= e < 1).
        tolerance: Stop when the last correction |dE| is below this (radians).
        max_iterations: Hard cap on Newton steps.

    Returns:
        KeplerSolution; eccentric_anomaly is the best estimate even when
        converged is False.
    """
    m = mean_anomaly
    e = eccentricity
    ecc_anom = m + e * math.sin(m) * (1.0 + e * math.cos(m))
    for i in range(1, max_iterations + 1):
        d_ecc = (ecc_anom - e * math.sin(ecc_anom) - m) / (1.0 - e * math.cos(ecc_anom))
        ecc_anom -= d_ecc
        if abs(d_ecc) < tolerance:
            return KeplerSolution(ecc_anom, i, True)
    return KeplerSolution(ecc_anom, max_iterations, False)


def solve_kepler(mean_anomaly: float, eccentricity: float) -> float:
    """Eccentric anomaly (radians) for mean anomaly M and eccentricity e.

    Never raises; if the 50-step cap is reached the last estimate is returned
    and a warning is logged.
    """
    solution = solve_kepler_detailed(mean_anomaly, eccentricity)
    if not solution.converged:
        logger.warning(
            'Kepler iteration did not converge in %d steps (M=%.12f, e=%.6f)',
            solution.iterations,
            mean_anomaly,
            eccentricity,
        )
    return solution.eccentric_anomaly
