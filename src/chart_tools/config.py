"""Configuration: numeric limits and leap-second paths from environment."""

import logging
import os

from chart_tools.constants import DEFAULT_LATITUDE_LIMIT

logger = logging.getLogger(__name__)


def get_latitude_limit() -> float:
    """Return the latitude clamp used before tan(latitude) in the ascendant formula.

    Reads CHART_TOOLS_LATITUDE_LIMIT; values that are not numbers in (0, 90)
    fall back to the default.

    Returns:
        Absolute latitude limit in degrees.
    """
    raw = os.environ.get('CHART_TOOLS_LATITUDE_LIMIT', '').strip()
    if not raw:
        return DEFAULT_LATITUDE_LIMIT
    try:
        limit = float(raw)
    except ValueError:
        logger.warning(
            'Invalid CHART_TOOLS_LATITUDE_LIMIT %r; using %s', raw, DEFAULT_LATITUDE_LIMIT
        )
        return DEFAULT_LATITUDE_LIMIT
    if not 0.0 < limit < 90.0:
        logger.warning(
            'CHART_TOOLS_LATITUDE_LIMIT %r outside (0, 90); using %s',
            raw,
            DEFAULT_LATITUDE_LIMIT,
        )
        return DEFAULT_LATITUDE_LIMIT
    return limit


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian, if configured.

    Returns:
        JULIAN_LEAPSECS value, or None to use the LSK bundled with rms-julian.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None


def get_log_level(default: str = 'WARNING') -> str:
    """Return log level name from CHART_TOOLS_LOG, or default when unset/invalid."""
    level = os.environ.get('CHART_TOOLS_LOG', '').strip().upper()
    if level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        return level
    return default
