"""Fixed constants: epochs, time units, angles, and chart body names."""

import math

# Epochs (Julian Date)
JD_UNIX_EPOCH = 2440587.5  # 1970-01-01 00:00 UTC
JD_J2000 = 2451545.0  # 2000-01-01 12:00
JD_J2000_MIDNIGHT = 2451544.5  # day 0 of rms-julian day numbering
DAYS_PER_JULIAN_CENTURY = 36525.0
ONE_DAY_CENTURIES = 1.0 / DAYS_PER_JULIAN_CENTURY

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0

# Angle
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
DEGREES_PER_SIGN = 30.0
ARCMIN_PER_DEGREE = 60.0
TWOPI = 2.0 * math.pi
DPR = 180.0 / math.pi
RPD = math.pi / 180.0

# Mean obliquity of the ecliptic at J2000.0, held fixed for all dates.
OBLIQUITY_DEG = 23.4393
OBLIQUITY_RAD = OBLIQUITY_DEG * RPD

# Kepler solver limits
KEPLER_TOLERANCE = 1e-12
KEPLER_MAX_ITERATIONS = 50

# Date range over which the planetary element rates are valid (Standish 1992)
ELEMENTS_VALID_YEARS = (1800, 2050)

# Default latitude clamp before tan(latitude) in the ascendant formula
DEFAULT_LATITUDE_LIMIT = 89.9999

# Ephemeris table limits
DEFAULT_INTERVAL = 1.0
DEFAULT_MIN_INTERVAL_SECONDS = 1.0
MAX_EPHEMERIS_STEPS = 100000

# Chart bodies in output order
SUN = 'Sun'
MOON = 'Moon'
MERCURY = 'Mercury'
VENUS = 'Venus'
EARTH = 'Earth'
MARS = 'Mars'
JUPITER = 'Jupiter'
SATURN = 'Saturn'
URANUS = 'Uranus'
NEPTUNE = 'Neptune'
PLUTO = 'Pluto'
ASCENDANT = 'Ascendant'
MIDHEAVEN = 'Midheaven'
NORTH_NODE = 'N Node'
LILITH = 'Lilith'

PLANET_NAMES = (
    SUN,
    MOON,
    MERCURY,
    VENUS,
    MARS,
    JUPITER,
    SATURN,
    URANUS,
    NEPTUNE,
    PLUTO,
)

# Bodies whose longitude is a function of time alone (ephemeris table columns)
TIME_BODY_NAMES = PLANET_NAMES + (NORTH_NODE, LILITH)

# Bodies that can show apparent backward motion
MOVING_PLANET_NAMES = (MERCURY, VENUS, MARS, JUPITER, SATURN, URANUS, NEPTUNE, PLUTO)

RETROGRADE_SYMBOL = '℞'
