"""Planetary orbital elements, J2000.0 values and rates per century.

Standish (1992), "Keplerian Elements for Approximate Positions of the Major
Planets", table valid 1800-2050 CE.
"""

from __future__ import annotations

from chart_tools.planets.base import OrbitalElementSet

MERCURY_ELEMENTS = OrbitalElementSet(
    name='Mercury',
    a=0.38709927,
    a_dot=0.00000037,
    e=0.20563593,
    e_dot=0.00001906,
    incl=7.00497902,
    incl_dot=-0.00594749,
    mean_lon=252.25032350,
    mean_lon_dot=149472.67411175,
    peri_lon=77.45779628,
    peri_lon_dot=0.16047689,
    node_lon=48.33076593,
    node_lon_dot=-0.12534081,
)

VENUS_ELEMENTS = OrbitalElementSet(
    name='Venus',
    a=0.72333566,
    a_dot=0.00000390,
    e=0.00677672,
    e_dot=-0.00004107,
    incl=3.39467605,
    incl_dot=-0.00078890,
    mean_lon=181.97909950,
    mean_lon_dot=58517.81538729,
    peri_lon=131.60246718,
    peri_lon_dot=0.00268329,
    node_lon=76.67984255,
    node_lon_dot=-0.27769418,
)

# Earth-Moon barycenter
EARTH_ELEMENTS = OrbitalElementSet(
    name='Earth',
    a=1.00000261,
    a_dot=0.00000562,
    e=0.01671123,
    e_dot=-0.00004392,
    incl=-0.00001531,
    incl_dot=-0.01294668,
    mean_lon=100.46457166,
    mean_lon_dot=35999.37244981,
    peri_lon=102.93768193,
    peri_lon_dot=0.32327364,
    node_lon=0.0,
    node_lon_dot=0.0,
)

MARS_ELEMENTS = OrbitalElementSet(
    name='Mars',
    a=1.52371034,
    a_dot=0.00001847,
    e=0.09339410,
    e_dot=0.00007882,
    incl=1.84969142,
    incl_dot=-0.00813131,
    mean_lon=-4.55343205,
    mean_lon_dot=19140.30268499,
    peri_lon=-23.94362959,
    peri_lon_dot=0.44441088,
    node_lon=49.55953891,
    node_lon_dot=-0.29257343,
)

JUPITER_ELEMENTS = OrbitalElementSet(
    name='Jupiter',
    a=5.20288700,
    a_dot=-0.00011607,
    e=0.04838624,
    e_dot=-0.00013253,
    incl=1.30439695,
    incl_dot=-0.00183714,
    mean_lon=34.39644051,
    mean_lon_dot=3034.74612775,
    peri_lon=14.72847983,
    peri_lon_dot=0.21252668,
    node_lon=100.47390909,
    node_lon_dot=0.20469106,
)

SATURN_ELEMENTS = OrbitalElementSet(
    name='Saturn',
    a=9.53667594,
    a_dot=-0.00125060,
    e=0.05386179,
    e_dot=-0.00050991,
    incl=2.48599187,
    incl_dot=0.00193609,
    mean_lon=49.95424423,
    mean_lon_dot=1222.49362201,
    peri_lon=92.59887831,
    peri_lon_dot=-0.41897216,
    node_lon=113.66242448,
    node_lon_dot=-0.28867794,
)

URANUS_ELEMENTS = OrbitalElementSet(
    name='Uranus',
    a=19.18916464,
    a_dot=-0.00196176,
    e=0.04725744,
    e_dot=-0.00004397,
    incl=0.77263783,
    incl_dot=-0.00242939,
    mean_lon=313.23810451,
    mean_lon_dot=428.48202785,
    peri_lon=170.95427630,
    peri_lon_dot=0.40805281,
    node_lon=74.01692503,
    node_lon_dot=0.04240589,
)

NEPTUNE_ELEMENTS = OrbitalElementSet(
    name='Neptune',
    a=30.06992276,
    a_dot=0.00026291,
    e=0.00859048,
    e_dot=0.00005105,
    incl=1.77004347,
    incl_dot=0.00035372,
    mean_lon=-55.12002969,
    mean_lon_dot=218.45945325,
    peri_lon=44.96476227,
    peri_lon_dot=-0.32241464,
    node_lon=131.78422574,
    node_lon_dot=-0.00508664,
)
