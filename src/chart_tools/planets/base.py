"""Keplerian orbital element set dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PropagatedElements:
    """Orbital elements advanced to a given epoch (angles in degrees)."""

    a: float
    e: float
    incl: float
    mean_lon: float
    peri_lon: float
    node_lon: float


@dataclass(frozen=True)
class OrbitalElementSet:
    """J2000.0 Keplerian elements with secular rates per Julian century.

    Distances in AU, angles in degrees. Mean longitude (L), longitude of
    perihelion (varpi) and longitude of the ascending node (Omega) follow the
    JPL "Approximate Positions of the Major Planets" convention.
    """

    name: str
    a: float
    a_dot: float
    e: float
    e_dot: float
    incl: float
    incl_dot: float
    mean_lon: float
    mean_lon_dot: float
    peri_lon: float
    peri_lon_dot: float
    node_lon: float
    node_lon_dot: float

    def propagate(self, t: float) -> PropagatedElements:
        """Return elements advanced linearly by t Julian centuries from J2000.0.

        Angles are not normalized here.
        """
        return PropagatedElements(
            a=self.a + self.a_dot * t,
            e=self.e + self.e_dot * t,
            incl=self.incl + self.incl_dot * t,
            mean_lon=self.mean_lon + self.mean_lon_dot * t,
            peri_lon=self.peri_lon + self.peri_lon_dot * t,
            node_lon=self.node_lon + self.node_lon_dot * t,
        )
