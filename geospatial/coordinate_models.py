"""
Ellipsoid Model and Unit-Sphere Coordinates.

This module describes the reference body the distance engine works on and
the Cartesian unit-vector conversions used for great-circle interpolation.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: Oblate reference ellipsoid (a, f). The Earth default uses WGS84.

Spherical formulas (Haversine, bearings, destination points) run on a
sphere of the ellipsoid's mean radius R1 = (2a + b) / 3. Vincenty's
inverse solution uses a and b directly.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Moritz, H. (1980). Geodetic Reference System 1980. Bulletin Géodésique.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

import numpy as np
import pint

from common.constants import GeodeticConstants, DISTANCE_MULTIPLIERS
from common.errors import UnknownUnit
from common.units import Q_, canonical_unit


@dataclass(frozen=True)
class Ellipsoid:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.
    multipliers : Mapping[str, float]
        Meters per unit for each accepted unit token.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    mean_radius : float
        Mean radius R1 = (2a + b) / 3 in meters.

    Examples
    --------
    >>> moon = Ellipsoid(a=1_738_100.0, f=0.0012, name="Moon")
    >>> round(moon.radius('km'), 1)
    1737.4
    """
    a: float
    f: float
    name: str = "custom"
    multipliers: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(DISTANCE_MULTIPLIERS))
    )

    def __post_init__(self):
        if not np.isfinite(self.a) or self.a <= 0:
            raise ValueError(f"Semi-major axis must be positive, got {self.a}")
        if not np.isfinite(self.f) or not 0 <= self.f < 1:
            raise ValueError(f"Flattening must be in [0, 1), got {self.f}")
        table = {canonical_unit(unit): float(value) for unit, value in self.multipliers.items()}
        for unit, value in table.items():
            if not np.isfinite(value) or value <= 0:
                raise ValueError(f"Multiplier for '{unit}' must be positive, got {value}")
        object.__setattr__(self, "multipliers", MappingProxyType(table))

    def __hash__(self) -> int:
        return hash((self.a, self.f, self.name, tuple(sorted(self.multipliers.items()))))

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def mean_radius(self) -> float:
        """Mean radius in meters."""
        return (2 * self.a + self.b) / 3

    def multiplier(self, unit: str) -> float:
        """Meters per `unit`.

        Raises
        ------
        UnknownUnit
            If `unit` is not in this ellipsoid's table.
        """
        try:
            return self.multipliers[canonical_unit(unit)]
        except KeyError:
            raise UnknownUnit(
                f"Unknown unit '{unit}' for ellipsoid {self.name}. "
                f"Known units: {', '.join(sorted(self.multipliers))}"
            ) from None

    def radius(self, unit: str = "km") -> float:
        """Mean radius expressed in `unit`."""
        return self.mean_radius / self.multiplier(unit)

    def quantity(self, value: float, unit: str) -> pint.Quantity:
        """A distance in `unit` as a pint Quantity in meters."""
        return Q_(value * self.multiplier(unit), "meter")


# Earth, the default body for every computation context
EARTH = Ellipsoid(
    a=GeodeticConstants.EARTH_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.EARTH_FLATTENING.value,
    name="WGS84"
)


def to_unit_vector(latitude_rad: float, longitude_rad: float) -> Tuple[float, float, float]:
    """Convert spherical coordinates to a Cartesian unit vector.

    Parameters
    ----------
    latitude_rad, longitude_rad : float
        Position in radians.

    Returns
    -------
    Tuple[float, float, float]
        (x, y, z) on the unit sphere. X points through the prime meridian
        at the equator, Z through the North Pole.
    """
    cos_lat = np.cos(latitude_rad)
    x = cos_lat * np.cos(longitude_rad)
    y = cos_lat * np.sin(longitude_rad)
    z = np.sin(latitude_rad)
    return x, y, z


def from_unit_vector(x: float, y: float, z: float) -> Tuple[float, float]:
    """Convert a Cartesian vector back to spherical coordinates.

    The vector need not be normalized.

    Returns
    -------
    Tuple[float, float]
        (latitude_rad, longitude_rad)
    """
    latitude_rad = np.arctan2(z, np.sqrt(x ** 2 + y ** 2))
    longitude_rad = np.arctan2(y, x)
    return float(latitude_rad), float(longitude_rad)
