"""
Interchangeable Computation Strategies.

The distance engine delegates the numerical work for each operation to a
`GeodesicStrategy`. Two strategies are provided:

- `ReferenceGeodesic`: the pure implementation in `geospatial.formulas`.
  This is the normative behavior.
- `PyprojGeodesic`: an accelerated alternative backed by `pyproj.Geod`
  (GeographicLib algorithms by Charles Karney, compiled in PROJ). Spherical
  operations run on a sphere of the ellipsoid's mean radius; the
  ellipsoidal distance uses the full ellipsoid and keeps the millimeter
  floor of the reference strategy.

Strategies are stateless apart from caches keyed on ellipsoid parameters,
so one instance may be shared between threads and contexts.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Tuple

import numpy as np
from pyproj import Geod

from common.constants import GeodeticConstants
from common.logging_config import get_logger
from geometry.point import Point
from geospatial.coordinate_models import Ellipsoid
from geospatial import formulas

logger = get_logger(__name__)


class GeodesicStrategy(ABC):
    """Abstract base class for distance engine implementations.

    All strategies in this toolkit implement this interface so that the
    engine can switch between them without changing results beyond
    floating-point noise.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the strategy."""
        pass

    @abstractmethod
    def haversine(self, point1: Point, point2: Point, ellipsoid: Ellipsoid) -> float:
        """Central angle between two points in radians."""
        pass

    @abstractmethod
    def vincenty(self, point1: Point, point2: Point, ellipsoid: Ellipsoid) -> float:
        """Ellipsoidal distance in meters, floored to millimeters."""
        pass

    @abstractmethod
    def initial_bearing(self, point1: Point, point2: Point, ellipsoid: Ellipsoid) -> float:
        """Initial bearing in degrees [0, 360)."""
        pass

    @abstractmethod
    def relative_point(
        self,
        point: Point,
        angular_distance: float,
        bearing_deg: float,
        ellipsoid: Ellipsoid
    ) -> Tuple[float, float]:
        """Destination (latitude_deg, longitude_deg) on the mean-radius sphere."""
        pass

    @abstractmethod
    def fraction_along_line(
        self,
        point1: Point,
        point2: Point,
        fraction: float,
        angular_distance: float,
        ellipsoid: Ellipsoid
    ) -> Tuple[float, float]:
        """Interpolated (latitude_deg, longitude_deg) on the great circle."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class ReferenceGeodesic(GeodesicStrategy):
    """Pure implementation of the distance engine formulas."""

    @property
    def name(self) -> str:
        return "reference"

    def haversine(self, point1: Point, point2: Point, ellipsoid: Ellipsoid) -> float:
        return formulas.haversine_angle(
            point1.latitude_rad, point1.longitude_rad,
            point2.latitude_rad, point2.longitude_rad
        )

    def vincenty(self, point1: Point, point2: Point, ellipsoid: Ellipsoid) -> float:
        result = formulas.vincenty_inverse(
            point1.latitude_rad, point1.longitude_rad,
            point2.latitude_rad, point2.longitude_rad,
            ellipsoid
        )
        return result.distance_m

    def initial_bearing(self, point1: Point, point2: Point, ellipsoid: Ellipsoid) -> float:
        return formulas.initial_bearing_angle(
            point1.latitude_rad, point1.longitude_rad,
            point2.latitude_rad, point2.longitude_rad
        )

    def relative_point(
        self,
        point: Point,
        angular_distance: float,
        bearing_deg: float,
        ellipsoid: Ellipsoid
    ) -> Tuple[float, float]:
        lat_rad, lon_rad = formulas.spherical_direct(
            point.latitude_rad, point.longitude_rad,
            np.radians(bearing_deg), angular_distance
        )
        return float(np.degrees(lat_rad)), float(np.degrees(lon_rad))

    def fraction_along_line(
        self,
        point1: Point,
        point2: Point,
        fraction: float,
        angular_distance: float,
        ellipsoid: Ellipsoid
    ) -> Tuple[float, float]:
        lat_rad, lon_rad = formulas.interpolate_great_circle(
            point1.latitude_rad, point1.longitude_rad,
            point2.latitude_rad, point2.longitude_rad,
            fraction, angular_distance
        )
        return float(np.degrees(lat_rad)), float(np.degrees(lon_rad))


@lru_cache(maxsize=32)
def _geod(a: float, f: float) -> Geod:
    return Geod(a=a, b=a * (1.0 - f))


class PyprojGeodesic(GeodesicStrategy):
    """Distance engine backed by `pyproj.Geod`.

    Notes
    -----
    GeographicLib converges for every pair of points, including antipodal
    ones, so `vincenty` never raises `ConvergenceFailure` with this
    strategy.
    """

    @property
    def name(self) -> str:
        return "pyproj"

    @staticmethod
    def _sphere(ellipsoid: Ellipsoid) -> Geod:
        return _geod(ellipsoid.mean_radius, 0.0)

    def haversine(self, point1: Point, point2: Point, ellipsoid: Ellipsoid) -> float:
        _, _, distance_m = self._sphere(ellipsoid).inv(
            point1.longitude, point1.latitude, point2.longitude, point2.latitude
        )
        return float(distance_m) / ellipsoid.mean_radius

    def vincenty(self, point1: Point, point2: Point, ellipsoid: Ellipsoid) -> float:
        _, _, distance_m = _geod(ellipsoid.a, ellipsoid.f).inv(
            point1.longitude, point1.latitude, point2.longitude, point2.latitude
        )
        scale = 10 ** GeodeticConstants.VINCENTY_PRECISION_DECIMALS
        return float(np.floor(distance_m * scale) / scale)

    def initial_bearing(self, point1: Point, point2: Point, ellipsoid: Ellipsoid) -> float:
        az_forward, _, _ = self._sphere(ellipsoid).inv(
            point1.longitude, point1.latitude, point2.longitude, point2.latitude
        )
        return float(az_forward % 360.0)

    def relative_point(
        self,
        point: Point,
        angular_distance: float,
        bearing_deg: float,
        ellipsoid: Ellipsoid
    ) -> Tuple[float, float]:
        lon, lat, _ = self._sphere(ellipsoid).fwd(
            point.longitude, point.latitude, bearing_deg,
            angular_distance * ellipsoid.mean_radius
        )
        return float(lat), float(lon)

    def fraction_along_line(
        self,
        point1: Point,
        point2: Point,
        fraction: float,
        angular_distance: float,
        ellipsoid: Ellipsoid
    ) -> Tuple[float, float]:
        sphere = self._sphere(ellipsoid)
        az_forward, _, distance_m = sphere.inv(
            point1.longitude, point1.latitude, point2.longitude, point2.latitude
        )
        lon, lat, _ = sphere.fwd(
            point1.longitude, point1.latitude, az_forward, distance_m * fraction
        )
        return float(lat), float(lon)
