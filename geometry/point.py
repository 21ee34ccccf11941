"""
Point Geometry.

A Point is a longitude/latitude pair in decimal degrees on the reference
ellipsoid. It is the leaf of the geometry family: every other variant is
ultimately an ordered arrangement of Points.

Constructor Order
-----------------
``Point(latitude, longitude)`` takes latitude first, as people say it.
Every array form (``from_array``, ``to_array``, WKT, GeoJSON) uses
``[longitude, latitude]``.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, ClassVar, List, Optional, Sequence, Tuple, TYPE_CHECKING
import math

import numpy as np

from common.errors import InvalidCoordinate, StructuralMismatch
from common.types import Position
from geometry.base import Geometry, format_number

if TYPE_CHECKING:
    from geometry.linestring import LineString
    from geometry.polygon import Polygon
    from geospatial.context import GeodesyContext


def is_sequence(value: Any) -> bool:
    """Whether `value` is an ordered container usable as a coordinate array."""
    return isinstance(value, (list, tuple, np.ndarray))


def _checked_coordinate(value: Any, name: str, limit: float) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidCoordinate(
            f"{name} must be a number between -{limit:g} and {limit:g}, got {value!r}"
        )
    value = float(value)
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise InvalidCoordinate(
            f"{name} must be a finite number between -{limit:g} and {limit:g}, got {value!r}"
        )
    return value


@dataclass(frozen=True)
class Point(Geometry):
    """A position on the ellipsoid in decimal degrees.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in DEGREES. Range: [-90, 90].
    longitude : float
        Geodetic longitude in DEGREES. Range: [-180, 180].

    Raises
    ------
    InvalidCoordinate
        If either value is non-numeric, non-finite or out of range.

    Examples
    --------
    >>> p = Point(51.5074, -0.1278)
    >>> p.to_wkt()
    'POINT(-0.1278 51.5074)'
    >>> p.to_array()
    [-0.1278, 51.5074]
    """
    latitude: float
    longitude: float

    geometry_type: ClassVar[str] = "Point"

    def __post_init__(self):
        """Validate coordinate ranges."""
        object.__setattr__(
            self, "latitude", _checked_coordinate(self.latitude, "latitude", 90.0)
        )
        object.__setattr__(
            self, "longitude", _checked_coordinate(self.longitude, "longitude", 180.0)
        )

    @classmethod
    def from_array(cls, coordinates: Position) -> "Point":
        """Create a Point from ``[longitude, latitude]``.

        Raises
        ------
        StructuralMismatch
            If `coordinates` is not a pair of scalars.
        """
        if isinstance(coordinates, Point):
            return coordinates
        if not is_sequence(coordinates) or len(coordinates) != 2:
            raise StructuralMismatch(
                f"A position must be a [longitude, latitude] pair, got {coordinates!r}"
            )
        longitude, latitude = coordinates
        if is_sequence(longitude) or is_sequence(latitude):
            raise StructuralMismatch(
                f"A position must contain two numbers, got nested arrays {coordinates!r}"
            )
        return cls(latitude, longitude)

    @classmethod
    def from_dms(cls, latitude: Sequence[Any], longitude: Sequence[Any]) -> "Point":
        """Create a Point from degrees, minutes and seconds.

        Parameters
        ----------
        latitude, longitude : sequence
            ``(degrees, minutes, seconds[, direction])`` where direction is
            'N', 'S', 'E' or 'W'. 'S' and 'W' negate the value.
        """
        from geospatial.dms import dms_to_decimal
        return cls(dms_to_decimal(*latitude), dms_to_decimal(*longitude))

    @property
    def latitude_rad(self) -> float:
        """Latitude in radians."""
        return float(np.radians(self.latitude))

    @property
    def longitude_rad(self) -> float:
        """Longitude in radians."""
        return float(np.radians(self.longitude))

    def latitude_in_dms(self) -> Tuple[float, float, float]:
        from geospatial.dms import decimal_to_dms
        return decimal_to_dms(self.latitude)

    def longitude_in_dms(self) -> Tuple[float, float, float]:
        from geospatial.dms import decimal_to_dms
        return decimal_to_dms(self.longitude)

    def points(self) -> List["Point"]:
        return [self]

    def to_array(self) -> List[float]:
        """The point as ``[longitude, latitude]``."""
        return [self.longitude, self.latitude]

    def wkt_body(self) -> str:
        return f"({self})"

    def __str__(self) -> str:
        return f"{format_number(self.longitude)} {format_number(self.latitude)}"

    # ------------------------------------------------------------------
    # Geodesic shortcuts; see geospatial.distance_calculations
    # ------------------------------------------------------------------

    def distance_to(
        self,
        other: "Point",
        unit: str = "km",
        formula=None,
        context: Optional["GeodesyContext"] = None
    ) -> float:
        """Distance to another point in `unit`."""
        from geospatial.distance_calculations import calculate_distance
        return calculate_distance(self, other, unit, formula=formula, context=context)

    def initial_bearing_to(
        self, other: "Point", context: Optional["GeodesyContext"] = None
    ) -> float:
        """Initial bearing to another point in degrees [0, 360)."""
        from geospatial.distance_calculations import initial_bearing
        return initial_bearing(self, other, context=context)

    def relative_point(
        self,
        distance: float,
        bearing: float,
        unit: str = "km",
        context: Optional["GeodesyContext"] = None
    ) -> "Point":
        """Point reached by travelling `distance` along `bearing` degrees."""
        from geospatial.distance_calculations import relative_point
        return relative_point(self, distance, bearing, unit, context=context)

    def fraction_along_line_to(
        self,
        other: "Point",
        fraction: float,
        context: Optional["GeodesyContext"] = None
    ) -> "Point":
        """Point a `fraction` of the way along the great circle to `other`."""
        from geospatial.distance_calculations import fraction_along_line
        return fraction_along_line(self, other, fraction, context=context)

    def midpoint(
        self, other: "Point", context: Optional["GeodesyContext"] = None
    ) -> "Point":
        from geospatial.distance_calculations import midpoint
        return midpoint(self, other, context=context)

    def line_to(self, other: "Point") -> "LineString":
        """Create a line between this point and another point."""
        from geometry.linestring import LineString
        return LineString([self, other])

    def bbox_by_radius(
        self,
        radius: float,
        unit: str = "km",
        context: Optional["GeodesyContext"] = None
    ) -> "Polygon":
        """Rectangle enclosing the circle of `radius` around this point."""
        from geospatial.distance_calculations import bbox_by_radius
        return bbox_by_radius(self, radius, unit, context=context)
