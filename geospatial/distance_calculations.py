"""
Distance and Bearing Engine.

Point-level geodesic operations: distances (Haversine and Vincenty),
initial bearing, destination points, great-circle interpolation, bounding
boxes by radius and unit conversion. Every operation takes an explicit
`GeodesyContext` (or None for `DEFAULT_CONTEXT`) and delegates the numerical
work to the context's strategy.

Scientific Context
------------------
Domain: Geodesy
Models: Sphere of the ellipsoid's mean radius for Haversine, bearings,
destination points and interpolation; the full ellipsoid for Vincenty.

Precision
---------
Vincenty distances are floored to millimeters. This cap is deliberate and
applies to both strategies.

Distances
---------
Distance arguments accept a bare number in the stated unit or a
`pint.Quantity` of length.
"""

from typing import Optional, Union

import numpy as np
import pint

from common.errors import OutOfRangeFraction, UndefinedGreatCircle
from common.logging_config import get_logger
from common.types import DistanceFormula
from common.units import length_magnitude
from geometry.point import Point
from geometry.polygon import Polygon
from geospatial.context import GeodesyContext, as_formula, resolve_context

logger = get_logger(__name__)

Distance = Union[float, pint.Quantity]

# Below this central angle two points are treated as the same position
# when interpolating.
_COINCIDENT_ANGLE = 1e-15


def haversine(
    point1: Point,
    point2: Point,
    context: Optional[GeodesyContext] = None
) -> float:
    """Great-circle distance between two points as a central angle.

    Returns
    -------
    float
        Distance in radians. Multiply by ``ellipsoid.radius(unit)`` for a
        linear distance.
    """
    context = resolve_context(context)
    return context.strategy.haversine(point1, point2, context.ellipsoid)


def vincenty(
    point1: Point,
    point2: Point,
    context: Optional[GeodesyContext] = None
) -> float:
    """Ellipsoidal distance between two points.

    Returns
    -------
    float
        Distance in meters, floored to millimeters.

    Raises
    ------
    ConvergenceFailure
        If the iteration does not converge (nearly antipodal points).
    """
    context = resolve_context(context)
    return context.strategy.vincenty(point1, point2, context.ellipsoid)


def calculate_distance(
    point1: Point,
    point2: Point,
    unit: str = "km",
    formula: Optional[Union[DistanceFormula, int, str]] = None,
    context: Optional[GeodesyContext] = None
) -> float:
    """Distance between two points in `unit`.

    Parameters
    ----------
    point1, point2 : Point
        End points.
    unit : str
        Unit of the result (e.g. 'm', 'km', 'mi', 'nm').
    formula : DistanceFormula, optional
        HAVERSINE or VINCENTY. Defaults to the context's formula.
    context : GeodesyContext, optional
        Computation context. Defaults to `DEFAULT_CONTEXT`.

    Examples
    --------
    >>> london = Point(51.5074, -0.1278)
    >>> paris = Point(48.8566, 2.3522)
    >>> round(calculate_distance(london, paris, 'km'), 1)
    343.6
    """
    context = resolve_context(context)
    formula = context.formula if formula is None else as_formula(formula)

    if formula is DistanceFormula.VINCENTY:
        distance_m = vincenty(point1, point2, context)
        if unit == "m":
            return distance_m
        return convert(distance_m, "m", unit, context)

    return haversine(point1, point2, context) * context.ellipsoid.radius(unit)


def initial_bearing(
    point1: Point,
    point2: Point,
    context: Optional[GeodesyContext] = None
) -> float:
    """Initial great-circle bearing from `point1` to `point2`.

    Returns
    -------
    float
        Bearing in degrees clockwise from north, in [0, 360).
    """
    context = resolve_context(context)
    return context.strategy.initial_bearing(point1, point2, context.ellipsoid)


def relative_point(
    point: Point,
    distance: Distance,
    bearing: float,
    unit: str = "km",
    context: Optional[GeodesyContext] = None
) -> Point:
    """Find the point a distance and bearing away from `point`.

    Parameters
    ----------
    point : Point
        Start point.
    distance : float or pint.Quantity
        Distance to travel, in `unit` when a bare number.
    bearing : float
        Initial bearing in degrees clockwise from north.
    unit : str
        Unit of `distance`.

    Returns
    -------
    Point
        Destination on the sphere of the ellipsoid's mean radius, with
        longitude wrapped into [-180, 180).
    """
    context = resolve_context(context)
    ellipsoid = context.ellipsoid
    angular_distance = length_magnitude(distance, ellipsoid.multiplier(unit)) / ellipsoid.radius(unit)
    latitude, longitude = context.strategy.relative_point(
        point, angular_distance, bearing, ellipsoid
    )
    return Point(float(np.clip(latitude, -90.0, 90.0)), float(np.clip(longitude, -180.0, 180.0)))


def fraction_along_line(
    point1: Point,
    point2: Point,
    fraction: float,
    context: Optional[GeodesyContext] = None
) -> Point:
    """Point a fraction of the way along the great circle between two points.

    Parameters
    ----------
    fraction : float
        0 returns `point1`, 1 returns `point2`.

    Raises
    ------
    OutOfRangeFraction
        If `fraction` is outside [0, 1].
    UndefinedGreatCircle
        If the points are antipodal, so no unique great circle joins them.
    """
    if not 0 <= fraction <= 1:
        raise OutOfRangeFraction(f"fraction must be between 0 and 1, got {fraction}")

    if fraction == 0:
        return point1
    if fraction == 1:
        return point2

    context = resolve_context(context)
    angular_distance = haversine(point1, point2, context)

    if angular_distance < _COINCIDENT_ANGLE:
        return point1
    if np.sin(angular_distance) < _COINCIDENT_ANGLE:
        raise UndefinedGreatCircle(
            f"No unique great circle joins antipodal points {point1} and {point2}"
        )

    latitude, longitude = context.strategy.fraction_along_line(
        point1, point2, fraction, angular_distance, context.ellipsoid
    )
    return Point(float(np.clip(latitude, -90.0, 90.0)), float(np.clip(longitude, -180.0, 180.0)))


def midpoint(
    point1: Point,
    point2: Point,
    context: Optional[GeodesyContext] = None
) -> Point:
    """Great-circle midpoint of two points."""
    return fraction_along_line(point1, point2, 0.5, context)


def bbox_by_radius(
    point: Point,
    radius: Distance,
    unit: str = "km",
    context: Optional[GeodesyContext] = None
) -> Polygon:
    """Rectangle enclosing the circle of `radius` around `point`.

    North and south limits come from projecting along bearings 0 and 180.
    East and west limits come from the spherical cap half-width
    asin(sin(d) / cos(lat)), wrapped across the antimeridian. When the
    circle reaches a pole the rectangle spans all longitudes and the
    latitude limit is clamped to the pole.

    Returns
    -------
    Polygon
        Closed ring NW, NE, SE, SW, NW.
    """
    context = resolve_context(context)
    radius = length_magnitude(radius, context.ellipsoid.multiplier(unit))
    rad_dist = radius / context.ellipsoid.radius(unit)
    lat_rad = point.latitude_rad

    north = relative_point(point, radius, 0, unit, context).latitude
    south = relative_point(point, radius, 180, unit, context).latitude

    crosses_north = lat_rad + rad_dist >= np.pi / 2
    crosses_south = lat_rad - rad_dist <= -np.pi / 2
    if crosses_north:
        north = 90.0
    if crosses_south:
        south = -90.0

    ratio = np.sin(rad_dist) / np.cos(lat_rad) if np.cos(lat_rad) > 0 else np.inf
    if crosses_north or crosses_south or ratio >= 1:
        west, east = -180.0, 180.0
    else:
        delta_lon = np.arcsin(ratio)
        lon_rad = point.longitude_rad

        min_lon = lon_rad - delta_lon
        if min_lon < np.radians(-180):
            min_lon += 2 * np.pi
        max_lon = lon_rad + delta_lon
        if max_lon > np.radians(180):
            max_lon -= 2 * np.pi

        west = float(np.clip(np.degrees(min_lon), -180.0, 180.0))
        east = float(np.clip(np.degrees(max_lon), -180.0, 180.0))

    logger.debug(f"BBox of {radius} {unit} around {point}: N={north} S={south} W={west} E={east}")

    nw = Point(north, west)
    ne = Point(north, east)
    se = Point(south, east)
    sw = Point(south, west)

    return Polygon([[nw, ne, se, sw]])


def convert(
    distance: Distance,
    from_unit: str,
    to_unit: str,
    context: Optional[GeodesyContext] = None
) -> float:
    """Convert a distance between units through meters.

    Parameters
    ----------
    distance : float or pint.Quantity
        Distance in `from_unit` when a bare number.
    from_unit, to_unit : str
        Unit tokens from the context ellipsoid's multiplier table.

    Raises
    ------
    UnknownUnit
        If either unit is not recognized.

    Examples
    --------
    >>> convert(1, 'mi', 'm')
    1609.344
    """
    context = resolve_context(context)
    ellipsoid = context.ellipsoid
    multiplier = ellipsoid.multiplier(from_unit)
    meters = length_magnitude(distance, multiplier) * multiplier
    return meters / ellipsoid.multiplier(to_unit)
