"""
Bounding Boxes.

Axis-aligned extremal boxes in longitude/latitude space. The box is a plain
scan over the constituent Points and ignores antimeridian wrapping; see
`geospatial.distance_calculations.bbox_by_radius` for the radius-based box,
which does wrap.
"""

from typing import Iterable, List, Union

from common.errors import InvalidGeometryInput, StructuralMismatch
from common.logging_config import get_logger
from common.types import BoundingBox
from geometry.base import Geometry
from geometry.point import Point, is_sequence
from geometry.polygon import Polygon

logger = get_logger(__name__)

GeometryInput = Union[Geometry, Iterable[Geometry]]


def _collect_points(geometry: GeometryInput) -> List[Point]:
    if isinstance(geometry, Geometry):
        return geometry.points()

    if not is_sequence(geometry):
        raise InvalidGeometryInput(
            f"Expected a geometry or a list of geometries, got {type(geometry).__name__}"
        )

    points = []
    for item in geometry:
        if not isinstance(item, Geometry):
            raise InvalidGeometryInput(
                f"Bounding box input must contain geometries, got {type(item).__name__}"
            )
        points.extend(item.points())
    return points


def get_bbox_array(geometry: GeometryInput) -> BoundingBox:
    """Extremal coordinates of a geometry or a list of geometries.

    Parameters
    ----------
    geometry : Geometry or list of Geometry
        Input to scan. A list may mix variants.

    Returns
    -------
    BoundingBox
        ``(min_lon, min_lat, max_lon, max_lat)`` in degrees.

    Raises
    ------
    InvalidGeometryInput
        If the input is not a geometry or a list of geometries.
    StructuralMismatch
        If the input holds no points (an empty collection).

    Examples
    --------
    >>> get_bbox_array([Point(2, 3), Point(3, 4)])
    BoundingBox(min_lon=3.0, min_lat=2.0, max_lon=4.0, max_lat=3.0)
    """
    points = _collect_points(geometry)
    if not points:
        raise StructuralMismatch("Cannot compute the bounding box of an empty geometry")

    max_lat = -90.0
    min_lat = 90.0
    max_lon = -180.0
    min_lon = 180.0

    for point in points:
        max_lat = max(max_lat, point.latitude)
        min_lat = min(min_lat, point.latitude)
        max_lon = max(max_lon, point.longitude)
        min_lon = min(min_lon, point.longitude)

    return BoundingBox(min_lon=min_lon, min_lat=min_lat, max_lon=max_lon, max_lat=max_lat)


def get_bbox(geometry: GeometryInput) -> Polygon:
    """Closed rectangular Polygon enclosing a geometry.

    The ring runs NW, NE, SE, SW and back to NW.

    Examples
    --------
    >>> get_bbox(Polygon([[Point(2, 3), Point(2, 4), Point(3, 4)]])).to_array()
    [[[3.0, 3.0], [4.0, 3.0], [4.0, 2.0], [3.0, 2.0], [3.0, 3.0]]]
    """
    box = get_bbox_array(geometry)
    logger.debug(f"Bounding box {box}")

    return Polygon([[
        [box.min_lon, box.max_lat],
        [box.max_lon, box.max_lat],
        [box.max_lon, box.min_lat],
        [box.min_lon, box.min_lat],
    ]])
