"""
Geometry Model.

The closed family of immutable geometry value objects shared by the
codecs and the distance engine:

- Point, LineString, Polygon
- MultiPoint, MultiLineString, MultiPolygon
- GeometryCollection

`GEOMETRY_TYPES` maps the lower-cased type tag used by both WKT and
GeoJSON to the variant class; it is the single dispatch table for
decoding.
"""

from typing import Dict, Type

from common.errors import UnsupportedGeometryType
from geometry.base import Geometry, format_number
from geometry.point import Point
from geometry.linestring import LineString
from geometry.polygon import Polygon
from geometry.collection import (
    GeometryCollection,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
)

GEOMETRY_TYPES: Dict[str, Type[Geometry]] = {
    cls.geometry_type.lower(): cls
    for cls in (
        Point,
        LineString,
        Polygon,
        MultiPoint,
        MultiLineString,
        MultiPolygon,
        GeometryCollection,
    )
}


def geometry_class(type_name: str) -> Type[Geometry]:
    """Look up a geometry variant by its WKT or GeoJSON tag.

    The lookup is case-insensitive.

    Raises
    ------
    UnsupportedGeometryType
        If the tag names no geometry variant.
    """
    try:
        return GEOMETRY_TYPES[str(type_name).strip().lower()]
    except KeyError:
        raise UnsupportedGeometryType(
            f"Geometry type '{type_name}' is not supported"
        ) from None


__all__ = [
    "Geometry",
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
    "GEOMETRY_TYPES",
    "geometry_class",
    "format_number",
]
