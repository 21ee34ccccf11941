"""
Geometry Base Class.

Every geometry variant is an immutable value object sharing one capability
set:

- ``points()``: flattened, ordered constituent Points
- ``to_array()``: nested coordinate arrays in GeoJSON ``coordinates`` depth
- ``to_wkt()`` / ``str()``: Well-Known Text and its coordinate body
- ``to_geojson()``: a GeoJSON geometry object (dict)

Equality is per variant: two geometries are equal iff they are the same
variant with equal ordered members, using exact float equality.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, TYPE_CHECKING

from common.types import BoundingBox, NestedCoordinates

if TYPE_CHECKING:
    from geometry.point import Point
    from geometry.polygon import Polygon


def format_number(value: float) -> str:
    """Format a coordinate for WKT.

    Integral values are written without a fractional part so that
    ``3.0`` is emitted as ``3``; other values use the shortest repr that
    round-trips.
    """
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


class Geometry(ABC):
    """Abstract base class of the geometry family.

    Subclasses set `geometry_type` to their GeoJSON type name; the WKT
    keyword is its upper-cased form.
    """

    geometry_type: str = ""

    @property
    def wkt_keyword(self) -> str:
        """WKT type keyword, e.g. ``'LINESTRING'``."""
        return self.geometry_type.upper()

    @abstractmethod
    def points(self) -> List["Point"]:
        """Flattened, ordered sequence of constituent Points."""
        pass

    @abstractmethod
    def to_array(self) -> NestedCoordinates:
        """Nested-array coordinate representation."""
        pass

    @abstractmethod
    def wkt_body(self) -> str:
        """WKT text following the type keyword."""
        pass

    def is_empty(self) -> bool:
        return False

    def to_wkt(self) -> str:
        """Serialize to Well-Known Text."""
        if self.is_empty():
            return f"{self.wkt_keyword} EMPTY"
        return f"{self.wkt_keyword}{self.wkt_body()}"

    def to_geojson(self) -> Dict[str, Any]:
        """Serialize to a GeoJSON geometry object."""
        return {
            "type": self.geometry_type,
            "coordinates": self.to_array(),
        }

    @property
    def __geo_interface__(self) -> Dict[str, Any]:
        return self.to_geojson()

    def bbox_array(self) -> BoundingBox:
        """Extremal coordinates ``(min_lon, min_lat, max_lon, max_lat)``."""
        from geospatial.bounding_box import get_bbox_array
        return get_bbox_array(self)

    def bbox(self) -> "Polygon":
        """Closed rectangular Polygon enclosing this geometry."""
        from geospatial.bounding_box import get_bbox
        return get_bbox(self)

    def __str__(self) -> str:
        if self.is_empty():
            return "EMPTY"
        return self.wkt_body()
