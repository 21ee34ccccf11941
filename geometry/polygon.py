"""
Polygon Geometry.

A Polygon is an ordered sequence of rings. Ring 0 is the exterior and any
further rings are holes. Every stored ring is closed: its first point is
exactly equal to its last point. A ring supplied open is closed by
appending its first point; closure compares coordinates exactly, never by
distance tolerance.

Notes
-----
Winding order, self-intersection and hole containment are not validated.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, List, Tuple

from common.errors import MalformedRing, StructuralMismatch
from common.types import RingList
from geometry.base import Geometry
from geometry.linestring import LineString, coerce_points
from geometry.point import Point, is_sequence


# A closed ring needs three distinct corners plus the closing point
MIN_RING_POSITIONS = 4


def close_ring(ring: Any) -> LineString:
    """Build a closed ring from a LineString or a sequence of positions.

    Raises
    ------
    MalformedRing
        If the ring is not a sequence or has fewer than three corners.
    """
    if isinstance(ring, LineString):
        vertices = ring.vertices
    elif is_sequence(ring):
        vertices = coerce_points(ring, "Polygon ring")
    else:
        raise MalformedRing(
            f"A polygon ring must be a sequence of positions, got {type(ring).__name__}"
        )

    if vertices and vertices[0] != vertices[-1]:
        vertices = vertices + (vertices[0],)

    if len(vertices) < MIN_RING_POSITIONS:
        raise MalformedRing(
            f"A closed polygon ring needs at least {MIN_RING_POSITIONS} positions, "
            f"got {len(vertices)}"
        )
    return LineString(vertices)


def _is_position(value: Any) -> bool:
    """A Point or a ``[lon, lat]`` pair, as opposed to a ring."""
    if isinstance(value, Point):
        return True
    return (
        is_sequence(value)
        and len(value) > 0
        and not is_sequence(value[0])
        and not isinstance(value[0], Geometry)
    )


@dataclass(frozen=True)
class Polygon(Geometry):
    """A polygon made of closed rings.

    Parameters
    ----------
    rings : sequence
        Either a sequence of rings (each a LineString, a sequence of Points
        or a sequence of ``[lon, lat]`` pairs) or, as a shorthand for a
        polygon without holes, a flat sequence of Points forming the
        exterior ring.

    Examples
    --------
    >>> Polygon([Point(2, 3), Point(2, 4), Point(3, 4)]).to_wkt()
    'POLYGON((3 2, 4 2, 4 3, 3 2))'
    """
    rings: Tuple[LineString, ...]

    geometry_type: ClassVar[str] = "Polygon"

    def __post_init__(self):
        rings = self.rings
        if not is_sequence(rings) or len(rings) == 0:
            raise StructuralMismatch("A Polygon needs at least one ring")
        if _is_position(rings[0]):
            rings = [rings]
        object.__setattr__(self, "rings", tuple(close_ring(ring) for ring in rings))

    @classmethod
    def from_array(cls, coordinates: RingList) -> "Polygon":
        """Create from ``[[[lon, lat], ...], ...]``.

        Unlike the constructor, the ring nesting level is mandatory.

        Raises
        ------
        StructuralMismatch
            If `coordinates` is not a sequence of rings.
        """
        if not is_sequence(coordinates) or len(coordinates) == 0:
            raise StructuralMismatch("Polygon coordinates must be a non-empty list of rings")
        for ring in coordinates:
            if not is_sequence(ring) or _is_position(ring):
                raise StructuralMismatch(
                    f"Polygon coordinates must be a list of rings, got {ring!r}"
                )
        return cls(coordinates)

    @property
    def exterior(self) -> LineString:
        return self.rings[0]

    @property
    def holes(self) -> Tuple[LineString, ...]:
        return self.rings[1:]

    def __len__(self) -> int:
        return len(self.rings)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.rings)

    def __getitem__(self, index: int) -> LineString:
        return self.rings[index]

    def points(self) -> List[Point]:
        return [point for ring in self.rings for point in ring.vertices]

    def to_array(self) -> List[List[List[float]]]:
        return [ring.to_array() for ring in self.rings]

    def wkt_body(self) -> str:
        return "(" + ", ".join(ring.wkt_body() for ring in self.rings) + ")"
