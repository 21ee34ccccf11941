"""
LineString Geometry.

An ordered sequence of at least two Points. Duplicate and coincident
points are allowed; the only invariant is order. Polygon rings are stored
as LineStrings.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, List, Optional, Tuple, TYPE_CHECKING

from common.errors import StructuralMismatch
from common.types import PositionList
from geometry.base import Geometry
from geometry.point import Point, is_sequence

if TYPE_CHECKING:
    from geospatial.context import GeodesyContext


def coerce_points(values: Any, owner: str) -> Tuple[Point, ...]:
    """Convert a sequence of Points and/or ``[lon, lat]`` pairs to Points."""
    if isinstance(values, LineString):
        return values.vertices
    if not is_sequence(values):
        raise StructuralMismatch(
            f"{owner} expects a sequence of positions, got {type(values).__name__}"
        )
    return tuple(
        value if isinstance(value, Point) else Point.from_array(value)
        for value in values
    )


@dataclass(frozen=True)
class LineString(Geometry):
    """An ordered sequence of two or more Points.

    Parameters
    ----------
    vertices : sequence
        Points, ``[longitude, latitude]`` pairs, or a mix of both.

    Raises
    ------
    StructuralMismatch
        If fewer than two positions are supplied or a member is not a
        position.
    """
    vertices: Tuple[Point, ...]

    geometry_type: ClassVar[str] = "LineString"
    min_vertices: ClassVar[int] = 2

    def __post_init__(self):
        vertices = coerce_points(self.vertices, self.geometry_type)
        if len(vertices) < self.min_vertices:
            raise StructuralMismatch(
                f"A {self.geometry_type} needs at least {self.min_vertices} positions, "
                f"got {len(vertices)}"
            )
        object.__setattr__(self, "vertices", vertices)

    @classmethod
    def from_array(cls, coordinates: PositionList) -> "LineString":
        """Create from ``[[lon, lat], ...]``."""
        return cls(coordinates)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __getitem__(self, index: int) -> Point:
        return self.vertices[index]

    @property
    def first(self) -> Point:
        return self.vertices[0]

    @property
    def last(self) -> Point:
        return self.vertices[-1]

    def is_closed(self) -> bool:
        """Whether the first and last points are exactly equal."""
        return self.first == self.last

    def points(self) -> List[Point]:
        return list(self.vertices)

    def to_array(self) -> List[List[float]]:
        return [point.to_array() for point in self.vertices]

    def wkt_body(self) -> str:
        return "(" + ", ".join(str(point) for point in self.vertices) + ")"

    def length(
        self,
        unit: str = "km",
        formula=None,
        context: Optional["GeodesyContext"] = None
    ) -> float:
        """Sum of the segment distances in `unit`."""
        from geospatial.distance_calculations import calculate_distance
        return sum(
            calculate_distance(start, end, unit, formula=formula, context=context)
            for start, end in zip(self.vertices, self.vertices[1:])
        )
