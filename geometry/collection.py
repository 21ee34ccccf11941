"""
Multi-Geometries and GeometryCollection.

MultiPoint, MultiLineString and MultiPolygon are ordered, possibly empty,
homogeneous sequences of their singular variant. GeometryCollection is an
ordered sequence of any geometries, including nested collections. All of
them own their members exclusively and hold no back-references.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterator, List, Sequence, Tuple, Type

from common.errors import InvalidGeometryCollection, StructuralMismatch
from common.types import NestedCoordinates
from geometry.base import Geometry
from geometry.linestring import LineString
from geometry.point import Point, is_sequence
from geometry.polygon import Polygon


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """An ordered sequence of heterogeneous geometries.

    Raises
    ------
    InvalidGeometryCollection
        If `geometries` is not a sequence of Geometry instances.
    """
    geometries: Tuple[Geometry, ...] = ()

    geometry_type: ClassVar[str] = "GeometryCollection"

    def __post_init__(self):
        if not is_sequence(self.geometries):
            raise InvalidGeometryCollection(
                f"{self.geometry_type} expects a sequence of geometries, "
                f"got {type(self.geometries).__name__}"
            )
        object.__setattr__(
            self, "geometries", tuple(self._coerce(member) for member in self.geometries)
        )

    def _coerce(self, member: Any) -> Geometry:
        if not isinstance(member, Geometry):
            raise InvalidGeometryCollection(
                f"{self.geometry_type} members must be geometries, got {member!r}"
            )
        return member

    @classmethod
    def from_array(cls, geometries: Sequence[Any]):
        return cls(geometries)

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.geometries)

    def __getitem__(self, index: int) -> Geometry:
        return self.geometries[index]

    def is_empty(self) -> bool:
        return len(self.geometries) == 0

    def points(self) -> List[Point]:
        return [point for member in self.geometries for point in member.points()]

    def to_array(self) -> NestedCoordinates:
        return [member.to_array() for member in self.geometries]

    def member_wkt(self, member: Geometry) -> str:
        return member.to_wkt()

    def wkt_body(self) -> str:
        return "(" + ", ".join(self.member_wkt(member) for member in self.geometries) + ")"

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": self.geometry_type,
            "geometries": [member.to_geojson() for member in self.geometries],
        }


@dataclass(frozen=True)
class _HomogeneousCollection(GeometryCollection):
    """Collection whose members are all of `member_type`.

    Members may be given as instances of `member_type` or as their
    nested-array form.
    """

    member_type: ClassVar[Type[Geometry]] = Geometry

    def _coerce(self, member: Any) -> Geometry:
        if isinstance(member, self.member_type):
            return member
        if isinstance(member, Geometry):
            raise StructuralMismatch(
                f"{self.geometry_type} members must be {self.member_type.geometry_type}, "
                f"got {member.geometry_type}"
            )
        return self.member_type.from_array(member)

    def __post_init__(self):
        if not is_sequence(self.geometries):
            raise StructuralMismatch(
                f"{self.geometry_type} coordinates must be a list, "
                f"got {type(self.geometries).__name__}"
            )
        super().__post_init__()

    def member_wkt(self, member: Geometry) -> str:
        return member.wkt_body()

    def to_geojson(self) -> Dict[str, Any]:
        return Geometry.to_geojson(self)


@dataclass(frozen=True)
class MultiPoint(_HomogeneousCollection):
    """Ordered sequence of Points.

    Examples
    --------
    >>> MultiPoint([[10, 40], [40, 30]]).to_wkt()
    'MULTIPOINT(10 40, 40 30)'
    """
    geometry_type: ClassVar[str] = "MultiPoint"
    member_type: ClassVar[Type[Geometry]] = Point

    def member_wkt(self, member: Geometry) -> str:
        return str(member)


@dataclass(frozen=True)
class MultiLineString(_HomogeneousCollection):
    """Ordered sequence of LineStrings."""
    geometry_type: ClassVar[str] = "MultiLineString"
    member_type: ClassVar[Type[Geometry]] = LineString


@dataclass(frozen=True)
class MultiPolygon(_HomogeneousCollection):
    """Ordered sequence of Polygons."""
    geometry_type: ClassVar[str] = "MultiPolygon"
    member_type: ClassVar[Type[Geometry]] = Polygon
