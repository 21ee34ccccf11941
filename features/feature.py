"""
GeoJSON Features.

A thin layer around the geometry model: a `Feature` pairs one geometry
with a free-form properties map and an optional identifier, and a
`FeatureCollection` is an ordered list of Features. Both can emit a
GeoJSON ``bbox`` member computed from their geometries.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from common.errors import StructuralMismatch
from geometry.base import Geometry
from geometry.point import is_sequence
from geospatial.bounding_box import get_bbox_array


@dataclass(frozen=True)
class Feature:
    """A geometry with properties.

    Attributes
    ----------
    geometry : Geometry or None
        The feature's geometry. None denotes an unlocated feature.
    properties : dict or None
        Arbitrary JSON-compatible properties.
    id : str or int, optional
        Feature identifier, emitted when set.
    bbox : bool
        Whether `to_geojson` emits a ``bbox`` member.

    Examples
    --------
    >>> from geometry import Point
    >>> Feature(Point(0, 1), {"name": "origin"}).to_geojson()["properties"]
    {'name': 'origin'}
    """
    geometry: Optional[Geometry]
    properties: Optional[Dict[str, Any]] = field(default_factory=dict)
    id: Optional[Union[str, int]] = None
    bbox: bool = False

    def __post_init__(self):
        if self.geometry is not None and not isinstance(self.geometry, Geometry):
            raise StructuralMismatch(
                f"Feature geometry must be a geometry or None, got {type(self.geometry).__name__}"
            )
        if self.properties is not None and not isinstance(self.properties, dict):
            raise StructuralMismatch(
                f"Feature properties must be an object or None, "
                f"got {type(self.properties).__name__}"
            )

    def with_bbox(self, bbox: bool = True) -> "Feature":
        """Copy of this feature with the bbox flag set."""
        return replace(self, bbox=bool(bbox))

    def bbox_array(self) -> Optional[Tuple[float, float, float, float]]:
        if self.geometry is None or not self.geometry.points():
            return None
        return tuple(get_bbox_array(self.geometry))

    def to_geojson(self) -> Dict[str, Any]:
        """Serialize to a GeoJSON Feature object."""
        data: Dict[str, Any] = {"type": "Feature"}
        if self.id is not None:
            data["id"] = self.id
        if self.bbox:
            box = self.bbox_array()
            if box is not None:
                data["bbox"] = list(box)
        data["geometry"] = None if self.geometry is None else self.geometry.to_geojson()
        data["properties"] = self.properties
        return data

    @property
    def __geo_interface__(self) -> Dict[str, Any]:
        return self.to_geojson()


@dataclass(frozen=True)
class FeatureCollection:
    """An ordered list of Features.

    Raises
    ------
    StructuralMismatch
        If a member is not a Feature.
    """
    features: Tuple[Feature, ...] = ()
    bbox: bool = False

    def __post_init__(self):
        if not is_sequence(self.features):
            raise StructuralMismatch(
                f"FeatureCollection expects a list of features, "
                f"got {type(self.features).__name__}"
            )
        for member in self.features:
            if not isinstance(member, Feature):
                raise StructuralMismatch(
                    f"FeatureCollection members must be features, got {type(member).__name__}"
                )
        object.__setattr__(self, "features", tuple(self.features))

    def with_bbox(self, bbox: bool = True) -> "FeatureCollection":
        return replace(self, bbox=bool(bbox))

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __getitem__(self, index: int) -> Feature:
        return self.features[index]

    def bbox_array(self) -> Optional[Tuple[float, float, float, float]]:
        geometries = [
            feature.geometry for feature in self.features
            if feature.geometry is not None and feature.geometry.points()
        ]
        if not geometries:
            return None
        return tuple(get_bbox_array(geometries))

    def to_geojson(self) -> Dict[str, Any]:
        """Serialize to a GeoJSON FeatureCollection object."""
        data: Dict[str, Any] = {"type": "FeatureCollection"}
        if self.bbox:
            box = self.bbox_array()
            if box is not None:
                data["bbox"] = list(box)
        data["features"] = [feature.to_geojson() for feature in self.features]
        return data

    @property
    def __geo_interface__(self) -> Dict[str, Any]:
        return self.to_geojson()
