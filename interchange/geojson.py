"""
GeoJSON Codec.

Decodes RFC 7946 geometry objects, ``Feature`` and ``FeatureCollection``
into the geometry model and the feature layer, and encodes them back.
The decoder works on already-parsed JSON values (dicts and lists); a JSON
string is accepted as a convenience and parsed with the standard `json`
module first.

Dispatch is on the ``type`` member, case-insensitively. Geometry objects
decode their ``coordinates`` with the variant's ``from_array``;
GeometryCollection decodes each entry of ``geometries`` recursively, at
most ``MAX_COLLECTION_DEPTH`` levels deep.
"""

import json
from collections.abc import Mapping
from typing import Any, Dict, Union

from common.constants import MAX_COLLECTION_DEPTH
from common.errors import StructuralMismatch
from common.logging_config import get_logger
from features.feature import Feature, FeatureCollection
from geometry import Geometry, GeometryCollection, geometry_class

logger = get_logger(__name__)

GeoJsonObject = Union[Geometry, Feature, FeatureCollection]


def _type_of(data: Any) -> str:
    if not isinstance(data, Mapping):
        raise StructuralMismatch(
            f"A GeoJSON object must be a JSON object, got {type(data).__name__}"
        )
    type_name = data.get("type")
    if not isinstance(type_name, str):
        raise StructuralMismatch("A GeoJSON object needs a string 'type' member")
    return type_name.strip().lower()


def _member(data: Mapping, key: str, owner: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise StructuralMismatch(f"GeoJSON {owner} is missing its '{key}' member") from None


def decode_geometry(data: Any, depth: int = 0) -> Geometry:
    """Decode a GeoJSON geometry object.

    Parameters
    ----------
    data : dict
        GeoJSON geometry object.
    depth : int
        GeometryCollection nesting level of `data`; decoding stops with
        StructuralMismatch beyond ``MAX_COLLECTION_DEPTH``.

    Raises
    ------
    UnsupportedGeometryType
        If ``type`` names no geometry variant.
    StructuralMismatch
        If a required member is missing, the coordinates have the wrong
        shape, or collections nest too deeply.
    """
    type_name = _type_of(data)
    cls = geometry_class(type_name)
    logger.debug(f"Decoding GeoJSON {cls.geometry_type}")

    if cls is GeometryCollection:
        if depth >= MAX_COLLECTION_DEPTH:
            raise StructuralMismatch(
                f"GeometryCollection nesting exceeds {MAX_COLLECTION_DEPTH} levels"
            )
        members = _member(data, "geometries", cls.geometry_type)
        if not isinstance(members, list):
            raise StructuralMismatch("GeometryCollection 'geometries' must be a list")
        return GeometryCollection([decode_geometry(member, depth + 1) for member in members])

    return cls.from_array(_member(data, "coordinates", cls.geometry_type))


def decode_feature(data: Any) -> Feature:
    """Decode a GeoJSON Feature object.

    A ``bbox`` member in the input sets the feature's bbox flag; the box
    itself is recomputed on output.
    """
    geometry = _member(data, "geometry", "Feature")
    return Feature(
        geometry=None if geometry is None else decode_geometry(geometry),
        properties=data.get("properties"),
        id=data.get("id"),
        bbox="bbox" in data,
    )


def decode_feature_collection(data: Any) -> FeatureCollection:
    """Decode a GeoJSON FeatureCollection object."""
    features = _member(data, "features", "FeatureCollection")
    if not isinstance(features, list):
        raise StructuralMismatch("FeatureCollection 'features' must be a list")

    decoded = []
    for member in features:
        if _type_of(member) != "feature":
            raise StructuralMismatch(
                f"FeatureCollection members must be Features, got '{member.get('type')}'"
            )
        decoded.append(decode_feature(member))
    return FeatureCollection(decoded, bbox="bbox" in data)


def loads(data: Union[str, Mapping]) -> GeoJsonObject:
    """Decode GeoJSON into a geometry, Feature or FeatureCollection.

    Parameters
    ----------
    data : dict or str
        A decoded JSON object, or JSON text.

    Raises
    ------
    UnsupportedGeometryType
        If the ``type`` member is not recognized.
    StructuralMismatch
        If the document shape does not match its type, or the text is
        not valid JSON.

    Examples
    --------
    >>> loads({"type": "Point", "coordinates": [100.0, 0.0]}).to_wkt()
    'POINT(100 0)'
    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as exc:
            raise StructuralMismatch(f"Invalid JSON: {exc}") from exc
        except RecursionError as exc:
            raise StructuralMismatch("JSON text is nested too deeply") from exc

    type_name = _type_of(data)
    if type_name == "feature":
        return decode_feature(data)
    if type_name == "featurecollection":
        return decode_feature_collection(data)
    return decode_geometry(data)


def to_geojson(obj: GeoJsonObject) -> Dict[str, Any]:
    """Encode a geometry, Feature or FeatureCollection as a GeoJSON dict."""
    if not isinstance(obj, (Geometry, Feature, FeatureCollection)):
        raise StructuralMismatch(f"Cannot encode {type(obj).__name__} as GeoJSON")
    return obj.to_geojson()


def dumps(obj: GeoJsonObject, **kwargs) -> str:
    """Encode as GeoJSON text; keyword arguments go to `json.dumps`."""
    return json.dumps(to_geojson(obj), **kwargs)
