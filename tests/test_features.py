"""
Tests for the Feature layer.
"""

import json

import pytest

from common.errors import StructuralMismatch
from features import Feature, FeatureCollection
from geometry import Point, Polygon
from interchange import from_geojson
from interchange.geojson import dumps


FEATURE_COLLECTION_JSON = """{ "type": "FeatureCollection",
    "features": [
      { "type": "Feature",
    "geometry": {
      "type": "Polygon",
      "coordinates": [[
        [-10.0, -10.0], [10.0, -10.0], [10.0, 10.0], [-10.0, 10.0], [-10,-10]
        ]]
      },
      "properties": {
        "foo":"bar"
      }
    }
      ]
    }"""


def square(size: float) -> Polygon:
    return Polygon([[[-size, -size], [size, -size], [size, size], [-size, size]]])


class TestFeatureCollectionRoundTrip:
    """Decoding and re-encoding a FeatureCollection."""

    def test_from_geojson_text(self):
        collection = from_geojson(FEATURE_COLLECTION_JSON)

        assert isinstance(collection, FeatureCollection)
        assert collection.to_geojson() == json.loads(FEATURE_COLLECTION_JSON)

    def test_member_order_matches_input(self):
        collection = from_geojson(FEATURE_COLLECTION_JSON)
        encoded = json.loads(dumps(collection))

        assert list(encoded) == ["type", "features"]
        assert list(encoded["features"][0]) == ["type", "geometry", "properties"]

    def test_features_are_decoded(self):
        collection = from_geojson(FEATURE_COLLECTION_JSON)

        assert len(collection) == 1
        assert collection[0].geometry == square(10)
        assert collection[0].properties == {"foo": "bar"}


class TestFeature:
    """Feature construction and encoding."""

    def test_defaults(self):
        feature = Feature(Point(1, 2))
        assert feature.to_geojson() == {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [2.0, 1.0]},
            "properties": {},
        }

    def test_id_is_emitted(self):
        feature = Feature(Point(1, 2), {"a": 1}, id="f1")
        assert feature.to_geojson()["id"] == "f1"

    def test_unlocated_feature(self):
        feature = Feature(None, None)
        assert feature.to_geojson() == {"type": "Feature", "geometry": None, "properties": None}
        assert from_geojson(feature.to_geojson()) == feature

    def test_with_bbox_returns_copy(self):
        feature = Feature(square(10), {"foo": "bar"})
        boxed = feature.with_bbox()

        assert boxed.bbox is True
        assert feature.bbox is False
        assert boxed.to_geojson()["bbox"] == [-10.0, -10.0, 10.0, 10.0]
        assert "bbox" not in feature.to_geojson()

    def test_bbox_member_order(self):
        encoded = Feature(square(1), {}, id=7).with_bbox().to_geojson()
        assert list(encoded) == ["type", "id", "bbox", "geometry", "properties"]

    def test_bbox_flag_survives_decoding(self):
        encoded = Feature(square(1), {}).with_bbox().to_geojson()
        assert from_geojson(encoded).bbox is True

    def test_geo_interface(self):
        feature = Feature(Point(1, 2), {"a": 1})
        assert feature.__geo_interface__ == feature.to_geojson()

    def test_rejects_non_geometry(self):
        with pytest.raises(StructuralMismatch):
            Feature({"type": "Point", "coordinates": [0, 0]})

    def test_rejects_non_mapping_properties(self):
        with pytest.raises(StructuralMismatch):
            Feature(Point(0, 0), ["a"])


class TestFeatureCollection:
    """FeatureCollection construction and bounding boxes."""

    def test_bbox_covers_all_features(self):
        collection = FeatureCollection([
            Feature(square(1), {}),
            Feature(Point(20, -30), {}),
            Feature(None, {}),
        ]).with_bbox()

        assert collection.to_geojson()["bbox"] == [-30.0, -1.0, 1.0, 20.0]

    def test_empty_collection(self):
        collection = FeatureCollection().with_bbox()
        assert collection.to_geojson() == {"type": "FeatureCollection", "features": []}

    def test_iteration(self):
        features = [Feature(Point(0, 0)), Feature(Point(1, 1))]
        collection = FeatureCollection(features)
        assert list(collection) == features

    def test_rejects_non_features(self):
        with pytest.raises(StructuralMismatch):
            FeatureCollection([Point(0, 0)])
        with pytest.raises(StructuralMismatch):
            FeatureCollection(Feature(Point(0, 0)))
