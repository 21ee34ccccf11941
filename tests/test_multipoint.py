"""
Tests for multi-geometries and GeometryCollection.
"""

import pytest

from common.errors import InvalidGeometryCollection, StructuralMismatch
from geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


class TestMultiPoint:
    """MultiPoint construction and serialization."""

    def test_from_pairs(self):
        multipoint = MultiPoint([[100, 0], [101, 1]])
        assert [point.to_array() for point in multipoint] == [[100, 0], [101, 1]]

    def test_from_points(self):
        multipoint = MultiPoint([Point(40, 10), Point(30, 40)])
        assert multipoint.to_wkt() == "MULTIPOINT(10 40, 40 30)"

    def test_empty(self):
        multipoint = MultiPoint()
        assert len(multipoint) == 0
        assert multipoint.is_empty()
        assert multipoint.to_wkt() == "MULTIPOINT EMPTY"
        assert multipoint.to_geojson() == {"type": "MultiPoint", "coordinates": []}

    def test_rejects_other_geometries(self):
        with pytest.raises(StructuralMismatch):
            MultiPoint([LineString([[0, 0], [1, 1]])])

    def test_rejects_non_list(self):
        with pytest.raises(StructuralMismatch):
            MultiPoint("10 40, 40 30")

    def test_geojson(self):
        assert MultiPoint([[100, 0], [101, 1]]).to_geojson() == {
            "type": "MultiPoint",
            "coordinates": [[100.0, 0.0], [101.0, 1.0]],
        }

    def test_equality_is_per_variant(self):
        points = [Point(0, 0), Point(1, 1)]
        assert MultiPoint(points) == MultiPoint(list(points))
        assert MultiPoint(points) != GeometryCollection(points)


class TestMultiLineStringAndMultiPolygon:
    """Homogeneous line and polygon collections."""

    def test_multilinestring_wkt(self):
        multiline = MultiLineString([
            [[10, 10], [20, 20], [10, 40]],
            [[40, 40], [30, 30], [40, 20], [30, 10]],
        ])
        assert multiline.to_wkt() == (
            "MULTILINESTRING((10 10, 20 20, 10 40), (40 40, 30 30, 40 20, 30 10))"
        )
        assert all(isinstance(line, LineString) for line in multiline)

    def test_multipolygon_wkt_and_closure(self):
        multipolygon = MultiPolygon([
            [[[30, 20], [45, 40], [10, 40]]],
            Polygon([[[15, 5], [40, 10], [10, 20], [5, 10]]]),
        ])
        assert multipolygon.to_wkt() == (
            "MULTIPOLYGON(((30 20, 45 40, 10 40, 30 20)), ((15 5, 40 10, 10 20, 5 10, 15 5)))"
        )

    def test_multipolygon_points(self):
        multipolygon = MultiPolygon([[[[0, 0], [1, 0], [1, 1]]]])
        assert len(multipolygon.points()) == 4


class TestGeometryCollection:
    """Heterogeneous collections."""

    def test_wkt_nests_members(self):
        collection = GeometryCollection([
            Point(10, 40),
            LineString([[10, 10], [20, 20], [10, 40]]),
        ])
        assert collection.to_wkt() == (
            "GEOMETRYCOLLECTION(POINT(40 10), LINESTRING(10 10, 20 20, 10 40))"
        )

    def test_geojson_uses_geometries(self):
        collection = GeometryCollection([Point(0, 100)])
        assert collection.to_geojson() == {
            "type": "GeometryCollection",
            "geometries": [{"type": "Point", "coordinates": [100.0, 0.0]}],
        }

    def test_nested_collections(self):
        inner = GeometryCollection([Point(1, 1)])
        outer = GeometryCollection([inner, MultiPoint()])
        assert outer.to_wkt() == "GEOMETRYCOLLECTION(GEOMETRYCOLLECTION(POINT(1 1)), MULTIPOINT EMPTY)"
        assert outer.points() == [Point(1, 1)]

    def test_members_must_be_geometries(self):
        with pytest.raises(InvalidGeometryCollection):
            GeometryCollection([[0, 0]])
        with pytest.raises(InvalidGeometryCollection):
            GeometryCollection(Point(0, 0))

    def test_invalid_collection_is_a_structural_mismatch(self):
        with pytest.raises(StructuralMismatch):
            GeometryCollection(["POINT(0 0)"])
