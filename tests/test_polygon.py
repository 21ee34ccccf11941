"""
Tests for LineString and Polygon geometries.
"""

import pytest

from common.errors import MalformedRing, StructuralMismatch
from geometry import LineString, Point, Polygon
from geospatial import EARTH


class TestLineString:
    """LineString construction and access."""

    def test_mixed_points_and_pairs(self):
        line = LineString([Point(0, 0), [1, 1], (2, 2)])
        assert line.to_array() == [[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]]

    def test_needs_two_positions(self):
        with pytest.raises(StructuralMismatch):
            LineString([Point(0, 0)])
        with pytest.raises(StructuralMismatch):
            LineString([])

    def test_rejects_non_sequence(self):
        with pytest.raises(StructuralMismatch):
            LineString("LINESTRING(0 0, 1 1)")

    def test_indexing_and_iteration(self):
        line = LineString.from_array([[30, 10], [10, 30], [40, 40]])
        assert len(line) == 3
        assert line[0] == Point(10, 30)
        assert line[-1] == Point(40, 40)
        assert list(line) == line.points()
        assert line.first == line[0]
        assert line.last == line[2]

    def test_wkt(self):
        line = LineString.from_array([[30, 10], [10, 30], [40, 40]])
        assert line.to_wkt() == "LINESTRING(30 10, 10 30, 40 40)"
        assert str(line) == "(30 10, 10 30, 40 40)"

    def test_duplicate_points_allowed(self):
        line = LineString([[1, 1], [1, 1]])
        assert len(line) == 2
        assert line.is_closed()

    def test_length_along_equator(self):
        line = LineString([[0, 0], [1, 0], [2, 0]])
        expected = 2 * (3.141592653589793 / 180) * EARTH.radius("km")
        assert line.length("km") == pytest.approx(expected)

    def test_length_with_vincenty(self):
        line = LineString([[0, 0], [1, 0]])
        # One degree of longitude along the WGS84 equator
        assert line.length("m", formula="vincenty") == pytest.approx(111319.49, abs=0.01)


class TestPolygon:
    """Polygon construction, closure and serialization."""

    def test_ring_is_closed_and_serialized_lon_lat(self):
        polygon = Polygon([[Point(2, 3), Point(2, 4), Point(3, 4)]])
        assert polygon.to_wkt() == "POLYGON((3 2, 4 2, 4 3, 3 2))"

    def test_flat_point_list_is_one_ring(self):
        flat = Polygon([Point(2, 3), Point(2, 4), Point(3, 4)])
        nested = Polygon([[Point(2, 3), Point(2, 4), Point(3, 4)]])
        assert flat == nested
        assert len(flat) == 1

    def test_closed_ring_is_not_closed_twice(self):
        polygon = Polygon([[[0, 0], [1, 0], [1, 1], [0, 0]]])
        assert len(polygon.exterior) == 4

    def test_every_ring_is_closed(self):
        polygon = Polygon([
            [[35, 10], [45, 45], [15, 40], [10, 20]],
            [[20, 30], [35, 35], [30, 20]],
        ])
        for ring in polygon:
            assert ring.first == ring.last
        assert polygon.to_wkt() == (
            "POLYGON((35 10, 45 45, 15 40, 10 20, 35 10), (20 30, 35 35, 30 20, 20 30))"
        )

    def test_exterior_and_holes(self):
        polygon = Polygon([
            [[0, 0], [10, 0], [10, 10], [0, 10]],
            [[2, 2], [3, 2], [3, 3]],
        ])
        assert polygon.exterior == polygon[0]
        assert polygon.holes == (polygon[1],)

    def test_linestring_rings(self):
        ring = LineString([[0, 0], [1, 0], [1, 1]])
        polygon = Polygon([ring])
        assert polygon.to_array() == [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]]

    @pytest.mark.parametrize("ring", [
        [[0, 0], [1, 1]],
        [[0, 0], [1, 1], [0, 0]],
    ])
    def test_degenerate_ring(self, ring):
        with pytest.raises(MalformedRing):
            Polygon([ring])

    def test_ring_must_be_a_sequence(self):
        with pytest.raises(MalformedRing):
            Polygon([42])

    def test_empty_polygon_rejected(self):
        with pytest.raises(StructuralMismatch):
            Polygon([])

    def test_from_array_requires_ring_nesting(self):
        with pytest.raises(StructuralMismatch):
            Polygon.from_array([[0, 0], [1, 0], [1, 1], [0, 0]])

    def test_points_flatten_all_rings(self):
        polygon = Polygon([
            [[0, 0], [10, 0], [10, 10]],
            [[2, 2], [3, 2], [3, 3]],
        ])
        assert len(polygon.points()) == 8

    def test_geojson(self):
        polygon = Polygon([[[0, 0], [1, 0], [1, 1]]])
        assert polygon.to_geojson() == {
            "type": "Polygon",
            "coordinates": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]],
        }
