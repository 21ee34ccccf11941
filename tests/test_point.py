"""
Tests for the Point geometry.
"""

import math

import numpy as np
import pytest

from common.errors import GeoError, InvalidCoordinate, StructuralMismatch
from geometry import LineString, Point


class TestPointConstruction:
    """Construction and coordinate validation."""

    def test_latitude_first_constructor(self):
        point = Point(51.5074, -0.1278)
        assert point.latitude == 51.5074
        assert point.longitude == -0.1278

    def test_integer_input_is_stored_as_float(self):
        point = Point(2, 3)
        assert isinstance(point.latitude, float)
        assert isinstance(point.longitude, float)

    def test_numpy_scalars_are_accepted(self):
        point = Point(np.float64(10.5), np.int64(20))
        assert point == Point(10.5, 20.0)

    @pytest.mark.parametrize("latitude, longitude", [
        (90.0001, 0),
        (-91, 0),
        (0, 180.5),
        (0, -181),
    ])
    def test_out_of_range(self, latitude, longitude):
        with pytest.raises(InvalidCoordinate):
            Point(latitude, longitude)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "10", None, True])
    def test_non_numeric_or_non_finite(self, value):
        with pytest.raises(InvalidCoordinate):
            Point(value, 0)
        with pytest.raises(InvalidCoordinate):
            Point(0, value)

    def test_invalid_coordinate_is_a_value_error(self):
        with pytest.raises(ValueError):
            Point(100, 0)
        with pytest.raises(GeoError):
            Point(100, 0)

    def test_boundary_values_are_valid(self):
        assert Point(90, 180).to_array() == [180.0, 90.0]
        assert Point(-90, -180).to_array() == [-180.0, -90.0]

    def test_points_are_immutable(self):
        point = Point(1, 2)
        with pytest.raises(AttributeError):
            point.latitude = 5


class TestPointArrays:
    """Conversion to and from [longitude, latitude] arrays."""

    def test_from_array_uses_lon_lat_order(self):
        point = Point.from_array([-0.1278, 51.5074])
        assert point.latitude == 51.5074
        assert point.longitude == -0.1278

    def test_to_array(self):
        assert Point(51.5074, -0.1278).to_array() == [-0.1278, 51.5074]

    @pytest.mark.parametrize("coordinates", [[1], [1, 2, 3], "12", [[1, 2], [3, 4]], 5])
    def test_from_array_shape_mismatch(self, coordinates):
        with pytest.raises(StructuralMismatch):
            Point.from_array(coordinates)

    def test_points_is_self(self):
        point = Point(1, 2)
        assert point.points() == [point]


class TestPointText:
    """String and WKT forms."""

    def test_str_is_lon_lat(self):
        assert str(Point(51.5, -0.25)) == "-0.25 51.5"

    def test_integral_values_print_without_fraction(self):
        assert str(Point(2, 3)) == "3 2"

    def test_wkt(self):
        assert Point(51.5074, -0.1278).to_wkt() == "POINT(-0.1278 51.5074)"

    def test_geojson(self):
        assert Point(0, 100).to_geojson() == {"type": "Point", "coordinates": [100.0, 0.0]}
        assert Point(0, 100).__geo_interface__ == Point(0, 100).to_geojson()


class TestPointEquality:
    """Structural equality."""

    def test_equal_coordinates(self):
        assert Point(1, 2) == Point(1.0, 2.0)
        assert hash(Point(1, 2)) == hash(Point(1.0, 2.0))

    def test_exact_float_comparison(self):
        assert Point(1, 2) != Point(1, 2 + 1e-12)

    def test_not_equal_to_other_types(self):
        assert Point(1, 2) != LineString([Point(1, 2), Point(3, 4)])
        assert Point(1, 2) != [2, 1]


class TestPointAngles:
    """Radian accessors and DMS conversion."""

    def test_radians(self):
        point = Point(45, -90)
        assert point.latitude_rad == pytest.approx(math.pi / 4)
        assert point.longitude_rad == pytest.approx(-math.pi / 2)

    def test_from_dms(self):
        point = Point.from_dms((51, 30, 0, "N"), (0, 15, 0, "W"))
        assert point.latitude == pytest.approx(51.5)
        assert point.longitude == pytest.approx(-0.25)

    def test_dms_accessors(self):
        point = Point(51.5, 10.25)
        assert point.latitude_in_dms() == (51.0, 30.0, 0.0)
        degrees, minutes, seconds = point.longitude_in_dms()
        assert (degrees, minutes) == (10.0, 15.0)
        assert seconds == pytest.approx(0.0, abs=1e-9)


class TestPointShortcuts:
    """Geodesic shortcuts delegating to the distance engine."""

    def test_distance_to_self_is_zero(self):
        point = Point(51.5074, -0.1278)
        assert point.distance_to(point) == 0.0

    def test_line_to(self):
        start, end = Point(0, 0), Point(1, 1)
        line = start.line_to(end)
        assert isinstance(line, LineString)
        assert line.points() == [start, end]

    def test_midpoint_on_equator(self):
        middle = Point(0, 0).midpoint(Point(0, 90))
        assert middle.latitude == pytest.approx(0.0, abs=1e-9)
        assert middle.longitude == pytest.approx(45.0)

    def test_relative_point_due_north(self):
        destination = Point(0, 0).relative_point(111.19, 0, "km")
        assert destination.latitude == pytest.approx(1.0, abs=1e-3)
        assert destination.longitude == pytest.approx(0.0, abs=1e-9)

    def test_initial_bearing_to(self):
        assert Point(0, 0).initial_bearing_to(Point(0, 10)) == pytest.approx(90.0)
