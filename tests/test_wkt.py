"""
Tests for the WKT codec.
"""

import pytest

from common.constants import MAX_COLLECTION_DEPTH
from common.errors import (
    InvalidCoordinate,
    MalformedRing,
    StructuralMismatch,
    UnsupportedGeometryType,
    WktSyntaxError,
)
from geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from interchange import from_wkt, to_wkt
from interchange.wkt import tokenize


def nested_collection(levels):
    return "GEOMETRYCOLLECTION(" * levels + "POINT(1 2)" + ")" * levels


ROUND_TRIP_CASES = [
    "POINT(30 10)",
    "POINT(-0.1278 51.5074)",
    "LINESTRING(30 10, 10 30, 40 40)",
    "POLYGON((30 10, 40 40, 20 40, 10 20, 30 10))",
    "POLYGON((35 10, 45 45, 15 40, 10 20, 35 10), (20 30, 35 35, 30 20, 20 30))",
    "MULTIPOINT(10 40, 40 30, 20 20, 30 10)",
    "MULTILINESTRING((10 10, 20 20, 10 40), (40 40, 30 30, 40 20, 30 10))",
    "MULTIPOLYGON(((30 20, 45 40, 10 40, 30 20)), ((15 5, 40 10, 10 20, 5 10, 15 5)))",
    "GEOMETRYCOLLECTION(POINT(40 10), LINESTRING(10 10, 20 20, 10 40), "
    "POLYGON((40 40, 20 45, 45 30, 40 40)))",
    "MULTIPOINT EMPTY",
    "MULTILINESTRING EMPTY",
    "MULTIPOLYGON EMPTY",
    "GEOMETRYCOLLECTION EMPTY",
]


class TestWktRoundTrip:
    """serialize(parse(s)) reproduces s."""

    @pytest.mark.parametrize("text", ROUND_TRIP_CASES)
    def test_round_trip(self, text):
        assert to_wkt(from_wkt(text)) == text


class TestWktParsing:
    """Decoding into the geometry model."""

    def test_point(self):
        assert from_wkt("POINT(1 2)") == Point(2, 1)

    def test_variant_types(self):
        assert isinstance(from_wkt("LINESTRING(0 0, 1 1)"), LineString)
        assert isinstance(from_wkt("POLYGON((0 0, 1 0, 1 1, 0 0))"), Polygon)
        assert isinstance(from_wkt("MULTIPOINT(0 0)"), MultiPoint)
        assert isinstance(from_wkt("MULTILINESTRING((0 0, 1 1))"), MultiLineString)
        assert isinstance(from_wkt("MULTIPOLYGON(((0 0, 1 0, 1 1, 0 0)))"), MultiPolygon)
        assert isinstance(from_wkt("GEOMETRYCOLLECTION(POINT(0 0))"), GeometryCollection)

    def test_multipoint_forms_are_equal(self):
        bare = from_wkt("MULTIPOINT(10 40, 40 30, 20 20, 30 10)")
        wrapped = from_wkt("MULTIPOINT((10 40), (40 30), (20 20), (30 10))")
        assert bare == wrapped
        assert len(bare) == 4

    def test_multipoint_mixed_forms(self):
        assert from_wkt("MULTIPOINT((10 40), 40 30)") == MultiPoint([[10, 40], [40, 30]])

    def test_keywords_are_case_insensitive(self):
        assert from_wkt("point(1 2)") == from_wkt("POINT(1 2)")
        assert from_wkt("MultiPoint Empty") == MultiPoint()

    def test_whitespace_is_flexible(self):
        text = "  LINESTRING ( 30   10 ,10 30,\n 40 40 )  "
        assert to_wkt(from_wkt(text)) == "LINESTRING(30 10, 10 30, 40 40)"

    def test_exponent_notation(self):
        point = from_wkt("POINT(1.5e1 -2E-1)")
        assert point.longitude == 15.0
        assert point.latitude == -0.2

    def test_polygon_ring_is_closed(self):
        polygon = from_wkt("POLYGON((3 2, 4 2, 4 3))")
        assert polygon.to_wkt() == "POLYGON((3 2, 4 2, 4 3, 3 2))"

    def test_nested_geometry_collection(self):
        collection = from_wkt(
            "GEOMETRYCOLLECTION(GEOMETRYCOLLECTION(POINT(1 2)), MULTIPOINT((3 4), (5 6)))"
        )
        assert isinstance(collection[0], GeometryCollection)
        assert collection[1] == MultiPoint([[3, 4], [5, 6]])
        assert collection.points() == [Point(2, 1), Point(4, 3), Point(6, 5)]


class TestWktErrors:
    """Parsing-related error kinds."""

    def test_unknown_type(self):
        with pytest.raises(UnsupportedGeometryType):
            from_wkt("CIRCLE(1 2)")

    @pytest.mark.parametrize("text", [
        "POINT(1 2",
        "POINT(1)",
        "POINT(1 2 3)",
        "POINT 1 2",
        "POINT(1 2) extra",
        "POINT(1 $ 2)",
        "LINESTRING(0 0, 1 1,)",
        "(1 2)",
        "",
    ])
    def test_syntax_errors(self, text):
        with pytest.raises(WktSyntaxError):
            from_wkt(text)

    def test_syntax_error_reports_position(self):
        with pytest.raises(WktSyntaxError) as excinfo:
            from_wkt("POINT(1 2")
        assert excinfo.value.position == 9

    def test_syntax_error_is_structural_mismatch(self):
        with pytest.raises(StructuralMismatch):
            from_wkt("POINT(1 2")

    def test_point_empty_has_no_representation(self):
        with pytest.raises(StructuralMismatch):
            from_wkt("POINT EMPTY")

    def test_single_point_linestring(self):
        with pytest.raises(StructuralMismatch):
            from_wkt("LINESTRING(1 2)")

    def test_degenerate_ring(self):
        with pytest.raises(MalformedRing):
            from_wkt("POLYGON((1 2, 3 4, 1 2))")

    def test_out_of_range_coordinate(self):
        with pytest.raises(InvalidCoordinate):
            from_wkt("POINT(200 0)")

    def test_non_string_input(self):
        with pytest.raises(StructuralMismatch):
            from_wkt(42)

    def test_collection_nesting_up_to_limit(self):
        geometry = from_wkt(nested_collection(MAX_COLLECTION_DEPTH))
        for _ in range(MAX_COLLECTION_DEPTH - 1):
            assert isinstance(geometry, GeometryCollection)
            geometry = geometry[0]
        assert geometry[0] == Point(2, 1)

    @pytest.mark.parametrize("levels", [MAX_COLLECTION_DEPTH + 1, 400, 5000])
    def test_collection_nesting_too_deep(self, levels):
        with pytest.raises(StructuralMismatch, match="nesting exceeds"):
            from_wkt(nested_collection(levels))


class TestTokenizer:
    """Lexical analysis."""

    def test_token_kinds(self):
        tokens = tokenize("POINT(-1.5e3 2)")
        assert [(token.kind, token.text) for token in tokens] == [
            ("word", "POINT"),
            ("punct", "("),
            ("number", "-1.5e3"),
            ("number", "2"),
            ("punct", ")"),
        ]

    def test_positions(self):
        tokens = tokenize("POINT (1 2)")
        assert [token.position for token in tokens] == [0, 6, 7, 9, 10]
