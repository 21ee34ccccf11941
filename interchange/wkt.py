"""
Well-Known Text Codec.

Parses and emits the 2-D WKT subset used by the toolkit:

    POINT(lon lat)
    LINESTRING(lon lat, lon lat, ...)
    POLYGON((lon lat, ...), (hole ...))
    MULTIPOINT((lon lat), ...)  or  MULTIPOINT(lon lat, ...)
    MULTILINESTRING((...), (...))
    MULTIPOLYGON(((...)), ((...)))
    GEOMETRYCOLLECTION(TYPE(...), TYPE(...))

Multi-geometries and GeometryCollection may also be ``EMPTY``. Keywords
are case-insensitive and coordinates may use exponent notation.

Parsing is a tokenizer followed by a recursive-descent parser. Each
variant's body is parsed into the nested-array form of its GeoJSON
``coordinates`` and handed to the variant's ``from_array``, so WKT and
GeoJSON share one geometry decoder. GeometryCollections may nest at most
``MAX_COLLECTION_DEPTH`` levels deep.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type

from common.constants import MAX_COLLECTION_DEPTH
from common.errors import StructuralMismatch, WktSyntaxError
from common.logging_config import get_logger
from geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    geometry_class,
)

logger = get_logger(__name__)

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)
  | (?P<word>[A-Za-z_]+)
  | (?P<punct>[(),])
  | (?P<space>\s+)
    """,
    re.VERBOSE,
)

_EMPTY_CAPABLE = (MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)


@dataclass(frozen=True)
class Token:
    """A lexical unit of WKT text."""
    kind: str
    text: str
    position: int


def tokenize(text: str) -> List[Token]:
    """Split WKT text into number, word and punctuation tokens.

    Raises
    ------
    WktSyntaxError
        On any character outside the WKT alphabet.
    """
    tokens = []
    position = 0
    while position < len(text):
        match = _TOKEN_PATTERN.match(text, position)
        if match is None:
            raise WktSyntaxError(f"Unexpected character {text[position]!r}", position)
        kind = match.lastgroup
        if kind != "space":
            tokens.append(Token(kind, match.group(), position))
        position = match.end()
    return tokens


class _Parser:
    """Recursive-descent parser over a token list."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0
        self.depth = 0

    # -- token helpers -------------------------------------------------

    def _peek(self) -> Token:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return Token("end", "", len(self.text))

    def _next(self) -> Token:
        token = self._peek()
        self.index += 1
        return token

    def _expect(self, text: str) -> Token:
        token = self._next()
        if token.text != text:
            found = token.text or "end of input"
            raise WktSyntaxError(f"Expected '{text}', found '{found}'", token.position)
        return token

    def _accept(self, text: str) -> bool:
        if self._peek().text == text:
            self.index += 1
            return True
        return False

    def _comma_separated(self, item: Callable[[], Any]) -> List[Any]:
        self._expect("(")
        items = [item()]
        while self._accept(","):
            items.append(item())
        self._expect(")")
        return items

    # -- grammar -------------------------------------------------------

    def parse(self) -> Geometry:
        geometry = self.geometry()
        trailing = self._peek()
        if trailing.kind != "end":
            raise WktSyntaxError(
                f"Unexpected '{trailing.text}' after geometry", trailing.position
            )
        return geometry

    def geometry(self) -> Geometry:
        token = self._next()
        if token.kind != "word":
            found = token.text or "end of input"
            raise WktSyntaxError(f"Expected a geometry keyword, found '{found}'", token.position)

        cls = geometry_class(token.text)
        logger.debug(f"Parsing WKT {cls.geometry_type} at position {token.position}")

        if self._peek().kind == "word" and self._peek().text.upper() == "EMPTY":
            empty = self._next()
            if cls not in _EMPTY_CAPABLE:
                raise StructuralMismatch(
                    f"{cls.geometry_type} EMPTY has no representation "
                    f"(at position {empty.position})"
                )
            return cls()

        return _BODY_PARSERS[cls](self)

    def coordinate(self) -> List[float]:
        values = []
        while self._peek().kind == "number":
            values.append(float(self._next().text))
        if len(values) != 2:
            token = self._peek()
            raise WktSyntaxError(
                f"A coordinate must be 'lon lat', got {len(values)} number(s)",
                token.position,
            )
        return values

    def coordinate_list(self) -> List[List[float]]:
        return self._comma_separated(self.coordinate)

    def ring_list(self) -> List[List[List[float]]]:
        return self._comma_separated(self.coordinate_list)

    def multipoint_member(self) -> List[float]:
        if self._accept("("):
            coordinate = self.coordinate()
            self._expect(")")
            return coordinate
        return self.coordinate()


def _point(parser: _Parser) -> Point:
    parser._expect("(")
    coordinate = parser.coordinate()
    parser._expect(")")
    return Point.from_array(coordinate)


def _linestring(parser: _Parser) -> LineString:
    return LineString.from_array(parser.coordinate_list())


def _polygon(parser: _Parser) -> Polygon:
    return Polygon.from_array(parser.ring_list())


def _multipoint(parser: _Parser) -> MultiPoint:
    return MultiPoint.from_array(parser._comma_separated(parser.multipoint_member))


def _multilinestring(parser: _Parser) -> MultiLineString:
    return MultiLineString.from_array(parser.ring_list())


def _multipolygon(parser: _Parser) -> MultiPolygon:
    return MultiPolygon.from_array(parser._comma_separated(parser.ring_list))


def _geometry_collection(parser: _Parser) -> GeometryCollection:
    if parser.depth >= MAX_COLLECTION_DEPTH:
        raise StructuralMismatch(
            f"GeometryCollection nesting exceeds {MAX_COLLECTION_DEPTH} levels "
            f"(at position {parser._peek().position})"
        )
    parser.depth += 1
    members = parser._comma_separated(parser.geometry)
    parser.depth -= 1
    return GeometryCollection(members)


_BODY_PARSERS: Dict[Type[Geometry], Callable[[_Parser], Geometry]] = {
    Point: _point,
    LineString: _linestring,
    Polygon: _polygon,
    MultiPoint: _multipoint,
    MultiLineString: _multilinestring,
    MultiPolygon: _multipolygon,
    GeometryCollection: _geometry_collection,
}


def loads(text: str) -> Geometry:
    """Parse WKT text into a geometry.

    Raises
    ------
    UnsupportedGeometryType
        If the type keyword names no geometry variant.
    WktSyntaxError
        If the text does not follow the grammar.
    StructuralMismatch
        If the coordinates do not fit the variant (e.g. a one-point line).
    MalformedRing
        If a polygon ring has fewer than three corners.

    Examples
    --------
    >>> loads("MULTIPOINT(10 40, 40 30)") == loads("MULTIPOINT((10 40), (40 30))")
    True
    """
    if not isinstance(text, str):
        raise StructuralMismatch(f"WKT input must be a string, got {type(text).__name__}")
    return _Parser(text).parse()


def dumps(geometry: Geometry) -> str:
    """Serialize a geometry to WKT."""
    return geometry.to_wkt()
