"""
Error Kinds for the Geometry Toolkit.

Every failure the toolkit raises derives from `GeoError` and from the
closest built-in exception, so callers can catch either. All errors are
local and synchronous: they are raised at the point of detection and the
computations that produce them are deterministic, so none are retried.

Parsing-related kinds
---------------------
InvalidCoordinate, MalformedRing, UnsupportedGeometryType,
StructuralMismatch (and WktSyntaxError), InvalidGeometryCollection.

Computation-related kinds
-------------------------
UnknownUnit, OutOfRangeFraction, ConvergenceFailure, UndefinedGreatCircle,
InvalidGeometryInput.
"""


class GeoError(Exception):
    """Base class for all toolkit errors."""


class InvalidCoordinate(GeoError, ValueError):
    """Latitude or longitude is out of range, non-numeric or non-finite."""


class MalformedRing(GeoError, ValueError):
    """A polygon ring cannot be closed or parsed."""


class UnsupportedGeometryType(GeoError, ValueError):
    """Unknown WKT or GeoJSON type tag."""


class StructuralMismatch(GeoError, ValueError):
    """Nested-array or document shape does not match the expected type."""


class WktSyntaxError(StructuralMismatch):
    """WKT text does not follow the grammar.

    Attributes
    ----------
    position : int
        Character offset in the input where the problem was detected.
    """

    def __init__(self, message: str, position: int = -1):
        if position >= 0:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position


class InvalidGeometryCollection(StructuralMismatch):
    """Collection input does not contain the expected members."""


class UnknownUnit(GeoError, ValueError):
    """Unit token is not in the ellipsoid multiplier table."""


class OutOfRangeFraction(GeoError, ValueError):
    """Interpolation fraction outside [0, 1]."""


class UndefinedGreatCircle(GeoError, ValueError):
    """No unique great circle joins the two points (antipodal pair)."""


class ConvergenceFailure(GeoError, ArithmeticError):
    """Vincenty iteration did not converge within its budget.

    Attributes
    ----------
    iterations : int
        Number of iterations performed before giving up.
    """

    def __init__(self, message: str, iterations: int = 0):
        super().__init__(message)
        self.iterations = iterations


class InvalidGeometryInput(GeoError, TypeError):
    """Input is neither a geometry nor a sequence of points."""
