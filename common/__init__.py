"""
Common utilities and infrastructure for the geometry toolkit.

This package provides foundational components used across all modules:
- Geodetic constants and unit multipliers with provenance
- Unit registry (pint) and unit token resolution
- Error kinds
- Shared type definitions
- Logging configuration
"""

from common.constants import Constant, GeodeticConstants, DISTANCE_MULTIPLIERS
from common.units import ureg, Q_, canonical_unit, length_magnitude
from common.types import BoundingBox, DistanceFormula
from common.errors import (
    GeoError,
    InvalidCoordinate,
    MalformedRing,
    UnsupportedGeometryType,
    StructuralMismatch,
    WktSyntaxError,
    InvalidGeometryCollection,
    UnknownUnit,
    OutOfRangeFraction,
    UndefinedGreatCircle,
    ConvergenceFailure,
    InvalidGeometryInput,
)
from common.logging_config import get_logger

__all__ = [
    "Constant",
    "GeodeticConstants",
    "DISTANCE_MULTIPLIERS",
    "ureg",
    "Q_",
    "canonical_unit",
    "length_magnitude",
    "BoundingBox",
    "DistanceFormula",
    "GeoError",
    "InvalidCoordinate",
    "MalformedRing",
    "UnsupportedGeometryType",
    "StructuralMismatch",
    "WktSyntaxError",
    "InvalidGeometryCollection",
    "UnknownUnit",
    "OutOfRangeFraction",
    "UndefinedGreatCircle",
    "ConvergenceFailure",
    "InvalidGeometryInput",
    "get_logger",
]
