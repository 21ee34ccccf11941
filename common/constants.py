"""
Geodetic Constants for the Geometry Toolkit.

This module provides the reference-body constants and unit conversion
factors used by the distance engine. All constants are defined in SI units
and traceable to authoritative sources.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Length units: NIST Special Publication 811 (2008), Appendix B
- Vincenty, T. (1975). Direct and inverse solutions of geodesics on the
  ellipsoid with application of nested equations. Survey Review, 23(176).
"""

from dataclasses import dataclass
from typing import Final, Dict


@dataclass(frozen=True)
class Constant:
    """A physical constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of constants used throughout the toolkit.

    Earth Geometry (WGS84)
    ----------------------
    These constants define the default reference ellipsoid. Other bodies
    are described by constructing an ``Ellipsoid`` directly.

    Length Units
    ------------
    Exact meters-per-unit factors for the distance units accepted by the
    ellipsoid multiplier table.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    EARTH_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    EARTH_SEMI_MINOR_AXIS: Final[Constant] = Constant(
        value=6_356_752.314245,
        uncertainty=0.0001,
        unit="m",
        source="WGS84, NIMA TR8350.2 (derived)",
        description="Semi-minor axis (polar radius) of WGS84 ellipsoid"
    )

    EARTH_MEAN_RADIUS: Final[Constant] = Constant(
        value=6_371_008.8,
        uncertainty=0.1,
        unit="m",
        source="IUGG mean radius R1 = (2a + b) / 3",
        description="Mean radius of Earth"
    )

    # =========================================================================
    # Length Units (meters per unit)
    # Reference: NIST SP 811, Appendix B
    # =========================================================================

    METER: Final[Constant] = Constant(
        value=1.0,
        uncertainty=0.0,
        unit="m per m",
        source="SI",
        description="Meter"
    )

    CENTIMETER: Final[Constant] = Constant(
        value=0.01,
        uncertainty=0.0,
        unit="m per cm",
        source="SI",
        description="Centimeter"
    )

    KILOMETER: Final[Constant] = Constant(
        value=1000.0,
        uncertainty=0.0,
        unit="m per km",
        source="SI",
        description="Kilometer"
    )

    INCH: Final[Constant] = Constant(
        value=0.0254,
        uncertainty=0.0,  # Defined exactly
        unit="m per in",
        source="International yard and pound agreement (1959)",
        description="International inch"
    )

    FOOT: Final[Constant] = Constant(
        value=0.3048,
        uncertainty=0.0,  # Defined exactly
        unit="m per ft",
        source="International yard and pound agreement (1959)",
        description="International foot"
    )

    YARD: Final[Constant] = Constant(
        value=0.9144,
        uncertainty=0.0,  # Defined exactly
        unit="m per yd",
        source="International yard and pound agreement (1959)",
        description="International yard"
    )

    MILE: Final[Constant] = Constant(
        value=1609.344,
        uncertainty=0.0,  # Defined exactly
        unit="m per mi",
        source="International yard and pound agreement (1959)",
        description="International statute mile"
    )

    NAUTICAL_MILE: Final[Constant] = Constant(
        value=1852.0,
        uncertainty=0.0,  # Defined exactly
        unit="m per nmi",
        source="IEEE/ASTM SI 10-2016",
        description="International nautical mile"
    )

    # =========================================================================
    # Vincenty Inverse Iteration
    # =========================================================================

    VINCENTY_TOLERANCE: Final[float] = 1e-12
    VINCENTY_MAX_ITERATIONS: Final[int] = 100
    VINCENTY_PRECISION_DECIMALS: Final[int] = 3  # millimeters


# Meters per unit for the canonical unit tokens
DISTANCE_MULTIPLIERS: Final[Dict[str, float]] = {
    "m": GeodeticConstants.METER.value,
    "cm": GeodeticConstants.CENTIMETER.value,
    "km": GeodeticConstants.KILOMETER.value,
    "in": GeodeticConstants.INCH.value,
    "ft": GeodeticConstants.FOOT.value,
    "yd": GeodeticConstants.YARD.value,
    "mi": GeodeticConstants.MILE.value,
    "nm": GeodeticConstants.NAUTICAL_MILE.value,
}

# Deepest GeometryCollection nesting the WKT and GeoJSON decoders accept
MAX_COLLECTION_DEPTH: Final[int] = 64
