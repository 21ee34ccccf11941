"""
Geospatial Module of the Geometry Toolkit.

All Earth-surface calculations originate from this module:

- Reference ellipsoid model and unit-sphere conversions
- Haversine and Vincenty distances, bearings and destination points
- Great-circle interpolation and bounding boxes
- Interchangeable computation strategies and explicit contexts
- Degrees-minutes-seconds conversions
"""

from geospatial.coordinate_models import (
    Ellipsoid,
    EARTH,
    to_unit_vector,
    from_unit_vector,
)

from geospatial.strategies import (
    GeodesicStrategy,
    ReferenceGeodesic,
    PyprojGeodesic,
)

from geospatial.context import (
    GeodesyContext,
    DEFAULT_CONTEXT,
    resolve_context,
)

from geospatial.distance_calculations import (
    haversine,
    vincenty,
    calculate_distance,
    initial_bearing,
    relative_point,
    fraction_along_line,
    midpoint,
    bbox_by_radius,
    convert,
)

from geospatial.bounding_box import (
    get_bbox,
    get_bbox_array,
)

from geospatial.dms import (
    dms_to_decimal,
    decimal_to_dms,
)

__all__ = [
    # Ellipsoid
    "Ellipsoid",
    "EARTH",
    "to_unit_vector",
    "from_unit_vector",
    # Strategies and context
    "GeodesicStrategy",
    "ReferenceGeodesic",
    "PyprojGeodesic",
    "GeodesyContext",
    "DEFAULT_CONTEXT",
    "resolve_context",
    # Distance calculations
    "haversine",
    "vincenty",
    "calculate_distance",
    "initial_bearing",
    "relative_point",
    "fraction_along_line",
    "midpoint",
    "bbox_by_radius",
    "convert",
    # Bounding boxes
    "get_bbox",
    "get_bbox_array",
    # DMS
    "dms_to_decimal",
    "decimal_to_dms",
]
