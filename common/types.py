"""
Shared Type Definitions for the Geometry Toolkit.

Aliases for the nested coordinate arrays exchanged with the codecs, the
bounding-box tuple returned by the extremal scan, and the distance formula
selector.

Coordinate Order
----------------
All array forms use GeoJSON order: ``[longitude, latitude]``. Only the
`Point` constructor takes ``(latitude, longitude)``.
"""

from enum import IntEnum
from typing import List, NamedTuple, Sequence, Union


# [lon, lat]
Position = Sequence[float]
# [[lon, lat], ...]
PositionList = Sequence[Position]
# [[[lon, lat], ...], ...]
RingList = Sequence[PositionList]

NestedCoordinates = Union[List[float], List["NestedCoordinates"]]


class DistanceFormula(IntEnum):
    """Distance formula selector.

    HAVERSINE is the spherical great-circle formula and the default.
    VINCENTY is the iterative ellipsoidal inverse solution.
    """
    HAVERSINE = 1
    VINCENTY = 2


class BoundingBox(NamedTuple):
    """Extremal coordinates of a geometry in degrees.

    Field order follows the GeoJSON ``bbox`` member.
    """
    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float
