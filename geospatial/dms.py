"""
Degrees-Minutes-Seconds Conversions.

Notes
-----
`decimal_to_dms` floors both the degrees and the minutes, so a negative
value yields a negative degree part with non-negative minutes and seconds
(-0.5 becomes (-1, 30, 0)). The round trip through `dms_to_decimal` is
exact up to floating-point error, not bit for bit.
"""

from typing import Optional, Tuple

import numpy as np

NEGATIVE_DIRECTIONS = ("S", "W")


def dms_to_decimal(
    degrees: float,
    minutes: float,
    seconds: float,
    direction: Optional[str] = None
) -> float:
    """Convert degrees, minutes and seconds to decimal degrees.

    Parameters
    ----------
    degrees, minutes, seconds : float
        Components of the angle.
    direction : str, optional
        'N', 'S', 'E' or 'W'. South and west negate the result.

    Examples
    --------
    >>> dms_to_decimal(51, 30, 0, 'N')
    51.5
    >>> dms_to_decimal(10, 30, 0, "S")
    -10.5
    """
    decimal = degrees + minutes / 60 + seconds / 3600

    if direction is not None and direction.strip().upper() in NEGATIVE_DIRECTIONS:
        decimal = -decimal

    return float(decimal)


def decimal_to_dms(decimal: float) -> Tuple[float, float, float]:
    """Split decimal degrees into (degrees, minutes, seconds).

    Examples
    --------
    >>> decimal_to_dms(51.5)
    (51.0, 30.0, 0.0)
    """
    degrees = float(np.floor(decimal))
    minutes = float(np.floor((decimal - degrees) * 60))
    seconds = float((decimal - degrees - minutes / 60) * 3600)
    return degrees, minutes, seconds
