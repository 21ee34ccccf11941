"""
Geodesic Formulas on Radians.

Low-level implementations of the spherical and ellipsoidal formulas used by
the reference computation strategy. Inputs and outputs are bare floats in
radians (distances in meters or radians as documented); Point handling,
units and contexts live in `geospatial.distance_calculations`.

Scientific Context
------------------
Domain: Geodesy, spherical trigonometry
Models:
1. Haversine: great-circle distance on a sphere. Closed form, always
   defined, limited by the spherical approximation (up to ~0.5% error).
2. Vincenty inverse: geodesic distance on an oblate ellipsoid by iterating
   on the longitude difference on the auxiliary sphere. Accurate to well
   under a millimeter where it converges, but the series is
   ill-conditioned for nearly antipodal points.

References
----------
- Sinnott, R.W. (1984). Virtues of the Haversine. Sky and Telescope, 68(2).
- Vincenty, T. (1975). Direct and inverse solutions of geodesics on the
  ellipsoid with application of nested equations. Survey Review, 23(176).
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from common.constants import GeodeticConstants
from common.errors import ConvergenceFailure
from common.logging_config import get_logger
from geospatial.coordinate_models import Ellipsoid, to_unit_vector, from_unit_vector

logger = get_logger(__name__)


@dataclass
class VincentyResult:
    """Result of a Vincenty inverse calculation.

    Attributes
    ----------
    distance_m : float
        Geodesic distance in meters, floored to millimeters.
    iterations : int
        Iterations needed to converge (0 for coincident points).
    """
    distance_m: float
    iterations: int


def normalize_longitude(longitude_rad: float) -> float:
    """Wrap a longitude into [-π, π)."""
    return float((longitude_rad + np.pi) % (2 * np.pi) - np.pi)


def haversine_angle(
    lat1_rad: float,
    lon1_rad: float,
    lat2_rad: float,
    lon2_rad: float
) -> float:
    """Angular great-circle distance between two points.

    Returns
    -------
    float
        Central angle in radians, in [0, π]. Multiply by a radius to get
        a linear distance.
    """
    d_lat = lat1_rad - lat2_rad
    d_lon = lon1_rad - lon2_rad

    a = (
        np.sin(d_lat / 2) ** 2
        + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(d_lon / 2) ** 2
    )
    # Rounding can push a marginally outside [0, 1]
    a = min(max(float(a), 0.0), 1.0)

    return float(2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))


def vincenty_inverse(
    lat1_rad: float,
    lon1_rad: float,
    lat2_rad: float,
    lon2_rad: float,
    ellipsoid: Ellipsoid,
    tolerance: float = GeodeticConstants.VINCENTY_TOLERANCE,
    max_iterations: int = GeodeticConstants.VINCENTY_MAX_ITERATIONS
) -> VincentyResult:
    """Solve the inverse geodesic problem with Vincenty's formulae.

    Parameters
    ----------
    lat1_rad, lon1_rad : float
        First point in radians.
    lat2_rad, lon2_rad : float
        Second point in radians.
    ellipsoid : Ellipsoid
        Reference ellipsoid.
    tolerance : float
        Convergence threshold on the change in λ between iterations.
    max_iterations : int
        Iteration budget.

    Returns
    -------
    VincentyResult
        Distance in meters, floored to 3 decimal places (millimeters).

    Raises
    ------
    ConvergenceFailure
        If λ has not converged within `max_iterations`, becomes
        non-finite, or the points are exactly antipodal on the auxiliary
        sphere.

    Notes
    -----
    When cos²α is zero (both points on the equator) the cos(2σm) term is
    indeterminate; it is set to zero, which is its limit for equatorial
    lines.
    """
    if lat1_rad == lat2_rad and lon1_rad == lon2_rad:
        return VincentyResult(distance_m=0.0, iterations=0)

    f = ellipsoid.f
    a = ellipsoid.a
    b = ellipsoid.b

    U1 = np.arctan((1.0 - f) * np.tan(lat1_rad))
    U2 = np.arctan((1.0 - f) * np.tan(lat2_rad))
    L = lon2_rad - lon1_rad
    sin_U1, cos_U1 = np.sin(U1), np.cos(U1)
    sin_U2, cos_U2 = np.sin(U2), np.cos(U2)

    lam = L
    for iteration in range(1, max_iterations + 1):
        sin_lam = np.sin(lam)
        cos_lam = np.cos(lam)
        sin_sigma = np.sqrt(
            (cos_U2 * sin_lam) ** 2
            + (cos_U1 * sin_U2 - sin_U1 * cos_U2 * cos_lam) ** 2
        )
        cos_sigma = sin_U1 * sin_U2 + cos_U1 * cos_U2 * cos_lam

        if sin_sigma == 0.0:
            if cos_sigma > 0:
                # Coincident on the auxiliary sphere
                return VincentyResult(distance_m=0.0, iterations=iteration)
            logger.warning("Vincenty inverse is undefined for antipodal points")
            raise ConvergenceFailure(
                "Vincenty inverse is undefined for antipodal points", iteration
            )

        sigma = np.arctan2(sin_sigma, cos_sigma)
        sin_alpha = cos_U1 * cos_U2 * sin_lam / sin_sigma
        cos_sq_alpha = 1.0 - sin_alpha ** 2

        with np.errstate(divide='ignore', invalid='ignore'):
            cos_2sigma_m = cos_sigma - 2.0 * sin_U1 * sin_U2 / np.float64(cos_sq_alpha)
        if not np.isfinite(cos_2sigma_m):
            cos_2sigma_m = 0.0

        C = f / 16.0 * cos_sq_alpha * (4.0 + f * (4.0 - 3.0 * cos_sq_alpha))
        lam_prev = lam
        lam = L + (1.0 - C) * f * sin_alpha * (
            sigma + C * sin_sigma * (
                cos_2sigma_m + C * cos_sigma * (-1.0 + 2.0 * cos_2sigma_m ** 2)
            )
        )

        if not np.isfinite(lam):
            logger.warning(f"Vincenty inverse diverged after {iteration} iterations")
            raise ConvergenceFailure(
                f"Vincenty inverse diverged after {iteration} iterations", iteration
            )

        if abs(lam - lam_prev) <= tolerance:
            break
    else:
        logger.warning(
            f"Vincenty inverse failed to converge within {max_iterations} iterations"
        )
        raise ConvergenceFailure(
            f"Vincenty inverse failed to converge within {max_iterations} iterations "
            f"(nearly antipodal points?)",
            max_iterations
        )

    logger.debug(f"Vincenty inverse converged in {iteration} iterations")

    u_sq = cos_sq_alpha * (a ** 2 - b ** 2) / b ** 2
    A = 1.0 + u_sq / 16384.0 * (4096.0 + u_sq * (-768.0 + u_sq * (320.0 - 175.0 * u_sq)))
    B = u_sq / 1024.0 * (256.0 + u_sq * (-128.0 + u_sq * (74.0 - 47.0 * u_sq)))
    delta_sigma = B * sin_sigma * (
        cos_2sigma_m + B / 4.0 * (
            cos_sigma * (-1.0 + 2.0 * cos_2sigma_m ** 2)
            - B / 6.0 * cos_2sigma_m * (-3.0 + 4.0 * sin_sigma ** 2)
            * (-3.0 + 4.0 * cos_2sigma_m ** 2)
        )
    )
    s = b * A * (sigma - delta_sigma)

    scale = 10 ** GeodeticConstants.VINCENTY_PRECISION_DECIMALS
    return VincentyResult(distance_m=float(np.floor(s * scale) / scale), iterations=iteration)


def initial_bearing_angle(
    lat1_rad: float,
    lon1_rad: float,
    lat2_rad: float,
    lon2_rad: float
) -> float:
    """Initial great-circle bearing from point 1 to point 2.

    Returns
    -------
    float
        Bearing in DEGREES clockwise from north, in [0, 360).
    """
    d_lon = lon2_rad - lon1_rad
    y = np.sin(d_lon) * np.cos(lat2_rad)
    x = (
        np.cos(lat1_rad) * np.sin(lat2_rad)
        - np.sin(lat1_rad) * np.cos(lat2_rad) * np.cos(d_lon)
    )
    bearing = (np.degrees(np.arctan2(y, x)) + 360.0) % 360.0
    return float(bearing)


def spherical_direct(
    lat1_rad: float,
    lon1_rad: float,
    bearing_rad: float,
    angular_distance: float
) -> Tuple[float, float]:
    """Destination reached from a start point along a great circle.

    Parameters
    ----------
    lat1_rad, lon1_rad : float
        Start point in radians.
    bearing_rad : float
        Initial bearing in radians clockwise from north.
    angular_distance : float
        Distance travelled divided by the sphere radius.

    Returns
    -------
    Tuple[float, float]
        (latitude_rad, longitude_rad); longitude wrapped into [-π, π).
    """
    sin_lat2 = (
        np.sin(lat1_rad) * np.cos(angular_distance)
        + np.cos(lat1_rad) * np.sin(angular_distance) * np.cos(bearing_rad)
    )
    lat2 = np.arcsin(np.clip(sin_lat2, -1.0, 1.0))

    y = np.sin(bearing_rad) * np.sin(angular_distance) * np.cos(lat1_rad)
    x = np.cos(angular_distance) - np.sin(lat1_rad) * np.sin(lat2)
    lon2 = lon1_rad + np.arctan2(y, x)

    return float(lat2), normalize_longitude(lon2)


def interpolate_great_circle(
    lat1_rad: float,
    lon1_rad: float,
    lat2_rad: float,
    lon2_rad: float,
    fraction: float,
    angular_distance: float
) -> Tuple[float, float]:
    """Point a fraction of the way along the great circle between two points.

    Weights the two endpoint unit vectors by sin((1 - f)·d) / sin(d) and
    sin(f·d) / sin(d) and converts the sum back to latitude/longitude.

    Parameters
    ----------
    fraction : float
        Position along the arc, 0 at point 1 and 1 at point 2.
    angular_distance : float
        Central angle between the points (from `haversine_angle`). Must
        not be 0 or π.

    Returns
    -------
    Tuple[float, float]
        (latitude_rad, longitude_rad)
    """
    sin_d = np.sin(angular_distance)
    weight1 = np.sin((1 - fraction) * angular_distance) / sin_d
    weight2 = np.sin(fraction * angular_distance) / sin_d

    x1, y1, z1 = to_unit_vector(lat1_rad, lon1_rad)
    x2, y2, z2 = to_unit_vector(lat2_rad, lon2_rad)

    x = weight1 * x1 + weight2 * x2
    y = weight1 * y1 + weight2 * y2
    z = weight1 * z1 + weight2 * z2

    return from_unit_vector(x, y, z)
