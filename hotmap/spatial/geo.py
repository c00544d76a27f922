"""Great-circle distance helpers."""

from __future__ import annotations

import math
from typing import Tuple

EARTH_RADIUS_M = 6371000.0
"""Mean Earth radius used by the spherical approximation."""


def haversine_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle surface distance in metres between two coordinates.

    Uses the haversine formula on a sphere of radius ``EARTH_RADIUS_M``.
    The intermediate term is clamped to ``[0, 1]`` so that rounding near
    antipodal points never pushes ``sqrt(1 - a)`` out of its domain.

    Args:
        lat1: Latitude of the first point (degrees)
        lng1: Longitude of the first point (degrees)
        lat2: Latitude of the second point (degrees)
        lng2: Longitude of the second point (degrees)

    Returns:
        Non-negative distance in metres, or NaN when any coordinate is
        not finite (NaN never compares as within reach)
    """
    if not all(math.isfinite(v) for v in (lat1, lng1, lat2, lng2)):
        return math.nan

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def distance_between(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Distance in metres between two ``(lat, lng)`` tuples."""

    return haversine_m(a[0], a[1], b[0], b[1])
