"""Coarse lat/lng grid bucketing used as the first clustering pass."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from .points import GeoPoint, points_dataframe

DEFAULT_CELL_SIZE_DEG = 0.05
"""Grid cell edge in degrees (~5 km at mid-latitudes)."""


def cell_key(lat: float, lng: float, cell_size_deg: float = DEFAULT_CELL_SIZE_DEG) -> Tuple[int, int]:
    """Return the ``(row, col)`` grid cell containing a coordinate."""

    return math.floor(lat / cell_size_deg), math.floor(lng / cell_size_deg)


def bucket_points(
    points: Sequence[GeoPoint],
    cell_size_deg: float = DEFAULT_CELL_SIZE_DEG,
) -> List[List[GeoPoint]]:
    """
    Partition points into grid cells of ``cell_size_deg`` degrees.

    Buckets come out in the order their cell was first seen in ``points`` and
    each bucket keeps the input order of its points, so the result is fully
    determined by the input sequence.

    Args:
        points: Complaint points to bucket
        cell_size_deg: Cell edge length in degrees

    Returns:
        List of non-empty buckets (empty list for empty input)
    """
    if len(points) == 0:
        return []

    df = points_dataframe(points)
    # Float keys rather than int casts: non-finite coordinates must not raise.
    df["cell_lat"] = np.floor(df["lat"] / cell_size_deg)
    df["cell_lng"] = np.floor(df["lng"] / cell_size_deg)

    buckets: List[List[GeoPoint]] = []
    for _key, group in df.groupby(["cell_lat", "cell_lng"], sort=False, dropna=False):
        buckets.append([points[i] for i in group.index])
    return buckets
