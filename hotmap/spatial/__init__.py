"""
hotmap/spatial: Complaint hotspot clustering and geographic utilities.

This module provides grid-bucketed circle-merge clustering, great-circle
distance, density tiers and focus-point selection.
"""

from .clustering import (
    Cluster,
    ClusteringConfig,
    ClusteringDiagnostics,
    build_clusters,
    build_clusters_with_diagnostics,
    clusters_overlap,
    dominant_district,
    merge_overlapping,
    radius_for_count,
)
from .density import (
    DensityConfig,
    DensityTier,
    density_legend,
    density_tier,
    tier_color,
)
from .focus import (
    DEFAULT_CENTER,
    DEFAULT_ZOOM,
    FocusConfig,
    FocusPoint,
    find_focus_point,
    zoom_for_count,
)
from .geo import EARTH_RADIUS_M, distance_between, haversine_m
from .grid import DEFAULT_CELL_SIZE_DEG, bucket_points, cell_key
from .points import GeoPoint, points_dataframe, points_from_records

__all__ = [
    "Cluster",
    "ClusteringConfig",
    "ClusteringDiagnostics",
    "build_clusters",
    "build_clusters_with_diagnostics",
    "clusters_overlap",
    "dominant_district",
    "merge_overlapping",
    "radius_for_count",
    "DensityConfig",
    "DensityTier",
    "density_legend",
    "density_tier",
    "tier_color",
    "DEFAULT_CENTER",
    "DEFAULT_ZOOM",
    "FocusConfig",
    "FocusPoint",
    "find_focus_point",
    "zoom_for_count",
    "EARTH_RADIUS_M",
    "distance_between",
    "haversine_m",
    "DEFAULT_CELL_SIZE_DEG",
    "bucket_points",
    "cell_key",
    "GeoPoint",
    "points_dataframe",
    "points_from_records",
]
