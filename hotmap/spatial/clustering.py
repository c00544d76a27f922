"""
Complaint hotspot clustering: grid bucketing followed by circle merging.

This module provides:
1. Grid bucketing into coarse cells for a cheap first pass
2. Count-dependent "density circles" around each cluster centroid
3. Fixed-point merging of clusters whose circles overlap
4. Deterministic dominant-district labelling
5. Diagnostics describing how the final partition was reached

Merge order:
- Pairs are scanned as (i, j) with i < j in list order
- The first overlapping pair found is merged into position i
- The scan restarts from the beginning after every merge, skipping
  pairs already proven not to overlap
- Iteration stops once a full scan finds no overlap
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .geo import haversine_m
from .grid import DEFAULT_CELL_SIZE_DEG, bucket_points
from .points import GeoPoint

logger = logging.getLogger(__name__)

UNKNOWN_DISTRICT = "Unknown"

DEFAULT_RADIUS_BASE_M = 1000.0
DEFAULT_RADIUS_PER_POINT_M = 500.0


@dataclass
class ClusteringConfig:
    """Configuration for grid bucketing and circle merging."""

    cell_size_deg: float = DEFAULT_CELL_SIZE_DEG
    """Grid cell edge in degrees for the bucketing pass."""

    radius_base_m: float = DEFAULT_RADIUS_BASE_M
    """Circle radius of a cluster before any points are counted (metres)."""

    radius_per_point_m: float = DEFAULT_RADIUS_PER_POINT_M
    """Radius added per constituent point (metres). Non-negative; zero disables count scaling."""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ClusteringConfig":
        """Build from a profile section, keeping defaults for missing keys."""
        data = data or {}
        return cls(
            cell_size_deg=float(data.get("cell_size_deg", DEFAULT_CELL_SIZE_DEG)),
            radius_base_m=float(data.get("radius_base_m", DEFAULT_RADIUS_BASE_M)),
            radius_per_point_m=float(data.get("radius_per_point_m", DEFAULT_RADIUS_PER_POINT_M)),
        )


DEFAULT_CLUSTERING_CONFIG = ClusteringConfig()


def dominant_district(points: Sequence[GeoPoint]) -> str:
    """
    Most frequent district among ``points``.

    Empty or missing districts are ignored. Ties go to the district that
    was encountered first. Returns ``"Unknown"`` when no point has one.
    """
    counts = Counter(p.district for p in points if p.district)
    if not counts:
        return UNKNOWN_DISTRICT
    # most_common orders equal counts by first insertion
    return counts.most_common(1)[0][0]


@dataclass
class Cluster:
    """A group of nearby complaints represented as one density circle."""

    centroid_lat: float
    """Mean latitude of the constituent points."""

    centroid_lng: float
    """Mean longitude of the constituent points."""

    points: List[GeoPoint] = field(default_factory=list)
    """Constituent complaints, in the order they were absorbed."""

    district: str = UNKNOWN_DISTRICT
    """Dominant district label."""

    @classmethod
    def from_points(cls, points: Sequence[GeoPoint]) -> "Cluster":
        """Build a cluster whose centroid and district derive from ``points``."""
        members = list(points)
        return cls(
            centroid_lat=float(np.mean([p.latitude for p in members])),
            centroid_lng=float(np.mean([p.longitude for p in members])),
            points=members,
            district=dominant_district(members),
        )

    @property
    def count(self) -> int:
        return len(self.points)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.centroid_lat, self.centroid_lng)

    @property
    def label(self) -> str:
        """Popup caption, e.g. ``"3 complaints in this area"``."""
        suffix = "s" if self.count > 1 else ""
        return f"{self.count} complaint{suffix} in this area"

    def merge(self, other: "Cluster") -> "Cluster":
        """Return the union of both clusters with a recomputed centroid."""
        return Cluster.from_points(self.points + other.points)


@dataclass
class ClusteringDiagnostics:
    """Summary of a clustering run."""

    num_points: int
    """Total number of points provided."""

    num_buckets: int
    """Number of non-empty grid cells after bucketing."""

    num_clusters: int
    """Number of clusters after merging."""

    num_merges: int = 0
    """Number of pairwise merges performed."""

    cluster_sizes: List[int] = field(default_factory=list)
    """Size of each final cluster, in output order."""

    config_used: Optional[ClusteringConfig] = None
    """Configuration the run used."""


def radius_for_count(count: int, config: Optional[ClusteringConfig] = None) -> float:
    """Density circle radius in metres for a cluster of ``count`` points."""

    config = config or DEFAULT_CLUSTERING_CONFIG
    return count * config.radius_per_point_m + config.radius_base_m


def clusters_overlap(a: Cluster, b: Cluster, config: Optional[ClusteringConfig] = None) -> bool:
    """Whether the density circles of ``a`` and ``b`` touch or overlap."""

    reach = radius_for_count(a.count, config) + radius_for_count(b.count, config)
    return haversine_m(a.centroid_lat, a.centroid_lng, b.centroid_lat, b.centroid_lng) <= reach


def initial_clusters(
    points: Sequence[GeoPoint],
    config: Optional[ClusteringConfig] = None,
) -> List[Cluster]:
    """One cluster per non-empty grid cell, in first-seen cell order."""

    config = config or DEFAULT_CLUSTERING_CONFIG
    return [Cluster.from_points(bucket) for bucket in bucket_points(points, config.cell_size_deg)]


def _first_overlapping_pair(
    clusters: Sequence[Cluster],
    config: ClusteringConfig,
    dirty: int = 0,
) -> Optional[Tuple[int, int]]:
    """
    First overlapping ``(i, j)`` pair in row-major scan order.

    Rows before ``dirty`` are known to be overlap-free except possibly
    against ``clusters[dirty]``, so only that column is checked for them.
    The result is the same pair a full scan from the beginning would find.
    """
    for i in range(dirty):
        if clusters_overlap(clusters[i], clusters[dirty], config):
            return i, dirty

    n = len(clusters)
    for i in range(dirty, n):
        for j in range(i + 1, n):
            if clusters_overlap(clusters[i], clusters[j], config):
                return i, j
    return None


def _merge_until_stable(
    clusters: Sequence[Cluster],
    config: ClusteringConfig,
) -> Tuple[List[Cluster], int]:
    working = list(clusters)
    merges = 0
    dirty = 0

    while len(working) > 1:
        pair = _first_overlapping_pair(working, config, dirty)
        if pair is None:
            break
        i, j = pair
        working[i] = working[i].merge(working[j])
        del working[j]
        merges += 1
        dirty = i

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Merged cluster %d into %d: count=%d center=(%.5f, %.5f) remaining=%d",
                j, i, working[i].count, working[i].centroid_lat, working[i].centroid_lng, len(working),
            )

    return working, merges


def merge_overlapping(
    clusters: Sequence[Cluster],
    config: Optional[ClusteringConfig] = None,
) -> List[Cluster]:
    """
    Repeatedly merge overlapping clusters until none overlap.

    The input sequence is left untouched; a new list is returned.

    Args:
        clusters: Starting clusters (typically one per grid cell)
        config: Radius policy (defaults if None)

    Returns:
        Final clusters, no two of which overlap
    """
    merged, _merges = _merge_until_stable(clusters, config or DEFAULT_CLUSTERING_CONFIG)
    return merged


def build_clusters_with_diagnostics(
    points: Sequence[GeoPoint],
    config: Optional[ClusteringConfig] = None,
) -> Tuple[List[Cluster], ClusteringDiagnostics]:
    """
    Cluster complaint points and report how the result was reached.

    Args:
        points: Complaint points (never mutated)
        config: Clustering configuration (uses defaults if None)

    Returns:
        (clusters, diagnostics)
    """
    config = config or DEFAULT_CLUSTERING_CONFIG

    buckets = initial_clusters(points, config)
    clusters, merges = _merge_until_stable(buckets, config)

    diagnostics = ClusteringDiagnostics(
        num_points=len(points),
        num_buckets=len(buckets),
        num_clusters=len(clusters),
        num_merges=merges,
        cluster_sizes=[c.count for c in clusters],
        config_used=config,
    )
    logger.debug(
        "Clustered %d points: %d buckets -> %d clusters (%d merges)",
        diagnostics.num_points, diagnostics.num_buckets, diagnostics.num_clusters, merges,
    )
    return clusters, diagnostics


def build_clusters(
    points: Sequence[GeoPoint],
    config: Optional[ClusteringConfig] = None,
) -> List[Cluster]:
    """
    Group complaint points into non-overlapping density clusters.

    Every point lands in exactly one cluster. Empty input gives an empty
    list.

    Args:
        points: Complaint points (never mutated)
        config: Clustering configuration (uses defaults if None)

    Returns:
        Final clusters
    """
    clusters, _diagnostics = build_clusters_with_diagnostics(points, config)
    return clusters
