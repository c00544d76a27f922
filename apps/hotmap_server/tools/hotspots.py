"""Hotspot helpers built on top of :mod:`hotmap.spatial`."""

from __future__ import annotations

from typing import Iterable, List

from hotmap.spatial import (
    Cluster,
    GeoPoint,
    build_clusters,
    density_legend,
    density_tier,
    find_focus_point,
    points_from_records,
    radius_for_count,
    tier_color,
)
from hotmap.tools.config_loader import HotmapSettings

from ..schemas.models import (
    ComplaintLocation,
    FocusView,
    Hotspot,
    HotspotsResponse,
    LatLng,
    LegendEntry,
)


def points_from_locations(locations: Iterable[ComplaintLocation]) -> List[GeoPoint]:
    """Convert request models into core points, dropping unplaceable ones."""

    return points_from_records(location.model_dump() for location in locations)


def cluster_to_hotspot(cluster: Cluster, settings: HotmapSettings) -> Hotspot:
    tier = density_tier(cluster.count, settings.density)
    return Hotspot(
        center=LatLng(lat=cluster.centroid_lat, lng=cluster.centroid_lng),
        count=cluster.count,
        radius_m=radius_for_count(cluster.count, settings.clustering),
        district=cluster.district,
        tier=tier.value,
        color=tier_color(tier, settings.density),
        label=cluster.label,
        complaint_ids=[point.id for point in cluster.points],
    )


def build_hotspots_response(points: List[GeoPoint], settings: HotmapSettings) -> HotspotsResponse:
    """Cluster ``points`` and package hotspots, focus view and legend."""

    clusters = build_clusters(points, settings.clustering)
    focus = find_focus_point(clusters, settings.focus)

    return HotspotsResponse(
        hotspots=[cluster_to_hotspot(cluster, settings) for cluster in clusters],
        focus=FocusView(center=LatLng(lat=focus.center[0], lng=focus.center[1]), zoom=focus.zoom),
        legend=[LegendEntry(**entry) for entry in density_legend(settings.density)],
        total_complaints=len(points),
    )
