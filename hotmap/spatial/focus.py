"""Initial map focus selection biased toward the densest hotspot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .clustering import Cluster

# Centre of India, shown when there are no complaints to focus on
DEFAULT_CENTER: Tuple[float, float] = (22.9734, 78.6569)
DEFAULT_ZOOM = 5

# (minimum cluster count, zoom) checked from the top; first match wins
DEFAULT_ZOOM_THRESHOLDS: Tuple[Tuple[int, int], ...] = (
    (10, 13),
    (5, 12),
    (3, 11),
)
DEFAULT_MIN_ZOOM = 10


@dataclass
class FocusConfig:
    """Default view and count-to-zoom thresholds."""

    default_center: Tuple[float, float] = DEFAULT_CENTER
    default_zoom: int = DEFAULT_ZOOM
    zoom_thresholds: List[Tuple[int, int]] = field(
        default_factory=lambda: list(DEFAULT_ZOOM_THRESHOLDS)
    )
    min_zoom: int = DEFAULT_MIN_ZOOM
    """Zoom used when the densest cluster is below every threshold."""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FocusConfig":
        data = data or {}
        center = data.get("default_center", DEFAULT_CENTER)
        thresholds = data.get("zoom_thresholds")
        if thresholds is None:
            parsed = list(DEFAULT_ZOOM_THRESHOLDS)
        else:
            parsed = [(int(entry["min_count"]), int(entry["zoom"])) for entry in thresholds]
        return cls(
            default_center=(float(center[0]), float(center[1])),
            default_zoom=int(data.get("default_zoom", DEFAULT_ZOOM)),
            zoom_thresholds=parsed,
            min_zoom=int(data.get("min_zoom", DEFAULT_MIN_ZOOM)),
        )


DEFAULT_FOCUS_CONFIG = FocusConfig()


@dataclass(frozen=True)
class FocusPoint:
    """Map centre and zoom level to show first."""

    center: Tuple[float, float]
    zoom: int


def zoom_for_count(count: int, config: Optional[FocusConfig] = None) -> int:
    """Map a cluster size to a zoom level; bigger clusters zoom in further."""

    config = config or DEFAULT_FOCUS_CONFIG
    for min_count, zoom in sorted(config.zoom_thresholds, reverse=True):
        if count >= min_count:
            return zoom
    return config.min_zoom


def find_focus_point(
    clusters: Sequence[Cluster],
    config: Optional[FocusConfig] = None,
) -> FocusPoint:
    """
    Pick the initial map view from the final clusters.

    Centres on the cluster with the largest count (the first one wins ties)
    and derives the zoom from that count. With no clusters, falls back to
    the configured default view.
    """
    config = config or DEFAULT_FOCUS_CONFIG
    if not clusters:
        return FocusPoint(center=tuple(config.default_center), zoom=config.default_zoom)

    top = max(clusters, key=lambda c: c.count)
    return FocusPoint(center=top.center, zoom=zoom_for_count(top.count, config))
