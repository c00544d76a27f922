"""Density tiers used to colour hotspot circles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class DensityTier(Enum):
    """Coarse classification of a cluster's complaint count."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


DEFAULT_HIGH_MIN_COUNT = 5
DEFAULT_MEDIUM_MIN_COUNT = 2

DEFAULT_TIER_COLORS: Dict[str, str] = {
    "high": "#ef4444",    # red
    "medium": "#f97316",  # orange
    "low": "#3b82f6",     # blue
}


@dataclass
class DensityConfig:
    """
    Tier thresholds and colours.

    Attributes:
        high_min_count: Smallest count classed as HIGH
        medium_min_count: Smallest count classed as MEDIUM
        colors: Hex colour per tier value ("high", "medium", "low")
    """
    high_min_count: int = DEFAULT_HIGH_MIN_COUNT
    medium_min_count: int = DEFAULT_MEDIUM_MIN_COUNT
    colors: Optional[Dict[str, str]] = None

    def __post_init__(self) -> None:
        merged = dict(DEFAULT_TIER_COLORS)
        if self.colors:
            merged.update(self.colors)
        self.colors = merged

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DensityConfig":
        data = data or {}
        return cls(
            high_min_count=int(data.get("high_min_count", DEFAULT_HIGH_MIN_COUNT)),
            medium_min_count=int(data.get("medium_min_count", DEFAULT_MEDIUM_MIN_COUNT)),
            colors=data.get("colors"),
        )


DEFAULT_DENSITY_CONFIG = DensityConfig()


def density_tier(count: int, config: Optional[DensityConfig] = None) -> DensityTier:
    config = config or DEFAULT_DENSITY_CONFIG
    if count >= config.high_min_count:
        return DensityTier.HIGH
    if count >= config.medium_min_count:
        return DensityTier.MEDIUM
    return DensityTier.LOW


def tier_color(tier: DensityTier, config: Optional[DensityConfig] = None) -> str:
    config = config or DEFAULT_DENSITY_CONFIG
    return config.colors[tier.value]


def _range_text(low: int, high: Optional[int]) -> str:
    if high is None:
        return f"{low}+"
    if high <= low:
        return str(low)
    return f"{low}-{high}"


def density_legend(config: Optional[DensityConfig] = None) -> List[Dict[str, str]]:
    """
    Legend rows for the density colours, densest first.

    Example (defaults)::

        [{"tier": "high", "label": "High (5+)", "color": "#ef4444"},
         {"tier": "medium", "label": "Medium (2-4)", "color": "#f97316"},
         {"tier": "low", "label": "Low (1)", "color": "#3b82f6"}]
    """
    config = config or DEFAULT_DENSITY_CONFIG
    ranges = [
        (DensityTier.HIGH, _range_text(config.high_min_count, None)),
        (DensityTier.MEDIUM, _range_text(config.medium_min_count, config.high_min_count - 1)),
        (DensityTier.LOW, _range_text(1, config.medium_min_count - 1)),
    ]
    return [
        {
            "tier": tier.value,
            "label": f"{tier.value.title()} ({text})",
            "color": tier_color(tier, config),
        }
        for tier, text in ranges
    ]
