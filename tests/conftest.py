"""
Pytest configuration and shared fixtures for hotmap tests.

This file provides:
- A factory for complaint points
- Sample complaint data around a few Indian cities
- Common test utilities
"""

import itertools
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pytest

from hotmap.spatial import GeoPoint


# ==============================================================================
# Point Factory
# ==============================================================================

@pytest.fixture
def make_point() -> Callable[..., GeoPoint]:
    """Factory building a GeoPoint with sensible defaults."""
    counter = itertools.count(1)

    def _make(lat: float, lng: float, district: Optional[str] = None, **overrides) -> GeoPoint:
        seq = next(counter)
        fields: Dict[str, Any] = dict(
            id=f"c{seq}",
            seq=seq,
            description="Streetlight not working",
            category="Electricity",
            sub_category="Streetlight",
            status="REGISTERED",
            urgency="MEDIUM",
            submission_date="2025-01-15T10:00:00Z",
            latitude=lat,
            longitude=lng,
            district=district,
        )
        fields.update(overrides)
        return GeoPoint(**fields)

    return _make


# ==============================================================================
# Sample Complaint Data
# ==============================================================================

@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """Complaint records shaped like the complaints backend response."""
    return [
        {
            "id": "cmp-1",
            "seq": 101,
            "description": "Garbage not collected for a week",
            "category": "Sanitation",
            "subCategory": "Garbage",
            "status": "REGISTERED",
            "urgency": "HIGH",
            "submissionDate": "2025-03-01T09:30:00Z",
            "latitude": 28.6139,
            "longitude": 77.2090,
            "district": "New Delhi",
            "city": "Delhi",
            "locality": "Connaught Place",
            "pin": "110001",
        },
        {
            "id": "cmp-2",
            "seq": 102,
            "description": "Pothole near the metro gate",
            "category": "Roads",
            "subCategory": "Pothole",
            "status": "IN_PROGRESS",
            "urgency": "CRITICAL",
            "submissionDate": "2025-03-02T11:00:00Z",
            "latitude": 28.6145,
            "longitude": 77.2101,
            "district": "New Delhi",
            "city": "Delhi",
            "locality": "Janpath",
            "pin": "110001",
        },
        {
            "id": "cmp-3",
            "seq": 103,
            "description": "Water logging after rain",
            "category": None,
            "subCategory": "Drainage",
            "status": "COMPLETED",
            "urgency": "LOW",
            "submissionDate": "2025-03-03T08:15:00Z",
            "latitude": 19.0760,
            "longitude": 72.8777,
            "district": "Mumbai City",
            "city": "Mumbai",
            "locality": "Fort",
            "pin": "400001",
        },
        {
            "id": "cmp-4",
            "seq": 104,
            "description": "Location not captured",
            "category": "Other",
            "subCategory": "Other",
            "status": "REGISTERED",
            "urgency": "LOW",
            "submissionDate": "2025-03-04T08:15:00Z",
            "latitude": None,
            "longitude": None,
            "district": None,
            "city": None,
            "locality": None,
            "pin": None,
        },
    ]


@pytest.fixture
def scattered_points(make_point) -> List[GeoPoint]:
    """Reproducible points spread around Delhi and Mumbai."""
    rng = np.random.default_rng(42)
    points = []
    for center_lat, center_lng, district in (
        (28.61, 77.21, "New Delhi"),
        (19.07, 72.88, "Mumbai City"),
    ):
        lats = center_lat + rng.normal(0, 0.12, size=80)
        lngs = center_lng + rng.normal(0, 0.12, size=80)
        for lat, lng in zip(lats, lngs):
            points.append(make_point(float(lat), float(lng), district=district))
    return points


# ==============================================================================
# Utilities
# ==============================================================================

def assert_approx_equal(a: float, b: float, tolerance: float = 0.01):
    """Assert two floats are approximately equal."""
    assert abs(a - b) < tolerance, f"{a} != {b} (tolerance={tolerance})"
