"""Complaint location records and their coercion from raw payloads."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "Unknown"


@dataclass(frozen=True)
class GeoPoint:
    """A single geolocated complaint."""

    id: str
    seq: int
    description: str
    category: str
    sub_category: str
    status: str
    urgency: str
    submission_date: str
    latitude: float
    longitude: float
    district: Optional[str] = None
    city: Optional[str] = None
    locality: Optional[str] = None
    pin: Optional[str] = None


# snake_case field -> camelCase key used by the complaints backend
_CAMEL_KEYS = {
    "sub_category": "subCategory",
    "submission_date": "submissionDate",
}


def _field(record: Mapping[str, Any], name: str, default: Any = None) -> Any:
    if name in record:
        return record[name]
    camel = _CAMEL_KEYS.get(name)
    if camel is not None and camel in record:
        return record[camel]
    return default


def points_from_records(records: Iterable[Mapping[str, Any]]) -> List[GeoPoint]:
    """
    Build ``GeoPoint`` objects from raw complaint mappings.

    Records missing a latitude or longitude cannot be placed on the map and
    are skipped. Both the backend's camelCase keys and snake_case keys are
    accepted. A missing category becomes ``"Unknown"``.

    Args:
        records: Iterable of mapping-like complaint records

    Returns:
        Points in input order (minus skipped records)
    """
    points: List[GeoPoint] = []
    skipped = 0

    for record in records:
        lat = _field(record, "latitude")
        lng = _field(record, "longitude")
        if lat is None or lng is None:
            skipped += 1
            continue

        points.append(
            GeoPoint(
                id=str(_field(record, "id", "")),
                seq=int(_field(record, "seq", 0) or 0),
                description=_field(record, "description", "") or "",
                category=_field(record, "category") or UNKNOWN_CATEGORY,
                sub_category=_field(record, "sub_category", "") or "",
                status=_field(record, "status", "") or "",
                urgency=_field(record, "urgency", "") or "",
                submission_date=str(_field(record, "submission_date", "") or ""),
                latitude=float(lat),
                longitude=float(lng),
                district=_field(record, "district"),
                city=_field(record, "city"),
                locality=_field(record, "locality"),
                pin=_field(record, "pin"),
            )
        )

    if skipped:
        logger.info("Skipped %d complaint records without coordinates", skipped)
    return points


def points_dataframe(points: Sequence[GeoPoint]) -> pd.DataFrame:
    """Return a ``lat``/``lng`` DataFrame indexed by position in ``points``."""

    return pd.DataFrame(
        {
            "lat": [p.latitude for p in points],
            "lng": [p.longitude for p in points],
        },
        dtype=float,
    )
