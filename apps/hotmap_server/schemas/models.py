"""Pydantic models for the hotmap actions server."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class LatLng(BaseModel):
    """Simple latitude/longitude container."""

    lat: float = Field(..., description="Latitude in decimal degrees")
    lng: float = Field(..., description="Longitude in decimal degrees")


class ComplaintLocation(BaseModel):
    """A complaint location as returned by the complaints backend."""

    id: str
    seq: int = 0
    description: str = ""
    category: Optional[str] = None
    sub_category: str = Field("", alias="subCategory")
    status: str = ""
    urgency: str = ""
    submission_date: str = Field("", alias="submissionDate")
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    district: Optional[str] = None
    city: Optional[str] = None
    locality: Optional[str] = None
    pin: Optional[str] = None

    model_config = {"populate_by_name": True}


class HotspotsRequest(BaseModel):
    complaints: List[ComplaintLocation] = Field(default_factory=list)
    profile: Optional[str] = Field(default=None, description="Configuration profile name")


class Hotspot(BaseModel):
    """One density circle ready for rendering."""

    center: LatLng
    count: int
    radius_m: float = Field(..., alias="radiusM")
    district: str
    tier: str
    color: str
    label: str
    complaint_ids: List[str] = Field(default_factory=list, alias="complaintIds")

    model_config = {"populate_by_name": True}


class FocusView(BaseModel):
    center: LatLng
    zoom: int


class LegendEntry(BaseModel):
    tier: str
    label: str
    color: str


class HotspotsResponse(BaseModel):
    hotspots: List[Hotspot]
    focus: FocusView
    legend: List[LegendEntry]
    total_complaints: int = Field(..., alias="totalComplaints")

    model_config = {"populate_by_name": True}
