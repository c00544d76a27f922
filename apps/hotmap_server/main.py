"""FastAPI server exposing complaint hotspot clustering as actions."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .schemas.models import HotspotsRequest
from .tools.hotspots import build_hotspots_response, points_from_locations
from hotmap.tools.config_loader import HotmapSettings, load_hotmap_settings

app = FastAPI(title="Complaint Hotmap Server", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    return {"status": "ok"}


def _load_settings(name: Optional[str]) -> HotmapSettings:
    try:
        return load_hotmap_settings(name)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.post("/actions/hotspots")
async def hotspots_action(request: HotspotsRequest) -> Dict[str, Any]:
    settings = _load_settings(request.profile)
    points = points_from_locations(request.complaints)
    response = build_hotspots_response(points, settings)

    hotspots = [hotspot.model_dump(by_alias=True) for hotspot in response.hotspots]
    markers = [
        {"id": point.id, "seq": point.seq, "lat": point.latitude, "lng": point.longitude}
        for point in points
    ]

    layout_widgets = [
        {
            "widget": "geo.hotspotCircles",
            "props": {
                "center": response.focus.center.model_dump(),
                "zoom": response.focus.zoom,
                "hotspots": hotspots,
                "legend": [entry.model_dump() for entry in response.legend],
            },
        },
        {
            "widget": "geo.complaintMarkers",
            "props": {"markers": markers},
        },
    ]

    template = {"layout": layout_widgets}
    payload = response.model_dump(by_alias=True)
    payload["_meta"] = {"openai": {"outputTemplate": template}}
    return payload


__all__ = ["app"]
