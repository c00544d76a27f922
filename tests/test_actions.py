from fastapi.testclient import TestClient
import pytest

from apps.hotmap_server.main import app


@pytest.fixture()
def client(monkeypatch) -> TestClient:
    monkeypatch.delenv("HOTMAP_PROFILE", raising=False)
    return TestClient(app)


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_hotspots_action_clusters_complaints(client: TestClient, sample_records):
    response = client.post("/actions/hotspots", json={"complaints": sample_records})
    assert response.status_code == 200
    data = response.json()

    assert data["totalComplaints"] == 3
    counts = sorted(h["count"] for h in data["hotspots"])
    assert counts == [1, 2]

    delhi = next(h for h in data["hotspots"] if h["count"] == 2)
    assert delhi["district"] == "New Delhi"
    assert delhi["tier"] == "medium"
    assert delhi["color"] == "#f97316"
    assert delhi["radiusM"] == 2000
    assert delhi["label"] == "2 complaints in this area"
    assert delhi["complaintIds"] == ["cmp-1", "cmp-2"]

    assert data["focus"]["center"]["lat"] == pytest.approx(delhi["center"]["lat"])
    assert data["focus"]["zoom"] == 10
    assert [row["tier"] for row in data["legend"]] == ["high", "medium", "low"]

    template = data["_meta"]["openai"]["outputTemplate"]
    assert set(template) == {"layout"}
    layout = template["layout"]
    assert [entry["widget"] for entry in layout] == ["geo.hotspotCircles", "geo.complaintMarkers"]
    assert len(layout[1]["props"]["markers"]) == 3


def test_no_static_assets_route(client: TestClient):
    assert client.get("/assets/index.html").status_code == 404


def test_hotspots_action_empty_uses_default_focus(client: TestClient):
    response = client.post("/actions/hotspots", json={"complaints": []})
    assert response.status_code == 200
    data = response.json()

    assert data["hotspots"] == []
    assert data["focus"] == {"center": {"lat": 22.9734, "lng": 78.6569}, "zoom": 5}


def test_hotspots_action_profile_override(client: TestClient, sample_records):
    response = client.post(
        "/actions/hotspots",
        json={"complaints": sample_records, "profile": "dense-city"},
    )
    assert response.status_code == 200
    data = response.json()

    delhi = next(h for h in data["hotspots"] if h["count"] == 2)
    assert delhi["radiusM"] == 500
    assert delhi["tier"] == "low"


def test_hotspots_action_unknown_profile(client: TestClient, sample_records):
    response = client.post(
        "/actions/hotspots",
        json={"complaints": sample_records, "profile": "nowhere"},
    )
    assert response.status_code == 404
    assert "nowhere" in response.json()["detail"]


def test_hotspots_action_rejects_out_of_range_latitude(client: TestClient):
    payload = {"complaints": [{"id": "bad", "latitude": 95.0, "longitude": 10.0}]}

    response = client.post("/actions/hotspots", json=payload)
    assert response.status_code == 422
