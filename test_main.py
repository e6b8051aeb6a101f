"""Integration tests for the Kundli Chart API endpoints."""

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

DELHI_EPOCH = {
    "name": "Epoch",
    "year": 2000, "month": 1, "day": 1,
    "hour": 12, "minute": 0,
    "timezone_offset": 0.0,
    "latitude": 28.6, "longitude": 77.2,
}


def test_health():
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert "POST /api/chart" in r.json()["endpoints"]


def test_chart():
    r = client.post("/api/chart", json=DELHI_EPOCH)
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True

    chart = body["chart"]
    assert chart["lagna"]["sign"] == "Gemini"
    assert chart["planets"]["Sun"]["sign"] == "Sagittarius"
    assert chart["planets"]["Sun"]["house"] == 7
    assert len(chart["houses"]) == 12
    assert chart["houses"][0]["occupants"] == ["As"]
    assert chart["meta"]["delta_t_modeled"] is True


def test_chart_accepts_coordinate_strings():
    payload = dict(DELHI_EPOCH, latitude="28N36", longitude="77E12")
    r = client.post("/api/chart", json=payload)
    assert r.status_code == 200
    meta_input = r.json()["chart"]["meta"]["input"]
    assert abs(meta_input["latitude"] - 28.6) < 1e-9
    assert abs(meta_input["longitude"] - 77.2) < 1e-9
    assert r.json()["chart"]["lagna"]["sign"] == "Gemini"


def test_chart_rejects_out_of_range_fields():
    r = client.post("/api/chart", json=dict(DELHI_EPOCH, month=13))
    assert r.status_code == 422

    r = client.post("/api/chart", json=dict(DELHI_EPOCH, latitude=95.0))
    assert r.status_code == 422


def test_chart_rejects_impossible_birth_data():
    r = client.post("/api/chart", json=dict(DELHI_EPOCH, month=2, day=30))
    assert r.status_code == 400
    assert "date" in r.json()["detail"]

    r = client.post("/api/chart", json=dict(DELHI_EPOCH, latitude=90.0))
    assert r.status_code == 400


def test_coordinates():
    r = client.post("/api/coordinates", json={"latitude": "12S0", "longitude": "77W30"})
    assert r.status_code == 200
    assert r.json() == {"latitude": -12.0, "longitude": -77.5}

    r = client.post("/api/coordinates", json={"latitude": "abc"})
    assert r.json() == {"latitude": 0.0, "longitude": 0.0}


def test_pdf():
    chart = client.post("/api/chart", json=DELHI_EPOCH).json()["chart"]
    r = client.post("/api/pdf", json={"chart": chart, "name": "Epoch"})
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/pdf"
    assert "kundli_Epoch.pdf" in r.headers["content-disposition"]
    assert r.content.startswith(b"%PDF")
