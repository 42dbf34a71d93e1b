"""
Tests for the HTTP API.

Uses FastAPI's TestClient against the real application.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def half_payload():
    return {
        "tier": "70.3",
        "unit_system": "metric",
        "swim_distance": 1.9,
        "swim_time": "33:00",
        "bike_distance": 90,
        "bike_time": "2:33:00",
        "run_distance": 21.1,
        "run_time": "1:28:00",
    }


# =============================================================================
# Health & standards
# =============================================================================

class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestStandardsRoutes:
    """GET /api/v1/standards."""

    def test_list_metric_by_default(self, client):
        response = client.get("/api/v1/standards")

        assert response.status_code == 200
        data = response.json()
        assert [s["tier"] for s in data] == ["olympic", "70.3", "full"]
        assert data[1]["swim"] == 1.9

    def test_list_imperial(self, client):
        response = client.get("/api/v1/standards", params={"unit_system": "imperial"})

        assert response.status_code == 200
        assert response.json()[1]["swim"] == 1.2

    def test_list_invalid_unit_system(self, client):
        response = client.get("/api/v1/standards", params={"unit_system": "cubits"})
        assert response.status_code == 422

    def test_get_single(self, client):
        response = client.get("/api/v1/standards/imperial/70.3")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "IRONMAN 70.3"
        assert (data["swim"], data["bike"], data["run"]) == (1.2, 56, 13.1)

    def test_get_unknown_tier(self, client):
        response = client.get("/api/v1/standards/metric/sprint")

        assert response.status_code == 404
        detail = response.json()["detail"]
        assert detail["error"] == "unknown_standard"
        assert detail["field"] == "tier"


# =============================================================================
# Normalization
# =============================================================================

class TestNormalizeRoute:
    """POST /api/v1/normalize."""

    def test_half_distance(self, client, half_payload):
        response = client.post("/api/v1/normalize", json=half_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["swim"]["time"] == "33:00"
        assert data["bike"]["time"] == "2:33:00"
        assert data["run"]["time"] == "1:28:00"
        assert data["t1"]["time"] == "2:00"
        assert data["t2"]["time"] == "2:00"
        assert data["total"] == "4:38:00"
        assert data["time_saved"] == "0:00"

    def test_pace_and_speed(self, client, half_payload):
        data = client.post("/api/v1/normalize", json=half_payload).json()

        assert data["swim"]["pace"] == "1:44"
        assert data["bike"]["speed"] == "35.3"
        assert data["run"]["pace"] == "4:10"
        assert data["bike"]["pace"] is None

    def test_short_bike_scaled(self, client, half_payload):
        half_payload.update(bike_distance=45, bike_time="1:16:30")
        data = client.post("/api/v1/normalize", json=half_payload).json()

        assert data["bike"]["time"] == "2:33:00"
        assert data["actual_total"] == "3:21:30"
        assert data["difference_minutes"] == pytest.approx(-76.5)

    def test_timeline_sums_to_100(self, client, half_payload):
        timeline = client.post("/api/v1/normalize", json=half_payload).json()["timeline"]
        assert sum(timeline.values()) == pytest.approx(100.0, abs=1e-6)

    def test_defaults_to_settings_tier(self, client, half_payload):
        del half_payload["tier"]
        del half_payload["unit_system"]
        data = client.post("/api/v1/normalize", json=half_payload).json()

        assert data["standard"]["tier"] == "70.3"
        assert data["standard"]["unit_system"] == "metric"

    def test_metadata_echoed(self, client, half_payload):
        half_payload.update(athlete_name="Jane Doe", age=35, bike_power=210)
        metadata = client.post("/api/v1/normalize", json=half_payload).json()["metadata"]

        assert metadata["athlete_name"] == "Jane Doe"
        assert metadata["age"] == 35
        assert metadata["bike_power"] == 210
        assert metadata["race_name"] is None

    def test_bad_time_names_field(self, client, half_payload):
        half_payload["bike_time"] = "two hours"
        response = client.post("/api/v1/normalize", json=half_payload)

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["field"] == "bike_time"
        assert detail["error"] == "invalid_duration"

    def test_blank_time_is_missing_field(self, client, half_payload):
        half_payload["run_time"] = ""
        response = client.post("/api/v1/normalize", json=half_payload)

        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "missing_field"

    def test_zero_distance_rejected(self, client, half_payload):
        half_payload["swim_distance"] = 0
        response = client.post("/api/v1/normalize", json=half_payload)
        assert response.status_code == 422

    def test_unknown_tier_rejected(self, client, half_payload):
        half_payload["tier"] = "sprint"
        response = client.post("/api/v1/normalize", json=half_payload)
        assert response.status_code == 422

    def test_tiny_distance_is_typed_failure(self, client, half_payload):
        half_payload["swim_distance"] = 1e-320
        response = client.post("/api/v1/normalize", json=half_payload)

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["field"] == "swim_distance"
        assert detail["error"] == "invalid_distance"

    def test_overlong_time_is_typed_failure(self, client, half_payload):
        half_payload["run_time"] = "9" * 400
        response = client.post("/api/v1/normalize", json=half_payload)

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "run_time"
