"""
API Tests
=========

Tests for the HTTP endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from venue_engine.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestServiceEndpoints:
    """Tests for service info and health."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["service"] == "VenueEngine"
        assert body["viewport"] == {"width": 100.0, "height": 62.5}

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestLayoutEndpoints:
    """Tests for generated venue maps."""

    def test_ring_pack(self, client):
        body = client.get("/geometry/ring-pack", params={"layers": 2}).json()

        assert body["layers"] == 2
        assert body["outer_radius"] == pytest.approx(28.25)
        assert body["center_x"] == 50

    def test_ring_pack_clamps_layers(self, client):
        assert client.get("/geometry/ring-pack", params={"layers": 50}).json()["layers"] == 8

    def test_grid(self, client):
        response = client.get("/layouts/grid", params={"rows": 3, "cols": 8})

        assert response.status_code == 200
        body = response.json()
        assert body["sections"] == 24
        assert body["layers"] == 1
        assert body["exitsList"] == []
        assert body["zones"][0]["id"] == "R1C1"
        assert body["summary"]["total_area"] == pytest.approx(4725)

    def test_grid_clamps_counts(self, client):
        body = client.get("/layouts/grid", params={"rows": 0, "cols": 2}).json()
        assert body["sections"] == 2

    def test_circular(self, client):
        response = client.get(
            "/layouts/circular",
            params=[("layers", 3), ("sections", 1), ("sections", 6), ("sections", 12)],
        )

        assert response.status_code == 200
        body = response.json()
        assert body["layers"] == 3
        assert body["sections"] == 19
        assert body["zones"][-1]["id"] == "L3-S12"

    def test_circular_defaults(self, client):
        body = client.get("/layouts/circular").json()

        assert body["layers"] == 2
        assert body["sections"] == 5


class TestRecommendationEndpoint:
    """Tests for POST /recommendations."""

    def test_ranked_recommendations(self, client, sample_snapshot_payload):
        response = client.post("/recommendations", json=sample_snapshot_payload)

        assert response.status_code == 200
        body = response.json()
        assert body[0]["id"] == "high-density-Main Entrance"
        assert body[0]["priority"] == "high"
        assert body[-1]["priority"] == "low"
        assert "timestamp" not in body[1]

    def test_location_filter(self, client, sample_snapshot_payload):
        response = client.post(
            "/recommendations",
            params={"location": "Main Entrance"},
            json=sample_snapshot_payload,
        )

        ids = [r["id"] for r in response.json()]
        assert "low-density-Food Court" not in ids
        assert "high-density-Main Entrance" in ids

    def test_invalid_density_rejected(self, client):
        payload = {
            "crowdDensity": [
                {"timestamp": "2025-03-01T18:00:00Z", "location": "A", "density": 2.0},
            ],
            "hotspots": [],
        }

        assert client.post("/recommendations", json=payload).status_code == 422
