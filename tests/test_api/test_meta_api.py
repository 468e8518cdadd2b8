"""
Tests for stats, API description, health and error handling.
"""

from fastapi.testclient import TestClient

from api.main import create_app
from notify_core.config import Settings


class TestStats:
    """Tests for GET /api/stats."""

    def test_initial_stats(self, api_client: TestClient):
        response = api_client.get("/api/stats")

        assert response.status_code == 200
        assert response.json() == {
            "totalNotifications": 0,
            "activeProducts": 4,
            "totalCustomers": 4,
            "thisWeek": 0,
        }

    def test_this_week_window(self, api_client: TestClient, clock):
        """Test that only notifications from the trailing 7 days count."""
        api_client.post("/api/notifications", json={"productIds": [1], "customerIds": [1, 2]})
        clock.advance(days=8)
        api_client.post("/api/notifications", json={"productIds": [1], "customerIds": [3]})
        api_client.put("/api/products/1", json={"isActive": False})

        stats = api_client.get("/api/stats").json()

        assert stats["totalNotifications"] == 3
        assert stats["thisWeek"] == 1
        assert stats["activeProducts"] == 3


class TestDescribeApi:
    """Tests for GET /api."""

    def test_describes_endpoints(self, api_client: TestClient):
        response = api_client.get("/api")

        assert response.status_code == 200
        data = response.json()
        assert set(data["endpoints"]) == {"customers", "products", "notifications", "templates", "stats"}
        assert "Customer" in data["schemas"]
        assert data["baseUrl"].endswith("/api")


class TestHealthAndErrors:
    """Tests for health check and generic error handling."""

    def test_health_check(self, api_client: TestClient):
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unexpected_error_is_generic_500(self, settings, store):
        app = create_app(settings=settings, store=store)

        @app.get("/boom")
        def boom():
            raise RuntimeError("secret internals")

        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_default_app_seeds_sample_data(self):
        client = TestClient(create_app(settings=Settings(_env_file=None, seed_sample_data=True)))

        assert len(client.get("/api/customers").json()) == 4
