"""Tests for the liveness and readiness endpoints."""


class TestHealthEndpoints:
    def test_liveness(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "api"}

    def test_readiness_with_reachable_database(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"]["status"] == "healthy"

    def test_readiness_reports_unreachable_database(
        self, client, database_service, monkeypatch
    ):
        monkeypatch.setattr(database_service, "health_check", lambda: False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "not_ready"
        assert body["checks"]["database"]["status"] == "unhealthy"
