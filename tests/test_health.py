"""Tests for health check endpoints."""


def test_health_check(client):
    """Test basic health endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_liveness_check(client):
    """Test liveness endpoint."""
    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.json()["status"] == "alive"


def test_readiness_check(client):
    """Test readiness endpoint reports the catalog size."""
    response = client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["book_count"] == 2


def test_root_endpoint(client):
    """Test root endpoint returns service info."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "service" in data
    assert "version" in data
    assert data["books"] == "/api/books"


def test_metrics_endpoint(client):
    """Test Prometheus metrics are exposed."""
    client.get("/api/books")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "http_request" in response.text
