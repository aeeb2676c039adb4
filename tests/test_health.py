"""
Tests for health endpoints
"""


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["components"]["database"]["status"] == "healthy"
    assert data["components"]["redis"]["status"] == "disabled"


def test_readiness(client):
    response = client.get("/health/ready")
    assert response.status_code == 200


def test_liveness(client):
    response = client.get("/health/live")
    assert response.json() == {"status": "alive"}
