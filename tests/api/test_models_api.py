"""Tests for GET /api/models and /health."""


def test_models_report_availability(client):
    resp = client.get("/api/models")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["availability"] == {"google": True, "openai": False, "anthropic": False}

    models = {m["id"]: m for m in data["models"]}
    assert list(models) == [
        "gemini-2.0-flash-exp",
        "gemini-1.5-flash-latest",
        "gemini-1.5-flash",
        "openai",
        "claude",
    ]
    assert models["gemini-2.0-flash-exp"]["isDefault"] is True
    assert models["gemini-1.5-flash"]["status"] == "AVAILABLE"
    assert models["claude"]["status"] == "API KEY REQUIRED"


def test_models_options(client):
    resp = client.options("/api/models")
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-methods"] == "GET, OPTIONS"


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["version"] == client.app.version


def test_health_lists_configured_providers(client):
    assert client.get("/health").json()["providers"] == ["google"]
