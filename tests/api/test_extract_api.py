"""Tests for POST /api/extract."""


def test_extract_url(client):
    resp = client.post("/api/extract", json={"url": "https://example.com/tidal"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert "error" not in body
    data = body["data"]
    assert data["title"] == "Tidal Energy"
    assert data["url"] == "https://example.com/tidal"
    assert data["metadata"] == {"siteName": "example.com"}


def test_extract_text(client):
    text = "Plain text supplied by the user, long enough to pass the minimum length."
    resp = client.post("/api/extract", json={"text": text})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["title"] == "User Provided Text"
    assert data["author"] == "User Input"
    assert data["content"] == text
    assert "publishedDate" in data
    assert "url" not in data


def test_extract_requires_input(client):
    resp = client.post("/api/extract", json={})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Either URL or text content is required"}


def test_extract_invalid_url(client):
    resp = client.post("/api/extract", json={"url": "not-a-url"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid URL format"


def test_extract_fetch_failure(client):
    resp = client.post("/api/extract", json={"url": "https://example.com/missing"})
    assert resp.status_code == 422
    assert resp.json()["success"] is False
    assert resp.json()["error"].startswith("Failed to fetch content")


def test_extract_options(client):
    resp = client.options("/api/extract")
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert resp.headers["access-control-allow-headers"] == "Content-Type, Authorization"
