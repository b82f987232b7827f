"""
Boundary tests for the HTTP API: validation, not-found, unmatched routes
and the generic 500 handler.
"""

import logging

import pytest

from shortlink_platform.registry.registry import CodeRegistry


@pytest.mark.parametrize(
    "payload,error",
    [
        ({"url": "not-a-url"}, "Invalid URL"),
        ({"url": "ftp://example.com"}, "Invalid URL"),
        ({"url": "javascript:alert(1)"}, "Invalid URL"),
        ({"url": ""}, "URL is required"),
        ({}, "URL is required"),
        ({"url": None}, "URL is required"),
        ({"url": 123}, "Invalid URL"),
        ({"url": "http://exa<mple.com"}, "Invalid URL"),
        ({"url": "https://exa%mple.com/path"}, "Invalid URL"),
    ],
)
def test_shorten_rejects_bad_input_without_creating(client, payload, error):
    resp = client.post("/api/shorten", json=payload)
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == error
    assert body["message"]
    assert client.get("/health").json()["totalUrls"] == 0


@pytest.mark.parametrize("raw", [b"not json", b"[1, 2]", b""])
def test_shorten_malformed_body_is_400(client, raw):
    resp = client.post("/api/shorten", content=raw, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert set(resp.json()) == {"error", "message"}


def test_redirect_unknown_code(client):
    resp = client.get("/nosuch12")
    assert resp.status_code == 404
    assert resp.json() == {
        "error": "Short URL not found",
        "message": "The requested short URL does not exist",
    }


def test_analytics_and_delete_unknown_code(client):
    assert client.get("/api/analytics/nosuch12").status_code == 404
    resp = client.delete("/api/urls/nosuch12")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Short URL not found"


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/"),
        ("get", "/api/unknown/route"),
        ("get", "/api/shorten"),
        ("post", "/health"),
        ("put", "/api/urls/abc12345"),
    ],
)
def test_unmatched_routes(client, method, path):
    resp = getattr(client, method)(path)
    assert resp.status_code == 404
    assert resp.json() == {
        "error": "Route not found",
        "message": "The requested endpoint does not exist",
    }


class _ExplodingRegistry(CodeRegistry):
    def get_or_create(self, url):
        raise RuntimeError("secret internal detail")

    def count(self):
        raise RuntimeError("secret internal detail")


def test_internal_error_is_generic_500(make_client):
    client = make_client(_ExplodingRegistry(), raise_server_exceptions=False)
    resp = client.post("/api/shorten", json={"url": "https://a.com"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error", "message": "Something went wrong"}
    assert "secret" not in resp.text


def test_internal_error_still_access_logged(make_client, caplog):
    client = make_client(_ExplodingRegistry(), raise_server_exceptions=False)
    with caplog.at_level(logging.INFO, logger="shortlink.web"):
        resp = client.get("/health")
    assert resp.status_code == 500
    messages = [r.getMessage() for r in caplog.records if r.name == "shortlink.web"]
    assert any(m.startswith("GET /health -> 500") for m in messages)


def test_visit_count_not_incremented_by_failed_redirect(client):
    code = client.post("/api/shorten", json={"url": "https://a.com"}).json()["shortCode"]
    client.get("/nosuch12")
    assert client.get(f"/api/analytics/{code}").json()["visitCount"] == 0
