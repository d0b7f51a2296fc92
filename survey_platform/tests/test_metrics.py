"""Tests for logging/metrics hardening."""

from __future__ import annotations


def test_metrics_endpoint(client):
    client.get("/api/ai/ping")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert b"survey_requests_total" in resp.data


def test_request_id_header(client):
    resp = client.get("/api/ai/ping")
    assert resp.status_code == 200
    assert "X-Request-ID" in resp.headers


def test_request_id_is_echoed(client):
    resp = client.get("/api/ai/ping", headers={"X-Request-ID": "abc123"})
    assert resp.headers["X-Request-ID"] == "abc123"


def test_ai_call_counter_recorded(client, fake_ai):
    client.post(
        "/api/ai/analyze-style",
        json={"samples": [{"title": "Intro", "content": "Hello there."}]},
    )
    resp = client.get("/metrics")
    assert b'survey_ai_calls_total{operation="analyze_style",outcome="success"}' in resp.data
