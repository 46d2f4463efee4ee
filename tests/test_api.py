"""Tests for the fetch proxy and static file server."""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch, Mock
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from api.main import FETCH_FAILED_DETAIL, create_app
from ingest.config import Settings
from scrapers.errors import NetworkError


@pytest.fixture
def client(tmp_path):
    (tmp_path / "index.html").write_text(
        '<html><body><div id="events-container"></div></body></html>', encoding="utf-8"
    )
    (tmp_path / "server-data-123.json").write_text('{"jsonld": []}', encoding="utf-8")
    return TestClient(create_app(Settings(static_dir=tmp_path, request_timeout=7)))


def test_health_endpoint(client):
    """Test the health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert "version" in data


def test_fetch_proxy_returns_body_verbatim(client):
    upstream = Mock()
    upstream.content = b"<html>window.__SERVER_DATA__ = {};</html>"
    upstream.headers = {"Content-Type": "text/html; charset=utf-8"}

    with patch("api.main.fetch_url", return_value=upstream) as mock_fetch:
        response = client.post("/api/fetch-eventbrite", json={"url": "https://www.eventbrite.com/o/123"})

    assert response.status_code == 200
    assert response.content == b"<html>window.__SERVER_DATA__ = {};</html>"
    assert response.headers["content-type"].startswith("text/html")
    mock_fetch.assert_called_once_with("https://www.eventbrite.com/o/123", 7)


def test_fetch_proxy_failure_returns_generic_500(client):
    with patch("api.main.fetch_url", side_effect=NetworkError("boom", status_code=404)):
        response = client.post("/api/fetch-eventbrite", json={"url": "https://www.eventbrite.com/o/404"})

    assert response.status_code == 500
    assert response.json()["detail"] == FETCH_FAILED_DETAIL


def test_fetch_proxy_requires_url(client):
    response = client.post("/api/fetch-eventbrite", json={})
    assert response.status_code == 422  # Validation error


def test_static_index_served(client):
    response = client.get("/")
    assert response.status_code == 200
    assert 'id="events-container"' in response.text


def test_static_files_served_verbatim(client):
    response = client.get("/server-data-123.json")
    assert response.status_code == 200
    assert response.json() == {"jsonld": []}


def test_unknown_static_file_is_404(client):
    assert client.get("/missing.html").status_code == 404
