from unittest.mock import Mock, patch
import os
import sys

import pytest
import requests

# Ensure the project root is on the import path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from scrapers.errors import ExtractionError, NetworkError, ParseError
from scrapers.server_data import extract_server_data, fetch_url


ORGANIZER_HTML = '''
<html><head>
<script>
  window.__SERVER_DATA__ = {"jsonld": [{"@context": "https://schema.org", "itemListElement": []}],
    "organizer": {"name": "Lima Jazz Club"}};
  window.__OTHER__ = {"ignored": true};
</script>
</head><body></body></html>
'''


def test_extracts_multiline_object():
    data = extract_server_data(ORGANIZER_HTML)
    assert data["organizer"] == {"name": "Lima Jazz Club"}
    assert data["jsonld"][0]["@context"] == "https://schema.org"


def test_extracts_custom_global():
    assert extract_server_data(ORGANIZER_HTML, "__OTHER__") == {"ignored": True}


def test_missing_assignment_raises_extraction_error():
    with pytest.raises(ExtractionError):
        extract_server_data("<html><script>window.__CONFIG__ = {};</script></html>")


def test_malformed_json_raises_parse_error():
    page = "<script>window.__SERVER_DATA__ = {jsonld: [1, 2,]};</script>"
    with pytest.raises(ParseError) as excinfo:
        extract_server_data(page)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.__cause__ is not None


def test_semicolon_inside_string_cuts_object_short():
    page = '<script>window.__SERVER_DATA__ = {"text": "a};b"};</script>'
    with pytest.raises(ParseError):
        extract_server_data(page)


def test_fetch_url_returns_response():
    resp = Mock()
    resp.raise_for_status = lambda: None
    resp.text = ORGANIZER_HTML
    with patch("scrapers.server_data.requests.get", return_value=resp) as mock_get:
        result = fetch_url("https://www.eventbrite.com/o/123", timeout=5)
    assert result is resp
    mock_get.assert_called_once_with("https://www.eventbrite.com/o/123", timeout=5)


def test_fetch_url_http_error_carries_status():
    error_resp = Mock(status_code=404, headers={"Content-Type": "text/html"})
    resp = Mock()
    resp.raise_for_status.side_effect = requests.HTTPError("404 Not Found", response=error_resp)
    with patch("scrapers.server_data.requests.get", return_value=resp):
        with pytest.raises(NetworkError) as excinfo:
            fetch_url("https://www.eventbrite.com/o/missing")
    assert excinfo.value.status_code == 404


def test_fetch_url_transport_error():
    with patch("scrapers.server_data.requests.get", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(NetworkError) as excinfo:
            fetch_url("https://www.eventbrite.com/o/123")
    assert excinfo.value.status_code is None
