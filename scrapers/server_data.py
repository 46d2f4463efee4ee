"""Fetch organizer pages and pull out their embedded server data."""
from __future__ import annotations

import json
import logging
import re
from typing import Any

import requests

from .errors import ExtractionError, NetworkError, ParseError

logger = logging.getLogger(__name__)

DEFAULT_GLOBAL = "__SERVER_DATA__"


def fetch_url(url: str, timeout: float = 30.0) -> requests.Response:
    """GET ``url`` and return the response, raising ``NetworkError`` on failure."""
    logger.info("Fetching URL: %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        status = None
        if exc.response is not None:
            status = exc.response.status_code
            logger.error("Response status: %s", status)
            logger.error("Response headers: %s", dict(exc.response.headers))
        raise NetworkError(f"Failed to fetch {url}: {exc}", status_code=status) from exc
    return resp


def _assignment_pattern(global_name: str) -> re.Pattern[str]:
    # Non-greedy: the object ends at the first "};" after the assignment.
    return re.compile(r"window\." + re.escape(global_name) + r"\s*=\s*({[\s\S]*?});")


def extract_server_data(page_html: str, global_name: str = DEFAULT_GLOBAL) -> dict[str, Any]:
    """Return the JSON object assigned to ``window.<global_name>`` in a page.

    Args:
        page_html: Raw text of the fetched page.
        global_name: Name of the global the page assigns its data to.

    Raises:
        ExtractionError: The assignment is not present.
        ParseError: The assigned literal is not a JSON object.
    """
    match = _assignment_pattern(global_name).search(page_html)
    if not match:
        raise ExtractionError(f"Could not find window.{global_name} in the page")

    try:
        return json.loads(match.group(1))
    except json.JSONDecodeError as exc:
        raise ParseError(f"window.{global_name} is not valid JSON: {exc}") from exc
