"""Replace the inner content of a container element in an HTML document.

The container is found by a marker substring of its opening tag, for example
``<div id="events-container">``. Its end is located with a depth-counting scan
over tags of the same element name, so nested ``<div>`` elements inside the
container do not cut it short. No markup parser is involved; everything
outside the container's inner content is left byte-for-byte unchanged.
"""
from __future__ import annotations

import re

from scrapers.errors import PatchError

DEFAULT_MARKER = '<div id="events-container">'

_TAG_NAME = re.compile(r"<([A-Za-z][\w:-]*)")


def _tag_pattern(name: str) -> re.Pattern[str]:
    return re.compile(r"<(/?)" + re.escape(name) + r"(?=[\s/>])[^>]*>", re.IGNORECASE)


def find_container(document: str, marker: str = DEFAULT_MARKER) -> tuple[int, int]:
    """Return ``(start, end)`` of the container's inner content in ``document``.

    Raises ``PatchError`` when the marker is missing or appears more than
    once, when it is not part of an opening tag, or when the container is
    never closed.
    """
    count = document.count(marker)
    if count == 0:
        raise PatchError(f"Could not find container {marker!r} in document")
    if count > 1:
        raise PatchError(f"Container {marker!r} appears {count} times in document")

    marker_at = document.index(marker)
    tag_start = document.rfind("<", 0, marker_at + 1)
    name_match = _TAG_NAME.match(document, tag_start) if tag_start != -1 else None
    if name_match is None or document.find(">", tag_start, marker_at) != -1:
        raise PatchError(f"Container {marker!r} is not inside an opening tag")

    open_end = document.find(">", marker_at + len(marker) - 1)
    if open_end == -1:
        raise PatchError(f"Opening tag of {marker!r} is never closed")
    inner_start = open_end + 1

    depth = 1
    for tag in _tag_pattern(name_match.group(1)).finditer(document, inner_start):
        if tag.group(1):
            depth -= 1
            if depth == 0:
                return inner_start, tag.start()
        elif not tag.group(0).endswith("/>"):
            depth += 1

    raise PatchError(
        f"Missing closing </{name_match.group(1)}> for {marker!r} "
        f"({depth} element(s) left open)"
    )


def extract_container_content(document: str, marker: str = DEFAULT_MARKER) -> str:
    """Return the current inner content of the container."""
    start, end = find_container(document, marker)
    return document[start:end]


def replace_container_content(document: str, fragment: str, marker: str = DEFAULT_MARKER) -> str:
    """Return ``document`` with the container's inner content set to ``fragment``."""
    start, end = find_container(document, marker)
    return document[:start] + fragment + document[end:]
