"""Exceptions raised while building the events embed."""
from __future__ import annotations


class EventPageError(Exception):
    """Base class for every fatal error in the events pipeline."""


class ExtractionError(EventPageError):
    """The embedded server data assignment was not found in the page."""


class ParseError(EventPageError, ValueError):
    """The embedded server data is not a valid JSON object."""


class PatchError(EventPageError):
    """The target document's container could not be located or is malformed."""


class NetworkError(EventPageError):
    """A fetch failed in transport or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
