"""Fetch an Eventbrite organizer's upcoming events and embed them in index.html."""
from __future__ import annotations

import os
import sys
import logging
from typing import List, Optional, Sequence

from ingest.config import Settings, load_settings
from ingest.normalizer import DEFAULT_MAX_EVENTS, normalize_events
from ingest.patcher import replace_container_content
from ingest.renderer import render_events_html
from ingest.schemas import EventRecord
from ingest.storage import read_document, save_server_data, write_document
from scrapers.server_data import extract_server_data, fetch_url

logger = logging.getLogger(__name__)

USAGE = "Usage: python -m jobs.generate_events <organizer-id> [max-events]"


def parse_max_events(value: Optional[str]) -> int:
    """Return ``value`` as a positive int, or the default cap."""
    try:
        number = int(value) if value is not None else 0
    except ValueError:
        return DEFAULT_MAX_EVENTS
    return number if number > 0 else DEFAULT_MAX_EVENTS


def run(organizer_id: str, max_events: int = DEFAULT_MAX_EVENTS, settings: Settings | None = None) -> List[EventRecord]:
    """Refresh the events container of the configured document.

    The server data dump written along the way is left in place if a later
    step fails.
    """
    settings = settings or load_settings()

    url = settings.organizer_url(organizer_id)
    page = fetch_url(url, timeout=settings.request_timeout)

    server_data = extract_server_data(page.text, settings.server_data_global)
    save_server_data(server_data, organizer_id, settings.storage_root)

    events = normalize_events(server_data, max_events)
    fragment = render_events_html(events, include_styles=settings.include_styles)

    document = read_document(settings.document_path)
    write_document(
        settings.document_path,
        replace_container_content(document, fragment, settings.container_marker),
    )
    logger.info("Updated %s with %d event(s)", settings.document_path, len(events))
    return events


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or not args[0]:
        print("Please provide an organizer ID", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    if os.getenv("SCRAPER_DEBUG"):
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    organizer_id = args[0]
    max_events = parse_max_events(args[1] if len(args) > 1 else None)

    print(f"Fetching events for organizer {organizer_id}...")
    try:
        events = run(organizer_id, max_events)
    except Exception as exc:
        print(f"❌ Failed to update events: {exc}", file=sys.stderr)
        return 1

    print(f"✅ Embedded {len(events)} upcoming event(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
