"""Turn Eventbrite server data into a short list of upcoming events."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

from scrapers.utils import format_event_date, parse_start_date

from .schemas import EventRecord, JsonLdEvent

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = "https://schema.org"
DEFAULT_MAX_EVENTS = 10


def find_event_list(server_data: dict[str, Any]) -> Optional[dict[str, Any]]:
    """Return the first schema.org ``ItemList`` in ``server_data["jsonld"]``."""
    for entry in server_data.get("jsonld") or []:
        if not isinstance(entry, dict) or entry.get("@context") != SCHEMA_CONTEXT:
            continue
        # An empty list still counts; it means the organizer has no events.
        if isinstance(entry.get("itemListElement"), list):
            return entry
    return None


def _list_items(event_list: dict[str, Any]) -> Iterable[dict[str, Any]]:
    for element in event_list["itemListElement"]:
        item = element.get("item") if isinstance(element, dict) else None
        if isinstance(item, dict):
            yield item


def normalize_events(
    server_data: dict[str, Any],
    max_events: int = DEFAULT_MAX_EVENTS,
    *,
    now: Optional[datetime] = None,
    tz: Optional[str] = None,
) -> List[EventRecord]:
    """Return up to ``max_events`` future events, soonest first.

    Args:
        server_data: Object parsed from ``window.__SERVER_DATA__``.
        max_events: Maximum number of records to return.
        now: Cut-off moment; only events starting strictly later are kept.
            Defaults to the current UTC time.
        tz: Timezone used to display dates. Defaults to the host's zone.

    Items without a ``startDate``, or with one that does not parse, are
    skipped. A missing event list yields an empty list rather than an error.
    """
    if max_events < 1:
        raise ValueError(f"max_events must be a positive integer, got {max_events}")

    event_list = find_event_list(server_data)
    if event_list is None:
        logger.info("No events found in jsonld data")
        return []

    now = now or datetime.now(timezone.utc)
    upcoming: list[tuple[datetime, EventRecord]] = []

    for item in _list_items(event_list):
        event = JsonLdEvent.from_item(item)
        if event.start_date is None:
            continue

        try:
            starts_at = parse_start_date(event.start_date)
        except (ValueError, TypeError):
            logger.info("Skipping event with unparseable startDate: %s (%r)", event.name, event.start_date)
            continue

        if starts_at <= now:
            logger.info("Skipping past event: %s on %s", event.name, format_event_date(starts_at, tz))
            continue

        record = event.to_record(format_event_date(starts_at, tz))
        logger.info("Found future event: %s", record)
        upcoming.append((starts_at, record))

    # list.sort is stable, so ties keep their listing order
    upcoming.sort(key=lambda pair: pair[0])
    events = [record for _, record in upcoming[:max_events]]
    logger.info("Found %d upcoming events", len(events))
    return events
