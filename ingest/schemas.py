"""Shared data models for the events embed."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class EventRecord:
    """An upcoming event ready to be rendered."""

    name: str
    date: str
    venue: str
    url: str
    description: str
    image: str


@dataclass(frozen=True)
class JsonLdEvent:
    """The fields of a schema.org ``Event`` item the embed cares about.

    Every field is optional; ``to_record`` substitutes the display defaults.
    """

    start_date: Optional[str] = None
    name: Optional[str] = None
    venue: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "JsonLdEvent":
        """Build from an ``itemListElement[*].item`` object."""
        location = item.get("location")
        venue = location.get("name") if isinstance(location, dict) else None
        return cls(
            start_date=item.get("startDate") or None,
            name=item.get("name") or None,
            venue=venue or None,
            url=item.get("url") or None,
            description=item.get("description") or None,
            image=item.get("image") or None,
        )

    def to_record(self, date: str) -> EventRecord:
        """Return an ``EventRecord`` with ``date`` and defaults for missing fields."""
        return EventRecord(
            name=self.name if self.name is not None else "Event TBD",
            date=date,
            venue=self.venue if self.venue is not None else "Venue TBD",
            url=self.url if self.url is not None else "#",
            description=self.description if self.description is not None else "",
            image=self.image if self.image is not None else "",
        )
