from __future__ import annotations

"""Date helpers shared by the event normalizer."""

from datetime import datetime
from zoneinfo import ZoneInfo


def parse_start_date(value: str, tz: str | None = None) -> datetime:
    """Return a timezone-aware datetime for a schema.org ``startDate``.

    Parameters
    ----------
    value:
        ``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM[:SS][offset]``. A trailing ``Z``
        means UTC.
    tz:
        Optional IANA timezone name applied when ``value`` carries no offset.
        Without it a bare date is midnight UTC and a date-time without an
        offset is read in the host's local zone, as browsers read them.

    Raises ``ValueError`` when ``value`` is not an ISO 8601 date and
    ``TypeError`` when it is not a string.
    """
    if not isinstance(value, str):
        raise TypeError(f"startDate must be a string, got {type(value).__name__}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        if tz:
            dt = dt.replace(tzinfo=ZoneInfo(tz))
        elif "T" in text or " " in text:
            dt = dt.astimezone()
        else:
            dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    return dt


def format_event_date(moment: datetime, tz: str | None = None) -> str:
    """Format ``moment`` like ``3/15/2027, 7:00:00 PM``.

    The result is rendered in ``tz`` when given, otherwise in the host's
    local timezone.
    """
    local = moment.astimezone(ZoneInfo(tz)) if tz else moment.astimezone()
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )
