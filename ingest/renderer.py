"""Render upcoming events as an HTML fragment for the events container."""
from __future__ import annotations

from typing import Sequence

from .schemas import EventRecord

NO_EVENTS_HTML = '<div class="events-container"><p>No upcoming events found.</p></div>'

EVENTS_CSS = """<style>
  .events-container {
    font-family: Arial, sans-serif;
    max-width: 800px;
    margin: 0 auto;
  }
  .events-list {
    display: grid;
    grid-template-columns: 1fr;
    gap: 20px;
  }
  .event-item {
    padding: 20px;
    border: 1px solid #ddd;
    border-radius: 5px;
    background-color: white;
    box-shadow: 0 2px 4px rgba(0,0,0,0.1);
  }
  .event-image {
    margin-bottom: 15px;
  }
  .event-image img {
    width: 100%;
    height: auto;
    border-radius: 4px;
  }
  .event-item h3 {
    margin-top: 0;
    color: #333;
  }
  .event-date, .event-venue {
    color: #555;
  }
  .event-description {
    margin: 10px 0;
    font-style: italic;
  }
  .event-button {
    display: inline-block;
    padding: 8px 16px;
    background-color: #f8682E;
    color: white;
    text-decoration: none;
    border-radius: 4px;
    margin-top: 10px;
  }
  .event-button:hover {
    background-color: #e5591b;
  }
  @media (min-width: 768px) {
    .events-list {
      grid-template-columns: repeat(2, 1fr);
    }
  }
</style>"""


def _render_event(event: EventRecord) -> str:
    # Values go in unescaped; the embed has always trusted Eventbrite's data.
    lines = ['    <div class="event-item">']
    if event.image:
        lines.append(f'      <div class="event-image"><img src="{event.image}" alt="{event.name}"></div>')
    lines.append(f'      <h3><a href="{event.url}" target="_blank">{event.name}</a></h3>')
    lines.append(f'      <p class="event-date"><strong>When:</strong> {event.date}</p>')
    lines.append(f'      <p class="event-venue"><strong>Where:</strong> {event.venue}</p>')
    if event.description:
        lines.append(f'      <p class="event-description">{event.description}</p>')
    lines.append(f'      <a href="{event.url}" class="event-button" target="_blank">Get Tickets</a>')
    lines.append("    </div>")
    return "\n".join(lines) + "\n"


def render_events_html(events: Sequence[EventRecord], *, include_styles: bool = True) -> str:
    """Return the events fragment.

    With ``include_styles`` the fragment carries its own ``<style>`` block
    (two columns from 768px up, hover color on the ticket button); without
    it, presentation is left to the host page.
    """
    if not events:
        return NO_EVENTS_HTML

    html = '<div class="events-container">\n'
    html += "  <h2>Upcoming Events</h2>\n"
    html += '  <div class="events-list">\n'
    html += "".join(_render_event(event) for event in events)
    html += "  </div>\n"
    html += "</div>\n"

    if include_styles:
        html += EVENTS_CSS
    return html
