"""Runtime settings for the events embed job and the proxy server."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .patcher import DEFAULT_MARKER
from scrapers.server_data import DEFAULT_GLOBAL

DEFAULT_ORGANIZER_URL = "https://www.eventbrite.com/o/{organizer_id}"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Configuration passed to ``jobs.generate_events.run`` and ``api.main.create_app``."""

    organizer_url_template: str = DEFAULT_ORGANIZER_URL
    server_data_global: str = DEFAULT_GLOBAL
    storage_root: Path = Path(".")
    document_path: Path = Path("index.html")
    container_marker: str = DEFAULT_MARKER
    include_styles: bool = True
    static_dir: Path = Path(".")
    port: int = 3000
    request_timeout: float = 30.0

    def organizer_url(self, organizer_id: str) -> str:
        return self.organizer_url_template.format(organizer_id=organizer_id)


def load_settings() -> Settings:
    """Build ``Settings`` from the environment, reading ``.env`` if present."""
    load_dotenv()
    return Settings(
        organizer_url_template=os.getenv("EVENTBRITE_ORGANIZER_URL", DEFAULT_ORGANIZER_URL),
        server_data_global=os.getenv("SERVER_DATA_GLOBAL", DEFAULT_GLOBAL),
        storage_root=Path(os.getenv("STORAGE_ROOT", ".")),
        document_path=Path(os.getenv("EVENTS_DOCUMENT", "index.html")),
        container_marker=os.getenv("EVENTS_CONTAINER_MARKER", DEFAULT_MARKER),
        include_styles=os.getenv("EVENTS_INLINE_STYLES", "1").strip().lower() not in _FALSE_VALUES,
        static_dir=Path(os.getenv("STATIC_DIR", ".")),
        port=int(os.getenv("PORT", "3000")),
        request_timeout=float(os.getenv("HTTP_TIMEOUT", "30")),
    )
