"""FastAPI application serving the events page and its Eventbrite fetch proxy."""
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Response
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from ingest.config import Settings, load_settings
from scrapers.errors import NetworkError
from scrapers.server_data import fetch_url

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
FETCH_FAILED_DETAIL = "Failed to fetch Eventbrite page"

# Thread pool for running the blocking requests call from async routes
executor = ThreadPoolExecutor(max_workers=4)


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str


class FetchRequest(BaseModel):
    """Request model for the fetch proxy."""
    # Not validated beyond being a string; any scheme or host is fetched.
    url: str


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for ``settings`` (read from the environment if omitted)."""
    settings = settings or load_settings()

    app = FastAPI(
        title="Eventbrite Embed Server",
        description="Serves the events page and proxies Eventbrite page fetches",
        version=VERSION,
    )

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=VERSION,
        )

    @app.post("/api/fetch-eventbrite")
    async def fetch_eventbrite(request: FetchRequest):
        """Fetch ``request.url`` and return its body unchanged."""
        loop = asyncio.get_running_loop()
        try:
            upstream = await loop.run_in_executor(
                executor,
                fetch_url,
                request.url,
                settings.request_timeout,
            )
        except NetworkError as exc:
            logger.error("Error fetching Eventbrite page: %s", exc)
            raise HTTPException(status_code=500, detail=FETCH_FAILED_DETAIL)

        return Response(
            content=upstream.content,
            media_type=upstream.headers.get("Content-Type", "text/html"),
        )

    # Mounted last so the API routes above take precedence
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    return app
