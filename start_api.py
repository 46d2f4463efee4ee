#!/usr/bin/env python3
"""
Serve index.html and the Eventbrite fetch proxy.

Usage:
    python start_api.py              # $PORT or 3000
    python start_api.py --port 8080
    python start_api.py --reload     # Restart on code changes
"""

import argparse

import uvicorn

from ingest.config import load_settings


def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Serve the events page and fetch proxy")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Restart the server when code changes")
    args = parser.parse_args()

    print(f"Server running on port {args.port}")
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
