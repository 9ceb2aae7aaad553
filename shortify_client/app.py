#!/usr/bin/env python3
"""
Web front for the Shortify client.

Serves the shortening page and the analytics page to browsers and talks to
the Shortify backend on their behalf.

Usage:
    python -m shortify_client.app

Environment variables:
    API_BASE_URL - Origin of the Shortify API gateway
    REDIRECT_BASE_URL - Base URL for redirect links (defaults to API_BASE_URL)
    REQUEST_TIMEOUT_SECONDS - Optional backend request timeout
    HOST / PORT - Address to listen on
    LOG_LEVEL - Logging level
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from shortify_client.config import Config, load_config
from shortify_client.lib.backend import BackendClient
from shortify_client.lib.common.logging_config import setup_logging
from shortify_client.web_app import create_app


def build_app(config: Optional[Config] = None) -> FastAPI:
    """Create the web front wired to a backend client."""
    config = config or load_config()
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    backend = BackendClient(
        base_url=config.api_base_url,
        timeout=config.request_timeout_seconds,
        logger=logger.getChild("backend"),
    )

    app = create_app(backend=backend, config=config, logger=logger)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Close the backend client on shutdown."""
        logger.info(f"Shortify web front using backend at {config.api_base_url}")
        yield
        logger.info("Shutting down Shortify web front...")
        await backend.close()

    app.router.lifespan_context = lifespan
    return app


def main(config: Optional[Config] = None):
    """Main entry point."""
    config = config or load_config()
    app = build_app(config)
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
