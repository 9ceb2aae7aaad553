"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI

from shortify_client.config import Config
from shortify_client.lib.backend import BackendClient
from .web import web_router, SessionStore
from .middleware.logging import LoggingMiddleware


def create_app(
    backend: BackendClient,
    config: Config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        backend: Backend client shared by every session
        config: Configuration instance
        logger: Optional logger

    Returns:
        Configured FastAPI app
    """
    logger = logger or logging.getLogger("shortify_client")

    app = FastAPI(
        title="Shortify",
        description="Shorten URLs and browse click analytics",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
    )

    # Store instances in app state for access in routes
    app.state.backend = backend
    app.state.config = config
    app.state.sessions = SessionStore(
        backend=backend,
        redirect_base_url=config.redirect_base_url,
        max_sessions=config.max_sessions,
        logger=logger,
    )

    app.add_middleware(LoggingMiddleware, logger=logger.getChild("web"))

    app.include_router(web_router, tags=["Web"])

    return app
