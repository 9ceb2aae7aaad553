"""Logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


def _short_id(session_id) -> str:
    return session_id[:8] if session_id else "-"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each page request with its browser session and duration.

    The session id is the one the route resolved, so a browser that arrives
    without a cookie is logged under the session it was given.
    """

    def __init__(self, app, logger: logging.Logger = None):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("shortify_client.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()

        client_ip = request.client.host if request.client else "unknown"
        self.logger.debug(f"Request: {request.method} {request.url.path} from {client_ip}")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        session = _short_id(getattr(request.state, "session_id", None))
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        self.logger.log(
            level,
            f"{request.method} {request.url.path} session={session} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms",
        )

        return response
