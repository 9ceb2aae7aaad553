"""Web page routes."""

from .routes import router as web_router
from .sessions import ClientSession, SessionStore

__all__ = ["web_router", "ClientSession", "SessionStore"]
