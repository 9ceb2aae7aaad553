"""Server-rendered web front for the Shortify client."""

from .app_factory import create_app

__all__ = ["create_app"]
