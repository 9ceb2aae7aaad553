"""Middleware for the Shortify web front."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
