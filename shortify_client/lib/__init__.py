"""Core client logic for Shortify."""

from .backend import BackendClient
from .flows import AnalyticsTab, AnalyticsView, ShorteningFlow

__all__ = ["BackendClient", "AnalyticsTab", "AnalyticsView", "ShorteningFlow"]
