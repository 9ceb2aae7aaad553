"""User-facing request/response flows."""

from .shortening import ShorteningFlow
from .analytics import AnalyticsTab, AnalyticsView, PlatformStatsFlow, UrlStatsFlow

__all__ = [
    "ShorteningFlow",
    "AnalyticsTab",
    "AnalyticsView",
    "PlatformStatsFlow",
    "UrlStatsFlow",
]
