"""Common utilities for the Shortify client."""

from .validators import is_valid_url, is_valid_short_code, normalize_short_code
from .url_builder import build_api_url, url_stats_path, qr_code_path
from .logging_config import setup_logging

__all__ = [
    "is_valid_url",
    "is_valid_short_code",
    "normalize_short_code",
    "build_api_url",
    "url_stats_path",
    "qr_code_path",
    "setup_logging",
]
