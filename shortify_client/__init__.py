"""Shortify client: shorten URLs and browse click analytics."""

__version__ = "1.0.0"
