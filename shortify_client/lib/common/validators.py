"""Input validation for the Shortify client."""

from urllib.parse import urlparse
from typing import Tuple

MAX_URL_LENGTH = 2048


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a long URL before it is submitted.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str) or not url.strip():
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    try:
        result = urlparse(url)

        # Check if scheme is http or https
        if result.scheme not in ["http", "https"]:
            return False, "URL must use http or https protocol"

        # Check if netloc (domain) exists
        if not result.hostname:
            return False, "URL must have a valid domain"

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def normalize_short_code(short_code: str) -> str:
    """Trim user input down to the bare short code.

    A pasted short URL (``http://host/abc123``) is reduced to its last path
    segment so it can be looked up the same way as a typed code.
    """
    code = (short_code or "").strip()
    if "://" in code:
        code = urlparse(code).path
    return code.strip("/").rsplit("/", 1)[-1]


def is_valid_short_code(short_code: str) -> Tuple[bool, str]:
    """Validate a short code typed into the statistics form.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not normalize_short_code(short_code):
        return False, "Please enter a short code"

    return True, ""
