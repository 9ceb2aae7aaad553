"""Backend endpoint paths and URL building."""

from urllib.parse import quote, urlencode

API_PREFIX = "/api/v1"

SHORTEN_PATH = f"{API_PREFIX}/create/shorten"
QR_CODE_PATH = f"{API_PREFIX}/create/qr"
URL_STATS_PATH = f"{API_PREFIX}/stats/url"
PLATFORM_STATS_PATH = f"{API_PREFIX}/stats/platform"


def url_stats_path(short_code: str) -> str:
    """Path of the statistics endpoint for one short code.

    The code is percent-encoded so user input can never escape the path
    segment.
    """
    return f"{URL_STATS_PATH}/{quote(short_code, safe='')}"


def qr_code_path(short_url: str) -> str:
    """Path and query of the QR code endpoint for a short URL."""
    return f"{QR_CODE_PATH}?{urlencode({'shortUrl': short_url})}"


def build_api_url(base_url: str, path: str) -> str:
    """Join the API origin and an endpoint path.

    Args:
        base_url: API origin (e.g., http://localhost:8080)
        path: Endpoint path starting with a slash

    Returns:
        Absolute endpoint URL
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
