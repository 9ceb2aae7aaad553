"""HTTP client for the Shortify backend."""

import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import ValidationError

from .common.url_builder import (
    PLATFORM_STATS_PATH,
    SHORTEN_PATH,
    build_api_url,
    qr_code_path,
    url_stats_path,
)
from .errors import BackendError, NotFoundError, RequestFailedError, TransportError
from .models import PlatformStats, ShortenRequest, ShortenResult, UrlStats

ModelT = TypeVar("ModelT")


class BackendClient:
    """Async client for the create and stats endpoints of the backend.

    Every failure surfaces as a :class:`BackendError` subclass; callers
    never see ``httpx`` exceptions.

    Requests have no timeout unless ``timeout`` is given. A hung backend
    keeps the request pending.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize backend client.

        Args:
            base_url: Origin of the API gateway
            timeout: Optional per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
            logger: Optional logger
        """
        self.base_url = base_url.rstrip("/")
        self.logger = logger or logging.getLogger(__name__)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self):
        """Release pooled connections."""
        await self._client.aclose()

    async def shorten(self, request: ShortenRequest) -> ShortenResult:
        """Create a short URL.

        Raises:
            RequestFailedError: Non-2xx answer; ``message`` from the body if any
            TransportError: Backend unreachable or answer unparsable
        """
        response = await self._request("POST", SHORTEN_PATH, json=request.to_payload())
        return self._parse(response, ShortenResult)

    async def get_url_stats(self, short_code: str) -> UrlStats:
        """Fetch click statistics for one short code.

        Raises:
            NotFoundError: Unknown short code or no statistics yet
            RequestFailedError: Any other non-2xx answer
            TransportError: Backend unreachable or answer unparsable
        """
        response = await self._request("GET", url_stats_path(short_code))
        return self._parse(response, UrlStats)

    async def get_platform_stats(self) -> PlatformStats:
        """Fetch platform-wide statistics."""
        response = await self._request("GET", PLATFORM_STATS_PATH)
        return self._parse(response, PlatformStats)

    async def get_qr_code(self, short_url: str) -> bytes:
        """Fetch the PNG QR code for a short URL."""
        response = await self._request("GET", qr_code_path(short_url))
        return response.content

    def qr_code_url(self, short_url: str) -> str:
        """Absolute URL of the QR code image, for a browser to load directly."""
        return build_api_url(self.base_url, qr_code_path(short_url))

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        self.logger.debug(f"{method} {self.base_url}{path}")
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            self.logger.warning(f"{method} {path} failed: {e!r}")
            raise TransportError(str(e)) from e

        self.logger.debug(f"{method} {path} -> {response.status_code}")
        if response.is_success:
            return response

        if response.status_code == 404:
            raise NotFoundError(_error_message(response), status_code=404)
        raise RequestFailedError(
            _error_message(response),
            status_code=response.status_code,
        )

    def _parse(self, response: httpx.Response, model: Type[ModelT]) -> ModelT:
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            self.logger.warning(f"Unparsable {model.__name__} response: {e}")
            raise TransportError(f"Unparsable {model.__name__} response") from e


def _error_message(response: httpx.Response) -> str:
    """The backend's ``message`` field, or an empty string."""
    try:
        body: Any = response.json()
    except ValueError:
        return ""
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str):
            return message
    return ""


__all__ = [
    "BackendClient",
    "BackendError",
    "NotFoundError",
    "RequestFailedError",
    "TransportError",
]
