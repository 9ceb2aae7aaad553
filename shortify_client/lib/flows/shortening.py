"""Shortening flow: long URL in, short URL (or an error) out."""

import logging
from typing import Callable, Optional

import pyperclip

from ..backend import BackendClient
from ..common.validators import is_valid_url
from ..errors import BackendError, ErrorKind
from ..models import ShortenRequest, ShortenResult
from ..state import IDLE, LOADING, Failed, Loading, Success, ViewState

CREATE_FAILED_MESSAGE = "Failed to create short URL"
GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."


class ShorteningFlow:
    """Holds the state of one shortening form."""

    def __init__(
        self,
        backend: BackendClient,
        redirect_base_url: str,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize shortening flow.

        Args:
            backend: Backend client
            redirect_base_url: Origin the backend uses to build redirect links
            logger: Optional logger
        """
        self.backend = backend
        self.redirect_base_url = redirect_base_url
        self.logger = logger or logging.getLogger(__name__)
        self.state: ViewState = IDLE
        self.input_value = ""

    @property
    def can_submit(self) -> bool:
        return not isinstance(self.state, Loading)

    @property
    def result(self) -> Optional[ShortenResult]:
        return self.state.payload if isinstance(self.state, Success) else None

    async def submit(self, long_url: Optional[str] = None) -> ViewState:
        """Submit a long URL for shortening.

        Args:
            long_url: URL to shorten; the current input value when omitted

        Returns:
            The flow's state once the request settled
        """
        if long_url is not None:
            self.input_value = long_url

        if not self.can_submit:
            self.logger.debug("Shorten request already in flight, ignoring submit")
            return self.state

        url = self.input_value.strip()
        is_valid, error = is_valid_url(url)
        if not is_valid:
            self.state = Failed(error, ErrorKind.VALIDATION)
            return self.state

        self.state = LOADING
        self.logger.info(f"Shortening {url}")
        try:
            result = await self.backend.shorten(
                ShortenRequest(original_url=url, base_url=self.redirect_base_url)
            )
        except BackendError as e:
            self.state = Failed(_failure_message(e), e.kind)
            self.logger.warning(f"Shortening {url} failed: {self.state.message}")
            return self.state
        except BaseException:
            self.state = Failed(GENERIC_ERROR_MESSAGE, ErrorKind.TRANSPORT)
            self.logger.warning(f"Shortening {url} interrupted")
            raise

        self.state = Success(result)
        self.input_value = ""
        self.logger.info(f"Shortened {url} -> {result.short_url}")
        return self.state

    def copy_short_url(self, writer: Optional[Callable[[str], None]] = None) -> bool:
        """Copy the current short URL to the clipboard.

        Returns:
            True if something was copied. False when there is no short URL
            or the clipboard is unavailable.
        """
        result = self.result
        if result is None:
            return False

        write = writer or pyperclip.copy
        try:
            write(result.short_url)
        except Exception as e:
            self.logger.warning(f"Could not copy {result.short_url} to clipboard: {e}")
            return False
        return True


def _failure_message(error: BackendError) -> str:
    if error.kind is ErrorKind.TRANSPORT:
        return GENERIC_ERROR_MESSAGE
    return error.message or CREATE_FAILED_MESSAGE
