"""Errors raised by the backend client."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Where a failure came from. Decides how it is presented."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    REQUEST_FAILED = "request_failed"
    TRANSPORT = "transport"


class BackendError(Exception):
    """Base class for failed backend calls."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(BackendError):
    """The backend reported that the resource does not exist (404)."""

    kind = ErrorKind.NOT_FOUND


class RequestFailedError(BackendError):
    """The backend answered with a non-2xx status.

    ``message`` holds the explanation from the response body, or an empty
    string when the backend gave none.
    """

    kind = ErrorKind.REQUEST_FAILED


class TransportError(BackendError):
    """The backend could not be reached or sent an unparsable response."""

    kind = ErrorKind.TRANSPORT
