"""Per-flow view state.

A flow is always in exactly one of four states. Each state is its own
frozen dataclass, so a flow cannot be loading and failed at the same time.
``tag`` names the variant for templates and JSON output.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from .errors import ErrorKind


@dataclass(frozen=True)
class Idle:
    """Nothing requested yet."""

    tag: ClassVar[str] = "idle"


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""

    tag: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Success:
    """The last request succeeded."""

    tag: ClassVar[str] = "success"

    payload: Any


@dataclass(frozen=True)
class Failed:
    """The last request (or its input) failed."""

    tag: ClassVar[str] = "failed"

    message: str
    kind: ErrorKind = ErrorKind.TRANSPORT

    @property
    def is_validation(self) -> bool:
        return self.kind is ErrorKind.VALIDATION


ViewState = Union[Idle, Loading, Success, Failed]

IDLE = Idle()
LOADING = Loading()
