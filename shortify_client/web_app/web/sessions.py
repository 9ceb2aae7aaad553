"""In-memory browser sessions for the web front."""

import logging
import uuid
from collections import OrderedDict
from typing import Optional, Tuple

from shortify_client.lib.backend import BackendClient
from shortify_client.lib.flows import AnalyticsView, ShorteningFlow


class ClientSession:
    """Flows belonging to one browser: the home page and the analytics page.

    A plain GET of a page opens a new view with fresh flows. Form posts and
    tab switches keep working on the current view. A response still pending
    for a replaced flow lands in that flow and is never shown.
    """

    def __init__(self, backend: BackendClient, redirect_base_url: str, logger: logging.Logger):
        self.backend = backend
        self.redirect_base_url = redirect_base_url
        self.logger = logger
        self.open_home()
        self.open_analytics()

    def open_home(self) -> ShorteningFlow:
        self.shortening = ShorteningFlow(self.backend, self.redirect_base_url, logger=self.logger)
        return self.shortening

    def open_analytics(self) -> AnalyticsView:
        self.analytics = AnalyticsView(self.backend, logger=self.logger)
        return self.analytics


class SessionStore:
    """Bounded LRU map of session id -> :class:`ClientSession`.

    Sessions live in process memory only. The least recently used session
    is dropped once ``max_sessions`` is exceeded.
    """

    def __init__(
        self,
        backend: BackendClient,
        redirect_base_url: str,
        max_sessions: int = 1000,
        logger: Optional[logging.Logger] = None,
    ):
        self.backend = backend
        self.redirect_base_url = redirect_base_url
        self.max_sessions = max_sessions
        self.logger = logger or logging.getLogger(__name__)
        self._sessions: "OrderedDict[str, ClientSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, ClientSession]:
        """Return the session for ``session_id``, creating one if unknown."""
        if session_id and session_id in self._sessions:
            self._sessions.move_to_end(session_id)
            return session_id, self._sessions[session_id]

        session_id = uuid.uuid4().hex
        session = ClientSession(self.backend, self.redirect_base_url, self.logger)
        self._sessions[session_id] = session

        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            self.logger.debug(f"Evicted session {evicted}")

        return session_id, session
