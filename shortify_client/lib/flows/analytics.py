"""Analytics flows: per-URL statistics, platform statistics and the tab selector."""

import logging
from enum import Enum
from typing import Optional

from ..backend import BackendClient
from ..common.validators import is_valid_short_code, normalize_short_code
from ..errors import BackendError, ErrorKind
from ..state import IDLE, LOADING, Failed, Loading, Success, ViewState

NOT_FOUND_MESSAGE = "Short URL not found or has no statistics yet"
URL_STATS_FAILED_MESSAGE = "Failed to fetch statistics"
PLATFORM_STATS_FAILED_MESSAGE = "Failed to fetch platform statistics"
GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."


class AnalyticsTab(str, Enum):
    URL = "url"
    PLATFORM = "platform"


class UrlStatsFlow:
    """Statistics for one short code, fetched on demand."""

    def __init__(self, backend: BackendClient, logger: Optional[logging.Logger] = None):
        self.backend = backend
        self.logger = logger or logging.getLogger(__name__)
        self.state: ViewState = IDLE
        self.short_code = ""

    @property
    def can_submit(self) -> bool:
        return not isinstance(self.state, Loading)

    async def fetch(self, short_code: str) -> ViewState:
        """Look up statistics for ``short_code``.

        Whitespace-only input fails validation without touching the network.
        A query while another one is in flight is ignored.
        """
        self.short_code = short_code
        if not self.can_submit:
            self.logger.debug("URL stats request already in flight, ignoring query")
            return self.state

        is_valid, error = is_valid_short_code(short_code)
        if not is_valid:
            self.state = Failed(error, ErrorKind.VALIDATION)
            return self.state

        code = normalize_short_code(short_code)
        self.state = LOADING
        try:
            stats = await self.backend.get_url_stats(code)
        except BackendError as e:
            self.state = Failed(_url_stats_message(e), e.kind)
            self.logger.warning(f"Statistics for {code} failed: {self.state.message}")
            return self.state
        except BaseException:
            self.state = Failed(GENERIC_ERROR_MESSAGE, ErrorKind.TRANSPORT)
            self.logger.warning(f"Statistics for {code} interrupted")
            raise

        self.state = Success(stats)
        self.logger.info(f"Fetched statistics for {code}: {stats.total_clicks} clicks")
        return self.state


class PlatformStatsFlow:
    """Platform-wide statistics. Takes no input."""

    def __init__(self, backend: BackendClient, logger: Optional[logging.Logger] = None):
        self.backend = backend
        self.logger = logger or logging.getLogger(__name__)
        self.state: ViewState = IDLE

    async def fetch(self) -> ViewState:
        if isinstance(self.state, Loading):
            self.logger.debug("Platform stats request already in flight, ignoring fetch")
            return self.state

        self.state = LOADING
        try:
            stats = await self.backend.get_platform_stats()
        except BackendError as e:
            message = (
                GENERIC_ERROR_MESSAGE if e.kind is ErrorKind.TRANSPORT
                else PLATFORM_STATS_FAILED_MESSAGE
            )
            self.state = Failed(message, e.kind)
            self.logger.warning(f"Platform statistics failed: {e.message or e.status_code}")
            return self.state
        except BaseException:
            self.state = Failed(GENERIC_ERROR_MESSAGE, ErrorKind.TRANSPORT)
            self.logger.warning("Platform statistics interrupted")
            raise

        self.state = Success(stats)
        self.logger.info(f"Fetched platform statistics: {stats.active_urls} active URLs")
        return self.state


class AnalyticsView:
    """The analytics page: two sub-flows behind a two-way tab selector.

    Platform statistics are fetched on each transition into the platform
    tab, never while staying on it. Switching tabs leaves both sub-flows'
    state alone.
    """

    def __init__(self, backend: BackendClient, logger: Optional[logging.Logger] = None):
        self.url_stats = UrlStatsFlow(backend, logger=logger)
        self.platform_stats = PlatformStatsFlow(backend, logger=logger)
        self.active_tab = AnalyticsTab.URL

    async def select_tab(self, tab) -> AnalyticsTab:
        """Switch to ``tab``, fetching platform statistics on entry."""
        tab = AnalyticsTab(tab)
        if tab is self.active_tab:
            return tab

        self.active_tab = tab
        if tab is AnalyticsTab.PLATFORM:
            await self.platform_stats.fetch()
        return tab

    @property
    def active_flow(self):
        if self.active_tab is AnalyticsTab.PLATFORM:
            return self.platform_stats
        return self.url_stats


def _url_stats_message(error: BackendError) -> str:
    if error.kind is ErrorKind.NOT_FOUND:
        return NOT_FOUND_MESSAGE
    if error.kind is ErrorKind.REQUEST_FAILED:
        return URL_STATS_FAILED_MESSAGE
    return GENERIC_ERROR_MESSAGE
