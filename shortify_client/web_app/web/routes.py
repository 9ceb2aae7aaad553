"""Web page routes: the shortening page and the analytics page."""

import os
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from shortify_client.lib.flows import AnalyticsTab
from .sessions import ClientSession

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)


def _format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M:%S")


templates.env.filters["timestamp"] = _format_timestamp


def _session(request: Request):
    """Session for the requesting browser, keyed by cookie."""
    config = request.app.state.config
    cookie = request.cookies.get(config.session_cookie)
    session_id, session = request.app.state.sessions.get_or_create(cookie)
    request.state.session_id = session_id
    return session_id, session


def _render(request: Request, name: str, session_id: str, session: ClientSession) -> HTMLResponse:
    backend = request.app.state.backend
    response = templates.TemplateResponse(
        request,
        name,
        {
            "shortening": session.shortening,
            "analytics": session.analytics,
            "qr_code_url": backend.qr_code_url,
        },
    )
    response.set_cookie(
        request.app.state.config.session_cookie,
        session_id,
        httponly=True,
        samesite="lax",
    )
    return response


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Empty shortening form. Earlier results are not carried over."""
    session_id, session = _session(request)
    session.open_home()
    return _render(request, "home.html", session_id, session)


@router.post("/shorten", response_class=HTMLResponse, include_in_schema=False)
async def shorten(request: Request, url: str = Form("")):
    """Handle the shortening form submission."""
    session_id, session = _session(request)
    await session.shortening.submit(url)
    return _render(request, "home.html", session_id, session)


@router.get("/analytics", response_class=HTMLResponse, include_in_schema=False)
async def analytics(request: Request, tab: Optional[AnalyticsTab] = None):
    """Analytics page.

    Without ``tab`` this opens a new view on the URL tab. With ``tab`` it
    switches tabs in the current view; entering the platform tab fetches
    platform statistics.
    """
    session_id, session = _session(request)
    if tab is None:
        session.open_analytics()
    else:
        await session.analytics.select_tab(tab)
    return _render(request, "analytics.html", session_id, session)


@router.post("/analytics/url", response_class=HTMLResponse, include_in_schema=False)
async def url_statistics(request: Request, short_code: str = Form("")):
    """Handle the short-code statistics form submission."""
    session_id, session = _session(request)
    await session.analytics.select_tab(AnalyticsTab.URL)
    await session.analytics.url_stats.fetch(short_code)
    return _render(request, "analytics.html", session_id, session)


@router.get("/health", include_in_schema=False)
async def health_check(request: Request):
    """Liveness check for load balancers."""
    return {"status": "healthy"}
