"""Display models for backend requests and responses.

Backend payloads use camelCase keys and are not strict about which fields
they include. Every model here normalizes once, on the way in: missing or
null counters become 0, missing lists become empty, and platform
``activeUrls`` falls back to ``totalUrls``. Views render these models as-is.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .common.validators import MAX_URL_LENGTH, is_valid_url


def _zero_if_missing(value):
    return 0 if value is None else value


def _empty_if_missing(value):
    return [] if value is None else value


Count = Annotated[int, BeforeValidator(_zero_if_missing), Field(ge=0)]


class BackendModel(BaseModel):
    """Base for models exchanged with the backend (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ShortenRequest(BackendModel):
    """Request to shorten a URL."""

    original_url: str = Field(..., min_length=1, max_length=MAX_URL_LENGTH)
    base_url: str = Field(..., description="Origin the backend uses to build the redirect link")

    @field_validator("original_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        is_valid, error = is_valid_url(v)
        if not is_valid:
            raise ValueError(error)
        return v

    def to_payload(self) -> dict:
        """JSON body as the backend expects it."""
        return self.model_dump(by_alias=True)


class ShortenResult(BackendModel):
    """Short URL returned by the backend."""

    model_config = ConfigDict(frozen=True)

    short_url: str = Field(..., min_length=1)
    short_code: Optional[str] = None
    original_url: Optional[str] = None


class CountryClicks(BackendModel):
    """Click count for one country."""

    country: str = "Unknown"
    clicks: Count = 0

    @field_validator("country", mode="before")
    @classmethod
    def _unknown_country(cls, v):
        return v or "Unknown"


class TimelinePoint(BackendModel):
    """Click count for one day."""

    date: str = ""
    clicks: Count = 0

    @field_validator("date", mode="before")
    @classmethod
    def _blank_date(cls, v):
        return v or ""


class UrlStats(BackendModel):
    """Click statistics for a single short URL."""

    total_clicks: Count = 0
    clicks_today: Count = 0
    clicks_this_week: Count = 0
    clicks_this_month: Count = 0
    top_countries: Annotated[List[CountryClicks], BeforeValidator(_empty_if_missing)] = Field(
        default_factory=list
    )
    click_timeline: Annotated[List[TimelinePoint], BeforeValidator(_empty_if_missing)] = Field(
        default_factory=list
    )
    first_click_at: Optional[datetime] = None
    last_click_at: Optional[datetime] = None


class PlatformStats(BackendModel):
    """Platform-wide statistics."""

    active_urls: Count = 0
    total_urls: Count = 0
    total_clicks: Count = 0
    clicks_today: Count = 0
    last_updated: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def _active_urls_fallback(cls, data):
        """Older backends only report ``totalUrls``."""
        if not isinstance(data, dict):
            return data
        if data.get("activeUrls", data.get("active_urls")) is None:
            data = {k: v for k, v in data.items() if k not in ("activeUrls", "active_urls")}
            data["activeUrls"] = data.get("totalUrls", data.get("total_urls"))
        return data
