from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ..config import Settings

NO_TITLE = "No title found"
NO_SECTION_NAME = "No section name found"
NO_IMAGE = "No image found"
NO_WEB_URL = "No website link found"


class OrderBy(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    RELEVANCE = "relevance"


class LoadState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    DELIVERED = "delivered"
    FAILED = "failed"


class NewsItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(NO_TITLE, description="Article headline")
    section_name: str = Field(NO_SECTION_NAME, description="Section of the publication")
    image_url: str = Field(NO_IMAGE, description="Thumbnail URL")
    web_url: str = Field(NO_WEB_URL, description="Link to the article page")


class FetchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject: str = Field(description="Free-text subject filter")
    order_by: OrderBy = Field(OrderBy.NEWEST, description="Sort order of the results")
    api_key: str = Field(description="Content API key")
    base_url: str = Field(description="Search endpoint of the content API")

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        subject: str | None = None,
        order_by: OrderBy | str | None = None,
    ) -> FetchRequest:
        return cls(
            subject=settings.feed_default_subject if subject is None else subject,
            order_by=order_by or settings.feed_default_order_by,
            api_key=settings.content_api_key,
            base_url=str(settings.content_api_base_url),
        )


class FeedResponse(BaseModel):
    subject: str = Field(description="Subject the feed was filtered on")
    order_by: OrderBy = Field(description="Sort order of the feed")
    fetched_at: datetime = Field(description="UTC timestamp of the fetch")
    status: LoadState = Field(description="Outcome of the fetch cycle")
    items: list[NewsItem] = Field(default_factory=list)
    message: str | None = Field(
        default=None, description="Empty-state text for display clients"
    )
