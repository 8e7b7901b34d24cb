from __future__ import annotations

from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Query
from fastapi.responses import ORJSONResponse
from mangum import Mangum

from newsfeed.config import configure_logging
from newsfeed.http_client import shutdown_http_client
from newsfeed.models import FeedResponse, LoadState, OrderBy
from newsfeed.services import FeedLoader

NO_NEWS_MESSAGE = "No corresponding news found."
UNAVAILABLE_MESSAGE = "News are unavailable right now, pull to refresh."

configure_logging()

app = FastAPI(
    title="NewsUp Feed API",
    version="0.1.0",
    description="Normalized Guardian news feed for display clients.",
    default_response_class=ORJSONResponse,
)


def get_feed_loader() -> FeedLoader:
    return FeedLoader()


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/news/feed", tags=["news"], response_model=FeedResponse)
async def news_feed(
    subject: str | None = Query(
        None, max_length=200, description="Subject filter (e.g. politics)"
    ),
    order_by: OrderBy | None = Query(None, description="Sort order of the results"),
    loader: FeedLoader = Depends(get_feed_loader),
) -> FeedResponse:
    request = loader.request_for(subject=subject, order_by=order_by)
    result = await loader.load(request)

    items = result.items or []
    message = None
    if result.state is LoadState.FAILED:
        message = UNAVAILABLE_MESSAGE
    elif not items:
        message = NO_NEWS_MESSAGE

    return FeedResponse(
        subject=request.subject,
        order_by=request.order_by,
        fetched_at=datetime.now(timezone.utc),
        status=result.state,
        items=items,
        message=message,
    )


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await shutdown_http_client()


handler = Mangum(app)
