from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial

import httpx

from ..config import Settings, get_settings
from ..exceptions import FeedError, InvalidUrl
from ..http_client import fetch_text, get_http_client
from ..models.news import FetchRequest, LoadState, NewsItem, OrderBy
from .parser import decode_feed
from .query import build_feed_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FeedResult:
    items: list[NewsItem] | None = None
    error: FeedError | None = None

    @property
    def state(self) -> LoadState:
        return LoadState.FAILED if self.error is not None else LoadState.DELIVERED

    @property
    def reason(self) -> str | None:
        return str(self.error) if self.error is not None else None


FeedConsumer = Callable[[FeedResult], None]


@dataclass(slots=True)
class FeedLoader:
    settings: Settings | None = None
    client: httpx.AsyncClient | None = None
    consumer: FeedConsumer | None = None
    state: LoadState = field(default=LoadState.IDLE, init=False)
    _generation: int = field(default=0, init=False, repr=False)
    _task: asyncio.Task | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = get_settings()

    def request_for(
        self, subject: str | None = None, order_by: OrderBy | str | None = None
    ) -> FetchRequest:
        return FetchRequest.from_settings(self.settings, subject=subject, order_by=order_by)

    async def load(self, request: FetchRequest) -> FeedResult:
        """Run one build-URL, GET, parse cycle. Failures come back as a failed result."""
        try:
            url = build_feed_url(
                request.base_url, request.subject, request.order_by, request.api_key
            )
        except InvalidUrl as e:
            logger.error("Problem building the feed URL: %s", e)
            return FeedResult(error=e)

        client = self.client or await get_http_client()
        try:
            body = await fetch_text(client, url)
            items = decode_feed(body)
        except FeedError as e:
            logger.error(
                "Feed load failed for subject=%r order_by=%s: %s",
                request.subject,
                request.order_by.value,
                e,
                exc_info=e,
            )
            return FeedResult(error=e)

        logger.info(
            "Loaded %s news items for subject=%r order_by=%s",
            "no" if items is None else len(items),
            request.subject,
            request.order_by.value,
        )
        return FeedResult(items=items)

    def start(self, request: FetchRequest) -> asyncio.Task:
        """
        Load in the background and hand the result to ``consumer``.

        A later ``start`` or ``reset`` supersedes this one; its result is then
        dropped, though the request itself is left to finish.

        ``state`` follows background loads only; awaiting ``load`` directly
        leaves it untouched.
        """
        self._generation += 1
        self.state = LoadState.FETCHING
        task = asyncio.create_task(self.load(request))
        task.add_done_callback(partial(self._deliver, self._generation))
        self._task = task
        return task

    def reset(self) -> None:
        self._generation += 1
        self._task = None
        self.state = LoadState.IDLE

    def _deliver(self, generation: int, task: asyncio.Task) -> None:
        if generation != self._generation or task.cancelled():
            logger.debug("Discarding stale feed result (generation %d)", generation)
            return
        error = task.exception()
        if error is None:
            result: FeedResult = task.result()
        else:
            logger.error("Background feed load crashed: %r", error, exc_info=error)
            if not isinstance(error, FeedError):
                wrapped = FeedError(f"Unexpected failure while loading the feed ({error!r})")
                wrapped.__cause__ = error
                error = wrapped
            result = FeedResult(error=error)
        self._task = None
        self.state = result.state
        if self.consumer is not None:
            self.consumer(result)
