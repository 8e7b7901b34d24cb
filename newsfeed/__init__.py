"""
newsfeed

Fetches a news feed from the Guardian content API and normalizes it.

build URL -> GET -> parse, delivered as a list of NewsItem:

    loader = FeedLoader()
    result = await loader.load(loader.request_for(subject="climate"))
    for item in result.items or []:
        print(item.section_name, item.title)
"""
from .exceptions import FeedError, HttpStatusError, InvalidUrl, MalformedJson, NetworkError
from .models import FetchRequest, NewsItem, OrderBy
from .services import FeedLoader, FeedResult

__all__ = [
    "FeedError",
    "FeedLoader",
    "FeedResult",
    "FetchRequest",
    "HttpStatusError",
    "InvalidUrl",
    "MalformedJson",
    "NetworkError",
    "NewsItem",
    "OrderBy",
]
