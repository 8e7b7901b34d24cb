from .feed import FeedConsumer, FeedLoader, FeedResult
from .parser import decode_feed, parse_feed
from .query import build_feed_url

__all__ = [
    "FeedConsumer",
    "FeedLoader",
    "FeedResult",
    "build_feed_url",
    "decode_feed",
    "parse_feed",
]
