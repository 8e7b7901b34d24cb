from .news import FeedResponse, FetchRequest, LoadState, NewsItem, OrderBy

__all__ = ["FeedResponse", "FetchRequest", "LoadState", "NewsItem", "OrderBy"]
