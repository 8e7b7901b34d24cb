class FeedError(Exception):
    """Base class for every failure of a feed fetch cycle."""


class InvalidUrl(FeedError):
    """Raised when the feed endpoint cannot be turned into a usable URL."""


class NetworkError(FeedError):
    """Raised on DNS, connection, timeout or read failures."""


class HttpStatusError(FeedError):
    """Raised when the content API answers with anything but 200."""

    def __init__(self, status_code: int, url: str | None = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Error response code: {status_code}")


class MalformedJson(FeedError):
    """Raised when a payload is not JSON or does not have the feed shape."""
