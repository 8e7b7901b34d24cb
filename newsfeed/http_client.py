import asyncio

import httpx

from .config import get_settings
from .exceptions import HttpStatusError, InvalidUrl, NetworkError

CONNECT_TIMEOUT = 15.0
READ_TIMEOUT = 10.0
FETCH_TIMEOUT = httpx.Timeout(READ_TIMEOUT, connect=CONNECT_TIMEOUT)
OK_STATUS = 200

_client: httpx.AsyncClient | None = None
_client_lock = asyncio.Lock()


async def get_http_client() -> httpx.AsyncClient:
    global _client

    if _client is None:
        async with _client_lock:
            if _client is None:
                settings = get_settings()
                limits = httpx.Limits(
                    max_connections=settings.http_max_connections,
                    max_keepalive_connections=settings.http_max_keepalive,
                )
                _client = httpx.AsyncClient(
                    timeout=FETCH_TIMEOUT,
                    limits=limits,
                    headers={"User-Agent": settings.http_user_agent},
                )
    return _client


async def fetch_text(client: httpx.AsyncClient, url: str | httpx.URL | None) -> str:
    """
    GET ``url`` and return the whole body as text.

    Only a 200 counts as success; any other httpx failure (transport, decoding,
    redirects) becomes NetworkError. The response stream is closed before this
    returns or raises, including when the body fails halfway through.
    A missing URL is a no-op that yields an empty body.
    """
    if url is None:
        return ""

    try:
        async with client.stream("GET", url, timeout=FETCH_TIMEOUT) as response:
            if response.status_code != OK_STATUS:
                raise HttpStatusError(response.status_code, str(response.url))
            await response.aread()
            return response.text
    except httpx.InvalidURL as e:
        raise InvalidUrl(f"Cannot request {url!s}: {e}") from e
    except httpx.HTTPError as e:
        raise NetworkError(f"Problem retrieving the news JSON results ({e!r})") from e


async def shutdown_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
