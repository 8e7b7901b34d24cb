from __future__ import annotations

import httpx

from ..exceptions import InvalidUrl
from ..models.news import OrderBy

THUMBNAIL_FIELDS = "thumbnail"


def build_feed_url(
    base_url: str,
    subject: str,
    order_by: OrderBy | str,
    api_key: str,
) -> str:
    """
    Compose the content API search URL.

    Appends ``q``, ``show-fields``, ``order-by`` and ``api-key`` (in that order)
    after any query the base URL already carries.
    """
    order = OrderBy(order_by)
    try:
        url = httpx.URL(str(base_url))
    except httpx.InvalidURL as e:
        raise InvalidUrl(f"Problem building the URL from {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidUrl(f"Problem building the URL from {base_url!r}")

    params = {
        "q": subject,
        "show-fields": THUMBNAIL_FIELDS,
        "order-by": order.value,
        "api-key": api_key,
    }
    return str(url.copy_merge_params(params))
