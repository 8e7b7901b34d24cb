from __future__ import annotations

import logging
from typing import Any

import orjson

from ..exceptions import MalformedJson
from ..models.news import NO_IMAGE, NO_SECTION_NAME, NO_TITLE, NO_WEB_URL, NewsItem

logger = logging.getLogger(__name__)

KEY_RESPONSE = "response"
KEY_RESULTS = "results"
KEY_WEB_TITLE = "webTitle"
KEY_SECTION_NAME = "sectionName"
KEY_WEB_URL = "webUrl"
KEY_FIELDS = "fields"
KEY_THUMBNAIL = "thumbnail"


def parse_feed(raw: str | bytes | None) -> list[NewsItem] | None:
    """
    Parse a content API search payload, never raising.

    Returns None for an empty body or a malformed payload (the latter is
    logged), otherwise the items in the order of the ``results`` array.
    """
    try:
        return decode_feed(raw)
    except MalformedJson:
        logger.exception("Problem parsing the news JSON results")
        return None


def decode_feed(raw: str | bytes | None) -> list[NewsItem] | None:
    """Strict variant of :func:`parse_feed` that raises MalformedJson."""
    if raw is None:
        return None
    if not raw.strip():
        return None

    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise MalformedJson(f"Payload is not valid JSON: {e}") from e

    response = _expect_object(payload, "payload")
    if KEY_RESPONSE not in response:
        return []
    body = _expect_object(response[KEY_RESPONSE], KEY_RESPONSE)
    if KEY_RESULTS not in body:
        return []
    results = body[KEY_RESULTS]
    if not isinstance(results, list):
        raise MalformedJson(f"'{KEY_RESULTS}' is {type(results).__name__}, expected an array")

    return [
        _build_item(_expect_object(entry, f"{KEY_RESULTS}[{index}]"))
        for index, entry in enumerate(results)
    ]


def _build_item(entry: dict[str, Any]) -> NewsItem:
    image_url = NO_IMAGE
    fields = entry.get(KEY_FIELDS)
    if fields is not None:
        image_url = _text(_expect_object(fields, KEY_FIELDS), KEY_THUMBNAIL, NO_IMAGE)

    return NewsItem(
        title=_text(entry, KEY_WEB_TITLE, NO_TITLE),
        section_name=_text(entry, KEY_SECTION_NAME, NO_SECTION_NAME),
        image_url=image_url,
        web_url=_text(entry, KEY_WEB_URL, NO_WEB_URL),
    )


def _text(entry: dict[str, Any], key: str, fallback: str) -> str:
    value = entry.get(key)
    if value is None:
        return fallback
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return orjson.dumps(value).decode()
    return str(value)


def _expect_object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedJson(f"'{where}' is {type(value).__name__}, expected an object")
    return value
