import httpx
import pytest

from newsfeed.exceptions import InvalidUrl
from newsfeed.models import OrderBy
from newsfeed.services.query import build_feed_url

BASE_URL = "https://content.guardianapis.com/search"


def _pairs(url: str) -> list[str]:
    return httpx.URL(url).query.decode().split("&")


def test_build_feed_url_appends_query_in_order() -> None:
    url = build_feed_url(BASE_URL, "football", OrderBy.NEWEST, "secret")

    assert url.startswith(BASE_URL + "?")
    assert list(httpx.URL(url).params.multi_items()) == [
        ("q", "football"),
        ("show-fields", "thumbnail"),
        ("order-by", "newest"),
        ("api-key", "secret"),
    ]


def test_build_feed_url_encodes_subject() -> None:
    url = build_feed_url(BASE_URL, "climate change & energy", "relevance", "key")

    assert " " not in url
    assert httpx.URL(url).params["q"] == "climate change & energy"
    assert httpx.URL(url).params["order-by"] == "relevance"


def test_varying_subject_changes_only_q() -> None:
    first = _pairs(build_feed_url(BASE_URL, "books", OrderBy.OLDEST, "key"))
    second = _pairs(build_feed_url(BASE_URL, "music", OrderBy.OLDEST, "key"))

    assert first[0] != second[0]
    assert first[1:] == second[1:]


def test_varying_order_changes_only_order_by() -> None:
    first = _pairs(build_feed_url(BASE_URL, "books", OrderBy.NEWEST, "key"))
    second = _pairs(build_feed_url(BASE_URL, "books", OrderBy.RELEVANCE, "key"))

    changed = [i for i, (a, b) in enumerate(zip(first, second)) if a != b]
    assert changed == [2]
    assert second[2] == "order-by=relevance"


def test_build_feed_url_keeps_existing_query() -> None:
    url = build_feed_url(BASE_URL + "?section=world", "x", OrderBy.NEWEST, "key")

    params = httpx.URL(url).params
    assert params["section"] == "world"
    assert params["q"] == "x"


def test_build_feed_url_rejects_unknown_order() -> None:
    with pytest.raises(ValueError):
        build_feed_url(BASE_URL, "books", "popularity", "key")


@pytest.mark.parametrize(
    "base_url",
    [
        "content.guardianapis.com/search",
        "ftp://content.guardianapis.com/search",
        "http://example.com:port/search",
        "",
    ],
)
def test_build_feed_url_rejects_malformed_base(base_url: str) -> None:
    with pytest.raises(InvalidUrl):
        build_feed_url(base_url, "books", OrderBy.NEWEST, "key")
