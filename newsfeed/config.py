import logging
from functools import lru_cache

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.news import OrderBy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", populate_by_name=True)

    http_max_connections: int = Field(20, ge=1, alias="HTTP_MAX_CONNECTIONS")
    http_max_keepalive: int = Field(10, ge=1, alias="HTTP_MAX_KEEPALIVE")
    http_user_agent: str = Field(
        "NewsUp/0.1 (+https://example.com)",
        alias="HTTP_USER_AGENT",
    )

    content_api_base_url: HttpUrl = Field(
        "https://content.guardianapis.com/search", alias="CONTENT_API_BASE_URL"
    )
    content_api_key: str = Field("test", alias="CONTENT_API_KEY")

    feed_default_subject: str = Field("technology", alias="FEED_DEFAULT_SUBJECT")
    feed_default_order_by: OrderBy = Field(OrderBy.NEWEST, alias="FEED_DEFAULT_ORDER_BY")

    log_level: str = Field("INFO", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
