"""
Helper configuration.

Read from ``REQUEST_HELPERS_*`` environment variables; defaults keep the
behaviour handlers have always seen.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from requesthelpers.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, ParseFallback, QueryStyle


class Settings(BaseSettings):
    """Settings for the request helpers."""

    model_config = SettingsConfigDict(
        env_prefix='REQUEST_HELPERS_',
        extra='ignore',
    )

    # -- Pagination --
    PAGINATION_STYLE: QueryStyle = Field(
        default=QueryStyle.per_page,
        description='Query parameter names: per_page (per-page/page) or page_no (page-size/page-no).',
    )
    PAGINATION_FALLBACK: ParseFallback = Field(
        default=ParseFallback.zero,
        description='Value used for unparsable pagination params: zero, or the defaults below.',
    )
    DEFAULT_PAGE_SIZE: int = DEFAULT_PAGE_SIZE
    DEFAULT_PAGE: int = DEFAULT_PAGE


settings = Settings()
