"""
Async client for the Wikimedia pageviews REST API.

    import asyncio
    import pageviews

    data = asyncio.run(pageviews.get_per_article_pageviews({
        "project": "en.wikipedia",
        "article": "Albert Einstein",
        "start": "20240101",
        "end": "20240131",
    }))
"""

from collections.abc import Mapping
from typing import Any

from pageviews.client import PageviewsClient
from pageviews.config import VERSION as __version__
from pageviews.config import ClientConfig
from pageviews.errors import (
    ApiError,
    InvalidParameterError,
    PageviewsError,
    ResponseParseError,
)
from pageviews.validation import Invalid, Operation, Valid, validate_params

__all__ = [
    "ApiError",
    "ClientConfig",
    "Invalid",
    "InvalidParameterError",
    "Operation",
    "PageviewsClient",
    "PageviewsError",
    "ResponseParseError",
    "Valid",
    "get_aggregated_pageviews",
    "get_pageviews_dimensions",
    "get_per_article_pageviews",
    "get_top_pageviews",
    "validate_params",
]


async def get_pageviews_dimensions() -> Any:
    return await PageviewsClient().get_pageviews_dimensions()


async def get_per_article_pageviews(params: Mapping[str, Any] | None) -> Any:
    return await PageviewsClient().get_per_article_pageviews(params)


async def get_aggregated_pageviews(params: Mapping[str, Any] | None) -> Any:
    return await PageviewsClient().get_aggregated_pageviews(params)


async def get_top_pageviews(params: Mapping[str, Any] | None) -> Any:
    return await PageviewsClient().get_top_pageviews(params)
