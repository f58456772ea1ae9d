"""
Wikimedia Pageviews API – async client.

Each operation is one stateless round trip:
validate params -> build URL -> GET with the User-Agent header -> map the
outcome to the parsed JSON document or an exception.

API root: https://wikimedia.org/api/rest_v1/metrics/pageviews/
"""

import asyncio
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

import requests
from requests.exceptions import JSONDecodeError

from pageviews.config import ClientConfig
from pageviews.errors import ApiError, ResponseParseError
from pageviews.urls import aggregate_url, dimensions_url, per_article_url, top_url
from pageviews.validation import LIMIT_PATTERN, Operation, check_params

logger = logging.getLogger(__name__)

RequestHook = Callable[[dict], None]


def check_response(response: requests.Response) -> Any:
    """
    Map an HTTP response to the parsed JSON body.

    Raises:
        ApiError: Status is not 200. A 404 whose JSON body has a "detail"
            uses that text as the message, anything else "Status code <n>".
        ResponseParseError: Status is 200 but the body is not JSON.
    """
    status = response.status_code
    if status != 200:
        if status == 404:
            try:
                body = response.json()
            except JSONDecodeError:
                body = None
            if isinstance(body, dict) and "detail" in body:
                raise ApiError(str(body["detail"]), status)
        raise ApiError(f"Status code {status}", status)

    try:
        return response.json()
    except JSONDecodeError as e:
        raise ResponseParseError(f"Invalid JSON in response body: {e}") from e


def limit_count(limit: Any) -> int | None:
    """Number of articles to keep, or None when no usable limit was given."""
    if not limit:
        return None
    if isinstance(limit, int) and not isinstance(limit, bool) and limit > 0:
        return limit
    if isinstance(limit, str) and LIMIT_PATTERN.fullmatch(limit):
        return int(limit)
    logger.warning(f"Ignoring unusable limit {limit!r}; returning all articles")
    return None


def truncate_articles(data: Any, count: int) -> Any:
    """Keep the first `count` entries of data["items"][0]["articles"], in order."""
    try:
        item = data["items"][0]
        articles = item["articles"]
    except (KeyError, IndexError, TypeError):
        logger.warning("Top response has no items[0].articles; limit not applied")
        return data
    item["articles"] = articles[:count]
    return data


class PageviewsClient:
    """
    Async client for the pageviews endpoints.

    Args:
        config: Base URL, user agent and flags (default ClientConfig()).
        session: Object with a requests-style get(); defaults to the requests
            module. Pass a requests.Session to reuse connections.
        on_request: Called with the outgoing request options before sending.
            When omitted and config.debug is set, the options are logged.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: Any = None,
        on_request: RequestHook | None = None,
    ):
        self.config = config or ClientConfig()
        self._session = session if session is not None else requests
        if on_request is None and self.config.debug:
            on_request = log_request
        self._on_request = on_request

    async def _fetch(self, url: str) -> Any:
        headers = {"User-Agent": self.config.user_agent}
        if self._on_request is not None:
            self._on_request({"url": url, "headers": dict(headers)})
        logger.debug(f"GET {url}")
        response = await asyncio.to_thread(
            self._session.get, url, headers=headers, timeout=self.config.timeout
        )
        return check_response(response)

    def _check(self, params: Mapping[str, Any] | None, operation: Operation) -> Mapping[str, Any]:
        return check_params(params, operation, strict_limit=self.config.strict_limit)

    async def get_pageviews_dimensions(self) -> Any:
        """
        Root of all pageview endpoints: lists the available ways to query
        (per article, aggregate, top, ...).
        """
        return await self._fetch(dimensions_url(self.config.base_url))

    async def get_per_article_pageviews(self, params: Mapping[str, Any] | None) -> Any:
        """
        Daily timeseries of pageviews for one article over a date range.

        Required: project, article, start, end (YYYYMMDD).
        Optional: access, agent, granularity.
        """
        params = self._check(params, Operation.PER_ARTICLE)
        return await self._fetch(per_article_url(self.config.base_url, params))

    async def get_aggregated_pageviews(self, params: Mapping[str, Any] | None) -> Any:
        """
        Timeseries of pageviews for a whole project over a range.

        Required: project, start, end (YYYYMMDDHH).
        Optional: access, agent, granularity.
        """
        params = self._check(params, Operation.AGGREGATE)
        return await self._fetch(aggregate_url(self.config.base_url, params))

    async def get_top_pageviews(self, params: Mapping[str, Any] | None) -> Any:
        """
        The 1000 most viewed articles of a project for one day.

        Required: project, year, month, day.
        Optional: access, limit (keep only the first `limit` articles).
        """
        params = self._check(params, Operation.TOP)
        count = limit_count(params.get("limit"))
        data = await self._fetch(top_url(self.config.base_url, params))
        if count is not None:
            data = truncate_articles(data, count)
        return data


def log_request(options: dict) -> None:
    """Default debug hook: log the outgoing request options as JSON."""
    logger.info(json.dumps(options, indent=2))
