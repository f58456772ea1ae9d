"""
Wikimedia Pageviews API – URL building.

Pure functions of (base_url, params): the same input always gives the same
URL. Parameters are expected to be validated already.
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from pageviews.config import ACCESS_DEFAULT, AGENT_DEFAULT, GRANULARITY_DEFAULT

PAGEVIEWS_PATH = "metrics/pageviews"

# Characters encodeURIComponent leaves alone besides unreserved ones
_COMPONENT_SAFE = "!*'()"
_WHITESPACE = re.compile(r"\s")
_DATE_SEPARATORS = re.compile(r"[-/.]")


def encode_article(title: str) -> str:
    """Replace whitespace with underscores, then percent-encode the title."""
    return quote(_WHITESPACE.sub("_", str(title)), safe=_COMPONENT_SAFE)


def compact_timestamp(value: Any) -> str:
    """Drop date separators: 2024-01-15 -> 20240115."""
    return _DATE_SEPARATORS.sub("", str(value))


def _option(params: Mapping[str, Any], field: str, default: str) -> str:
    return params.get(field) or default


def _join(base_url: str, *segments: Any) -> str:
    return "/".join([base_url.rstrip("/"), PAGEVIEWS_PATH, *(str(s) for s in segments)])


def dimensions_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}/{PAGEVIEWS_PATH}/"


def per_article_url(base_url: str, params: Mapping[str, Any]) -> str:
    """.../per-article/{project}/{access}/{agent}/{article}/{granularity}/{start}/{end}"""
    return _join(
        base_url,
        "per-article",
        params["project"],
        _option(params, "access", ACCESS_DEFAULT),
        _option(params, "agent", AGENT_DEFAULT),
        encode_article(params["article"]),
        _option(params, "granularity", GRANULARITY_DEFAULT),
        compact_timestamp(params["start"]),
        compact_timestamp(params["end"]),
    )


def aggregate_url(base_url: str, params: Mapping[str, Any]) -> str:
    """.../aggregate/{project}/{access}/{agent}/{granularity}/{start}/{end}"""
    return _join(
        base_url,
        "aggregate",
        params["project"],
        _option(params, "access", ACCESS_DEFAULT),
        _option(params, "agent", AGENT_DEFAULT),
        _option(params, "granularity", GRANULARITY_DEFAULT),
        compact_timestamp(params["start"]),
        compact_timestamp(params["end"]),
    )


def top_url(base_url: str, params: Mapping[str, Any]) -> str:
    """.../top/{project}/{access}/{year}/{month}/{day}"""
    return _join(
        base_url,
        "top",
        params["project"],
        _option(params, "access", ACCESS_DEFAULT),
        params["year"],
        params["month"],
        params["day"],
    )
