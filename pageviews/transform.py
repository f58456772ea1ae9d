"""
Wikimedia Pageviews API – flatten responses into analysis-ready rows.

Each record is validated with the response models; invalid records are
skipped and logged, the rest are returned in API order.
"""

import logging
from collections import Counter

from pydantic import ValidationError

from pageviews.models import AggregateViews, ArticleViews, TopArticle

logger = logging.getLogger(__name__)


def _items(data: dict | None) -> list:
    if not data:
        return []
    return data.get("items") or []


def extract_daily_views(data: dict | None) -> list[dict]:
    """
    Extract (timestamp, views) rows from a per-article or aggregate response.

    Per-article records (they name their article) are checked against
    ArticleViews, project-wide records against AggregateViews.
    """
    rows = []
    for item in _items(data):
        model = ArticleViews if isinstance(item, dict) and "article" in item else AggregateViews
        try:
            point = model.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping invalid series record {item!r}: {e}")
            continue
        rows.append({"timestamp": point.timestamp, "views": point.views})
    return rows


def views_by_date(data: dict | None) -> dict[str, int]:
    """Sum views per calendar day, keyed YYYY-MM-DD (timestamps are YYYYMMDDHH)."""
    totals: Counter = Counter()
    for row in extract_daily_views(data):
        ts = row["timestamp"]
        totals[f"{ts[0:4]}-{ts[4:6]}-{ts[6:8]}"] += row["views"]
    return dict(totals)


def total_views(data: dict | None) -> int:
    """Sum of views over the whole series."""
    return sum(row["views"] for row in extract_daily_views(data))


def extract_top_articles(data: dict | None) -> list[dict]:
    """
    Extract (rank, article, views) rows from the first item of a top response.
    """
    items = _items(data)
    if not items:
        return []
    rows = []
    for entry in items[0].get("articles") or []:
        try:
            article = TopArticle.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"Skipping invalid top article {entry!r}: {e}")
            continue
        rows.append({"rank": article.rank, "article": article.article, "views": article.views})
    return rows
