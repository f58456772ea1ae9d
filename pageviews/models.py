"""
Wikimedia Pageviews API – Pydantic models for response documents.

The client itself returns raw dicts; these models are used by the
transform helpers to validate records before flattening them.
"""

from pydantic import BaseModel, ConfigDict, Field


class ArticleViews(BaseModel):
    """One timestamped data point of a per-article series."""

    model_config = ConfigDict(extra="ignore")

    project: str | None = None
    article: str
    granularity: str | None = None
    timestamp: str
    access: str | None = None
    agent: str | None = None
    views: int = 0


class PerArticleResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[ArticleViews] = Field(default_factory=list)


class AggregateViews(BaseModel):
    """One timestamped data point of a project-wide series."""

    model_config = ConfigDict(extra="ignore")

    project: str | None = None
    access: str | None = None
    agent: str | None = None
    granularity: str | None = None
    timestamp: str
    views: int = 0


class TopArticle(BaseModel):
    """An entry of a top-articles listing."""

    model_config = ConfigDict(extra="ignore")

    article: str
    views: int = 0
    rank: int | None = None


class TopItem(BaseModel):
    """
    Top-articles listing for one project and day.

    Year, month and day are kept as the API returns them (zero-padded strings).
    """

    model_config = ConfigDict(extra="ignore")

    project: str | None = None
    access: str | None = None
    year: str | None = None
    month: str | None = None
    day: str | None = None
    articles: list[TopArticle] = Field(default_factory=list)


class TopResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[TopItem] = Field(default_factory=list)

