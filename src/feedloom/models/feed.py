"""Normalized feed and article models handed to the caller."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ParsedArticle(BaseModel):
    """A single article normalized from an RSS item, Atom entry or Reddit post.

    Serializes with camelCase keys (``pubDate``, ``imageUrl``, ...) when
    dumped with ``by_alias=True``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, description="Article title")
    link: str = Field(..., min_length=1, description="Canonical article URL, used for dedup")
    description: str = Field(default="", description="Short text, truncated to 300 chars")
    content: str | None = Field(default=None, description="Full content when provided")
    pub_date: str = Field(..., description="Publication date as found in the source")
    image_url: str | None = Field(default=None)
    source: str = Field(..., description="Title of the parent feed")

    # Reader state, persisted and mutated by the caller
    is_read: bool = Field(default=False)
    is_read_later: bool = Field(default=False)

    # Reddit metadata (only for subreddit feeds)
    reddit_post_id: str | None = Field(default=None)
    reddit_permalink: str | None = Field(default=None)
    reddit_subreddit: str | None = Field(default=None)


class ParsedFeed(BaseModel):
    """Feed metadata plus its articles in document order."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: str = Field(default="")
    image_url: str | None = Field(default=None)
    articles: list[ParsedArticle] = Field(..., min_length=1)


class FeedType(str, Enum):
    """How a subscription URL is fetched and parsed."""

    RSS = "rss"
    REDDIT = "reddit"
    GOOGLE_NEWS = "google_news"
