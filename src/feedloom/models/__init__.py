"""Models package."""

from feedloom.models.dialect import (
    AtomEntry,
    AtomFeed,
    Enclosure,
    EntryMedia,
    FeedDocument,
    RssChannel,
    RssItem,
)
from feedloom.models.feed import FeedType, ParsedArticle, ParsedFeed

__all__ = [
    "FeedType",
    "ParsedArticle",
    "ParsedFeed",
    "AtomEntry",
    "AtomFeed",
    "Enclosure",
    "EntryMedia",
    "FeedDocument",
    "RssChannel",
    "RssItem",
]
