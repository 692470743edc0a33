"""feedloom - RSS/Atom feed ingestion and normalization."""

from feedloom.exceptions import FeedloomError
from feedloom.models.feed import FeedType, ParsedArticle, ParsedFeed
from feedloom.services.feed_service import FeedService, parse_feed
from feedloom.services.ingestion import FeedIngestionService
from feedloom.sources.fetcher import fetch_feed_xml

__version__ = "0.1.0"

__all__ = [
    "FeedIngestionService",
    "FeedService",
    "FeedType",
    "FeedloomError",
    "ParsedArticle",
    "ParsedFeed",
    "fetch_feed_xml",
    "parse_feed",
]
