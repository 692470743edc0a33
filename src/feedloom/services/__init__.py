"""Services package."""

from feedloom.services.feed_service import FeedService, detect_feed_type, parse_feed
from feedloom.services.ingestion import FeedIngestionService

__all__ = [
    "FeedIngestionService",
    "FeedService",
    "detect_feed_type",
    "parse_feed",
]
