"""Caller-side ingestion policy: a hard deadline around parse_feed."""

import asyncio

import structlog

from feedloom.config.settings import settings
from feedloom.exceptions import FeedTimeoutError
from feedloom.models.feed import FeedType, ParsedFeed
from feedloom.services.feed_service import FeedService

logger = structlog.get_logger()


class FeedIngestionService:
    """Runs a fetch-and-parse under a wall-clock deadline.

    On expiry the parse task is cancelled; the core keeps no shared state,
    so nothing needs rolling back.
    """

    def __init__(self, feed_service: FeedService | None = None, timeout: float | None = None):
        self._feed_service = feed_service or FeedService()
        self._timeout = timeout if timeout is not None else settings.feed_parse_timeout

    async def ingest(self, url: str, feed_type: FeedType | str | None = None) -> ParsedFeed:
        """Parse the feed at ``url`` or fail within the configured deadline.

        Raises:
            ValueError: When the URL is blank.
            FeedTimeoutError: When the deadline expires first.
            FeedloomError: Any classified fetch or parse failure.
        """
        url = url.strip()
        if not url:
            raise ValueError("Feed URL cannot be empty.")

        try:
            return await asyncio.wait_for(
                self._feed_service.parse_feed(url, feed_type),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            logger.warning("Feed parsing timed out", url=url, timeout=self._timeout)
            raise FeedTimeoutError() from e
