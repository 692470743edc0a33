"""Tests for the ingestion deadline wrapper."""

import asyncio

import pytest

from feedloom.exceptions import FeedTimeoutError, NoArticlesError
from feedloom.models.feed import ParsedArticle, ParsedFeed
from feedloom.services.ingestion import FeedIngestionService


def _feed() -> ParsedFeed:
    return ParsedFeed(
        title="Stub",
        articles=[
            ParsedArticle(
                title="Only",
                link="https://example.com/only",
                pub_date="2024-01-01T00:00:00.000Z",
                source="Stub",
            )
        ],
    )


class StubFeedService:
    def __init__(self, delay: float = 0.0, error: Exception | None = None):
        self.delay = delay
        self.error = error
        self.calls = []
        self.cancelled = False

    async def parse_feed(self, url, feed_type=None):
        self.calls.append((url, feed_type))
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error:
            raise self.error
        return _feed()


def test_returns_feed_within_deadline():
    stub = StubFeedService()
    service = FeedIngestionService(feed_service=stub, timeout=1.0)

    feed = asyncio.run(service.ingest("  https://example.com/feed.xml  ", "rss"))

    assert feed.title == "Stub"
    assert stub.calls == [("https://example.com/feed.xml", "rss")]


def test_deadline_expiry_raises_timeout():
    stub = StubFeedService(delay=1.0)
    service = FeedIngestionService(feed_service=stub, timeout=0.05)

    with pytest.raises(FeedTimeoutError) as exc_info:
        asyncio.run(service.ingest("https://example.com/slow.xml"))

    assert str(exc_info.value) == "Feed parsing timed out"
    assert stub.cancelled is True


def test_classified_errors_pass_through():
    stub = StubFeedService(error=NoArticlesError())
    service = FeedIngestionService(feed_service=stub, timeout=1.0)

    with pytest.raises(NoArticlesError):
        asyncio.run(service.ingest("https://example.com/empty.xml"))


@pytest.mark.parametrize("url", ["", "   "])
def test_blank_url_is_rejected(url):
    stub = StubFeedService()
    service = FeedIngestionService(feed_service=stub, timeout=1.0)

    with pytest.raises(ValueError, match="Feed URL cannot be empty."):
        asyncio.run(service.ingest(url))

    assert stub.calls == []


def test_default_timeout_comes_from_settings(monkeypatch):
    from feedloom.config.settings import settings

    monkeypatch.setattr(settings, "feed_parse_timeout", 7.5)

    service = FeedIngestionService(feed_service=StubFeedService())

    assert service._timeout == 7.5
