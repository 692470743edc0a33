"""Feed service - fetch a subscription URL and normalize it.

Dispatches on feed type, runs fetch then parse, and turns every failure
into one of the classified, user-facing errors in ``feedloom.exceptions``.
"""

import asyncio

import httpx
import structlog

from feedloom.exceptions import (
    FeedloomError,
    FeedTransportError,
    FeedUnreachableError,
    InvalidFeedError,
    ProxyFetchError,
    RedditFeedError,
    RedditUnavailableError,
    UnsupportedFeedTypeError,
)
from feedloom.models.feed import FeedType, ParsedFeed
from feedloom.parsers.base import FeedParser
from feedloom.parsers.reddit_parser import RedditParser
from feedloom.parsers.syndication_parser import SyndicationParser
from feedloom.sources.fetcher import fetch_feed_xml
from feedloom.sources.reddit import RedditFeedSource
from feedloom.utils.urls import is_google_news_url, is_reddit_url

logger = structlog.get_logger()

REDDIT_REQUEST_TIMEOUT = 15.0


def detect_feed_type(url: str, feed_type: FeedType | str | None = None) -> FeedType:
    """Resolve the feed type, honouring an explicit Reddit/Google News choice.

    Raises:
        UnsupportedFeedTypeError: When ``feed_type`` names no known type.
    """
    if feed_type is not None:
        try:
            feed_type = FeedType(feed_type)
        except ValueError as e:
            raise UnsupportedFeedTypeError(feed_type) from e
    if feed_type is FeedType.REDDIT or is_reddit_url(url):
        return FeedType.REDDIT
    if feed_type is FeedType.GOOGLE_NEWS or is_google_news_url(url):
        return FeedType.GOOGLE_NEWS
    return FeedType.RSS


class FeedService:
    """Fetch-and-parse facade used by the subscription layer.

    Holds no per-call state, so one instance can serve concurrent calls
    for different URLs.
    """

    def __init__(
        self,
        parser: FeedParser | None = None,
        reddit_parser: RedditParser | None = None,
        client: httpx.AsyncClient | None = None,
        reddit_timeout: float = REDDIT_REQUEST_TIMEOUT,
    ):
        """Initialize feed service.

        Args:
            parser: RSS/Atom parser. Defaults to SyndicationParser.
            reddit_parser: Subreddit listing parser.
            client: Optional shared HTTP client; per-call clients otherwise.
            reddit_timeout: Deadline in seconds for the Reddit listing request.
        """
        self._parser = parser or SyndicationParser()
        self._reddit_parser = reddit_parser or RedditParser()
        self._client = client
        self._reddit_timeout = reddit_timeout

    async def parse_feed(self, url: str, feed_type: FeedType | str | None = None) -> ParsedFeed:
        """Fetch and normalize the feed at ``url``.

        Raises:
            FeedloomError: A classified failure whose message is user-facing.
        """
        resolved = detect_feed_type(url, feed_type)
        if resolved is FeedType.REDDIT:
            return await self._parse_reddit(url)

        # Google News serves plain RSS
        return await self._parse_syndication(url)

    async def _parse_syndication(self, url: str) -> ParsedFeed:
        log = logger.bind(url=url)
        try:
            try:
                xml_text = await fetch_feed_xml(url, self._client)
            except ProxyFetchError as e:
                log.warning("Proxy rejected feed request", status_code=e.status_code)
                raise
            except (FeedTransportError, httpx.HTTPError) as e:
                log.warning("Feed unreachable", error=str(e))
                raise FeedUnreachableError() from e

            feed = self._parser.parse(xml_text)
        except FeedloomError as e:
            log.info("Feed rejected", reason=str(e))
            raise
        except Exception as e:
            log.error("Unexpected error while parsing feed", error=repr(e))
            raise InvalidFeedError() from e

        log.info("Feed parsed", title=feed.title, article_count=len(feed.articles))
        return feed

    async def _parse_reddit(self, url: str) -> ParsedFeed:
        log = logger.bind(url=url)
        try:
            source = RedditFeedSource(url)
            try:
                listing = await asyncio.wait_for(
                    source.fetch_listing(self._client),
                    timeout=self._reddit_timeout,
                )
            except asyncio.TimeoutError as e:
                raise RedditUnavailableError(
                    "Reddit request timed out. Please try again later."
                ) from e
            feed = self._reddit_parser.parse(listing, source.subreddit)
        except RedditUnavailableError as e:
            log.warning("Reddit unavailable", reason=str(e))
            raise
        except Exception as e:
            log.error("Error parsing Reddit feed", error=repr(e))
            raise RedditFeedError() from e

        log.info("Reddit feed parsed", title=feed.title, article_count=len(feed.articles))
        return feed


async def parse_feed(
    url: str,
    feed_type: FeedType | str | None = None,
    client: httpx.AsyncClient | None = None,
) -> ParsedFeed:
    """Fetch and normalize ``url`` with a default FeedService."""
    return await FeedService(client=client).parse_feed(url, feed_type)
