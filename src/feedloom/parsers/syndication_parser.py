"""RSS 2.0 / Atom feed parser implementation."""

from typing import Callable, TypeVar

import structlog

from feedloom.exceptions import (
    FeedParseError,
    InvalidFeedError,
    MissingTitleError,
    NoArticlesError,
    NoValidArticlesError,
)
from feedloom.models.dialect import AtomEntry, AtomFeed, RssChannel, RssItem
from feedloom.models.feed import ParsedArticle, ParsedFeed
from feedloom.parsers.dialect import parse_document
from feedloom.parsers.images import extract_image_url
from feedloom.utils.text import truncate, utc_now_iso

logger = structlog.get_logger()

T = TypeVar("T")


class SyndicationParser:
    """Parser for RSS 2.0 and Atom documents.

    Classifies the document, then normalizes every usable item or entry
    into a ParsedArticle. Items without a title or link are dropped.
    """

    def parse(self, raw_content: str) -> ParsedFeed:
        """Parse raw feed text into a ParsedFeed.

        Args:
            raw_content: Raw RSS or Atom document text.

        Returns:
            ParsedFeed with at least one article.

        Raises:
            InvalidFeedError: Not an RSS/Atom document, or parsing blew up.
            NoArticlesError: No item/entry elements at all.
            MissingTitleError: Channel/feed title is missing.
            NoValidArticlesError: Every item lacks a title or link.
        """
        try:
            document = parse_document(raw_content)
            if isinstance(document, AtomFeed):
                return self._from_atom(document)
            return self._from_rss(document)
        except FeedParseError:
            raise
        except Exception as e:
            # Never leak parser internals to the caller
            logger.error("Unexpected feed parse error", error=repr(e))
            raise InvalidFeedError() from e

    def _from_rss(self, channel: RssChannel) -> ParsedFeed:
        title = self._require_title(channel.title, channel.items)
        articles = self._collect(channel.items, lambda item: self._rss_article(item, title), "rss")
        return ParsedFeed(
            title=title,
            description=channel.description.strip(),
            image_url=channel.image_url,
            articles=articles,
        )

    def _from_atom(self, feed: AtomFeed) -> ParsedFeed:
        title = self._require_title(feed.title, feed.entries)
        articles = self._collect(feed.entries, lambda entry: self._atom_article(entry, title), "atom")
        return ParsedFeed(
            title=title,
            description=feed.subtitle.strip(),
            image_url=feed.icon or feed.logo,
            articles=articles,
        )

    def _require_title(self, title: str, candidates: list) -> str:
        # An empty document reports NoArticles even when its title is missing
        if not candidates:
            raise NoArticlesError()
        title = title.strip()
        if not title:
            raise MissingTitleError()
        return title

    def _collect(
        self,
        candidates: list[T],
        normalize: Callable[[T], ParsedArticle | None],
        dialect: str,
    ) -> list[ParsedArticle]:
        log = logger.bind(dialect=dialect)
        articles = []
        for index, candidate in enumerate(candidates):
            article = normalize(candidate)
            if article is None:
                log.warning("Skipping invalid article: missing title or link", index=index)
                continue
            articles.append(article)

        if not articles:
            raise NoValidArticlesError()
        return articles

    def _rss_article(self, item: RssItem, source: str) -> ParsedArticle | None:
        title, link = item.title.strip(), item.link.strip()
        if not title or not link:
            return None

        return ParsedArticle(
            title=title,
            link=link,
            description=truncate(item.description),
            content=item.content,
            pub_date=item.pub_date or utc_now_iso(),
            image_url=extract_image_url(item, item.description, item.content),
            source=source,
        )

    def _atom_article(self, entry: AtomEntry, source: str) -> ParsedArticle | None:
        title, link = entry.title.strip(), entry.link.strip()
        if not title or not link:
            return None

        return ParsedArticle(
            title=title,
            link=link,
            description=truncate(entry.summary),
            content=entry.content,
            pub_date=entry.published or entry.updated or utc_now_iso(),
            image_url=extract_image_url(entry, entry.summary, entry.content),
            source=source,
        )
