"""Abstract feed parser interface using Protocol."""

from typing import Protocol

from feedloom.models.feed import ParsedFeed


class FeedParser(Protocol):
    """Feed document parser abstraction protocol."""

    def parse(self, raw_content: str) -> ParsedFeed:
        """Parse a raw feed document into a normalized feed.

        Args:
            raw_content: Raw document text from the fetcher.

        Returns:
            ParsedFeed with at least one article.

        Raises:
            FeedParseError: When the document cannot be normalized.
        """
        ...
