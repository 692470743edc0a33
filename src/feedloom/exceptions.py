"""Custom exceptions for feedloom.

Every message below is surfaced verbatim to end users, so the strings
are part of the public contract.
"""

INVALID_FEED_MESSAGE = "Invalid feed: This URL does not contain a valid RSS or Atom feed"
NO_ARTICLES_MESSAGE = "Invalid feed: No articles found"
MISSING_TITLE_MESSAGE = "Failed to parse feed"
NO_VALID_ARTICLES_MESSAGE = "Invalid feed: No valid articles found"
UNREACHABLE_MESSAGE = "Unable to fetch the feed. Please check the URL and try again."
TIMEOUT_MESSAGE = "Feed parsing timed out"
REDDIT_FAILED_MESSAGE = (
    "Failed to fetch Reddit feed. Please ensure the subreddit URL is valid and try again."
)


class FeedloomError(Exception):
    """Base exception class for all feedloom errors."""

    pass


class FetchError(FeedloomError):
    """Raised when retrieving a feed document fails.

    Attributes:
        url: The feed URL that was requested.
    """

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class FeedTransportError(FetchError):
    """Raised when the proxy attempt fails at the transport level."""

    pass


class ProxyFetchError(FetchError):
    """Raised when the proxy answers with a non-success status.

    Attributes:
        status_code: HTTP status returned by the proxy.
        reason_phrase: HTTP status text returned by the proxy.
    """

    def __init__(self, url: str, status_code: int, reason_phrase: str):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        super().__init__(url, f"Proxy fetch failed with status {status_code} {reason_phrase}")


class FeedUnreachableError(FeedloomError):
    """Raised when neither the direct nor the proxy path could reach the feed."""

    def __init__(self, message: str = UNREACHABLE_MESSAGE):
        super().__init__(message)


class FeedParseError(FeedloomError):
    """Base class for classified feed document failures."""

    default_message = INVALID_FEED_MESSAGE

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidFeedError(FeedParseError):
    """Document is not a recognizable RSS or Atom feed."""

    default_message = INVALID_FEED_MESSAGE


class NoArticlesError(FeedParseError):
    """Channel or feed holds no item/entry elements at all."""

    default_message = NO_ARTICLES_MESSAGE


class MissingTitleError(FeedParseError):
    """Channel or feed title is missing or blank."""

    default_message = MISSING_TITLE_MESSAGE


class NoValidArticlesError(FeedParseError):
    """Items exist but every one lacks a title or link."""

    default_message = NO_VALID_ARTICLES_MESSAGE


class RedditFeedError(FeedloomError):
    """Raised when a subreddit listing cannot be turned into a feed."""

    def __init__(self, message: str = REDDIT_FAILED_MESSAGE):
        super().__init__(message)


class RedditUnavailableError(RedditFeedError):
    """Reddit refused the request (rate limit, unknown or private subreddit, timeout).

    Unlike other Reddit failures these are shown to the user as-is.
    """

    pass


class UnsupportedFeedTypeError(FeedloomError):
    """Raised when a caller names a feed type that is not rss, reddit or google_news."""

    def __init__(self, feed_type: object):
        self.feed_type = feed_type
        super().__init__(f"Unsupported feed type: {feed_type}")


class FeedTimeoutError(FeedloomError):
    """Raised by the ingestion wrapper when its deadline expires."""

    def __init__(self, message: str = TIMEOUT_MESSAGE):
        super().__init__(message)
