"""Sources package."""

from feedloom.sources.fetcher import (
    FetchOutcome,
    FetchState,
    attempt_direct,
    attempt_proxy,
    build_proxy_url,
    fetch_feed_xml,
)
from feedloom.sources.reddit import RedditFeedSource

__all__ = [
    "FetchOutcome",
    "FetchState",
    "RedditFeedSource",
    "attempt_direct",
    "attempt_proxy",
    "build_proxy_url",
    "fetch_feed_xml",
]
