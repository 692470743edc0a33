"""Feed document fetcher with a single proxy fallback.

Some publishers refuse direct requests (bot filters, geo blocks, TLS
quirks). When the direct request raises or answers with a non-2xx
status, the same URL is retried once through a public read-through proxy.
"""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

import httpx
import structlog

from feedloom.exceptions import FeedTransportError, ProxyFetchError
from feedloom.utils.http_client import create_http_client

logger = structlog.get_logger()

USER_AGENT = "Mozilla/5.0 (compatible; Feedloom/1.0; +https://github.com/feedloom/feedloom)"
ACCEPT = "application/rss+xml, application/xml;q=0.9, */*;q=0.8"
PROXY_BASE = "https://api.allorigins.win/raw?url="

DIRECT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": ACCEPT,
}


class FetchState(str, Enum):
    """State of the direct attempt."""

    DIRECT = "direct"
    NEEDS_FALLBACK = "needs_fallback"


@dataclass(frozen=True)
class FetchOutcome:
    """Explicit result of the direct attempt.

    ``body`` is set for DIRECT; ``reason`` says why the proxy is needed.
    A failed proxy attempt is not an outcome: it raises a FetchError.
    """

    state: FetchState
    body: str | None = None
    reason: str | None = None


def build_proxy_url(url: str) -> str:
    """Proxy endpoint for ``url``, fully percent-encoded as a query value."""
    return f"{PROXY_BASE}{quote(url, safe='')}"


async def attempt_direct(client: httpx.AsyncClient, url: str) -> FetchOutcome:
    """Request the feed directly.

    Never raises for transport errors or bad statuses; both are reported
    as NEEDS_FALLBACK so the caller can decide on the proxy.
    """
    try:
        response = await client.get(url, headers=DIRECT_HEADERS, follow_redirects=True)
    except httpx.RequestError as e:
        return FetchOutcome(FetchState.NEEDS_FALLBACK, reason=f"Direct fetch failed: {e!r}")

    if response.is_success:
        return FetchOutcome(FetchState.DIRECT, body=response.text)
    return FetchOutcome(
        FetchState.NEEDS_FALLBACK,
        reason=f"Direct fetch failed with status {response.status_code} {response.reason_phrase}",
    )


async def attempt_proxy(client: httpx.AsyncClient, url: str) -> str:
    """Request the feed through the read-through proxy.

    Raises:
        FeedTransportError: When the proxy request fails at the transport level.
        ProxyFetchError: When the proxy answers with a non-success status.
    """
    try:
        response = await client.get(build_proxy_url(url))
    except httpx.RequestError as e:
        raise FeedTransportError(url, f"Proxy fetch failed: {e}") from e

    if not response.is_success:
        raise ProxyFetchError(url, response.status_code, response.reason_phrase)
    return response.text


async def fetch_feed_xml(url: str, client: httpx.AsyncClient | None = None) -> str:
    """Fetch the raw feed document for ``url``.

    Args:
        url: Absolute feed URL.
        client: Optional shared client. A short-lived one is created otherwise.

    Returns:
        Response body text from the direct request or, failing that, the proxy.

    Raises:
        FeedTransportError: When both attempts fail at the transport level.
        ProxyFetchError: When the proxy answers with a non-success status.
    """
    if client is None:
        async with create_http_client() as own_client:
            return await fetch_feed_xml(url, own_client)

    log = logger.bind(url=url)

    outcome = await attempt_direct(client, url)
    if outcome.state is FetchState.DIRECT:
        log.debug("Feed fetched directly")
        return outcome.body

    log.warning("Direct fetch failed, falling back to proxy", reason=outcome.reason)
    body = await attempt_proxy(client, url)
    log.debug("Feed fetched through proxy")
    return body
