"""HTTP client utilities.

Provides the configured async client used by the feed and Reddit fetchers.
"""

import httpx

from feedloom.config.settings import settings


def create_http_client(
    timeout: float | None = None,
    follow_redirects: bool = True,
) -> httpx.AsyncClient:
    """Create an async HTTP client.

    Headers are left to each request: the direct feed fetch sends its own
    User-Agent and Accept, while the proxy fallback must go out bare.

    Args:
        timeout: Per-request socket timeout in seconds. Defaults to settings.
        follow_redirects: Whether to follow redirects.

    Returns:
        Configured httpx.AsyncClient.
    """
    return httpx.AsyncClient(
        timeout=timeout if timeout is not None else settings.http_timeout,
        follow_redirects=follow_redirects,
    )
