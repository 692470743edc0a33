"""Subreddit listing source.

Reddit serves a JSON listing at ``/r/<name>.json``; that is used instead
of the subreddit's RSS, which drops self-post bodies and thumbnails.
"""

import httpx

from feedloom.exceptions import RedditFeedError, RedditUnavailableError
from feedloom.sources.fetcher import USER_AGENT
from feedloom.utils.http_client import create_http_client
from feedloom.utils.urls import extract_subreddit_name


class RedditFeedSource:
    """Reddit subreddit source.

    Fetches the newest listing for one subreddit.
    """

    def __init__(self, url: str, user_agent: str = USER_AGENT):
        """Initialize Reddit source.

        Args:
            url: Subreddit URL (e.g., https://www.reddit.com/r/python).
            user_agent: User-Agent header for requests.

        Raises:
            ValueError: When the URL is not a subreddit URL.
        """
        self._subreddit = extract_subreddit_name(url)
        self._user_agent = user_agent

    @property
    def subreddit(self) -> str:
        return self._subreddit

    @property
    def url(self) -> str:
        """Listing endpoint URL."""
        return f"https://www.reddit.com/r/{self._subreddit}.json"

    async def fetch_listing(self, client: httpx.AsyncClient | None = None) -> dict:
        """Fetch the raw subreddit listing.

        Returns:
            Decoded JSON listing.

        Raises:
            RedditFeedError: On rate limiting, unknown or private subreddits,
                and any other non-2xx status.
            httpx.RequestError: When the request fails at the transport level.
        """
        if client is None:
            async with create_http_client() as own_client:
                return await self.fetch_listing(own_client)

        response = await client.get(self.url, headers={"User-Agent": self._user_agent})

        if response.status_code == 429:
            raise RedditUnavailableError(
                "Reddit rate limit exceeded. Please try again in a few minutes."
            )
        if response.status_code == 404:
            raise RedditUnavailableError(
                f'Subreddit "{self._subreddit}" not found. '
                "Please check the subreddit name and try again."
            )
        if response.status_code == 403:
            raise RedditUnavailableError(
                f'Subreddit "{self._subreddit}" is private, banned, or quarantined.'
            )
        if not response.is_success:
            raise RedditFeedError(
                f"Failed to fetch Reddit posts: {response.status_code} {response.reason_phrase}"
            )

        return response.json()
