"""URL helpers for the non-RSS feed types (Reddit, Google News)."""

import re
from urllib.parse import parse_qs, quote, unquote, urlparse

REDDIT_URL_PATTERN = re.compile(r"^(https?://)?(www\.)?reddit\.com/r/([a-zA-Z0-9_]+)")

GOOGLE_NEWS_TOPICS = {
    "CAAqJggKIiBDQkFTRWdvSUwyMHZNRGx1YlY4U0FtVnVHZ0pWVXlnQVAB": "World",
    "CAAqJggKIiBDQkFTRWdvSUwyMHZNRGRqTVhZU0FtVnVHZ0pWVXlnQVAB": "Technology",
    "CAAqJggKIiBDQkFTRWdvSUwyMHZNRGx6TVdZU0FtVnVHZ0pWVXlnQVAB": "Business",
    "CAAqJggKIiBDQkFTRWdvSUwyMHZNRFp0Y1RjU0FtVnVHZ0pWVXlnQVAB": "Science",
    "CAAqIQgKIhtDQkFTRGdvSUwyMHZNR3QwTlRFU0FtVnVLQUFQAQ": "Health",
    "CAAqJggKIiBDQkFTRWdvSUwyMHZNREpxYW5RU0FtVnVHZ0pWVXlnQVAB": "Entertainment",
    "CAAqJggKIiBDQkFTRWdvSUwyMHZNRFp1ZEdvU0FtVnVHZ0pWVXlnQVAB": "Sports",
}

_TOPIC_ID = re.compile(r"/topics/([^?]+)")
_PUBLISHER = re.compile(r"allinurl:([a-z0-9.-]+)", re.IGNORECASE)
_WHEN_TOKEN = re.compile(r"when:\d+[hdwmy]")


def is_reddit_url(url: str) -> bool:
    return bool(REDDIT_URL_PATTERN.match(url))


def extract_subreddit_name(url: str) -> str:
    """Return the subreddit name from a reddit.com/r/<name> URL.

    Raises:
        ValueError: When the URL is not a subreddit URL.
    """
    match = REDDIT_URL_PATTERN.match(url)
    if not match or not match.group(3):
        raise ValueError("Invalid Reddit URL format. Expected: https://reddit.com/r/subreddit")
    return match.group(3)


def normalize_reddit_url(url: str) -> str:
    return f"https://www.reddit.com/r/{extract_subreddit_name(url)}"


def is_google_news_url(url: str) -> bool:
    return "news.google.com/rss" in url


def build_google_news_search_url(query: str) -> str:
    encoded = quote(query.strip(), safe="")
    return f"https://news.google.com/rss/search?q={encoded}&hl=en&gl=US&ceid=US:en"


def generate_google_news_title(url: str) -> str:
    """Derive a readable feed title from a Google News RSS URL.

    Examples:
        https://news.google.com/rss -> "Google News - Top Stories"
        .../rss/search?q=allinurl:bbc.co.uk -> "Google News - BBC"
        .../rss/search?q=climate+when:7d -> "Google News - climate"
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return "Google News"

    path = parsed.path
    if path in ("/rss", "/rss/"):
        return "Google News - Top Stories"

    if "/topics/" in path:
        match = _TOPIC_ID.search(path)
        if match and match.group(1) in GOOGLE_NEWS_TOPICS:
            return f"Google News - {GOOGLE_NEWS_TOPICS[match.group(1)]}"
        return "Google News"

    if "/search" in path:
        query = parse_qs(parsed.query).get("q", [""])[0]
        if query:
            publisher = _PUBLISHER.search(query)
            if publisher:
                label = publisher.group(1).split(".")[0]
                return f"Google News - {label.upper()}"

            cleaned = _WHEN_TOKEN.sub("", unquote(query)).replace("+", " ").strip()
            return f"Google News - {cleaned}" if cleaned else "Google News"

    return "Google News"
