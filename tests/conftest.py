"""Test configuration and fixtures."""

import asyncio

import httpx
import pytest

FEED_URL = "https://example.com/feed.xml"


class ScriptedHandler:
    """httpx.MockTransport handler that replays responses in order.

    Each step is either an ``httpx.Response`` to return or an exception to
    raise. Every request seen is recorded on ``requests``.
    """

    def __init__(self, *steps):
        self.steps = list(steps)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.steps:
            raise AssertionError(f"Unexpected request to {request.url}")
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step


@pytest.fixture
def scripted():
    """Factory for ScriptedHandler instances."""
    return ScriptedHandler


@pytest.fixture
def run_with_client():
    """Run ``call(client)`` against a client backed by ``handler``."""

    def _run(handler, call):
        async def runner():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await call(client)

        return asyncio.run(runner())

    return _run


@pytest.fixture
def sample_rss_feed():
    """RSS 2.0 feed: three items, the third has no link."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:content="http://purl.org/rss/1.0/modules/content/"
     xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Test Blog</title>
    <link>https://example.com</link>
    <description>A test blog for RSS parsing</description>
    <image>
      <url>https://example.com/logo.png</url>
      <title>Test Blog</title>
      <link>https://example.com</link>
    </image>
    <item>
      <title>First Post</title>
      <link>https://example.com/first-post</link>
      <description>This is the first post description</description>
      <content:encoded><![CDATA[<p>This is the full content of the first post</p>]]></content:encoded>
      <pubDate>Mon, 01 Jan 2024 12:00:00 GMT</pubDate>
      <enclosure url="https://example.com/first.jpg" type="image/jpeg" length="1234"/>
      <media:thumbnail url="https://example.com/first-thumb.jpg"/>
    </item>
    <item>
      <title>Second Post</title>
      <link>https://example.com/second-post</link>
      <description><![CDATA[<p>Intro <img src="https://example.com/inline.png" alt="chart"> text</p>]]></description>
      <pubDate>Tue, 02 Jan 2024 12:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Third Post</title>
      <description>This item has no link</description>
      <pubDate>Wed, 03 Jan 2024 12:00:00 GMT</pubDate>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def sample_atom_feed():
    """Atom 1.0 feed: the second entry only has <updated>."""
    return """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Test Atom Feed</title>
  <subtitle>An Atom feed for testing</subtitle>
  <icon>https://example.com/icon.png</icon>
  <link href="https://example.com/"/>
  <id>urn:uuid:60a76c80-d399-11d9-b93C-0003939e0af6</id>
  <updated>2024-01-05T12:00:00Z</updated>
  <entry>
    <title>Atom Entry One</title>
    <link href="https://example.com/atom-entry-1"/>
    <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
    <published>2024-01-01T12:00:00Z</published>
    <updated>2024-01-02T12:00:00Z</updated>
    <summary>Summary of atom entry one</summary>
    <content type="html">&lt;p&gt;Full content of atom entry one&lt;/p&gt;</content>
  </entry>
  <entry>
    <title>Atom Entry Two</title>
    <link href="https://example.com/atom-entry-2"/>
    <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6b</id>
    <updated>2024-01-05T12:00:00Z</updated>
    <summary>Summary of atom entry two</summary>
  </entry>
</feed>"""


@pytest.fixture
def empty_rss_feed():
    """RSS channel with a title but no items."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Empty Feed</title>
    <link>https://example.com</link>
    <description>Nothing here yet</description>
  </channel>
</rss>"""


def rss_document(items: str, title: str = "Test Feed", namespaces: str = "") -> str:
    """Wrap item markup in a minimal RSS 2.0 channel."""
    title_element = f"<title>{title}</title>" if title else ""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" {namespaces}>
  <channel>
    {title_element}
    {items}
  </channel>
</rss>"""


@pytest.fixture
def make_rss():
    """Factory building RSS documents around item markup."""
    return rss_document


@pytest.fixture
def reddit_listing():
    """Subreddit listing with a self post, a link post and an invalid post."""
    return {
        "data": {
            "children": [
                {
                    "data": {
                        "id": "abc123",
                        "title": "  How do I parse feeds?  ",
                        "selftext": "First paragraph\nsecond line\n\nSecond paragraph",
                        "url": "https://www.reddit.com/r/python/comments/abc123/how/",
                        "permalink": "/r/python/comments/abc123/how/",
                        "author": "alice",
                        "created_utc": 1704110400,
                        "thumbnail": "self",
                        "subreddit": "python",
                        "is_self": True,
                    }
                },
                {
                    "data": {
                        "id": "def456",
                        "title": "A great article",
                        "selftext": "",
                        "url": "https://blog.example.com/post",
                        "permalink": "/r/python/comments/def456/a_great_article/",
                        "author": "bob",
                        "created_utc": 1704114000,
                        "thumbnail": "https://b.thumbs.redditmedia.com/thumb.jpg",
                        "subreddit": "python",
                        "is_self": False,
                    }
                },
                {
                    "data": {
                        "id": "ghi789",
                        "title": "   ",
                        "selftext": "",
                        "url": "https://example.com/untitled",
                        "permalink": "/r/python/comments/ghi789/x/",
                        "author": "carol",
                        "created_utc": 1704117600,
                        "thumbnail": "default",
                        "subreddit": "python",
                        "is_self": False,
                    }
                },
            ]
        }
    }
