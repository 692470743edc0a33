"""Dialect detection: raw XML text to a typed RSS or Atom document.

feedparser does the tolerant XML work (encodings, undeclared entities,
malformed markup). Its untyped result is classified here into either an
``RssChannel`` or an ``AtomFeed`` before any field is normalized.
"""

import io
import re

import feedparser

from feedloom.exceptions import InvalidFeedError
from feedloom.models.dialect import (
    AtomEntry,
    AtomFeed,
    Enclosure,
    FeedDocument,
    RssChannel,
    RssItem,
)

# RSS 0.90 and 1.0 are RDF documents, not <rss><channel>
RDF_VERSIONS = frozenset({"rss090", "rss10"})

# feedparser does not record <channel>; items directly under <rss> still parse
CHANNEL_TAG = re.compile(r"<(?:[A-Za-z_][\w.-]*:)?channel[\s>/]", re.IGNORECASE)

# The text has already been decoded by the HTTP layer; re-encode it as
# UTF-8 and say so, otherwise a stale XML declaration wins.
_UTF8_HEADERS = {"content-type": "application/xml; charset=utf-8"}


def load_document(xml_text: str) -> feedparser.FeedParserDict:
    """Parse raw text into feedparser's generic tree.

    The text is passed as a stream: feedparser treats plain strings that
    look like URLs or paths as locations to open.
    """
    data = xml_text.encode("utf-8", errors="replace")
    return feedparser.parse(
        io.BytesIO(data),
        response_headers=_UTF8_HEADERS,
        resolve_relative_uris=False,
        sanitize_html=False,
    )


def classify(parsed: feedparser.FeedParserDict) -> FeedDocument:
    """Turn a feedparser result into a typed dialect document.

    Raises:
        InvalidFeedError: When the document is neither RSS nor Atom.
    """
    version = parsed.get("version") or ""
    if version.startswith("atom"):
        return _build_atom(parsed)
    if version.startswith("rss") and version not in RDF_VERSIONS:
        return _build_rss(parsed)
    raise InvalidFeedError()


def parse_document(xml_text: str) -> FeedDocument:
    """Parse and classify raw feed text.

    Raises:
        InvalidFeedError: When the document is neither RSS nor Atom, or is
            an <rss> root without a <channel>.
    """
    document = classify(load_document(xml_text))
    if isinstance(document, RssChannel) and not CHANNEL_TAG.search(xml_text):
        raise InvalidFeedError()
    return document


def _text(node: dict, key: str) -> str | None:
    value = node.get(key)
    return value if isinstance(value, str) else None


def _first_content(entry: dict) -> str | None:
    for block in entry.get("content") or []:
        value = block.get("value")
        if isinstance(value, str):
            return value
    return None


def _image_href(node: dict) -> str | None:
    image = node.get("image")
    if isinstance(image, dict):
        return _text(image, "href")
    return None


def _rss_link(entry: dict) -> str | None:
    # A permalink <guid> is copied into "link" but never into "links"
    link = _text(entry, "link")
    for candidate in entry.get("links") or []:
        if candidate.get("rel") == "alternate" and candidate.get("href") == link:
            return link
    return None


def _media_fields(entry: dict) -> dict:
    enclosures = [
        Enclosure(url=link["href"], type=link.get("type") or "")
        for link in entry.get("enclosures", [])
        if isinstance(link.get("href"), str)
    ]
    thumbnails = [
        item["url"] for item in entry.get("media_thumbnail") or [] if isinstance(item.get("url"), str)
    ]
    media_contents = [
        item["url"] for item in entry.get("media_content") or [] if isinstance(item.get("url"), str)
    ]
    return {
        "enclosures": enclosures,
        "media_thumbnails": thumbnails,
        "media_contents": media_contents,
        "itunes_image": _image_href(entry),
    }


def _build_rss(parsed: feedparser.FeedParserDict) -> RssChannel:
    channel = parsed.get("feed") or {}
    items = []
    for entry in parsed.get("entries") or []:
        # feedparser copies content:encoded into "summary" when there is no
        # <description>; only a real description carries summary_detail.
        description = _text(entry, "summary") if "summary_detail" in entry else None
        items.append(
            RssItem(
                title=_text(entry, "title") or "",
                link=_rss_link(entry) or "",
                description=description,
                content=_first_content(entry),
                pub_date=_text(entry, "published"),
                **_media_fields(entry),
            )
        )

    return RssChannel(
        title=_text(channel, "title") or "",
        description=_text(channel, "subtitle") or "",
        image_url=_image_href(channel),
        items=items,
    )


def _build_atom(parsed: feedparser.FeedParserDict) -> AtomFeed:
    feed = parsed.get("feed") or {}
    entries = []
    for entry in parsed.get("entries") or []:
        # "published" is checked first; asking for a missing "updated" makes
        # feedparser fall back to "published" with a DeprecationWarning.
        published = _text(entry, "published")
        updated = None if published else _text(entry, "updated")
        entries.append(
            AtomEntry(
                title=_text(entry, "title") or "",
                link=_text(entry, "link") or "",
                summary=_text(entry, "summary"),
                content=_first_content(entry),
                published=published,
                updated=updated,
                **_media_fields(entry),
            )
        )

    return AtomFeed(
        title=_text(feed, "title") or "",
        subtitle=_text(feed, "subtitle") or "",
        icon=_text(feed, "icon"),
        logo=_text(feed, "logo") or _image_href(feed),
        entries=entries,
    )
