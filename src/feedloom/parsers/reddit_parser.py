"""Subreddit listing parser.

Maps Reddit's JSON listing onto the same ParsedFeed shape RSS and Atom
feeds produce, so callers can store them identically.
"""

from datetime import datetime, timezone

import structlog

from feedloom.exceptions import RedditFeedError
from feedloom.models.feed import ParsedArticle, ParsedFeed
from feedloom.utils.text import format_iso_utc, truncate, utc_now_iso

logger = structlog.get_logger()

# Thumbnail placeholders Reddit uses instead of a URL
_PLACEHOLDER_THUMBNAILS = {"self", "default"}


class RedditParser:
    """Parser for ``/r/<name>.json`` listings."""

    def parse(self, listing: dict, subreddit: str) -> ParsedFeed:
        """Parse a subreddit listing into a ParsedFeed.

        Args:
            listing: Decoded JSON from the listing endpoint.
            subreddit: Subreddit name, used for the feed title and messages.

        Raises:
            RedditFeedError: When the listing holds no usable posts.
        """
        children = (listing.get("data") or {}).get("children") or []
        if not children:
            raise RedditFeedError(
                f'No posts found in subreddit "{subreddit}". '
                "The subreddit might be empty or restricted."
            )

        log = logger.bind(subreddit=subreddit)
        articles = []
        for index, child in enumerate(children):
            article = self._parse_post(child.get("data") or {})
            if article is None:
                log.warning("Skipping invalid Reddit post: missing title or link", index=index)
                continue
            articles.append(article)

        if not articles:
            raise RedditFeedError(f'No valid posts found in subreddit "{subreddit}".')

        return ParsedFeed(
            title=f"r/{subreddit}",
            description=f"Posts from the {subreddit} subreddit",
            image_url=None,
            articles=articles,
        )

    def _parse_post(self, post: dict) -> ParsedArticle | None:
        title = (post.get("title") or "").strip()
        is_self = bool(post.get("is_self"))
        if is_self:
            permalink = post.get("permalink")
            link = f"https://www.reddit.com{permalink}" if permalink else ""
        else:
            link = post.get("url") or ""

        if not title or not link:
            return None

        selftext = post.get("selftext") or ""
        if selftext:
            description = truncate(selftext)
            content = self._selftext_to_html(selftext)
        elif is_self:
            description = "Discussion post on Reddit"
            content = ""
        else:
            description = f"External link: {link}"
            content = (
                "<p>This is a link post to an external resource.</p>"
                f'<p><a href="{link}" target="_blank" rel="noopener noreferrer">'
                f"Open external link: {link}</a></p>"
            )

        return ParsedArticle(
            title=title,
            link=link,
            description=description,
            content=content,
            pub_date=self._created_at(post.get("created_utc")),
            source=f"u/{post.get('author') or '[deleted]'}",
            image_url=self._thumbnail(post.get("thumbnail")),
            reddit_post_id=post.get("id"),
            reddit_permalink=post.get("permalink"),
            reddit_subreddit=post.get("subreddit"),
        )

    def _selftext_to_html(self, selftext: str) -> str:
        paragraphs = (para.replace("\n", "<br>") for para in selftext.split("\n\n"))
        return "".join(f"<p>{para}</p>" for para in paragraphs)

    def _created_at(self, created_utc: float | None) -> str:
        if created_utc is None:
            return utc_now_iso()
        return format_iso_utc(datetime.fromtimestamp(created_utc, tz=timezone.utc))

    def _thumbnail(self, thumbnail: str | None) -> str | None:
        if (
            thumbnail
            and thumbnail not in _PLACEHOLDER_THUMBNAILS
            and thumbnail.startswith("http")
        ):
            return thumbnail
        return None
