"""Command-line entry point.

Fetches and parses one feed and prints it as JSON, the same shape the
subscription layer stores.
"""

import argparse
import asyncio
import json
import sys

from feedloom.config.settings import settings
from feedloom.exceptions import FeedloomError
from feedloom.models.feed import FeedType, ParsedFeed
from feedloom.services.ingestion import FeedIngestionService
from feedloom.utils.logger import configure_logging, get_logger
from feedloom.utils.urls import build_google_news_search_url, generate_google_news_title


async def run_cli(url: str, feed_type: str | None, timeout: float) -> ParsedFeed:
    """Ingest one feed under the configured deadline."""
    logger = get_logger("cli")
    logger.info("Ingesting feed", url=url, feed_type=feed_type)
    return await FeedIngestionService(timeout=timeout).ingest(url, feed_type)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="feedloom - RSS/Atom feed ingestion")
    parser.add_argument("url", nargs="?", help="Feed URL to fetch and parse")
    parser.add_argument(
        "--type",
        dest="feed_type",
        choices=[t.value for t in FeedType],
        default=None,
        help="Force a feed type instead of detecting it from the URL",
    )
    parser.add_argument(
        "--google-news",
        metavar="QUERY",
        help="Build a Google News search feed for QUERY instead of passing a URL",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.feed_parse_timeout,
        help="Deadline in seconds for the whole fetch and parse",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: from settings)",
    )

    args = parser.parse_args(argv)

    if args.google_news:
        url = build_google_news_search_url(args.google_news)
    elif args.url:
        url = args.url
    else:
        parser.error("a feed URL or --google-news QUERY is required")

    configure_logging(log_level=args.log_level, json_format=settings.log_json)

    if args.google_news:
        get_logger("cli").info(
            "Built Google News search feed",
            url=url,
            title=generate_google_news_title(url),
        )

    try:
        feed = asyncio.run(run_cli(url, args.feed_type, args.timeout))
    except (FeedloomError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 1

    print(json.dumps(feed.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
