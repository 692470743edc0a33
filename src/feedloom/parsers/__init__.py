"""Parsers package."""

from feedloom.parsers.base import FeedParser
from feedloom.parsers.dialect import classify, load_document, parse_document
from feedloom.parsers.images import extract_image_url, find_inline_image
from feedloom.parsers.reddit_parser import RedditParser
from feedloom.parsers.syndication_parser import SyndicationParser

__all__ = [
    "FeedParser",
    "RedditParser",
    "SyndicationParser",
    "classify",
    "extract_image_url",
    "find_inline_image",
    "load_document",
    "parse_document",
]
