"""Utils package."""

from feedloom.utils.http_client import create_http_client
from feedloom.utils.logger import configure_logging, get_logger
from feedloom.utils.text import truncate, utc_now_iso

__all__ = [
    "configure_logging",
    "get_logger",
    "create_http_client",
    "truncate",
    "utc_now_iso",
]
