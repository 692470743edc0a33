"""Small text helpers shared by the parsers."""

from datetime import datetime, timezone

DESCRIPTION_LIMIT = 300
ELLIPSIS = "…"


def truncate(text: str | None, limit: int = DESCRIPTION_LIMIT) -> str:
    """Cut text to ``limit`` characters and append a single ellipsis.

    Not word-boundary aware: a description of 301 characters becomes the
    first 300 followed by ``…``.
    """
    if not text:
        return ""
    if len(text) > limit:
        return f"{text[:limit]}{ELLIPSIS}"
    return text


def format_iso_utc(moment: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision and ``Z``."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Current wall-clock time, used when a source omits a publication date."""
    return format_iso_utc(datetime.now(timezone.utc))
