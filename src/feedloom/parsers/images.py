"""Image URL extraction for a single item or entry.

Strategies are tried in order and the first match wins:

1. an ``<enclosure>`` whose type is ``image/*``
2. ``<media:thumbnail url>``
3. ``<media:content url>``, then ``<itunes:image href>``
4. the first ``<img src>`` inside the description/content HTML

No match is a normal outcome and yields ``None``.
"""

import re

from feedloom.models.dialect import EntryMedia

# One bounded scan over the raw fragment; inner markup is often malformed,
# so this is not an HTML parse.
IMG_SRC_PATTERN = re.compile(
    r"<img[^>]{1,2048}src=[\"']([^\"'>]{1,2048})[\"'][^>]*>",
    re.IGNORECASE,
)


def _first(urls: list[str]) -> str | None:
    for url in urls:
        if url.strip():
            return url.strip()
    return None


def find_inline_image(*fragments: str | None) -> str | None:
    """Return the ``src`` of the first ``<img>`` across the given fragments."""
    text = " ".join(fragment for fragment in fragments if fragment)
    if not text:
        return None
    match = IMG_SRC_PATTERN.search(text)
    return match.group(1) if match else None


def extract_image_url(media: EntryMedia, *fragments: str | None) -> str | None:
    """Resolve an article image from structured media fields, then inline HTML.

    Args:
        media: The item or entry being normalized.
        fragments: Description/summary and content HTML to scan for ``<img>``.
    """
    for enclosure in media.enclosures:
        if enclosure.type.lower().startswith("image/") and enclosure.url.strip():
            return enclosure.url.strip()

    structured = (
        _first(media.media_thumbnails)
        or _first(media.media_contents)
        or _first([media.itunes_image] if media.itunes_image else [])
    )
    if structured:
        return structured

    return find_inline_image(*fragments)
