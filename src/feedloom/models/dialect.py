"""Typed views of a feed document, one per supported dialect.

A raw document is classified into exactly one of these before any
field is normalized.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class Enclosure(BaseModel):
    """An ``<enclosure>`` (RSS) or ``rel="enclosure"`` link (Atom)."""

    url: str
    type: str = ""


class EntryMedia(BaseModel):
    """Image-bearing fields shared by RSS items and Atom entries."""

    enclosures: list[Enclosure] = Field(default_factory=list)
    media_thumbnails: list[str] = Field(default_factory=list)
    media_contents: list[str] = Field(default_factory=list)
    itunes_image: str | None = None


class RssItem(EntryMedia):
    title: str = ""
    link: str = ""
    description: str | None = None
    content: str | None = None
    pub_date: str | None = None


class AtomEntry(EntryMedia):
    title: str = ""
    link: str = ""
    summary: str | None = None
    content: str | None = None
    published: str | None = None
    updated: str | None = None


class RssChannel(BaseModel):
    """RSS 0.9x/2.0 ``<rss><channel>`` document."""

    dialect: Literal["rss"] = "rss"
    title: str = ""
    description: str = ""
    image_url: str | None = None
    items: list[RssItem] = Field(default_factory=list)


class AtomFeed(BaseModel):
    """Atom ``<feed>`` document."""

    dialect: Literal["atom"] = "atom"
    title: str = ""
    subtitle: str = ""
    icon: str | None = None
    logo: str | None = None
    entries: list[AtomEntry] = Field(default_factory=list)


FeedDocument = Annotated[RssChannel | AtomFeed, Field(discriminator="dialect")]
