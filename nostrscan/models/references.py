"""Pydantic models for references extracted from note text."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class MediaKind(str, Enum):
    """Kind of embedded media."""

    IMAGE = "image"
    VIDEO = "video"


class QuoteKind(str, Enum):
    """Kind of quoted nostr object, taken from the payload prefix."""

    EVENT = "event"
    NOTE = "note"
    NEVENT = "nevent"
    ADDR = "addr"
    UNKNOWN = "unknown"


class MediaReference(BaseModel):
    """An image or video URL found in text."""

    model_config = ConfigDict(frozen=True)

    kind: MediaKind
    url: str
    thumbnail: str | None = None


class LinkReference(BaseModel):
    """A generic http(s) link; domain is None when the URL does not parse."""

    model_config = ConfigDict(frozen=True)

    url: str
    domain: str | None = None


class QuotedObjectReference(BaseModel):
    """A `nostr:` object reference, kept verbatim for a fetcher to decode."""

    model_config = ConfigDict(frozen=True)

    kind: QuoteKind
    id: str
    raw_match: str
