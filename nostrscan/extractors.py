"""Utilities for extracting typed references from note text.

Every function here is pure: it reads the text once per pattern family and
returns fresh records. Nothing is cached between calls and nothing is decoded;
bech32 identifiers are handed back exactly as they appeared.
"""

from __future__ import annotations

import logging
import re

import httpx

from .models.references import (
    LinkReference,
    MediaKind,
    MediaReference,
    QuotedObjectReference,
    QuoteKind,
)

log = logging.getLogger(__name__)

_IMAGE_URL_RE = re.compile(
    r"https?://[^\s]+\.(?:jpg|jpeg|png|gif|webp|svg)(?:\?[^\s]*)?",
    re.IGNORECASE,
)
_VIDEO_URL_RE = re.compile(
    r"https?://[^\s]+\.(?:mp4|webm|mov|avi)(?:\?[^\s]*)?",
    re.IGNORECASE,
)
_YOUTUBE_URL_RE = re.compile(
    r"(?:https?://)?(?:www\.)?(?:youtube\.com/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]+)",
    re.IGNORECASE,
)
_YOUTUBE_THUMBNAIL = "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"

_URL_RE = re.compile(r"https?://[^\s]+", re.IGNORECASE)

# event1/note1 payloads are fixed length, nevent1/addr1 are TLV and variable.
_NOSTR_REF_RE = re.compile(
    r"nostr:(event1[a-z0-9]{58}|note1[a-z0-9]{58}|nevent1[a-z0-9]+|addr1[a-z0-9]+)",
    re.IGNORECASE,
)
# Checked in order; the first discriminator the payload starts with wins.
_QUOTE_DISCRIMINATORS: tuple[tuple[str, QuoteKind], ...] = (
    ("event1", QuoteKind.EVENT),
    ("note1", QuoteKind.NOTE),
    ("nevent1", QuoteKind.NEVENT),
    ("addr1", QuoteKind.ADDR),
)

_HASHTAG_RE = re.compile(r"#([a-zA-Z0-9_]+)")

# Prefix is case-insensitive, the 58-character body is not.
_NPUB_RE = re.compile(r"(?i:npub1)[a-z0-9]{58}")


def extract_media(text: str) -> list[MediaReference]:
    """Extract image, video file and YouTube references.

    Images come first, then video files, then YouTube links; each group is in
    input order.
    """
    if not text:
        return []

    media = [MediaReference(kind=MediaKind.IMAGE, url=m.group(0)) for m in _IMAGE_URL_RE.finditer(text)]
    media.extend(MediaReference(kind=MediaKind.VIDEO, url=m.group(0)) for m in _VIDEO_URL_RE.finditer(text))
    for match in _YOUTUBE_URL_RE.finditer(text):
        media.append(
            MediaReference(
                kind=MediaKind.VIDEO,
                url=match.group(0),
                thumbnail=_YOUTUBE_THUMBNAIL.format(video_id=match.group(1)),
            )
        )
    return media


def domain_for(url: str) -> str | None:
    """Return the host of a well-formed absolute http(s) URL, else None."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, ValueError):
        return None
    if parsed.scheme.lower() not in ("http", "https") or not parsed.host:
        return None
    return parsed.host


def extract_links(text: str) -> list[LinkReference]:
    """Extract every http(s) URL in input order, duplicates included."""
    if not text:
        return []

    links: list[LinkReference] = []
    for match in _URL_RE.finditer(text):
        url = match.group(0)
        domain = domain_for(url)
        if domain is None:
            log.warning("Invalid URL: %s", url)
        links.append(LinkReference(url=url, domain=domain))
    return links


def classify_quote(payload: str) -> QuoteKind:
    """Map a `nostr:` payload to its kind using the discriminator table."""
    lowered = payload.lower()
    for prefix, kind in _QUOTE_DISCRIMINATORS:
        if lowered.startswith(prefix):
            return kind
    return QuoteKind.UNKNOWN


def extract_quoted_references(text: str) -> list[QuotedObjectReference]:
    """Extract `nostr:` event, note, nevent and addr references."""
    if not text:
        return []

    quotes: list[QuotedObjectReference] = []
    for match in _NOSTR_REF_RE.finditer(text):
        raw = match.group(0)
        kind = classify_quote(match.group(1))
        if kind is QuoteKind.UNKNOWN:
            log.error("Unclassifiable nostr reference: %s", raw)
        quotes.append(QuotedObjectReference(kind=kind, id=raw, raw_match=raw))
    return quotes


def extract_hashtags(text: str) -> list[str]:
    """Extract hashtags without the leading '#'."""
    if not text:
        return []
    return [match.group(1) for match in _HASHTAG_RE.finditer(text)]


def extract_identifier_mentions(text: str) -> list[str]:
    """Extract raw npub mentions.

    Only the shape is checked. Tokens that fail bech32 decoding later are the
    decoder's problem, not filtered here.
    """
    if not text:
        return []
    return [match.group(0) for match in _NPUB_RE.finditer(text)]
