"""Run every extractor over a note and bundle the results."""

from __future__ import annotations

import logging

from .events import CONTENT_PROCESSED, EventBus
from .extractors import (
    extract_hashtags,
    extract_identifier_mentions,
    extract_links,
    extract_media,
    extract_quoted_references,
)
from .models.content import ContentProcessed, ExtractedContent

log = logging.getLogger(__name__)

# Extractor per reference kind, in the order results are reported.
EXTRACTORS = {
    "media": extract_media,
    "links": extract_links,
    "quotes": extract_quoted_references,
    "hashtags": extract_hashtags,
    "mentions": extract_identifier_mentions,
}


def scan_content(text: str) -> ExtractedContent:
    """Extract all reference kinds from `text`."""
    text = text or ""
    return ExtractedContent(
        text=text,
        media=extract_media(text),
        links=extract_links(text),
        quoted_references=extract_quoted_references(text),
        hashtags=extract_hashtags(text),
        mentions=extract_identifier_mentions(text),
    )


def process_content(
    text: str,
    *,
    bus: EventBus | None = None,
    source_id: str | None = None,
) -> ExtractedContent:
    """Scan `text` and announce the result on `bus` when one is given."""
    content = scan_content(text)
    log.debug(
        "Processed %s: %d media, %d links, %d quotes, %d hashtags, %d mentions",
        source_id or "content",
        len(content.media),
        len(content.links),
        len(content.quoted_references),
        len(content.hashtags),
        len(content.mentions),
    )
    if bus is not None:
        bus.emit(CONTENT_PROCESSED, ContentProcessed(content=content, source_id=source_id))
    return content
