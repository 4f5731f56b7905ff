"""Tests for combined content processing."""

from nostrscan.content import EXTRACTORS, process_content, scan_content
from nostrscan.events import CONTENT_PROCESSED, EventBus
from nostrscan.extractors import (
    extract_hashtags,
    extract_identifier_mentions,
    extract_links,
    extract_media,
    extract_quoted_references,
)
from nostrscan.models import ContentProcessed, MediaKind, QuoteKind

NOTE_ID = "note1" + "qy" * 29
NPUB = "npub1" + "x7" * 29

TEXT = (
    "Fresh pics #photography https://example.com/sunset.jpg\n"
    f"via {NPUB} quoting nostr:{NOTE_ID}\n"
    "full album https://example.com/album"
)


def test_scan_content_matches_individual_extractors():
    content = scan_content(TEXT)

    assert content.text == TEXT
    assert list(content.media) == extract_media(TEXT)
    assert list(content.links) == extract_links(TEXT)
    assert list(content.quoted_references) == extract_quoted_references(TEXT)
    assert list(content.hashtags) == extract_hashtags(TEXT)
    assert list(content.mentions) == extract_identifier_mentions(TEXT)


def test_scan_content_shapes_results():
    content = scan_content(TEXT)

    assert [m.kind for m in content.media] == [MediaKind.IMAGE]
    assert [link.domain for link in content.links] == ["example.com", "example.com"]
    assert [q.kind for q in content.quoted_references] == [QuoteKind.NOTE]
    assert content.hashtags == ("photography",)
    assert content.mentions == (NPUB,)


def test_scan_content_empty_text():
    content = scan_content("")

    assert content.text == ""
    assert content.media == ()
    assert content.links == ()
    assert content.quoted_references == ()
    assert content.hashtags == ()
    assert content.mentions == ()


def test_process_content_without_bus_returns_scan():
    assert process_content(TEXT) == scan_content(TEXT)


def test_process_content_announces_result():
    bus = EventBus()
    received: list[ContentProcessed] = []
    bus.on(CONTENT_PROCESSED, received.append)

    content = process_content(TEXT, bus=bus, source_id="note-42")

    assert len(received) == 1
    assert received[0].source_id == "note-42"
    assert received[0].content == content


def test_process_content_survives_failing_subscriber():
    bus = EventBus()

    def _boom(_payload):
        raise RuntimeError("index unavailable")

    bus.on(CONTENT_PROCESSED, _boom)

    content = process_content(TEXT, bus=bus)

    assert content.hashtags == ("photography",)


def test_extractors_registry_covers_all_kinds():
    assert list(EXTRACTORS) == ["media", "links", "quotes", "hashtags", "mentions"]
