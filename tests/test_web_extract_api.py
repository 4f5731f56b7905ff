"""Tests for the extraction HTTP API."""

from fastapi.testclient import TestClient

from nostrscan.events import CONTENT_PROCESSED, EventBus
from nostrscan.web.app import create_app

NOTE_ID = "note1" + "qy" * 29


def test_extract_all_returns_content_and_emits_event():
    bus = EventBus()
    received = []
    bus.on(CONTENT_PROCESSED, received.append)
    client = TestClient(create_app(bus))

    response = client.post(
        "/api/extract",
        json={"text": f"#zap https://youtu.be/abc123 nostr:{NOTE_ID}", "source_id": "evt-1"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["hashtags"] == ["zap"]
    assert body["media"] == [
        {
            "kind": "video",
            "url": "https://youtu.be/abc123",
            "thumbnail": "https://img.youtube.com/vi/abc123/maxresdefault.jpg",
        }
    ]
    assert body["links"] == [{"url": "https://youtu.be/abc123", "domain": "youtu.be"}]
    assert body["quoted_references"][0]["kind"] == "note"
    assert body["mentions"] == []
    assert len(received) == 1
    assert received[0].source_id == "evt-1"


def test_extract_all_empty_text():
    client = TestClient(create_app())

    response = client.post("/api/extract", json={"text": ""})

    assert response.status_code == 200
    body = response.json()
    assert body["text"] == ""
    assert all(body[key] == [] for key in ("media", "links", "quoted_references", "hashtags", "mentions"))


def test_extract_single_kind():
    client = TestClient(create_app())

    response = client.post("/api/extract/links", json={"text": "a http://example.com:abc/x b https://ok.example"})

    assert response.status_code == 200
    assert response.json() == {
        "kind": "links",
        "items": [
            {"url": "http://example.com:abc/x", "domain": None},
            {"url": "https://ok.example", "domain": "ok.example"},
        ],
    }


def test_extract_unknown_kind_is_404():
    client = TestClient(create_app())

    response = client.post("/api/extract/emoji", json={"text": ":)"})

    assert response.status_code == 404


def test_health():
    client = TestClient(create_app())

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
