"""Pydantic models for processed note content and its events."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .references import LinkReference, MediaReference, QuotedObjectReference


class ExtractedContent(BaseModel):
    """Every reference found in one piece of text."""

    model_config = ConfigDict(frozen=True)

    text: str
    media: tuple[MediaReference, ...] = ()
    links: tuple[LinkReference, ...] = ()
    quoted_references: tuple[QuotedObjectReference, ...] = ()
    hashtags: tuple[str, ...] = ()
    mentions: tuple[str, ...] = ()


class ContentProcessed(BaseModel):
    """Payload of the `content:processed` event."""

    model_config = ConfigDict(frozen=True)

    content: ExtractedContent
    source_id: str | None = None
