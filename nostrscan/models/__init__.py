"""Pydantic models for the nostrscan application."""

from __future__ import annotations

from .config import (
    ALL_KINDS,
    LoggingConfig,
    NostrscanConfig,
    OutputConfig,
    ReferenceKind,
    WebConfig,
)
from .content import ContentProcessed, ExtractedContent
from .references import (
    LinkReference,
    MediaKind,
    MediaReference,
    QuotedObjectReference,
    QuoteKind,
)

__all__ = [
    "ALL_KINDS",
    "ContentProcessed",
    "ExtractedContent",
    "LinkReference",
    "LoggingConfig",
    "MediaKind",
    "MediaReference",
    "NostrscanConfig",
    "OutputConfig",
    "QuoteKind",
    "QuotedObjectReference",
    "ReferenceKind",
    "WebConfig",
]
