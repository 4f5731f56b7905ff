"""Extraction API routes."""

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from ...content import EXTRACTORS, process_content
from ...models.content import ExtractedContent

router = APIRouter(tags=["extract"])


class ExtractRequest(BaseModel):
    """Request body for extraction."""

    text: str = ""
    source_id: str | None = None


@router.post("/extract")
async def extract_all(request: Request, body: ExtractRequest) -> ExtractedContent:
    """Extract every reference kind and announce the result."""
    return process_content(body.text, bus=request.app.state.bus, source_id=body.source_id)


@router.post("/extract/{kind}")
async def extract_kind(kind: str, body: ExtractRequest) -> dict[str, Any]:
    """Extract a single reference kind."""
    extractor = EXTRACTORS.get(kind)
    if extractor is None:
        raise HTTPException(status_code=404, detail=f"Unknown reference kind: {kind}")

    items = extractor(body.text)
    return {
        "kind": kind,
        "items": [item if isinstance(item, str) else item.model_dump(mode="json") for item in items],
    }
