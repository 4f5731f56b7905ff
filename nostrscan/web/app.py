"""FastAPI application for the nostrscan API."""

from fastapi import FastAPI

from .. import __version__
from ..events import EventBus
from .routes import extract


def create_app(bus: EventBus | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    `bus` receives a `content:processed` event for every full extraction;
    a fresh bus is created when none is passed.
    """
    app = FastAPI(
        title="nostrscan",
        description="Reference extraction for Nostr note text",
        version=__version__,
    )

    app.state.bus = bus if bus is not None else EventBus()

    app.include_router(extract.router, prefix="/api")

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "version": __version__}

    return app
