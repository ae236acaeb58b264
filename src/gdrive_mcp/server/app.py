"""HTTP ingress for the Google Drive MCP server.

POST <path> hands the raw request to the MCP transport, which parses the
JSON-RPC envelope itself. GET /healthz is a liveness probe.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from ..core.config import HEALTH_PATH, Settings, get_settings
from ..utils.constants import SERVER_VERSION
from .adapter import GoogleDriveAdapter

logger = logging.getLogger(__name__)


class MCPEndpoint:
    """
    Raw ASGI endpoint for the MCP path.

    The body is left unread so the transport receives it untouched.
    """

    def __init__(self, adapter: GoogleDriveAdapter) -> None:
        self.adapter = adapter

    async def __call__(self, scope: Any, receive: Any, send: Any) -> None:
        response_started = False

        async def tracking_send(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.adapter.handle_request(scope, receive, tracking_send)
        except Exception:
            logger.exception("Google Drive handler error")
            if not response_started:
                response = PlainTextResponse("internal error", status_code=500)
                await response(scope, receive, send)


def create_app(
    settings: Optional[Settings] = None,
    adapter: Optional[GoogleDriveAdapter] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The adapter is constructed here, before the app serves anything, and its
    transport runs for the lifetime of the app.
    """
    settings = settings or get_settings()
    adapter = adapter or GoogleDriveAdapter(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with adapter.run():
            yield

    app = FastAPI(
        title="Google Drive MCP",
        version=SERVER_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_route(settings.path, MCPEndpoint(adapter), methods=["POST"], include_in_schema=False)

    @app.get(HEALTH_PATH, response_class=PlainTextResponse)
    async def healthz() -> str:
        return "ok"

    return app
