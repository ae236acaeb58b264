"""MCP protocol adapter for Google Drive.

Registers the list-resources, read-resource, list-tools and call-tool
handlers on a low-level MCP server and binds it to a stateless
streamable-HTTP transport. The adapter is built once at startup and shared
by every request.
"""
import asyncio
import base64
import functools
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Mapping, Optional

import mcp.types as types
from google.auth.exceptions import RefreshError
from googleapiclient.errors import HttpError
from mcp.server.lowlevel import Server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from ..client import GDriveClient
from ..client.files import is_text_mime_type
from ..core.config import Settings, get_settings
from ..utils.constants import RESOURCE_URI_PREFIX, SERVER_NAME, SERVER_VERSION
from ..utils.errors import (
    AuthenticationError,
    GDriveError,
    InvalidArgumentError,
    ToolNotFoundError,
    handle_http_error,
)

logger = logging.getLogger(__name__)

SEARCH_TOOL_NAME = "search"

SEARCH_TOOL = types.Tool(
    name=SEARCH_TOOL_NAME,
    description="Search for files in Google Drive",
    inputSchema={
        "type": "object",
        "properties": {"query": {"type": "string", "description": "Search query"}},
        "required": ["query"],
    },
)

TOOLS = [SEARCH_TOOL]

ClientFactory = Callable[[Optional[Mapping[str, str]]], GDriveClient]
RequestHandler = Callable[[Any], Awaitable[types.ServerResult]]


def resource_uri(file_id: str) -> str:
    """Build the resource URI for a Drive file ID."""
    return f"{RESOURCE_URI_PREFIX}{file_id}"


def file_id_from_uri(uri: str) -> str:
    """Extract the Drive file ID from a resource URI.

    Raises:
        InvalidArgumentError: If the URI is not a gdrive:/// URI or has no ID.
    """
    if not uri.startswith(RESOURCE_URI_PREFIX):
        raise InvalidArgumentError(f"Unsupported resource URI: {uri}")
    file_id = uri[len(RESOURCE_URI_PREFIX):]
    if not file_id:
        raise InvalidArgumentError(f"Resource URI has no file ID: {uri}")
    return file_id


def build_resource_contents(
    uri: Any, mime_type: str, data: bytes
) -> types.TextResourceContents | types.BlobResourceContents:
    """Shape file bytes as text or base64 blob contents, never both."""
    if is_text_mime_type(mime_type):
        return types.TextResourceContents(
            uri=uri, mimeType=mime_type, text=data.decode('utf-8', errors='replace')
        )
    return types.BlobResourceContents(
        uri=uri, mimeType=mime_type, blob=base64.b64encode(data).decode('ascii')
    )


def format_search_results(files: list[dict[str, Any]]) -> str:
    """Render search matches as a 'Found N files:' summary, one line per file."""
    lines = [f"{f.get('name')} ({f.get('mimeType')})" for f in files]
    return f"Found {len(files)} files:\n" + "\n".join(lines)


class GoogleDriveAdapter:
    """
    Routes MCP requests to the Google Drive API.

    One instance owns one MCP server and one streamable-HTTP session
    manager. `run()` must be entered before `handle_request()` is used.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client_factory = client_factory or functools.partial(
            GDriveClient.from_headers, settings=self.settings
        )

        self.server = Server(SERVER_NAME, version=SERVER_VERSION)
        self._register_handlers()

        self.session_manager = StreamableHTTPSessionManager(
            app=self.server,
            stateless=True,
            json_response=self.settings.json_response,
        )

    def _register_handlers(self) -> None:
        handlers: dict[type, RequestHandler] = {
            types.ListResourcesRequest: self.list_resources,
            types.ReadResourceRequest: self.read_resource,
            types.ListToolsRequest: self.list_tools,
            types.CallToolRequest: self.call_tool,
        }
        for request_type, handler in handlers.items():
            self.server.request_handlers[request_type] = self._translate_errors(handler)

    def _translate_errors(self, handler: RequestHandler) -> RequestHandler:
        """Report GDriveError as a JSON-RPC error carrying the error's code."""

        @functools.wraps(handler)
        async def wrapper(req: Any) -> types.ServerResult:
            try:
                return await handler(req)
            except GDriveError as e:
                logger.warning(f"{req.method} failed: {e}")
                raise e.to_mcp_error() from e
            except Exception:
                logger.exception(f"{req.method} failed with an unexpected error")
                raise

        return wrapper

    @asynccontextmanager
    async def run(self) -> AsyncIterator[None]:
        """Start the transport; requests can be handled while the context is open."""
        async with self.session_manager.run():
            logger.info(f"{SERVER_NAME} {SERVER_VERSION} transport started")
            try:
                yield
            finally:
                logger.info(f"{SERVER_NAME} transport stopped")

    async def handle_request(self, scope: Any, receive: Any, send: Any) -> None:
        """Hand one HTTP request (ASGI) to the streamable-HTTP transport."""
        await self.session_manager.handle_request(scope, receive, send)

    def _request_headers(self) -> Optional[Mapping[str, str]]:
        request = self.server.request_context.request
        return getattr(request, "headers", None)

    async def _client(self) -> GDriveClient:
        # build() parses the discovery document from disk, so keep it off the event loop.
        return await asyncio.to_thread(self._client_factory, self._request_headers())

    async def _run_drive(self, func: Callable[..., Any], *args: Any, file_id: Optional[str] = None) -> Any:
        """Run a blocking Drive call in a worker thread, translating Google errors."""
        try:
            return await asyncio.to_thread(func, *args)
        except HttpError as e:
            raise handle_http_error(e, file_id) from e
        except RefreshError as e:
            # Drive answered 401 and google-auth could not refresh the token.
            raise AuthenticationError(
                "Authentication failed. The access token was rejected and could not be refreshed.",
                file_id
            ) from e

    async def list_resources(self, req: types.ListResourcesRequest) -> types.ServerResult:
        cursor = getattr(req.params, "cursor", None)
        client = await self._client()

        result = await self._run_drive(client.list_files, cursor)
        files = result.get('files', [])
        logger.debug(f"Listed {len(files)} files (cursor: {cursor})")

        return types.ServerResult(
            types.ListResourcesResult(
                resources=[
                    types.Resource(
                        uri=resource_uri(f['id']),
                        mimeType=f.get('mimeType'),
                        name=f.get('name', ''),
                    )
                    for f in files
                ],
                nextCursor=result.get('nextPageToken'),
            )
        )

    async def read_resource(self, req: types.ReadResourceRequest) -> types.ServerResult:
        uri = req.params.uri
        file_id = file_id_from_uri(str(uri))
        client = await self._client()

        mime_type, data = await self._run_drive(client.read_file_content, file_id, file_id=file_id)
        logger.debug(f"Read {len(data)} bytes of {mime_type} from {file_id}")

        return types.ServerResult(
            types.ReadResourceResult(contents=[build_resource_contents(uri, mime_type, data)])
        )

    async def list_tools(self, req: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=TOOLS))

    async def call_tool(self, req: types.CallToolRequest) -> types.ServerResult:
        name = req.params.name
        if name != SEARCH_TOOL_NAME:
            raise ToolNotFoundError(name)

        query = (req.params.arguments or {}).get("query")
        if not isinstance(query, str):
            raise InvalidArgumentError("search requires a string 'query' argument")

        client = await self._client()
        files = await self._run_drive(client.search_files, query)

        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=format_search_results(files))],
                isError=False,
            )
        )
