"""stdio and HTTP/SSE transports for the MCP server."""

from __future__ import annotations

from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from contentforge.common.config import SERVER_NAME, SERVER_VERSION, Settings
from contentforge.common.logging import setup_logging
from contentforge.tools import ToolDispatcher

from .auth import ApiKeyMiddleware
from .mcp_server import create_server
from .rate_limiter import RateLimiter

logger = setup_logging(module_name="contentforge.server.transports")

MESSAGES_PATH = "/messages/"


async def run_stdio(dispatcher: ToolDispatcher) -> None:
    """Serve a single MCP session over stdin/stdout."""
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("ContentForge MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def create_http_app(
    settings: Settings,
    dispatcher: ToolDispatcher,
    limiter: RateLimiter | None = None,
) -> Starlette:
    """Build the Starlette app serving MCP over SSE.

    Routes:
        GET  /health       liveness probe, never authenticated
        GET  /sse          opens an SSE session
        POST /messages/    client messages for an open session
    """
    limiter = limiter or RateLimiter(
        settings.server.rate_limit, settings.server.rate_window_seconds
    )
    sse = SseServerTransport(MESSAGES_PATH)

    async def health(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "server": SERVER_NAME, "version": SERVER_VERSION})

    async def handle_sse(request: Request) -> Response:
        api_key = getattr(request.state, "api_key", None)
        logger.info("SSE connection requested")
        async with sse.connect_sse(request.scope, request.receive, request._send) as streams:
            server = create_server(dispatcher, api_key=api_key)
            await server.run(streams[0], streams[1], server.create_initialization_options())
        logger.info("SSE session closed")
        return Response()

    return Starlette(
        routes=[
            Route("/health", endpoint=health, methods=["GET"]),
            Route("/sse", endpoint=handle_sse, methods=["GET"]),
            Mount(MESSAGES_PATH, app=sse.handle_post_message),
        ],
        middleware=[
            Middleware(ApiKeyMiddleware, api_key=settings.server.api_key, limiter=limiter),
        ],
    )
