"""MCP server exposing the ContentForge tools."""

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone
from typing import Any, Optional

import mcp.types as types
from mcp.server.lowlevel import Server

from contentforge.common.config import SERVER_NAME, SERVER_VERSION
from contentforge.common.logging import setup_logging
from contentforge.tools import TOOL_DEFINITIONS, ToolDispatcher

from .auth import mask_key

logger = setup_logging(module_name="contentforge.server.mcp")


class ToolCallError(Exception):
    """Raised from a tool handler so the SDK flags the result as an error."""


def log_usage(tool_name: str, api_key: Optional[str]) -> None:
    """Emit one JSON usage record per tool call."""
    logger.info(json.dumps({
        "type": "tool_call",
        "tool": tool_name,
        "apiKey": mask_key(api_key),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }))


def create_server(dispatcher: ToolDispatcher, api_key: Optional[str] = None) -> Server:
    """Build an MCP server bound to ``dispatcher``.

    A new server is created per SSE connection so usage records carry
    the caller's key; stdio mode uses a single keyless server.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name.value,
                description=tool.description,
                inputSchema=tool.input_schema,
            )
            for tool in TOOL_DEFINITIONS
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        log_usage(name, api_key)
        # CMS calls block; keep the event loop free for other sessions
        outcome = await asyncio.to_thread(dispatcher.call, name, arguments or {})
        if outcome.is_error:
            raise ToolCallError(outcome.text)
        return [types.TextContent(type="text", text=outcome.text)]

    return server
