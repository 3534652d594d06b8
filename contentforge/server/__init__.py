# Server: MCP transports (stdio, HTTP/SSE), API-key auth, rate limiting
"""
Transport adapters exposing the tool dispatcher to MCP clients.
"""

from .auth import ApiKeyMiddleware, mask_key
from .mcp_server import ToolCallError, create_server, log_usage
from .rate_limiter import RateLimiter
from .transports import create_http_app, run_stdio

__all__ = [
    "ApiKeyMiddleware",
    "RateLimiter",
    "ToolCallError",
    "create_http_app",
    "create_server",
    "log_usage",
    "mask_key",
    "run_stdio",
]
