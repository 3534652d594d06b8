"""API-key authentication and rate limiting for the HTTP/SSE transport."""

from __future__ import annotations

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from contentforge.common.logging import setup_logging

from .rate_limiter import RateLimiter

logger = setup_logging(module_name="contentforge.server.auth")

API_KEY_HEADER = "x-api-key"
PUBLIC_PATHS = frozenset({"/health"})


class ApiKeyMiddleware:
    """Pure ASGI middleware guarding every path except the public ones.

    With no access key configured all requests pass. Otherwise the
    ``x-api-key`` header must match, and each accepted request counts
    against the key's hourly quota. The accepted key is stored in
    ``scope["state"]["api_key"]`` for usage logging.
    """

    def __init__(
        self,
        app: ASGIApp,
        api_key: str,
        limiter: RateLimiter,
    ) -> None:
        self.app = app
        self.api_key = api_key
        self.limiter = limiter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] in PUBLIC_PATHS or not self.api_key:
            await self.app(scope, receive, send)
            return

        key = Headers(scope=scope).get(API_KEY_HEADER)
        if key != self.api_key:
            logger.warning("Rejected request to %s: invalid or missing API key", scope["path"])
            response = JSONResponse({"error": "Invalid or missing API key"}, status_code=401)
            await response(scope, receive, send)
            return

        if not self.limiter.check(key):
            logger.warning("Rate limit exceeded for key %s", mask_key(key))
            response = JSONResponse(
                {"error": f"Rate limit exceeded ({self.limiter.limit} req/hr)"},
                status_code=429,
            )
            await response(scope, receive, send)
            return

        scope.setdefault("state", {})["api_key"] = key
        await self.app(scope, receive, send)


def mask_key(api_key: str | None) -> str:
    """Shorten a key for logs; stdio callers have none."""
    return f"{api_key[:8]}..." if api_key else "stdio"
