"""CLI entry point for the ContentForge MCP server.

Usage:
    contentforge --stdio                  # serve one session over stdin/stdout
    contentforge                          # serve HTTP/SSE on $PORT (default 3000)
    contentforge --port 8080 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import asyncio
import logging

import uvicorn

from contentforge.common.config import Settings
from contentforge.common.logging import set_level, setup_logging
from contentforge.tools import ToolDispatcher

from .transports import create_http_app, run_stdio

logger = setup_logging(module_name="contentforge.server.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ContentForge MCP server")
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Serve over stdin/stdout instead of HTTP/SSE",
    )
    parser.add_argument("--host", help="HTTP bind address (default: $HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="HTTP port (default: $PORT or 3000)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    set_level(getattr(logging, args.log_level))

    settings = Settings.load()
    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port

    dispatcher = ToolDispatcher.from_settings(settings)

    if args.stdio:
        asyncio.run(run_stdio(dispatcher))
        return

    if not settings.server.api_key:
        logger.warning("CONTENTFORGE_API_KEY not set; HTTP endpoints are open")
    app = create_http_app(settings, dispatcher)
    logger.info(
        "ContentForge HTTP/SSE server listening on %s:%d",
        settings.server.host,
        settings.server.port,
    )
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
