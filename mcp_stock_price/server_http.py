#!/usr/bin/env python3
"""
Stock price MCP Server - HTTP transport

Same JSON-RPC dispatcher as the stdio server, one request per POST.
Business logic delegated to handlers.py.

Run with: python -m mcp_stock_price.server_http

Configuration:
- HOST: Bind address (default: 127.0.0.1)
- PORT: Server port (default: 5001)
"""

import json
from typing import Any

import uvicorn
from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from .config import get_host, get_log_file, get_log_level, get_port
from .handlers import handle_request
from .logging_config import get_logger, setup_async_logging, shutdown_async_logging
from .rpc import DEFAULT_REQUEST_ID, PARSE_ERROR, error_response

logger = get_logger(__name__)


async def handle_ping(_request: Request) -> JSONResponse:
    """Health check endpoint"""
    return JSONResponse({"status": "ok"})


async def handle_rpc(request: Request) -> JSONResponse:
    """
    JSON-RPC endpoint.

    Dispatch blocks on outbound HTTP, so it runs in the threadpool.
    """
    body = await request.body()
    try:
        message: Any = json.loads(body)
    except (ValueError, RecursionError) as e:
        logger.error(f"JSON decode error: {e}")
        message = None

    if not isinstance(message, dict):
        return JSONResponse(
            error_response(DEFAULT_REQUEST_ID, PARSE_ERROR, "Parse error"),
            status_code=400,
        )

    response = await run_in_threadpool(handle_request, message)
    return JSONResponse(response)


# Starlette application
app = Starlette(
    routes=[
        Route("/ping", endpoint=handle_ping, methods=["GET"]),
        Route("/rpc", endpoint=handle_rpc, methods=["POST"]),
    ]
)


def main() -> None:
    """Run the HTTP server"""
    setup_async_logging(get_log_file(), get_log_level())
    host, port = get_host(), get_port()
    logger.info(f"Serving JSON-RPC on http://{host}:{port}/rpc")
    try:
        uvicorn.run(app, host=host, port=port, log_config=None)
    finally:
        shutdown_async_logging()


if __name__ == "__main__":
    main()
