#!/usr/bin/env python3
"""
Stock price MCP Server - stdio transport

JSON-RPC over stdin/stdout for Claude Desktop (stdio mode).
Reads one request, writes one response, strictly in order.
Business logic delegated to handlers.py.

Run with: python -m mcp_stock_price.server
"""

import io
import json
import re
import sys
from collections.abc import Iterable, Iterator
from typing import Any, BinaryIO, TextIO

from .config import get_log_file, get_log_level
from .handlers import handle_request
from .logging_config import get_logger, setup_async_logging, shutdown_async_logging

logger = get_logger(__name__)

_decoder = json.JSONDecoder()
_whitespace = re.compile(r"\s*")


def iter_messages(lines: Iterable[str]) -> Iterator[dict[str, Any]]:
    """
    Decode request objects from a line-oriented stream.

    A line may hold several concatenated JSON objects. Undecodable input
    is logged and the rest of that line skipped; non-object values are
    logged and skipped. Blank lines are ignored.
    """
    for line in lines:
        text = line.strip()
        pos = 0
        while pos < len(text):
            try:
                value, pos = _decoder.raw_decode(text, pos)
            except (json.JSONDecodeError, RecursionError) as e:
                logger.error(f"JSON decode error: {e}")
                break
            pos = _whitespace.match(text, pos).end()  # type: ignore[union-attr]

            if not isinstance(value, dict):
                logger.error(f"Ignoring non-object JSON message: {type(value).__name__}")
                continue
            yield value


def write_response(stream: TextIO, response: dict[str, Any]) -> None:
    """Write one response as a single JSON line and flush."""
    try:
        stream.write(json.dumps(response) + "\n")
        stream.flush()
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to encode response: {e}")


def decode_stream(binary: BinaryIO) -> TextIO:
    """Wrap a byte stream as UTF-8 text; invalid bytes become U+FFFD and fail JSON decoding."""
    return io.TextIOWrapper(binary, encoding="utf-8", errors="replace")


def serve(input_stream: TextIO, output_stream: TextIO) -> None:
    """Answer requests until input_stream is exhausted."""
    for message in iter_messages(input_stream):
        write_response(output_stream, handle_request(message))
    logger.info("Input closed, shutting down")


def main() -> None:
    """Run the MCP server"""
    setup_async_logging(get_log_file(), get_log_level())
    try:
        serve(decode_stream(sys.stdin.buffer), sys.stdout)
    finally:
        shutdown_async_logging()


if __name__ == "__main__":
    main()
