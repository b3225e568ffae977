"""
Request handlers - single source of truth for JSON-RPC method routing.

Both server.py (stdio) and server_http.py (HTTP) pass decoded request
objects to handle_request(), which always returns exactly one response.

Architecture:
- Protocol layer (server.py, server_http.py) handles transport
- This module handles envelope defaults, method routing and tool arguments
- stock_price.services.quotes handles data fetching
- formatters.quotes handles text rendering
"""

from typing import Any

from mcp.types import (
    CallToolResult,
    Implementation,
    InitializeResult,
    ListToolsResult,
    ServerCapabilities,
    TextContent,
    ToolsCapability,
)

from mcp_stock_price.formatters.quotes import format_quote
from mcp_stock_price.logging_config import get_logger
from mcp_stock_price.rpc import (
    INTERNAL_ERROR,
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    RpcError,
    error_response,
    normalize_request,
    success_response,
)
from mcp_stock_price.tools import GET_STOCK_PRICE, get_mcp_tools
from stock_price.services.quotes import QuoteUnavailableError, get_stock_quote

logger = get_logger(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "stock-price-checker"
SERVER_VERSION = "1.0.0"


def handle_initialize(_params: Any) -> dict[str, Any]:  # noqa: ANN401
    """Handle initialize - fixed capabilities, params ignored"""
    result = InitializeResult(
        protocolVersion=PROTOCOL_VERSION,
        capabilities=ServerCapabilities(tools=ToolsCapability()),
        serverInfo=Implementation(name=SERVER_NAME, version=SERVER_VERSION),
    )
    return result.model_dump(by_alias=True, exclude_none=True)


def handle_tools_list(_params: Any) -> dict[str, Any]:  # noqa: ANN401
    """Handle tools/list"""
    result = ListToolsResult(tools=get_mcp_tools())
    return result.model_dump(by_alias=True, exclude_none=True)


def handle_get_stock_price(arguments: dict[str, Any]) -> str:
    """Handle get_stock_price() tool call"""
    if "symbol" not in arguments:
        msg = "Missing symbol parameter"
        raise InvalidParamsError(msg)

    symbol = arguments["symbol"]
    if not isinstance(symbol, str):
        msg = "Symbol must be a string"
        raise InvalidParamsError(msg)
    if not symbol.strip():
        msg = "Symbol cannot be empty"
        raise InvalidParamsError(msg)

    try:
        quote = get_stock_quote(symbol)
    except QuoteUnavailableError as e:
        raise InternalError(str(e)) from e

    return format_quote(quote)


def call_tool(name: str, arguments: dict[str, Any]) -> str:
    """
    Route tool call to appropriate handler.

    Returns formatted string output.
    Raises InvalidParamsError for unknown tools or bad arguments.
    """
    if name == GET_STOCK_PRICE:
        return handle_get_stock_price(arguments)

    msg = "Unknown tool"
    raise InvalidParamsError(msg)


def handle_tools_call(params: Any) -> dict[str, Any]:  # noqa: ANN401
    """Handle tools/call - validate params envelope, then route to call_tool()"""
    if params is None:
        msg = "Missing params"
        raise InvalidParamsError(msg)
    if not isinstance(params, dict):
        msg = "Invalid params"
        raise InvalidParamsError(msg)

    name = params.get("name")
    if not isinstance(name, str):
        msg = "Missing tool name"
        raise InvalidParamsError(msg)

    arguments = params.get("arguments")
    if not isinstance(arguments, dict):
        msg = "Missing arguments"
        raise InvalidParamsError(msg)

    logger.info(f"call_tool: name={name}, arguments={arguments}")
    text = call_tool(name, arguments)
    logger.info(f"{name}() returning {len(text)} chars")

    result = CallToolResult(content=[TextContent(type="text", text=text)])
    return result.model_dump(by_alias=True, exclude_none=True)


METHODS = {
    "initialize": handle_initialize,
    "tools/list": handle_tools_list,
    "tools/call": handle_tools_call,
}


def dispatch(method: Any, params: Any) -> dict[str, Any]:  # noqa: ANN401
    """Route a method name to its handler and return the result payload."""
    if not isinstance(method, str) or not method:
        msg = "Invalid Request - missing method"
        raise InvalidRequestError(msg)

    handler = METHODS.get(method)
    if handler is None:
        msg = "Method not found"
        raise MethodNotFoundError(msg)

    return handler(params)


def handle_request(message: dict[str, Any]) -> dict[str, Any]:
    """
    Produce exactly one JSON-RPC response for a decoded request object.

    Never raises: RpcError becomes its error object, anything unexpected
    becomes an internal error.
    """
    request = normalize_request(message)
    request_id = request["id"]
    method = request.get("method")

    try:
        result = dispatch(method, request.get("params"))
    except RpcError as e:
        logger.info(f"{method} -> error {e.code}: {e.message}")
        return error_response(request_id, e.code, e.message)
    except Exception as e:
        logger.exception(f"Unhandled error in {method}")
        return error_response(request_id, INTERNAL_ERROR, str(e))

    return success_response(request_id, result)
