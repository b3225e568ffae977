"""
JSON-RPC 2.0 envelope helpers.

Builds response objects and defines the exceptions handlers raise to
produce error responses. A response carries exactly one of "result" or
"error", never both.
"""

from typing import Any

from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    ErrorData,
)

JSONRPC_VERSION = "2.0"

# Identifier echoed back when the request carries none
DEFAULT_REQUEST_ID = 0

__all__ = [
    "DEFAULT_REQUEST_ID",
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "JSONRPC_VERSION",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "RpcError",
    "error_response",
    "normalize_request",
    "success_response",
]


class RpcError(Exception):
    """Base for errors reported to the client as a JSON-RPC error object"""

    code = INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(RpcError):
    code = INVALID_REQUEST


class MethodNotFoundError(RpcError):
    code = METHOD_NOT_FOUND


class InvalidParamsError(RpcError):
    code = INVALID_PARAMS


class InternalError(RpcError):
    code = INTERNAL_ERROR


def normalize_request(message: dict[str, Any]) -> dict[str, Any]:
    """Fill in envelope defaults: jsonrpc forced to "2.0", absent/null id becomes 0."""
    request = dict(message)
    request["jsonrpc"] = JSONRPC_VERSION
    if request.get("id") is None:
        request["id"] = DEFAULT_REQUEST_ID
    return request


def success_response(request_id: Any, result: dict[str, Any]) -> dict[str, Any]:  # noqa: ANN401
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_response(request_id: Any, code: int, message: str) -> dict[str, Any]:  # noqa: ANN401
    error = ErrorData(code=code, message=message)
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": error.model_dump(exclude_none=True),
    }
