"""MCP error constructors used by the Notes Manager request handlers."""

import mcp.types as types
from mcp.shared.exceptions import McpError


def invalid_request(message: str) -> McpError:
    """The request cannot be satisfied against the current store state."""
    return McpError(types.ErrorData(code=types.INVALID_REQUEST, message=message))


def method_not_found(message: str) -> McpError:
    return McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=message))


def internal_error(exc: Exception) -> McpError:
    return McpError(
        types.ErrorData(code=types.INTERNAL_ERROR, message=f"Internal error: {exc}")
    )
