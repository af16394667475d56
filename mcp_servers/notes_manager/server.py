"""
Notes Manager MCP Server

Exposes tools for adding, listing, searching, and deleting notes, plus
``notes://`` resources for reading them, via the Model Context Protocol.
Runs over stdio.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

from . import resources, tools
from .config import settings
from .errors import internal_error
from .storage import NoteStorage

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("notes_manager")


@contextmanager
def _request_errors(request_kind: str) -> Iterator[None]:
    """Let MCP errors through; turn anything else into INTERNAL_ERROR."""
    try:
        yield
    except McpError:
        raise
    except Exception as exc:
        logger.exception("Unhandled error while handling %s", request_kind)
        raise internal_error(exc) from exc


# ---------------------------------------------------------------------------
# MCP server
# ---------------------------------------------------------------------------


def create_server(
    storage: NoteStorage,
    name: str = settings.server_name,
    version: str = settings.server_version,
) -> Server:
    """Build a low-level MCP server whose handlers operate on ``storage``."""
    server: Server = Server(name, version=version)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        with _request_errors("list_tools"):
            return tools.list_tools()

    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        with _request_errors(f"call_tool {name}"):
            return tools.call_tool(storage, name, arguments)

    @server.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        with _request_errors("list_resources"):
            return resources.list_resources(storage)

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        with _request_errors(f"read_resource {uri}"):
            text = resources.read_resource(storage, str(uri))
            return [ReadResourceContents(content=text, mime_type=resources.JSON_MIME_TYPE)]

    return server


async def serve(storage: NoteStorage) -> None:
    """Run the server over stdio until the client disconnects."""
    server = create_server(storage)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------


def main() -> None:
    storage = NoteStorage()
    if settings.seed_notes:
        storage.seed()
    logger.info(
        "Starting Notes Manager MCP server on stdio (%d notes) ...", storage.count
    )
    try:
        anyio.run(serve, storage)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
