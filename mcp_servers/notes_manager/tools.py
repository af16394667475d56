"""
Tool catalog and call routing for the Notes Manager.

Each tool is a member of the closed ``ToolName`` enum and is bound to one
pydantic argument model and one handler in ``_HANDLERS``.  Handlers receive
the validated arguments plus the ``NoteStorage`` they operate on, and return
the human-readable response text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import mcp.types as types
from pydantic import ValidationError

from .errors import invalid_request, method_not_found
from .models import (
    AddNoteArgs,
    DeleteNoteArgs,
    ListNotesArgs,
    SearchNotesArgs,
    ToolArgs,
)
from .storage import NoteNotFoundError, NoteStorage

logger = logging.getLogger("notes_manager.tools")

SEARCH_PREVIEW_LENGTH = 100


class ToolName(str, Enum):
    ADD_NOTE = "add_note"
    LIST_NOTES = "list_notes"
    SEARCH_NOTES = "search_notes"
    DELETE_NOTE = "delete_note"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

TOOLS: list[types.Tool] = [
    types.Tool(
        name=ToolName.ADD_NOTE.value,
        description="Create a new note with a title, content, and optional tags",
        inputSchema={
            "type": "object",
            "properties": {
                "title": {
                    "type": "string",
                    "description": "The title of the note",
                },
                "content": {
                    "type": "string",
                    "description": "The content/body of the note",
                },
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Optional tags to categorize the note",
                },
            },
            "required": ["title", "content"],
        },
    ),
    types.Tool(
        name=ToolName.LIST_NOTES.value,
        description="List all notes with their IDs and titles",
        inputSchema={"type": "object", "properties": {}},
    ),
    types.Tool(
        name=ToolName.SEARCH_NOTES.value,
        description="Search notes by title, content, or tags",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to find in notes",
                },
            },
            "required": ["query"],
        },
    ),
    types.Tool(
        name=ToolName.DELETE_NOTE.value,
        description="Delete a note by its ID",
        inputSchema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "description": "The ID of the note to delete",
                },
            },
            "required": ["id"],
        },
    ),
]


def list_tools() -> list[types.Tool]:
    """Return the static tool catalog."""
    return list(TOOLS)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def add_note(storage: NoteStorage, args: AddNoteArgs) -> str:
    note = storage.insert(args.title, args.content, args.tags)
    logger.info("Tool add_note invoked — id=%s", note.id)
    return (
        "Note created successfully!\n"
        f"ID: {note.id}\n"
        f"Title: {note.title}\n"
        f"Tags: {note.tag_summary or 'none'}"
    )


def list_notes(storage: NoteStorage, args: ListNotesArgs) -> str:
    notes = storage.list()
    logger.info("Tool list_notes invoked — found=%d", len(notes))
    if not notes:
        return "No notes found. Use add_note to create one!"
    lines = [f"- [{n.id}] {n.title} ({n.tag_summary or 'no tags'})" for n in notes]
    return f"Found {len(lines)} notes:\n" + "\n".join(lines)


def search_notes(storage: NoteStorage, args: SearchNotesArgs) -> str:
    matches = storage.search(args.query)
    logger.info(
        "Tool search_notes invoked — query='%s', found=%d", args.query, len(matches)
    )
    if not matches:
        return f'No notes found matching "{args.query}"'
    results = [
        f"- [{n.id}] {n.title}\n  {n.content[:SEARCH_PREVIEW_LENGTH]}..."
        for n in matches
    ]
    return f"Found {len(results)} matching notes:\n" + "\n\n".join(results)


def delete_note(storage: NoteStorage, args: DeleteNoteArgs) -> str:
    try:
        note = storage.delete(args.id)
    except NoteNotFoundError:
        logger.warning("Tool delete_note invoked — id=%s not found", args.id)
        raise invalid_request(f'Note with ID "{args.id}" not found') from None
    logger.info("Tool delete_note invoked — id=%s", note.id)
    return f'Deleted note: "{note.title}" (ID: {note.id})'


@dataclass(frozen=True)
class ToolHandler:
    args_model: type[ToolArgs]
    func: Callable[[NoteStorage, Any], str]


_HANDLERS: dict[ToolName, ToolHandler] = {
    ToolName.ADD_NOTE: ToolHandler(AddNoteArgs, add_note),
    ToolName.LIST_NOTES: ToolHandler(ListNotesArgs, list_notes),
    ToolName.SEARCH_NOTES: ToolHandler(SearchNotesArgs, search_notes),
    ToolName.DELETE_NOTE: ToolHandler(DeleteNoteArgs, delete_note),
}


def call_tool(
    storage: NoteStorage, name: str, arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    """Validate arguments, run the named tool and wrap its text response.

    Raises:
        McpError: METHOD_NOT_FOUND for an unknown tool, INVALID_REQUEST for
            bad arguments or a missing note.
    """
    try:
        tool = ToolName(name)
    except ValueError:
        logger.warning("Unknown tool requested: %s", name)
        raise method_not_found(f"Unknown tool: {name}") from None

    handler = _HANDLERS[tool]
    try:
        args = handler.args_model.model_validate(arguments or {})
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}"
            for err in exc.errors()
        )
        logger.warning("Invalid arguments for %s: %s", tool.value, details)
        raise invalid_request(f"Invalid arguments for {tool.value}: {details}") from None

    text = handler.func(storage, args)
    return [types.TextContent(type="text", text=text)]
