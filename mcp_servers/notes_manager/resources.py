"""Resource listing and reading for the Notes Manager (``notes://`` URIs)."""

from __future__ import annotations

import logging
import re

import mcp.types as types

from .errors import invalid_request
from .models import notes_to_json
from .storage import NoteStorage

logger = logging.getLogger("notes_manager.resources")

JSON_MIME_TYPE = "application/json"
NOTES_LIST_URI = "notes://list"
NOTE_URI_PREFIX = "notes://note/"

_NOTE_URI_RE = re.compile(r"^notes://note/(.+)$")


def note_uri(note_id: str) -> str:
    return f"{NOTE_URI_PREFIX}{note_id}"


def list_resources(storage: NoteStorage) -> list[types.Resource]:
    """Return the collection resource followed by one resource per note."""
    resources = [
        types.Resource(
            uri=NOTES_LIST_URI,
            name="All Notes",
            description="List of all notes in the system",
            mimeType=JSON_MIME_TYPE,
        )
    ]
    for note in storage.list():
        resources.append(
            types.Resource(
                uri=note_uri(note.id),
                name=note.title,
                description=f"Note: {note.title} ({note.tag_summary or 'no tags'})",
                mimeType=JSON_MIME_TYPE,
            )
        )
    return resources


def read_resource(storage: NoteStorage, uri: str) -> str:
    """Return the JSON text behind a ``notes://`` URI.

    Raises:
        McpError: INVALID_REQUEST for a missing note or an unknown URI.
    """
    if uri == NOTES_LIST_URI:
        notes = storage.list()
        logger.info("Resource read — %s, notes=%d", uri, len(notes))
        return notes_to_json(notes)

    match = _NOTE_URI_RE.match(uri)
    if match:
        note_id = match.group(1)
        note = storage.get(note_id)
        if note is None:
            logger.warning("Resource read — note %s not found", note_id)
            raise invalid_request(f"Note not found: {note_id}")
        logger.info("Resource read — %s", uri)
        return note.to_json()

    logger.warning("Resource read — unknown resource %s", uri)
    raise invalid_request(f"Unknown resource: {uri}")
