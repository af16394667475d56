"""In-memory storage layer for the Notes Manager."""

from __future__ import annotations

import logging
import time
import uuid
from datetime import UTC, datetime

from .models import Note

logger = logging.getLogger("notes_manager.storage")

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

SEED_NOTES: list[tuple[str, str, list[str]]] = [
    (
        "Welcome to MCP",
        "This is your first note created with the MCP Notes Server!",
        ["welcome", "mcp"],
    ),
    (
        "Docker Basics",
        "Docker containers are lightweight, portable units of software.",
        ["docker", "devops"],
    ),
]


class NoteNotFoundError(KeyError):
    """Raised when a note id is not present in the store."""

    def __init__(self, note_id: str) -> None:
        super().__init__(note_id)
        self.note_id = note_id

    def __str__(self) -> str:
        return f"Note not found: {self.note_id}"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def generate_note_id() -> str:
    """Millisecond timestamp in base 36 followed by a random hex suffix."""
    return _to_base36(time.time_ns() // 1_000_000) + uuid.uuid4().hex[:12]


class NoteStorage:
    """Manages notes in process memory, keyed by id in insertion order."""

    def __init__(self) -> None:
        self._notes: dict[str, Note] = {}

    def seed(self) -> None:
        """Insert the startup sample notes."""
        for title, content, tags in SEED_NOTES:
            self.insert(title, content, tags)

    def insert(self, title: str, content: str, tags: list[str]) -> Note:
        """Create and store a new note."""
        note_id = generate_note_id()
        while note_id in self._notes:
            note_id = generate_note_id()
        note = Note(
            id=note_id,
            title=title,
            content=content,
            created_at=datetime.now(UTC).isoformat(),
            tags=list(tags),
        )
        self._notes[note.id] = note
        logger.info("Inserted note %s — '%s'", note.id, note.title)
        return note

    def list(self) -> list[Note]:
        """Return every stored note."""
        return list(self._notes.values())

    def search(self, query: str) -> list[Note]:
        """Return notes whose title, content or any tag contains the query (case-insensitive)."""
        q = query.lower()
        return [
            n
            for n in self._notes.values()
            if q in n.title.lower()
            or q in n.content.lower()
            or any(q in t.lower() for t in n.tags)
        ]

    def get(self, note_id: str) -> Note | None:
        return self._notes.get(note_id)

    def delete(self, note_id: str) -> Note:
        """Remove a note and return it. Raises NoteNotFoundError if absent."""
        try:
            note = self._notes.pop(note_id)
        except KeyError:
            raise NoteNotFoundError(note_id) from None
        logger.info("Deleted note %s — '%s'", note.id, note.title)
        return note

    @property
    def count(self) -> int:
        """Number of stored notes."""
        return len(self._notes)
