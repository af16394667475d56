"""Pydantic models for the Notes Manager MCP server."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Note(BaseModel):
    """A single note with metadata."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Opaque unique note identifier")
    title: str = Field(..., min_length=1, description="Note title")
    content: str = Field(..., description="Note content")
    created_at: str = Field(
        ...,
        alias="createdAt",
        description="ISO-8601 creation timestamp",
    )
    tags: list[str] = Field(default_factory=list, description="List of tags")

    def to_json(self) -> str:
        """Pretty-printed JSON using the wire field names."""
        return self.model_dump_json(indent=2, by_alias=True)

    @property
    def tag_summary(self) -> str:
        return ", ".join(self.tags)


NoteList = TypeAdapter(list[Note])


def notes_to_json(notes: list[Note]) -> str:
    """Serialize a list of notes as a pretty-printed JSON array."""
    return NoteList.dump_json(notes, indent=2, by_alias=True).decode("utf-8")


# ---------------------------------------------------------------------------
# Tool argument shapes
# ---------------------------------------------------------------------------


class ToolArgs(BaseModel):
    """Base for per-tool argument models; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class AddNoteArgs(ToolArgs):
    title: str = Field(..., min_length=1)
    content: str
    tags: list[str] = Field(default_factory=list)


class ListNotesArgs(ToolArgs):
    pass


class SearchNotesArgs(ToolArgs):
    query: str


class DeleteNoteArgs(ToolArgs):
    id: str
