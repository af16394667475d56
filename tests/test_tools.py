"""Tests for the Notes Manager tool catalog and call routing."""

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_REQUEST, METHOD_NOT_FOUND

from mcp_servers.notes_manager.storage import NoteStorage
from mcp_servers.notes_manager.tools import ToolName, call_tool, list_tools


@pytest.fixture()
def storage() -> NoteStorage:
    """Return a NoteStorage holding the two startup notes."""
    store = NoteStorage()
    store.seed()
    return store


def _text(storage: NoteStorage, name: str, arguments: dict | None = None) -> str:
    result = call_tool(storage, name, arguments)
    assert len(result) == 1
    assert result[0].type == "text"
    return result[0].text


class TestListTools:
    def test_catalog(self) -> None:
        tools = list_tools()
        assert [t.name for t in tools] == [
            "add_note",
            "list_notes",
            "search_notes",
            "delete_note",
        ]
        assert {t.name for t in tools} == {n.value for n in ToolName}

    def test_required_arguments(self) -> None:
        schemas = {t.name: t.inputSchema for t in list_tools()}
        assert schemas["add_note"]["required"] == ["title", "content"]
        assert schemas["search_notes"]["required"] == ["query"]
        assert schemas["delete_note"]["required"] == ["id"]
        assert "required" not in schemas["list_notes"]

    def test_catalog_copy(self) -> None:
        list_tools().clear()
        assert len(list_tools()) == 4


class TestAddNote:
    def test_confirmation_text(self, storage: NoteStorage) -> None:
        text = _text(
            storage, "add_note", {"title": "Test", "content": "Hello", "tags": ["x", "y"]}
        )
        note = storage.list()[-1]
        assert text == (
            "Note created successfully!\n"
            f"ID: {note.id}\n"
            "Title: Test\n"
            "Tags: x, y"
        )
        assert note.content == "Hello"

    def test_tags_default_to_none(self, storage: NoteStorage) -> None:
        text = _text(storage, "add_note", {"title": "T", "content": ""})
        assert text.endswith("Tags: none")
        assert storage.list()[-1].tags == []

    @pytest.mark.parametrize(
        "arguments",
        [
            {"content": "no title"},
            {"title": "no content"},
            {"title": "", "content": "empty title"},
            {"title": 5, "content": "bad type"},
            {"title": "T", "content": "C", "tags": "not-a-list"},
            None,
        ],
    )
    def test_invalid_arguments(self, storage: NoteStorage, arguments) -> None:
        with pytest.raises(McpError) as exc_info:
            call_tool(storage, "add_note", arguments)
        assert exc_info.value.error.code == INVALID_REQUEST
        assert "Invalid arguments for add_note" in exc_info.value.error.message
        assert storage.count == 2


class TestListNotes:
    def test_lists_seed_notes(self, storage: NoteStorage) -> None:
        welcome, docker = storage.list()
        text = _text(storage, "list_notes", {})
        assert text == (
            "Found 2 notes:\n"
            f"- [{welcome.id}] Welcome to MCP (welcome, mcp)\n"
            f"- [{docker.id}] Docker Basics (docker, devops)"
        )

    def test_no_tags(self, storage: NoteStorage) -> None:
        note = storage.insert("Bare", "", [])
        assert f"- [{note.id}] Bare (no tags)" in _text(storage, "list_notes")

    def test_empty_store(self) -> None:
        text = _text(NoteStorage(), "list_notes", None)
        assert text == "No notes found. Use add_note to create one!"


class TestSearchNotes:
    def test_match_format(self, storage: NoteStorage) -> None:
        docker = storage.list()[1]
        text = _text(storage, "search_notes", {"query": "DEVOPS"})
        assert text == (
            "Found 1 matching notes:\n"
            f"- [{docker.id}] Docker Basics\n"
            "  Docker containers are lightweight, portable units of software...."
        )

    def test_content_preview_truncated(self, storage: NoteStorage) -> None:
        storage.insert("Long", "a" * 150, [])
        text = _text(storage, "search_notes", {"query": "long"})
        assert ("  " + "a" * 100 + "...") in text
        assert "a" * 101 not in text

    def test_multiple_matches_separated(self, storage: NoteStorage) -> None:
        text = _text(storage, "search_notes", {"query": ""})
        assert text.startswith("Found 2 matching notes:\n")
        assert "...\n\n- [" in text

    def test_no_matches(self, storage: NoteStorage) -> None:
        text = _text(storage, "search_notes", {"query": "zzzz"})
        assert text == 'No notes found matching "zzzz"'

    def test_missing_query(self, storage: NoteStorage) -> None:
        with pytest.raises(McpError) as exc_info:
            call_tool(storage, "search_notes", {})
        assert exc_info.value.error.code == INVALID_REQUEST


class TestDeleteNote:
    def test_delete_existing(self, storage: NoteStorage) -> None:
        welcome = storage.list()[0]
        text = _text(storage, "delete_note", {"id": welcome.id})
        assert text == f'Deleted note: "Welcome to MCP" (ID: {welcome.id})'
        assert storage.get(welcome.id) is None
        assert "Welcome to MCP" not in _text(storage, "list_notes")

    def test_delete_missing(self, storage: NoteStorage) -> None:
        with pytest.raises(McpError) as exc_info:
            call_tool(storage, "delete_note", {"id": "nope"})
        assert exc_info.value.error.code == INVALID_REQUEST
        assert exc_info.value.error.message == 'Note with ID "nope" not found'
        assert storage.count == 2

    def test_missing_id(self, storage: NoteStorage) -> None:
        with pytest.raises(McpError) as exc_info:
            call_tool(storage, "delete_note", {})
        assert exc_info.value.error.code == INVALID_REQUEST


class TestUnknownTool:
    def test_unknown_tool(self, storage: NoteStorage) -> None:
        with pytest.raises(McpError) as exc_info:
            call_tool(storage, "frobnicate", {})
        assert exc_info.value.error.code == METHOD_NOT_FOUND
        assert exc_info.value.error.message == "Unknown tool: frobnicate"


class TestScenario:
    def test_add_list_delete(self, storage: NoteStorage) -> None:
        assert _text(storage, "list_notes").startswith("Found 2 notes:")

        _text(storage, "add_note", {"title": "Test", "content": "Hello", "tags": ["x"]})
        listing = _text(storage, "list_notes")
        assert listing.startswith("Found 3 notes:")
        assert "Test (x)" in listing

        new_id = storage.list()[-1].id
        _text(storage, "delete_note", {"id": new_id})
        listing = _text(storage, "list_notes")
        assert listing.startswith("Found 2 notes:")
        assert new_id not in listing
