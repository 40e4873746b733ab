"""Common test fixtures."""

from pathlib import Path
from textwrap import dedent

import pytest

from note_creator.config import NoteType
from note_creator.services.note_service import NoteService
from note_creator.services.suggest_service import SuggestService
from note_creator.services.vault import MetadataTypeRegistry, Vault


@pytest.fixture
def vault_path(tmp_path) -> Path:
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def write_note(vault_path):
    """Write a note into the vault, dedenting its content."""

    def _write(relative_path: str, content: str) -> Path:
        path = vault_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def vault(vault_path) -> Vault:
    return Vault(vault_path)


@pytest.fixture
def registry() -> MetadataTypeRegistry:
    return MetadataTypeRegistry({"rating": "number", "Tags": "text", "due": "date"})


@pytest.fixture
def book_template(write_note) -> Path:
    return write_note(
        "Templates/Book.md",
        """
        ---
        author:
        rating: 3
        read: false
        tags: [book]
        ---

        ## Summary
        """,
    )


@pytest.fixture
def book_type(book_template) -> NoteType:
    return NoteType(
        id="book",
        name="Book",
        template_path="Templates/Book.md",
        destination_folder="Library/Books",
    )


@pytest.fixture
def note_service(vault, book_type) -> NoteService:
    return NoteService(vault, [book_type])


@pytest.fixture
def suggest_service(vault) -> SuggestService:
    return SuggestService(vault)
