"""Service for creating notes and updating their frontmatter."""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

import frontmatter
import yaml
from loguru import logger

from note_creator.config import NoteType
from note_creator.markdown.frontmatter_parser import FrontmatterParser, strip_frontmatter
from note_creator.markdown.frontmatter_writer import build_note_content
from note_creator.markdown.schemas import (
    CustomProperty,
    FrontmatterField,
    FrontmatterType,
    is_valid_key,
)
from note_creator.markdown.value_codec import to_frontmatter_value
from note_creator.services.exceptions import (
    InvalidNoteError,
    NoteExistsError,
    NoteNotFoundError,
    NoteTypeNotFoundError,
)
from note_creator.services.vault import NOTE_SUFFIX, Vault

# Types whose empty value is left out instead of written
OMIT_WHEN_EMPTY = (FrontmatterType.TEXT, FrontmatterType.DATE, FrontmatterType.DATETIME)


def note_path(folder: str, name: str) -> str:
    return f"{folder.strip().rstrip('/')}/{name.strip()}{NOTE_SUFFIX}"


class NoteService:
    """
    Creates notes from note types or ad hoc properties.

    Features:
    - Template frontmatter read into editable fields
    - Notes written with a generated header block
    - Frontmatter of existing notes updated in place
    """

    def __init__(self, vault: Vault, note_types: Optional[Sequence[NoteType]] = None):
        self.vault = vault
        self.note_types = list(note_types or [])
        self.parser = FrontmatterParser(vault)

    def get_note_type(self, type_id: str) -> NoteType:
        for note_type in self.note_types:
            if note_type.id == type_id:
                return note_type
        raise NoteTypeNotFoundError(f"Selected type not found: {type_id}")

    async def template_fields(self, template_path: str) -> List[FrontmatterField]:
        """Frontmatter fields of a template, empty if the template is missing."""
        return await self.parser.parse(template_path)

    async def create_custom_note(
        self,
        name: str,
        folder: str,
        properties: Iterable[CustomProperty],
    ) -> Path:
        """Create a note in ``folder`` with the given properties.

        Properties without a key are ignored.

        Raises:
            InvalidNoteError: If name or folder is blank, or a key is not a valid property name
            NoteExistsError: If the note already exists
        """
        if not name.strip():
            raise InvalidNoteError("Please enter a name for the new note.")
        if not folder.strip():
            raise InvalidNoteError("Please specify a destination folder for the new note.")

        fields = []
        for prop in properties:
            key = prop.key.strip()
            if not key:
                continue
            if not is_valid_key(key):
                raise InvalidNoteError(f"Invalid property name: {key!r}")
            fields.append(prop.to_field())

        path = note_path(folder, name)
        if self.vault.exists(path):
            raise NoteExistsError(f"A file already exists at: {path}")

        await self.vault.ensure_folder(folder.strip())
        return await self.vault.create_note(path, build_note_content(fields))

    async def create_note_from_type(
        self,
        name: str,
        note_type: NoteType,
        fields: Optional[Sequence[FrontmatterField]] = None,
    ) -> Path:
        """Create a note from a note type's template.

        Args:
            name: Name of the new note, without extension
            note_type: Note type to create
            fields: Edited template fields; read from the template when omitted

        Raises:
            InvalidNoteError: If name is blank
            NoteExistsError: If the note already exists
        """
        if not name.strip():
            raise InvalidNoteError("Please enter a name for the new note.")

        path = note_path(note_type.destination_folder, name)
        if self.vault.exists(path):
            raise NoteExistsError(f"A file already exists at: {path}")

        if fields is None:
            fields = await self.template_fields(note_type.template_path)

        try:
            body = strip_frontmatter(await self.vault.read_text(note_type.template_path))
        except NoteNotFoundError:
            logger.warning(f"Template file not found: {note_type.template_path}")
            body = ""

        await self.vault.ensure_folder(note_type.destination_folder)
        return await self.vault.create_note(path, build_note_content(fields, body))

    async def apply_frontmatter(
        self, path: str, fields: Iterable[FrontmatterField]
    ) -> Dict[str, Any]:
        """Merge ``fields`` into the frontmatter of an existing note.

        Keys not among ``fields`` and the note body are kept as they are.
        Empty text, date and datetime fields are skipped.

        Returns:
            The merged frontmatter

        Raises:
            NoteNotFoundError: If the note does not exist
            InvalidNoteError: If the note's frontmatter cannot be parsed
        """
        content = await self.vault.read_text(path)
        try:
            post = frontmatter.loads(content)
        except (yaml.YAMLError, ValueError) as e:
            raise InvalidNoteError(f"Failed to parse frontmatter in {path}: {e}") from e

        for field in fields:
            if field.type in OMIT_WHEN_EMPTY and not field.value:
                continue
            post.metadata[field.key] = to_frontmatter_value(field.value, field.type)

        await self.vault.write_text(path, frontmatter.dumps(post, sort_keys=False) + "\n")
        logger.info(f"Updated frontmatter: {path}")
        return dict(post.metadata)
