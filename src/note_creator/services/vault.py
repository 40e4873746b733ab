"""Filesystem vault holding markdown notes."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import frontmatter
import yaml
from loguru import logger

from note_creator.file_utils import ensure_directory, write_file_atomic
from note_creator.services.exceptions import (
    FileOperationError,
    InvalidNoteError,
    NoteExistsError,
    NoteNotFoundError,
)

SETTINGS_DIR_NAME = ".obsidian"
TYPES_FILE_NAME = "types.json"
NOTE_SUFFIX = ".md"


class MetadataTypeRegistry:
    """Property types assigned per key, as stored in ``.obsidian/types.json``.

    The file looks like ``{"types": {"rating": "number", "due": "date"}}``.
    Keys are matched case-insensitively.
    """

    def __init__(self, types: Optional[Dict[str, str]] = None):
        self.types = {key.lower(): value for key, value in (types or {}).items()}

    @classmethod
    def from_file(cls, path: Path) -> "MetadataTypeRegistry":
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable property types file {path}: {e}")
            return cls()

        types = data.get("types") if isinstance(data, dict) else None
        if not isinstance(types, dict):
            logger.warning(f"Property types file {path} has no 'types' mapping")
            return cls()
        return cls({str(key): str(value) for key, value in types.items()})

    def assigned_type(self, key: str) -> Optional[str]:
        return self.types.get(key.lower())


class Vault:
    """
    A folder of markdown notes.

    Paths passed to a vault are relative to its base path and may not
    point outside of it.
    """

    def __init__(self, base_path: Path, type_registry: Optional[MetadataTypeRegistry] = None):
        self.base_path = Path(base_path)
        if type_registry is None:
            type_registry = MetadataTypeRegistry.from_file(
                self.base_path / SETTINGS_DIR_NAME / TYPES_FILE_NAME
            )
        self.type_registry = type_registry

    def get_path(self, path: Union[Path, str]) -> Path:
        """Absolute path for a vault relative ``path``."""
        full_path = (self.base_path / path).resolve()
        if not full_path.is_relative_to(self.base_path.resolve()):
            raise InvalidNoteError(f"Path is outside the vault: {path}")
        return full_path

    def exists(self, path: Union[Path, str]) -> bool:
        return self.get_path(path).exists()

    async def read_text(self, path: Union[Path, str]) -> str:
        """
        Read the raw text of a note.

        Raises:
            NoteNotFoundError: If there is no file at ``path``
            FileOperationError: If the file cannot be read
        """
        full_path = self.get_path(path)
        if not full_path.is_file():
            raise NoteNotFoundError(f"Note not found: {path}")
        try:
            return full_path.read_text(encoding="utf-8")
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to read note: {full_path}: {e}")
            raise FileOperationError(f"Failed to read note {path}: {e}") from e

    async def get_metadata(self, path: Union[Path, str]) -> Optional[Dict[str, Any]]:
        """
        Parsed frontmatter of a note.

        Returns None when the note has no frontmatter or its YAML cannot be
        parsed or built (an invalid date, for example), so callers can fall
        back to reading the header text.
        """
        content = await self.read_text(path)
        try:
            post = frontmatter.loads(content)
        except (yaml.YAMLError, ValueError) as e:
            logger.warning(f"Failed to parse YAML frontmatter in {path}: {e}")
            return None

        if not post.metadata:
            return None
        return dict(post.metadata)

    async def write_text(self, path: Union[Path, str], content: str) -> Path:
        full_path = self.get_path(path)
        await ensure_directory(full_path.parent)
        await write_file_atomic(full_path, content)
        return full_path

    async def create_note(self, path: Union[Path, str], content: str) -> Path:
        """
        Create a new note, creating its folder as needed.

        Raises:
            NoteExistsError: If a file already exists at ``path``
        """
        if self.exists(path):
            raise NoteExistsError(f"A file already exists at: {path}")
        full_path = await self.write_text(path, content)
        logger.info(f"Created note: {path}")
        return full_path

    async def ensure_folder(self, folder: Union[Path, str]) -> Path:
        full_path = self.get_path(folder)
        await ensure_directory(full_path)
        return full_path

    def _walk(self, folder: Path):
        for child in sorted(folder.iterdir()):
            if child.name.startswith("."):
                continue
            yield child
            if child.is_dir():
                yield from self._walk(child)

    def list_folders(self) -> List[str]:
        """All folders in the vault, depth first, as posix relative paths."""
        if not self.base_path.is_dir():
            return []
        return [
            child.relative_to(self.base_path).as_posix()
            for child in self._walk(self.base_path)
            if child.is_dir()
        ]

    def list_notes(self) -> List[str]:
        """All markdown notes in the vault, as posix relative paths."""
        if not self.base_path.is_dir():
            return []
        return [
            child.relative_to(self.base_path).as_posix()
            for child in self._walk(self.base_path)
            if child.is_file() and child.suffix == NOTE_SUFFIX
        ]
