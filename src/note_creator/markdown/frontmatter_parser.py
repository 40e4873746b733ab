"""Parse a note's header block into typed frontmatter fields.

Two strategies, picked by what the vault can offer:

- structured: the vault already holds the parsed key/value map for the note,
  so each entry becomes a field directly
- manual: no parsed map is available, so the header text between the ``---``
  lines is scanned one line at a time

The manual scan treats every physical line on its own. A block sequence
(``key:`` followed by indented ``- item`` lines) is not reassembled; the key
comes through with an empty value and the item lines are skipped.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

from loguru import logger

from note_creator.markdown.schemas import RESERVED_KEYS, FrontmatterField, is_valid_key
from note_creator.markdown.type_inference import TypeRegistry, infer_type
from note_creator.markdown.value_codec import NUMBER_PATTERN, parse_number, stringify_value
from note_creator.services.exceptions import NoteCreatorError, NoteNotFoundError

FRONTMATTER_DELIMITER = "---"

QUOTE_CHARACTERS = ('"', "'")
ESCAPE_PATTERN = re.compile(r"\\(.)")


class NoteSource(Protocol):
    """Where the parser reads notes from."""

    type_registry: Optional[TypeRegistry]

    async def get_metadata(self, path: Union[Path, str]) -> Optional[Dict[str, Any]]: ...

    async def read_text(self, path: Union[Path, str]) -> str: ...


def extract_frontmatter_block(content: str) -> Optional[str]:
    """Return the text between the opening and closing ``---`` lines.

    The opening line must be the first line of the note. Returns None when
    there is no delimited header.
    """
    lines = content.split("\n")
    if lines[0].rstrip("\r") != FRONTMATTER_DELIMITER:
        return None
    for index in range(1, len(lines)):
        if lines[index].rstrip("\r") == FRONTMATTER_DELIMITER:
            return "\n".join(lines[1:index])
    return None


def strip_frontmatter(content: str) -> str:
    """Return the note body following the header block."""
    lines = content.split("\n")
    if lines[0].rstrip("\r") != FRONTMATTER_DELIMITER:
        return content
    for index in range(1, len(lines)):
        if lines[index].rstrip("\r") == FRONTMATTER_DELIMITER:
            return "\n".join(lines[index + 1 :]).lstrip("\r\n")
    return content


def unquote(value: str) -> str:
    """Strip a matching pair of surrounding quotes and unescape the content."""
    if len(value) >= 2 and value[0] in QUOTE_CHARACTERS and value[-1] == value[0]:
        return ESCAPE_PATTERN.sub(r"\1", value[1:-1])
    return value


def parse_scalar(raw: str) -> Any:
    """Reduce the raw text after ``key:`` to a plain value.

    Quoted text stays a string, a one-line ``[a, b]`` becomes a list, and
    bare booleans and numbers become ``bool``/``int``/``float``.
    """
    if len(raw) >= 2 and raw[0] in QUOTE_CHARACTERS and raw[-1] == raw[0]:
        return unquote(raw)
    if raw.startswith("[") and raw.endswith("]"):
        items = (unquote(item.strip()) for item in raw[1:-1].split(","))
        return [item for item in items if item]
    if raw.lower() in ("true", "false"):
        return raw.lower() == "true"
    if NUMBER_PATTERN.fullmatch(raw):
        return parse_number(raw)
    return raw


def parse_frontmatter_text(
    content: str, registry: Optional[TypeRegistry] = None
) -> List[FrontmatterField]:
    """Scan the header of ``content`` line by line.

    Lines without a ``:`` and lines whose key is not a valid property name
    are skipped.
    """
    block = extract_frontmatter_block(content)
    if not block:
        return []

    fields: List[FrontmatterField] = []
    for line in block.split("\n"):
        key, separator, raw_value = line.partition(":")
        if not separator:
            continue
        key = key.strip()
        if not is_valid_key(key):
            continue
        raw_value = raw_value.strip()
        value = parse_scalar(raw_value)
        # only flow lists are rewritten, other values keep their text as typed
        text = stringify_value(value) if isinstance(value, list) else unquote(raw_value)
        fields.append(
            FrontmatterField(
                key=key,
                value=text,
                type=infer_type(key, value, registry),
            )
        )

    logger.debug(f"Parsed {len(fields)} frontmatter fields from header text")
    return fields


def fields_from_metadata(
    metadata: Dict[str, Any], registry: Optional[TypeRegistry] = None
) -> List[FrontmatterField]:
    """Build fields from an already parsed key/value map, keeping its order."""
    fields: List[FrontmatterField] = []
    for key, value in metadata.items():
        key = str(key)
        if key in RESERVED_KEYS:
            continue
        if not is_valid_key(key):
            logger.debug(f"Skipping frontmatter key that is not a valid property name: {key!r}")
            continue
        fields.append(
            FrontmatterField(
                key=key,
                value=stringify_value(value),
                type=infer_type(key, value, registry),
            )
        )
    return fields


class FrontmatterParser:
    """Reads the frontmatter fields of notes in a vault."""

    def __init__(self, source: NoteSource):
        self.source = source

    async def parse(self, path: Union[Path, str]) -> List[FrontmatterField]:
        """Parse the fields of the note at ``path``.

        A missing note is logged and yields no fields.
        """
        try:
            metadata = await self.source.get_metadata(path)
            if metadata is not None:
                return fields_from_metadata(metadata, self.source.type_registry)

            logger.debug(f"No parsed metadata for {path}, scanning header text")
            content = await self.source.read_text(path)
        except NoteNotFoundError:
            logger.warning(f"Template file not found: {path}")
            return []
        except NoteCreatorError as e:
            logger.warning(f"Failed to read frontmatter of {path}: {e}")
            return []

        return parse_frontmatter_text(content, self.source.type_registry)
