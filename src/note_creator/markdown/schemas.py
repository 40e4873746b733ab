"""Models for frontmatter properties."""

import re
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict

KEY_PATTERN = re.compile(r"\w[\w\s-]*")

RESERVED_KEYS = frozenset({"position"})
"""Keys a metadata index adds for its own bookkeeping, never user properties."""


class FrontmatterType(str, Enum):
    """Property types recognized in a note header.

    The type decides both how a value is coerced and how its line is written.
    """

    TEXT = "text"
    MULTITEXT = "multitext"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    DATE = "date"
    DATETIME = "datetime"
    ALIASES = "aliases"
    TAGS = "tags"

    @property
    def label(self) -> str:
        return FRONTMATTER_TYPE_LABELS[self]

    @property
    def is_list(self) -> bool:
        return self in LIST_TYPES

    @classmethod
    def _missing_(cls, value):
        """Handle case-insensitive lookup."""
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


FRONTMATTER_TYPE_LABELS = {
    FrontmatterType.TEXT: "Text",
    FrontmatterType.MULTITEXT: "List",
    FrontmatterType.NUMBER: "Number",
    FrontmatterType.CHECKBOX: "Checkbox",
    FrontmatterType.DATE: "Date",
    FrontmatterType.DATETIME: "Date & time",
    FrontmatterType.ALIASES: "Aliases",
    FrontmatterType.TAGS: "Tags",
}

LIST_TYPES = frozenset({FrontmatterType.MULTITEXT, FrontmatterType.ALIASES, FrontmatterType.TAGS})


def is_valid_key(key: str) -> bool:
    """Keys start with a word character, followed by word characters, spaces or hyphens."""
    return bool(key) and KEY_PATTERN.fullmatch(key) is not None


def validate_key(key: str) -> str:
    if not is_valid_key(key):
        raise ValueError(f"Invalid property key: {key!r}")
    return key


PropertyKey = Annotated[str, AfterValidator(validate_key)]


class FrontmatterField(BaseModel):
    """One key/value/type triple being edited or written.

    ``value`` always holds the string form of the property, lists included
    (comma separated), so an editor can treat every field the same way.
    """

    model_config = ConfigDict(validate_assignment=True)

    key: PropertyKey
    value: str = ""
    type: FrontmatterType = FrontmatterType.TEXT


class CustomProperty(BaseModel):
    """A property typed in by the user, possibly still without a usable key."""

    key: str = ""
    value: str = ""
    type: FrontmatterType = FrontmatterType.TEXT

    def to_field(self) -> FrontmatterField:
        return FrontmatterField(key=self.key.strip(), value=self.value, type=self.type)
