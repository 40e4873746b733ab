"""Infer the property type for a frontmatter key."""

import re
from datetime import date, datetime
from typing import Any, Optional, Protocol

from note_creator.markdown.schemas import FrontmatterType

DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}\Z")

KEY_TYPES = {
    "tags": FrontmatterType.TAGS,
    "aliases": FrontmatterType.ALIASES,
}


class TypeRegistry(Protocol):
    """Source of property types declared ahead of time, keyed by property name."""

    def assigned_type(self, key: str) -> Optional[str]: ...


def _declared_type(key: str, registry: Optional[TypeRegistry]) -> Optional[FrontmatterType]:
    if registry is None:
        return None
    assigned = registry.assigned_type(key)
    if not assigned:
        return None
    try:
        return FrontmatterType(assigned)
    except ValueError:
        return None


def infer_type(key: str, value: Any, registry: Optional[TypeRegistry] = None) -> FrontmatterType:
    """Return the property type to use for ``key``.

    Resolution order:
    1. ``tags`` and ``aliases`` keys always get their own type
    2. a type declared for the key in ``registry``
    3. the shape of ``value`` (list, bool, number, date-like string)
    4. text
    """
    key_type = KEY_TYPES.get(key.lower())
    if key_type is not None:
        return key_type

    declared = _declared_type(key, registry)
    if declared is not None:
        return declared

    if isinstance(value, (list, tuple)):
        return FrontmatterType.MULTITEXT
    # bool first, it is a subclass of int
    if isinstance(value, bool):
        return FrontmatterType.CHECKBOX
    if isinstance(value, (int, float)):
        return FrontmatterType.NUMBER
    if isinstance(value, datetime):
        return FrontmatterType.DATETIME
    if isinstance(value, date):
        return FrontmatterType.DATE
    if isinstance(value, str):
        if DATETIME_PATTERN.match(value):
            return FrontmatterType.DATETIME
        if DATE_PATTERN.match(value):
            return FrontmatterType.DATE
    return FrontmatterType.TEXT
