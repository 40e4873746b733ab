"""Convert property values between their editable string form and typed values.

A value that does not fit its type falls back to ``0``, ``False`` or an
empty list. Nothing here raises.
"""

import math
import re
from datetime import date, datetime
from typing import Any, List, Union

from note_creator.markdown.schemas import FrontmatterType

Number = Union[int, float]
TypedValue = Union[str, Number, bool, List[str]]

NUMBER_PATTERN = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
INTEGER_PATTERN = re.compile(r"[-+]?\d+")

TRUTHY_VALUES = ("true", "1")


def parse_number(value: str) -> Number:
    """Parse a decimal number, falling back to 0.

    Integral results come back as ``int`` so ``"3"`` and ``"3.0"`` both
    write as ``3``.
    """
    text = value.strip()
    if not text:
        return 0
    if not NUMBER_PATTERN.fullmatch(text):
        return 0
    if INTEGER_PATTERN.fullmatch(text):
        return int(text)
    number = float(text)
    if not math.isfinite(number):
        return 0
    if number.is_integer():
        return int(number)
    return number


def is_truthy(value: str) -> bool:
    return value in TRUTHY_VALUES


def split_list(value: str) -> List[str]:
    """Split a comma separated string, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def to_frontmatter_value(value: str, field_type: FrontmatterType) -> TypedValue:
    """Expand the string form of a property into the value its type calls for."""
    if field_type == FrontmatterType.NUMBER:
        return parse_number(value)
    if field_type == FrontmatterType.CHECKBOX:
        return is_truthy(value)
    if field_type.is_list:
        return split_list(value)
    return value


def format_number(value: Number) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def stringify_value(value: Any) -> str:
    """Collapse a metadata value into the string form used for editing."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_value(item) for item in value)
    return str(value)


def to_field_string(value: TypedValue, field_type: FrontmatterType) -> str:
    """Inverse of ``to_frontmatter_value``."""
    if field_type == FrontmatterType.CHECKBOX:
        if isinstance(value, str):
            return "true" if is_truthy(value) else "false"
        return "true" if value else "false"
    return stringify_value(value)
