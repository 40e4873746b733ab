"""Write frontmatter properties as a YAML header block."""

from typing import Iterable, Optional

from note_creator.markdown.schemas import FrontmatterField, FrontmatterType
from note_creator.markdown.value_codec import format_number, is_truthy, parse_number, split_list

FRONTMATTER_DELIMITER = "---"

# Characters that would change the meaning of a plain YAML scalar
SPECIAL_CHARACTERS = (":", "#", "'", '"', "\n")


def quote_yaml_string(value: str) -> str:
    """Wrap ``value`` in double quotes, escaping backslashes and quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_yaml_value(value: str) -> str:
    """Quote ``value`` only when it holds characters YAML would misread."""
    if not value:
        return ""
    if any(char in value for char in SPECIAL_CHARACTERS):
        return quote_yaml_string(value)
    return value


def _format_list(key: str, value: str, always_quote: bool) -> str:
    items = split_list(value)
    if not items:
        return f"{key}: []"
    format_item = quote_yaml_string if always_quote else format_yaml_value
    lines = [f"{key}:"]
    lines.extend(f"  - {format_item(item)}" for item in items)
    return "\n".join(lines)


def format_frontmatter_line(
    key: str, value: str, field_type: Optional[FrontmatterType] = None
) -> str:
    """Format one property as header text.

    Returns an empty string when the property should be left out, which is
    the case for empty text, date and datetime values.
    """
    if field_type == FrontmatterType.NUMBER:
        return f"{key}: {format_number(parse_number(value))}"
    if field_type == FrontmatterType.CHECKBOX:
        return f"{key}: {'true' if is_truthy(value) else 'false'}"
    if field_type in (FrontmatterType.MULTITEXT, FrontmatterType.ALIASES):
        return _format_list(key, value, always_quote=True)
    if field_type == FrontmatterType.TAGS:
        # tags stay bare unless they need quoting
        return _format_list(key, value, always_quote=False)
    if field_type in (FrontmatterType.DATE, FrontmatterType.DATETIME):
        if not value:
            return ""
        return f"{key}: {value}"
    if not value:
        return ""
    return f"{key}: {format_yaml_value(value)}"


def build_frontmatter(fields: Iterable[FrontmatterField]) -> str:
    """Build the header block for ``fields``, in order.

    An empty field list produces an empty string rather than an empty block.
    """
    fields = list(fields)
    if not fields:
        return ""

    lines = [FRONTMATTER_DELIMITER]
    for field in fields:
        line = format_frontmatter_line(field.key, field.value, field.type)
        if line:
            lines.append(line)
    lines.append(FRONTMATTER_DELIMITER)
    lines.append("")
    return "\n".join(lines)


def build_note_content(fields: Iterable[FrontmatterField], body: str = "") -> str:
    """Header block for ``fields`` followed by ``body``."""
    header = build_frontmatter(fields)
    if not body:
        return header
    if not header:
        return body
    return f"{header}\n{body}"
