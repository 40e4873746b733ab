"""Frontmatter parsing, type inference and writing for note headers."""

from note_creator.markdown.frontmatter_parser import (
    FrontmatterParser,
    fields_from_metadata,
    parse_frontmatter_text,
)
from note_creator.markdown.frontmatter_writer import (
    build_frontmatter,
    build_note_content,
    format_frontmatter_line,
)
from note_creator.markdown.schemas import (
    CustomProperty,
    FrontmatterField,
    FrontmatterType,
)
from note_creator.markdown.type_inference import infer_type
from note_creator.markdown.value_codec import to_field_string, to_frontmatter_value

__all__ = [
    "CustomProperty",
    "FrontmatterField",
    "FrontmatterParser",
    "FrontmatterType",
    "build_frontmatter",
    "build_note_content",
    "fields_from_metadata",
    "format_frontmatter_line",
    "infer_type",
    "parse_frontmatter_text",
    "to_field_string",
    "to_frontmatter_value",
]
