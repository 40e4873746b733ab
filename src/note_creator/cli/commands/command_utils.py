"""utility functions for commands"""

import asyncio
from typing import Coroutine, Dict, List, Optional, Sequence, TypeVar

import typer
from rich.console import Console

from note_creator.markdown.schemas import FrontmatterField, FrontmatterType, is_valid_key
from note_creator.markdown.type_inference import TypeRegistry, infer_type
from note_creator.services.exceptions import NoteCreatorError

console = Console()

T = TypeVar("T")


def run(coro: Coroutine[None, None, T]) -> T:
    """Run a service call, reporting note-creator errors and exiting with status 1."""
    try:
        return asyncio.run(coro)
    except NoteCreatorError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1)


def parse_assignments(items: Optional[Sequence[str]], option: str) -> Dict[str, str]:
    """Parse repeated ``KEY=VALUE`` options, keeping their order."""
    result: Dict[str, str] = {}
    for item in items or []:
        key, separator, value = item.partition("=")
        key = key.strip()
        if not separator or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got {item!r}", param_hint=option)
        if not is_valid_key(key):
            raise typer.BadParameter(f"Invalid property name: {key!r}", param_hint=option)
        result[key] = value
    return result


def parse_property_types(items: Optional[Sequence[str]]) -> Dict[str, FrontmatterType]:
    types: Dict[str, FrontmatterType] = {}
    for key, name in parse_assignments(items, "--prop-type").items():
        try:
            types[key] = FrontmatterType(name.strip())
        except ValueError:
            choices = ", ".join(t.value for t in FrontmatterType)
            raise typer.BadParameter(
                f"Unknown property type {name!r}, expected one of: {choices}",
                param_hint="--prop-type",
            )
    return types


def merge_fields(
    fields: Sequence[FrontmatterField],
    values: Dict[str, str],
    types: Dict[str, FrontmatterType],
    registry: Optional[TypeRegistry] = None,
) -> List[FrontmatterField]:
    """Apply edited values and types to ``fields``.

    Keys not among ``fields`` are appended, typed from ``types`` or inferred
    from the value.
    """
    merged = [field.model_copy() for field in fields]
    by_key = {field.key: field for field in merged}

    for key in [*values, *(key for key in types if key not in values)]:
        field = by_key.get(key)
        if field is None:
            field = FrontmatterField(key=key, type=infer_type(key, values.get(key, ""), registry))
            merged.append(field)
            by_key[key] = field
        if key in values:
            field.value = values[key]
        if key in types:
            field.type = types[key]

    return merged
