"""Commands for creating notes and updating their properties."""

from typing import List, Optional

import typer

from note_creator.cli.app import app, get_config
from note_creator.cli.commands.command_utils import (
    console,
    merge_fields,
    parse_assignments,
    parse_property_types,
    run,
)
from note_creator.markdown.schemas import CustomProperty
from note_creator.services.note_service import NoteService
from note_creator.services.vault import Vault

PROP_HELP = "Property value as KEY=VALUE; lists are comma separated. Repeatable."
PROP_TYPE_HELP = (
    "Property type as KEY=TYPE (text, multitext, number, checkbox, date, datetime, aliases, tags). "
    "Repeatable."
)


@app.command()
def create(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the new note"),
    note_type: Optional[str] = typer.Option(None, "--type", "-t", help="Note type id to create"),
    folder: Optional[str] = typer.Option(
        None, "--folder", "-f", help="Destination folder for a note without a type"
    ),
    prop: Optional[List[str]] = typer.Option(None, "--prop", "-p", help=PROP_HELP),
    prop_type: Optional[List[str]] = typer.Option(None, "--prop-type", help=PROP_TYPE_HELP),
) -> None:
    """Create a note from a note type, or a custom note in a folder."""
    if bool(note_type) == bool(folder):
        raise typer.BadParameter("Pass exactly one of --type or --folder")

    config = get_config(ctx)
    vault = Vault(config.vault)
    service = NoteService(vault, config.types)
    values = parse_assignments(prop, "--prop")
    types = parse_property_types(prop_type)

    async def create_note():
        if folder:
            fields = merge_fields([], values, types, vault.type_registry)
            properties = [CustomProperty(**field.model_dump()) for field in fields]
            return await service.create_custom_note(name, folder, properties)

        selected = service.get_note_type(note_type)
        template_fields = await service.template_fields(selected.template_path)
        fields = merge_fields(template_fields, values, types, vault.type_registry)
        return await service.create_note_from_type(name, selected, fields)

    path = run(create_note())
    console.print(f"[green]✓ Note created: {path.relative_to(vault.get_path('.'))}[/green]")


@app.command()
def apply(
    ctx: typer.Context,
    note: str = typer.Argument(..., help="Note path, relative to the vault"),
    prop: Optional[List[str]] = typer.Option(None, "--prop", "-p", help=PROP_HELP),
    prop_type: Optional[List[str]] = typer.Option(None, "--prop-type", help=PROP_TYPE_HELP),
) -> None:
    """Merge properties into the frontmatter of an existing note."""
    values = parse_assignments(prop, "--prop")
    if not values:
        raise typer.BadParameter("Pass at least one --prop")

    config = get_config(ctx)
    vault = Vault(config.vault)
    service = NoteService(vault, config.types)
    types = parse_property_types(prop_type)

    async def apply_properties():
        existing = await service.template_fields(note)
        fields = merge_fields(existing, values, types, vault.type_registry)
        return await service.apply_frontmatter(note, [f for f in fields if f.key in values])

    run(apply_properties())
    console.print(f"[green]✓ Updated {len(values)} properties in {note}[/green]")
