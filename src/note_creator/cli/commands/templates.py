"""Commands for inspecting note types and template properties."""

import typer
from rich.table import Table

from note_creator.cli.app import app, get_config
from note_creator.cli.commands.command_utils import console, run
from note_creator.services.note_service import NoteService
from note_creator.services.vault import Vault


@app.command("types")
def list_types(ctx: typer.Context) -> None:
    """List the configured note types."""
    config = get_config(ctx)
    if not config.types:
        console.print(f"[yellow]No note types configured in {config.config_file}[/yellow]")
        return

    table = Table(title="Note types")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Template")
    table.add_column("Destination")
    for note_type in config.types:
        table.add_row(
            note_type.id,
            note_type.display_name,
            note_type.template_path,
            note_type.destination_folder,
        )
    console.print(table)


@app.command()
def fields(
    ctx: typer.Context,
    template: str = typer.Argument(..., help="Template path, relative to the vault"),
) -> None:
    """Show the frontmatter properties of a template."""
    config = get_config(ctx)
    service = NoteService(Vault(config.vault), config.types)
    template_fields = run(service.template_fields(template))

    if not template_fields:
        console.print("[yellow]No frontmatter properties found in the template file.[/yellow]")
        return

    table = Table(title="Properties")
    table.add_column("Key", style="cyan")
    table.add_column("Type")
    table.add_column("Value")
    for field in template_fields:
        table.add_row(field.key, field.type.label, field.value)
    console.print(table)
