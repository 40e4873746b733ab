"""Commands for folder and property value suggestions."""

import typer

from note_creator.cli.app import get_config, suggest_app
from note_creator.cli.commands.command_utils import console, run
from note_creator.services.suggest_service import SuggestService
from note_creator.services.vault import Vault


def print_suggestions(suggestions) -> None:
    if not suggestions:
        console.print("[yellow]No suggestions[/yellow]")
        return
    for suggestion in suggestions:
        console.print(suggestion, markup=False, highlight=False)


@suggest_app.command()
def folders(
    ctx: typer.Context,
    query: str = typer.Argument("", help="Text the folder path should contain"),
) -> None:
    """Suggest existing folders."""
    service = SuggestService(Vault(get_config(ctx).vault))
    print_suggestions(run(service.suggest_folders(query)))


@suggest_app.command()
def values(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Property name"),
    query: str = typer.Argument("", help="Text the value should contain"),
) -> None:
    """Suggest values already used for a property in other notes."""
    service = SuggestService(Vault(get_config(ctx).vault))
    print_suggestions(run(service.suggest_values(key, query)))
