from pathlib import Path
from typing import Optional

import typer

from note_creator.config import NoteCreatorConfig, load_config
from note_creator.utils import setup_logging


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import note_creator

        typer.echo(f"note-creator version: {note_creator.__version__}")
        raise typer.Exit()


app = typer.Typer(name="note-creator", no_args_is_help=True)


@app.callback()
def app_callback(
    ctx: typer.Context,
    vault: Optional[Path] = typer.Option(
        None,
        "--vault",
        help="Vault folder to work in (defaults to NOTE_CREATOR_VAULT or the current directory)",
        envvar="NOTE_CREATOR_VAULT",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """note-creator - create notes from templates with typed properties."""
    config = load_config(vault)
    setup_logging(log_level=config.log_level, log_file=config.log_file)
    ctx.obj = config


def get_config(ctx: typer.Context) -> NoteCreatorConfig:
    return ctx.obj


# Register sub-command groups
suggest_app = typer.Typer(help="Suggest folders and property values")
app.add_typer(suggest_app, name="suggest")
