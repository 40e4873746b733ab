"""Main CLI entry point for note-creator."""  # pragma: no cover

from note_creator.cli.app import app  # pragma: no cover

# Register commands
from note_creator.cli.commands import create, suggest, templates  # pragma: no cover

__all__ = ["create", "suggest", "templates"]  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
