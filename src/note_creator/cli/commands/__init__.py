"""CLI commands for note-creator."""

from . import create, suggest, templates

__all__ = ["create", "suggest", "templates"]
