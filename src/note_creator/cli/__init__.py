"""CLI tools for note-creator."""
