"""note-creator - create notes from templates with typed frontmatter properties."""

__version__ = "0.1.0"
