"""Utilities for file operations."""

from pathlib import Path

from loguru import logger

from note_creator.services.exceptions import FileOperationError


async def ensure_directory(path: Path) -> None:
    """
    Ensure directory exists, creating intermediate directories as needed.

    Args:
        path: Directory path to ensure

    Raises:
        FileOperationError: If directory creation fails
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create directory: {path}: {e}")
        raise FileOperationError(f"Failed to create directory {path}: {e}") from e


async def write_file_atomic(path: Path, content: str) -> None:
    """
    Write file with atomic operation using temporary file.

    Args:
        path: Target file path
        content: Content to write

    Raises:
        FileOperationError: If write operation fails
    """
    temp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        logger.error(f"Failed to write file: {path}: {e}")
        raise FileOperationError(f"Failed to write file {path}: {e}") from e
