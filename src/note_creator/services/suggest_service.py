"""Suggestions for folder paths and property values while editing a note."""

from typing import List

from loguru import logger

from note_creator.markdown.value_codec import stringify_value
from note_creator.services.exceptions import NoteCreatorError
from note_creator.services.vault import Vault

MAX_SUGGESTIONS = 20


class SuggestService:
    """Looks up existing folders and property values in a vault."""

    def __init__(self, vault: Vault, limit: int = MAX_SUGGESTIONS):
        self.vault = vault
        self.limit = limit

    async def suggest_folders(self, query: str) -> List[str]:
        """Folders whose path contains ``query``, ignoring case."""
        lower_query = query.lower()
        folders = [folder for folder in self.vault.list_folders() if lower_query in folder.lower()]
        return folders[: self.limit]

    async def suggest_values(self, key: str, query: str) -> List[str]:
        """Values already used for property ``key`` in other notes.

        Only string items of list values are offered. Results are distinct,
        filtered on ``query`` ignoring case, and sorted.
        """
        key = key.strip()
        if not key:
            return []

        lower_query = query.lower()
        seen = set()
        for path in self.vault.list_notes():
            try:
                metadata = await self.vault.get_metadata(path)
            except NoteCreatorError as e:
                logger.debug(f"Skipping {path} while collecting values for {key}: {e}")
                continue
            if not metadata or metadata.get(key) is None:
                continue

            value = metadata[key]
            if isinstance(value, list):
                candidates = [item.strip() for item in value if isinstance(item, str)]
            else:
                candidates = [stringify_value(value).strip()]

            for candidate in candidates:
                if candidate and lower_query in candidate.lower():
                    seen.add(candidate)

        return sorted(seen)[: self.limit]
