"""Configuration management for note-creator."""

import json
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILE_NAME = ".note-creator.json"


class NoteType(BaseModel):
    """A kind of note: which template it starts from and where it is created.

    Accepts both ``template_path`` and the camelCase ``templatePath`` spelling.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str = ""
    template_path: str
    destination_folder: str

    @property
    def display_name(self) -> str:
        return self.name or "(unnamed type)"


class NoteCreatorConfig(BaseSettings):
    """Configuration for a note-creator vault."""

    vault: Path = Field(
        default_factory=Path.cwd,
        description="Base path of the vault notes are read from and created in",
    )
    types: List[NoteType] = Field(default_factory=list, description="Configured note types")
    log_level: str = Field(default="INFO", description="Log level for console and file output")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_prefix="NOTE_CREATOR_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def config_file(self) -> Path:
        return self.vault / CONFIG_FILE_NAME

    def get_type(self, type_id: str) -> Optional[NoteType]:
        return next((note_type for note_type in self.types if note_type.id == type_id), None)


def load_config(vault: Optional[Path] = None) -> NoteCreatorConfig:
    """Load configuration from the environment, overlaid with the vault's config file.

    Args:
        vault: Vault path, overriding ``NOTE_CREATOR_VAULT``
    """
    overrides = {"vault": vault} if vault is not None else {}
    config = NoteCreatorConfig(**overrides)

    if config.config_file.exists():
        logger.debug(f"Loading config file: {config.config_file}")
        data = json.loads(config.config_file.read_text(encoding="utf-8"))
        data.update(vault=config.vault)
        config = NoteCreatorConfig(**data)

    return config
