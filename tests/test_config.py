"""Tests for configuration loading."""

import json

from note_creator.config import CONFIG_FILE_NAME, NoteCreatorConfig, NoteType, load_config


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("NOTE_CREATOR_VAULT", raising=False)
    monkeypatch.chdir(tmp_path)
    config = NoteCreatorConfig()
    assert config.vault == tmp_path
    assert config.types == []
    assert config.log_level == "INFO"


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("NOTE_CREATOR_VAULT", str(tmp_path))
    monkeypatch.setenv("NOTE_CREATOR_LOG_LEVEL", "DEBUG")
    config = NoteCreatorConfig()
    assert config.vault == tmp_path
    assert config.log_level == "DEBUG"


def test_note_type_accepts_camel_case_keys():
    note_type = NoteType.model_validate(
        {"id": "book", "templatePath": "T/Book.md", "destinationFolder": "Books"}
    )
    assert note_type.template_path == "T/Book.md"
    assert note_type.destination_folder == "Books"
    assert note_type.display_name == "(unnamed type)"


def test_load_config_reads_vault_file(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text(
        json.dumps(
            {
                "types": [
                    {
                        "id": "book",
                        "name": "Book",
                        "templatePath": "Templates/Book.md",
                        "destinationFolder": "Books",
                    }
                ],
                "log_level": "WARNING",
            }
        )
    )
    config = load_config(tmp_path)
    assert config.vault == tmp_path
    assert config.log_level == "WARNING"
    assert config.get_type("book").name == "Book"
    assert config.get_type("movie") is None


def test_load_config_without_file(tmp_path):
    config = load_config(tmp_path)
    assert config.vault == tmp_path
    assert config.types == []
