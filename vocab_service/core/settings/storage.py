"""Flat-file storage settings for the JSON-backed stores."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_storage_yaml_source


class StorageSettings(BaseSettings):
    """Location of the subscription and dictionary JSON files.

    Environment variables use STORAGE_ prefix.
    Example: STORAGE_DATA_DIR=/var/lib/vocab-service
    """

    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding the JSON data files",
    )
    subscriptions_file: str = Field(
        default="subscriptions.json",
        min_length=1,
        description="File name of the push subscription list",
    )
    dictionary_file: str = Field(
        default="dictionary.json",
        min_length=1,
        description="File name of the dictionary entry list",
    )

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_storage_yaml_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @property
    def subscriptions_path(self) -> Path:
        return self.data_dir / self.subscriptions_file

    @property
    def dictionary_path(self) -> Path:
        return self.data_dir / self.dictionary_file
