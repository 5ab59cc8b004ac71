"""Timestamp settings and configuration.

The storage encoding is chosen once, when this module is imported, and then
handed to every column adapter that needs it. Values are loaded from
environment variables (or an ``.env`` file) with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from epochstamp.storage.encoding import StorageEncoding


class Settings(BaseSettings):
    """Timestamp settings loaded from environment variables."""

    # Physical column encoding for timestamp columns
    storage_encoding: StorageEncoding = Field(
        default=StorageEncoding.DATETIME_WITH_TIMEZONE,
        alias="TIMESTAMP_STORAGE_ENCODING",
    )
    # Raise on unrecognised column values instead of reading them as empty
    strict_decode: bool = Field(default=False, alias="TIMESTAMP_STRICT_DECODE")

    model_config = SettingsConfigDict(
        env_file=".env",
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


settings = Settings()
