"""Runtime configuration: env-driven via pydantic-settings.

Reads ``ASSETTAGGER_*`` environment variables and an optional ``.env``
file. Settings are always handed to ``FileTagger`` explicitly; nothing
reads a module-level instance.

Examples
--------
Reproduce legacy MD5 names with a ``.min.js`` suffix for every group::

    export ASSETTAGGER_ALGORITHM=md5
    export ASSETTAGGER_STYLE_SHEET_SUFFIX=.min.js
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from assettagger.core.errors import HashError
from assettagger.core.hasher import DEFAULT_ALGORITHM, DEFAULT_CHUNK_SIZE, HashAlgorithm


class TaggerSettings(BaseSettings):
    """Tagging defaults with environment variable overrides."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ASSETTAGGER_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    algorithm: HashAlgorithm = DEFAULT_ALGORITHM

    # Tagged name layout
    style_sheet_suffix: str = ".min.css"
    script_suffix: str = ".min.js"
    minified_marker: str = ".min"

    # Optional JSON manifest of source -> tagged name
    manifest_path: Path | None = None

    chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: str = "INFO"

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: object) -> HashAlgorithm:
        try:
            return HashAlgorithm.parse(value)  # type: ignore[arg-type]
        except HashError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()
