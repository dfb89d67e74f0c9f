"""Asset models: inputs, tagged outputs and the run manifest."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class AssetKind(str, Enum):
    """The group an input file belongs to."""

    STYLE_SHEET = "style_sheet"
    SCRIPT = "script"


class AssetFile(BaseModel):
    """A caller-supplied source file. Identity is its path."""

    model_config = ConfigDict(frozen=True)

    path: Path
    kind: AssetKind


class TaggedAsset(BaseModel):
    """One tagged copy written to the output directory.

    ``digest`` is the lowercase hex digest embedded in ``tagged_path``.
    """

    model_config = ConfigDict(frozen=True)

    source: Path
    tagged_path: Path
    kind: AssetKind
    digest: str
    algorithm: str
    size_bytes: int = 0

    @property
    def tagged_name(self) -> str:
        return self.tagged_path.name


class AssetManifest(BaseModel):
    """Durable record of which source became which tagged file."""

    model_config = ConfigDict(frozen=True)

    algorithm: str
    output_dir: Path
    entries: list[TaggedAsset] = Field(default_factory=list)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def mapping(self) -> dict[str, str]:
        """Source path -> tagged file name, in processing order."""
        return {str(e.source): e.tagged_name for e in self.entries}

    def by_kind(self, kind: AssetKind) -> list[TaggedAsset]:
        return [e for e in self.entries if e.kind == kind]
