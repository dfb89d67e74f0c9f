"""Run inputs and the aggregate report handed back to callers."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from assettagger.models.assets import AssetFile, AssetKind, AssetManifest


class TaggingJob(BaseModel):
    """Everything one run needs: both input groups and the output directory.

    Empty groups are valid and simply produce no output.
    """

    model_config = ConfigDict(frozen=True)

    style_sheets: list[Path] = Field(default_factory=list)
    scripts: list[Path] = Field(default_factory=list)
    output_dir: Path

    def assets(self) -> list[AssetFile]:
        """All inputs in processing order: style sheets first, then scripts."""
        return [
            *(AssetFile(path=p, kind=AssetKind.STYLE_SHEET) for p in self.style_sheets),
            *(AssetFile(path=p, kind=AssetKind.SCRIPT) for p in self.scripts),
        ]


class TaggingReport(BaseModel):
    """Outcome of :meth:`FileTagger.run`.

    On failure ``error`` carries a human-readable cause and ``error_kind``
    the failing ``ProcessingError.kind``; ``manifest`` is ``None``.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    error: str | None = None
    error_kind: str | None = None
    manifest: AssetManifest | None = None
    sources_removed: list[Path] = Field(default_factory=list)

    def __bool__(self) -> bool:
        return self.success
