"""Batch processor: runs the full tagging pipeline over both asset groups.

Pipeline (linear, first failure aborts):

    check inputs -> clear output -> tag style sheets -> tag scripts
                 -> write manifest -> remove sources

Inputs that sit directly inside the output directory are rejected before
anything is cleared.

Sources are only removed once every tagged copy (and the manifest, when
configured) has been written, so a failed run never loses source data. A
failed run may leave a partial set of tagged files in the output
directory; they are not cleaned up.

The output directory must be owned by a single run at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from assettagger.config import TaggerSettings
from assettagger.core.errors import AssetIOError, ProcessingError, SourceRemovalError
from assettagger.core.manifest import build_manifest, write_manifest
from assettagger.core.versioner import FileVersioner
from assettagger.models.assets import AssetFile, AssetKind, AssetManifest, TaggedAsset
from assettagger.models.jobs import TaggingJob, TaggingReport

logger = logging.getLogger(__name__)


class FileTagger:
    """Versions style sheets and scripts into a single output directory.

    Parameters
    ----------
    settings:
        Algorithm, suffixes and manifest location. Uses defaults (and
        ``ASSETTAGGER_*`` environment overrides) if not provided.
    """

    def __init__(self, settings: TaggerSettings | None = None) -> None:
        self.settings = settings or TaggerSettings()

    def suffix_for(self, kind: AssetKind) -> str:
        if kind == AssetKind.STYLE_SHEET:
            return self.settings.style_sheet_suffix
        return self.settings.script_suffix

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def check_sources_outside(
        self, assets: Iterable[AssetFile], output_dir: Path | str
    ) -> None:
        """Refuse inputs that clearing ``output_dir`` would delete."""
        target = Path(output_dir).resolve()
        for asset in assets:
            if asset.path.resolve().parent == target:
                raise AssetIOError(
                    f"Source {asset.path} lives inside the output directory {output_dir}",
                    path=asset.path,
                )

    def clear_output_directory(self, output_dir: Path | str) -> list[Path]:
        """Delete every file directly inside ``output_dir``.

        Creates the directory if it does not exist yet. Subdirectories are
        left untouched. Returns the removed paths.
        """
        output_dir = Path(output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            entries = sorted(output_dir.iterdir())
        except OSError as exc:
            raise AssetIOError(
                f"Cannot prepare output directory {output_dir}: {exc}", path=output_dir
            ) from exc

        removed: list[Path] = []
        for entry in entries:
            if entry.is_dir() and not entry.is_symlink():
                continue
            try:
                entry.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise AssetIOError(
                    f"Cannot remove {entry} from output directory: {exc}", path=entry
                ) from exc
            logger.debug("Removed stale output %s", entry)
            removed.append(entry)
        return removed

    def process_group(
        self,
        paths: Iterable[Path | str],
        kind: AssetKind,
        output_dir: Path | str,
    ) -> list[TaggedAsset]:
        """Tag every path of one group, in order. Stops at the first error."""
        tagged: list[TaggedAsset] = []
        for path in paths:
            versioner = (
                FileVersioner.for_file(path)
                .with_algorithm(self.settings.algorithm)
                .with_suffix(self.suffix_for(kind))
                .with_marker(self.settings.minified_marker)
                .with_chunk_size(self.settings.chunk_size)
            )
            asset = versioner.tag(output_dir, kind)
            logger.info("%s -> %s", asset.source, asset.tagged_path)
            tagged.append(asset)
        return tagged

    def remove_sources(self, paths: Iterable[Path | str]) -> list[Path]:
        """Delete the original inputs. Already-missing files are skipped."""
        removed: list[Path] = []
        for path in map(Path, paths):
            try:
                path.unlink()
            except FileNotFoundError:
                logger.debug("Source already gone: %s", path)
                continue
            except OSError as exc:
                raise SourceRemovalError(
                    f"Cannot remove source {path}: {exc}", path=path, removed=removed
                ) from exc
            removed.append(path)
        return removed

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def process(self, job: TaggingJob) -> TaggingReport:
        """Run the whole pipeline for ``job``.

        Raises ``ProcessingError`` on the first failure.
        """
        logger.info(
            "File versioning started: %d style sheet(s), %d script(s) -> %s (%s)",
            len(job.style_sheets),
            len(job.scripts),
            job.output_dir,
            self.settings.algorithm.value,
        )

        assets = job.assets()
        self.check_sources_outside(assets, job.output_dir)
        self.clear_output_directory(job.output_dir)

        tagged: list[TaggedAsset] = []
        for kind in (AssetKind.STYLE_SHEET, AssetKind.SCRIPT):
            tagged += self.process_group(
                [a.path for a in assets if a.kind == kind], kind, job.output_dir
            )

        manifest: AssetManifest = build_manifest(
            tagged, self.settings.algorithm, job.output_dir
        )
        if self.settings.manifest_path is not None:
            write_manifest(manifest, self.settings.manifest_path)

        removed = self.remove_sources(a.path for a in assets)

        logger.info("File versioning finished: %d file(s) tagged", len(tagged))
        return TaggingReport(success=True, manifest=manifest, sources_removed=removed)

    def run(
        self,
        style_sheets: Iterable[Path | str],
        scripts: Iterable[Path | str],
        output_dir: Path | str,
    ) -> TaggingReport:
        """Aggregate entry point for build tooling.

        Never raises ``ProcessingError``; failures are reported through
        ``TaggingReport.success`` and ``TaggingReport.error``. ``None``
        for any argument is a programming error and raises ``ValueError``.
        """
        if style_sheets is None or scripts is None or output_dir is None:
            raise ValueError("style_sheets, scripts and output_dir are required")

        job = TaggingJob(
            style_sheets=[Path(p) for p in style_sheets],
            scripts=[Path(p) for p in scripts],
            output_dir=Path(output_dir),
        )
        try:
            return self.process(job)
        except SourceRemovalError as exc:
            logger.error("Error occurred when removing the input files: %s", exc)
            return TaggingReport(
                success=False,
                error=str(exc),
                error_kind=exc.kind,
                sources_removed=exc.removed,
            )
        except ProcessingError as exc:
            logger.error("Error occurred when processing the input files: %s", exc)
            return TaggingReport(success=False, error=str(exc), error_kind=exc.kind)
