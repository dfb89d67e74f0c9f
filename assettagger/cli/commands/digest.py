"""``assettagger digest FILE...``: preview digests and tagged names.

Read-only: nothing is written and no input is deleted.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.markup import escape

from assettagger.cli.commands.tag import build_settings
from assettagger.cli.console import console
from assettagger.core.errors import HashError, ProcessingError
from assettagger.core.versioner import FileVersioner
from assettagger.models.assets import AssetKind

_STYLE_SHEET_EXTENSIONS = {".css", ".scss", ".less"}


def digest_cmd(
    files: list[Path] = typer.Argument(
        ...,
        help="Files to hash.",
    ),
    algorithm: str = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Digest to use: md5, sha1, sha256, sha512, blake2b, blake2s.",
    ),
) -> None:
    """Print each file's digest and the name it would be tagged with."""
    try:
        settings = build_settings(algorithm)
    except (HashError, ValidationError) as exc:
        console.print(f"[bold red]Invalid settings:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    try:
        tagger_suffix = {
            AssetKind.STYLE_SHEET: settings.style_sheet_suffix,
            AssetKind.SCRIPT: settings.script_suffix,
        }
        for path in files:
            kind = (
                AssetKind.STYLE_SHEET
                if path.suffix.lower() in _STYLE_SHEET_EXTENSIONS
                else AssetKind.SCRIPT
            )
            versioner = (
                FileVersioner.for_file(path)
                .with_algorithm(settings.algorithm)
                .with_suffix(tagger_suffix[kind])
                .with_marker(settings.minified_marker)
            )
            digest = versioner.compute_digest()
            console.print(
                f"{digest}  {versioner.tagged_filename(digest)}",
                soft_wrap=True,
                highlight=False,
                markup=False,
            )
    except ProcessingError as exc:
        console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        raise typer.Exit(code=1)
