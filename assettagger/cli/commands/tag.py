"""``assettagger tag``: version a batch of style sheets and scripts.

Clears the output directory, writes one content-tagged copy per input,
optionally writes a JSON manifest, then deletes the original inputs.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from assettagger.cli.console import configure_logging, console
from assettagger.config import TaggerSettings
from assettagger.core.batch import FileTagger
from assettagger.core.errors import HashError
from assettagger.core.hasher import HashAlgorithm


def build_settings(
    algorithm: str | None = None,
    manifest: Path | None = None,
    css_suffix: str | None = None,
    js_suffix: str | None = None,
) -> TaggerSettings:
    """Layer explicit CLI options over env-driven defaults."""
    overrides: dict[str, object] = {}
    if algorithm:
        overrides["algorithm"] = HashAlgorithm.parse(algorithm)
    if manifest is not None:
        overrides["manifest_path"] = manifest
    if css_suffix:
        overrides["style_sheet_suffix"] = css_suffix
    if js_suffix:
        overrides["script_suffix"] = js_suffix
    return TaggerSettings(**overrides)


def tag_cmd(
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="Output directory. Its files are deleted before tagging.",
    ),
    css: list[Path] = typer.Option(
        [],
        "--css",
        "-c",
        help="Style sheet to version (repeatable).",
    ),
    js: list[Path] = typer.Option(
        [],
        "--js",
        "-j",
        help="Script to version (repeatable).",
    ),
    algorithm: str = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Digest to use: md5, sha1, sha256, sha512, blake2b, blake2s.",
    ),
    manifest: Path = typer.Option(
        None,
        "--manifest",
        "-m",
        help="Write a JSON manifest of source -> tagged names here.",
    ),
    css_suffix: str = typer.Option(
        None,
        "--css-suffix",
        help="Suffix for tagged style sheets (default .min.css).",
    ),
    js_suffix: str = typer.Option(
        None,
        "--js-suffix",
        help="Suffix for tagged scripts (default .min.js).",
    ),
) -> None:
    """Tag style sheets and scripts with their content digest.

    Original inputs are deleted only when every file was tagged.
    """
    try:
        settings = build_settings(algorithm, manifest, css_suffix, js_suffix)
    except (HashError, ValidationError) as exc:
        console.print(f"[bold red]Invalid settings:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    configure_logging(settings.log_level)

    report = FileTagger(settings).run(css, js, output)

    if not report.success:
        console.print(
            f"[bold red]File versioning failed ({report.error_kind}):[/bold red] {escape(report.error or '')}"
        )
        if report.sources_removed:
            console.print(
                f"[yellow]{len(report.sources_removed)} source file(s) were already deleted.[/yellow]"
            )
        else:
            console.print("[dim]No source files were deleted.[/dim]")
        raise typer.Exit(code=1)

    entries = report.manifest.entries if report.manifest else []

    if entries:
        table = Table(title="Tagged Assets")
        table.add_column("Kind", style="cyan")
        table.add_column("Source")
        table.add_column("Tagged", style="green")
        for entry in entries:
            table.add_row(entry.kind.value, str(entry.source), entry.tagged_name)
        console.print(table)

    console.print(
        Panel(
            "\n".join([
                f"[bold green]Tagged {len(entries)} file(s)[/bold green]",
                "",
                f"[bold]Algorithm:[/bold]       {settings.algorithm.value}",
                f"[bold]Output:[/bold]          {output}",
                f"[bold]Sources removed:[/bold] {len(report.sources_removed)}",
                f"[bold]Manifest:[/bold]        {settings.manifest_path or '-'}",
            ]),
            title="[bold]assettagger[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
