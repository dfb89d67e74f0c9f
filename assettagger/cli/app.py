"""Main Typer application: imports and registers all CLI commands.

Entry point: ``assettagger`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import typer

from assettagger.cli.commands.digest import digest_cmd
from assettagger.cli.commands.tag import tag_cmd

app = typer.Typer(
    name="assettagger",
    help="assettagger: content-hash fingerprinting of style sheets and scripts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="tag", help="Version style sheets and scripts into an output directory.")(tag_cmd)
app.command(name="digest", help="Show digests and tagged names without writing.")(digest_cmd)


@app.command(name="algorithms", help="List supported hash algorithms.")
def algorithms_cmd() -> None:
    """List supported hash algorithms and their digest width."""
    from rich.table import Table

    from assettagger.cli.console import console
    from assettagger.core.hasher import DEFAULT_ALGORITHM, HashAlgorithm

    table = Table(title="Hash Algorithms")
    table.add_column("Name", style="cyan")
    table.add_column("Bits", justify="right")
    table.add_column("Default", justify="center")

    for algorithm in HashAlgorithm:
        default = "[green]Yes[/green]" if algorithm == DEFAULT_ALGORITHM else ""
        table.add_row(algorithm.value, str(algorithm.digest_bits), default)

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
