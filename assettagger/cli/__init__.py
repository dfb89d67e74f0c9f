"""assettagger CLI: Typer-based command-line interface.

Provides the ``assettagger`` command with subcommands for tagging a batch
of style sheets and scripts, previewing digests, and listing the
supported hash algorithms.

All output uses Rich for formatted terminal display.
"""
