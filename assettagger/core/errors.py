"""Error taxonomy shared by the versioner and the batch processor.

Every failure surfaced by the tagging pipeline is a ``ProcessingError``.
The ``kind`` attribute is the stable, machine-readable name reported back
to callers in a ``TaggingReport``.
"""

from __future__ import annotations

from pathlib import Path


class ProcessingError(RuntimeError):
    """Base class for any failure that aborts a tagging run."""

    kind: str = "processing_error"

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class AssetNotFoundError(ProcessingError):
    """An input path does not exist or is not a readable regular file."""

    kind = "not_found"


class AssetIOError(ProcessingError):
    """A filesystem operation failed (clear, read, write or delete)."""

    kind = "io_error"


class SourceRemovalError(AssetIOError):
    """Deleting the original inputs failed after some were already removed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        removed: list[Path] | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.removed = list(removed or [])


class HashError(ProcessingError):
    """The digest strategy could not be created or failed mid-stream."""

    kind = "hash_error"
