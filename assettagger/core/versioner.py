"""Single-file versioner: hashes one asset and writes its tagged copy.

Tagged name layout: ``{basename-without-marker}.{hexdigest}{suffix}``

    jquery.min.js  ->  jquery.<digest>.min.js
    site.css       ->  site.<digest>.min.css   (suffix ".min.css")

A ``FileVersioner`` is immutable: ``with_algorithm`` and friends return a
new instance, so a partially configured versioner can be shared safely.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from assettagger.core.errors import AssetIOError, AssetNotFoundError
from assettagger.core.hasher import (
    DEFAULT_ALGORITHM,
    DEFAULT_CHUNK_SIZE,
    HashAlgorithm,
    hash_bytes,
    hash_file,
)
from assettagger.models.assets import AssetKind, TaggedAsset

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".min.js"
DEFAULT_MARKER = ".min"


def tagged_filename(
    filename: str,
    digest: str,
    suffix: str = DEFAULT_SUFFIX,
    marker: str = DEFAULT_MARKER,
) -> str:
    """Derive the tagged file name from a source name and its digest.

    The first case-sensitive occurrence of ``marker`` is removed before the
    extension is stripped, so already-minified inputs are not double-tagged.
    """
    name = Path(filename).name
    if marker:
        name = name.replace(marker, "", 1)
    stem = Path(name).stem
    return f"{stem}.{digest.lower()}{suffix}"


class FileVersioner:
    """Produces a content-tagged copy of one source file.

    Use :meth:`for_file` rather than the constructor; it validates the
    source eagerly.

    Parameters
    ----------
    path:
        Source file to version.
    algorithm:
        Digest used for the tag.
    suffix:
        Canonical suffix appended after the digest.
    marker:
        Minified marker stripped from the source name.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        algorithm: HashAlgorithm | str = DEFAULT_ALGORITHM,
        suffix: str = DEFAULT_SUFFIX,
        marker: str = DEFAULT_MARKER,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._path = Path(path)
        self._algorithm = HashAlgorithm.parse(algorithm)
        self._suffix = suffix
        self._marker = marker
        self._chunk_size = chunk_size

    @classmethod
    def for_file(cls, path: Path | str) -> FileVersioner:
        """Bind a versioner to ``path``.

        Raises ``AssetNotFoundError`` unless ``path`` is an existing,
        readable regular file.
        """
        path = Path(path)
        if not path.exists():
            raise AssetNotFoundError(f"Asset not found: {path}", path=path)
        if not path.is_file():
            raise AssetNotFoundError(f"Asset is not a regular file: {path}", path=path)
        if not os.access(path, os.R_OK):
            raise AssetNotFoundError(f"Asset is not readable: {path}", path=path)
        return cls(path)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def _replace(self, **changes: object) -> FileVersioner:
        params: dict[str, object] = {
            "algorithm": self._algorithm,
            "suffix": self._suffix,
            "marker": self._marker,
            "chunk_size": self._chunk_size,
        }
        params.update(changes)
        return type(self)(self._path, **params)  # type: ignore[arg-type]

    def with_algorithm(self, algorithm: HashAlgorithm | str) -> FileVersioner:
        return self._replace(algorithm=HashAlgorithm.parse(algorithm))

    def with_suffix(self, suffix: str) -> FileVersioner:
        return self._replace(suffix=suffix)

    def with_marker(self, marker: str) -> FileVersioner:
        return self._replace(marker=marker)

    def with_chunk_size(self, chunk_size: int) -> FileVersioner:
        return self._replace(chunk_size=chunk_size)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    @property
    def suffix(self) -> str:
        return self._suffix

    # ------------------------------------------------------------------
    # Hashing and writing
    # ------------------------------------------------------------------

    def compute_digest(self) -> str:
        """Stream the source through the configured digest."""
        return hash_file(self._path, self._algorithm, chunk_size=self._chunk_size)

    def tagged_filename(self, digest: str) -> str:
        return tagged_filename(self._path.name, digest, self._suffix, self._marker)

    def _read_source(self) -> bytes:
        try:
            return self._path.read_bytes()
        except FileNotFoundError as exc:
            raise AssetNotFoundError(f"Asset not found: {self._path}", path=self._path) from exc
        except OSError as exc:
            raise AssetIOError(f"Cannot read asset {self._path}: {exc}", path=self._path) from exc

    def tag(self, output_dir: Path | str, kind: AssetKind = AssetKind.SCRIPT) -> TaggedAsset:
        """Write the tagged copy into ``output_dir`` and describe it.

        The source is read once; the same bytes are hashed and written, so
        the copy always matches the digest embedded in its name.
        """
        data = self._read_source()
        digest = hash_bytes(data, self._algorithm)
        target = Path(output_dir) / self.tagged_filename(digest)
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise AssetIOError(
                f"Cannot write tagged copy {target}: {exc}", path=target
            ) from exc

        logger.debug("Tagged %s -> %s", self._path, target)
        return TaggedAsset(
            source=self._path,
            tagged_path=target,
            kind=kind,
            digest=digest,
            algorithm=self._algorithm.value,
            size_bytes=len(data),
        )

    def generate_tagged_file(self, output_dir: Path | str) -> Path:
        """Write the tagged copy into ``output_dir`` and return its path."""
        return self.tag(output_dir).tagged_path
