"""Content digest strategies for asset fingerprinting.

The set of supported digests is closed: callers select a ``HashAlgorithm``
by value and never construct hash objects themselves. Digests are only
used for content addressing, so legacy algorithms such as MD5 are created
with ``usedforsecurity=False`` and remain available on FIPS-restricted
interpreters where possible.
"""

from __future__ import annotations

import hashlib
from enum import Enum
from pathlib import Path
from typing import Any

from assettagger.core.errors import AssetIOError, AssetNotFoundError, HashError

DEFAULT_CHUNK_SIZE = 64 * 1024


class HashAlgorithm(str, Enum):
    """Supported content digests.

    * ``md5`` - 128-bit, broken, kept for parity with legacy tagged names.
    * ``sha1`` - 160-bit, broken, legacy only.
    * ``sha256`` - 256-bit, the default.
    * ``sha512`` - 512-bit.
    * ``blake2b`` / ``blake2s`` - fast modern digests (512 / 256 bit).
    """

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"

    @classmethod
    def parse(cls, name: HashAlgorithm | str) -> HashAlgorithm:
        """Resolve an algorithm identifier such as ``"SHA-256"``.

        Raises ``HashError`` for identifiers outside the supported set.
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(normalized)
        except ValueError as exc:
            supported = ", ".join(a.value for a in cls)
            raise HashError(
                f"Unsupported hash algorithm {name!r} (supported: {supported})"
            ) from exc

    def new(self) -> Any:
        """Return a fresh ``hashlib`` object for this algorithm."""
        try:
            return hashlib.new(self.value, usedforsecurity=False)
        except (ValueError, TypeError) as exc:
            raise HashError(
                f"Hash algorithm {self.value!r} is unavailable: {exc}"
            ) from exc

    @property
    def digest_bits(self) -> int:
        """Digest width in bits."""
        return self.new().digest_size * 8


DEFAULT_ALGORITHM = HashAlgorithm.SHA256


def hash_bytes(data: bytes, algorithm: HashAlgorithm | str = DEFAULT_ALGORITHM) -> str:
    """Return the lowercase hex digest of raw bytes."""
    hasher = HashAlgorithm.parse(algorithm).new()
    hasher.update(data)
    return hasher.hexdigest()


def hash_file(
    path: Path | str,
    algorithm: HashAlgorithm | str = DEFAULT_ALGORITHM,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Stream a file through the digest and return its lowercase hex form.

    The read handle is closed before this function returns, whether
    hashing succeeded or not.
    """
    path = Path(path)
    hasher = HashAlgorithm.parse(algorithm).new()
    try:
        with path.open("rb") as fh:
            for chunk in iter(lambda: fh.read(chunk_size), b""):
                hasher.update(chunk)
    except FileNotFoundError as exc:
        raise AssetNotFoundError(f"Asset not found: {path}", path=path) from exc
    except OSError as exc:
        raise AssetIOError(f"Cannot read asset {path}: {exc}", path=path) from exc
    return hasher.hexdigest()
