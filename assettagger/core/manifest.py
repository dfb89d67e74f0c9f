"""JSON manifest of source -> tagged file names.

Downstream templates need this mapping to rewrite asset references. The
file is canonical JSON (sorted keys, compact) so identical runs produce
byte-identical manifests apart from ``created_at``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from assettagger.core.errors import AssetIOError, AssetNotFoundError
from assettagger.core.hasher import HashAlgorithm
from assettagger.models.assets import AssetManifest, TaggedAsset

logger = logging.getLogger(__name__)


def canonical_json_bytes(obj: Any) -> bytes:
    """Deterministic JSON bytes: sorted keys, no whitespace, UTF-8."""
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def build_manifest(
    entries: list[TaggedAsset],
    algorithm: HashAlgorithm | str,
    output_dir: Path | str,
) -> AssetManifest:
    return AssetManifest(
        algorithm=HashAlgorithm.parse(algorithm).value,
        output_dir=Path(output_dir),
        entries=list(entries),
    )


def write_manifest(manifest: AssetManifest, path: Path | str) -> Path:
    """Write ``manifest`` to ``path``, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(canonical_json_bytes(manifest.model_dump(mode="json")))
    except OSError as exc:
        raise AssetIOError(f"Cannot write manifest {path}: {exc}", path=path) from exc
    logger.info("Wrote manifest with %d entries to %s", len(manifest.entries), path)
    return path


def read_manifest(path: Path | str) -> AssetManifest:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise AssetNotFoundError(f"Manifest not found: {path}", path=path) from exc
    except OSError as exc:
        raise AssetIOError(f"Cannot read manifest {path}: {exc}", path=path) from exc
    try:
        return AssetManifest.model_validate_json(raw)
    except ValidationError as exc:
        raise AssetIOError(f"Malformed manifest {path}: {exc}", path=path) from exc
