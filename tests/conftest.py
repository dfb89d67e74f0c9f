"""Shared test fixtures for assettagger."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from assettagger.config import TaggerSettings
from assettagger.core.batch import FileTagger


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep ASSETTAGGER_* variables and stray .env files out of tests."""
    for key in list(os.environ):
        if key.startswith("ASSETTAGGER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test assets."""
    return tmp_path


@pytest.fixture
def src_dir(tmp_dir: Path) -> Path:
    """Directory holding the source assets of a run."""
    path = tmp_dir / "src"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_dir: Path) -> Path:
    """Empty output directory for tagged copies."""
    path = tmp_dir / "dist"
    path.mkdir()
    return path


@pytest.fixture
def make_asset(src_dir: Path) -> Callable[..., Path]:
    """Factory fixture: write an asset file under ``src_dir``."""

    def _factory(name: str, content: bytes | str = b"/* asset */") -> Path:
        path = src_dir / name
        data = content.encode("utf-8") if isinstance(content, str) else content
        path.write_bytes(data)
        return path

    return _factory


@pytest.fixture
def settings() -> TaggerSettings:
    """Default settings, isolated from the environment."""
    return TaggerSettings()


@pytest.fixture
def tagger(settings: TaggerSettings) -> FileTagger:
    """Provide a FileTagger with default settings."""
    return FileTagger(settings)
