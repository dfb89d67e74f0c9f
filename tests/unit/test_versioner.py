"""Tests for FileVersioner: name derivation, eager validation, tagged copies."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

import pytest

from assettagger.core.errors import AssetIOError, AssetNotFoundError
from assettagger.core.hasher import HashAlgorithm
from assettagger.core.versioner import FileVersioner, tagged_filename
from assettagger.models.assets import AssetKind


class TestTaggedFilename:
    def test_plain_script(self):
        assert tagged_filename("app.js", "abc123") == "app.abc123.min.js"

    def test_minified_input_is_not_double_tagged(self):
        name = tagged_filename("jquery.min.js", "abc123")
        assert name == "jquery.abc123.min.js"
        assert name.count(".min") == 1

    def test_style_sheet_suffix(self):
        assert tagged_filename("site.css", "ff00", suffix=".min.css") == "site.ff00.min.css"

    def test_marker_is_case_sensitive(self):
        assert tagged_filename("app.MIN.js", "ab") == "app.MIN.ab.min.js"

    def test_only_first_marker_removed(self):
        assert tagged_filename("a.min.b.min.js", "ab") == "a.b.min.ab.min.js"

    def test_digest_lowercased(self):
        assert tagged_filename("app.js", "ABCDEF") == "app.abcdef.min.js"

    def test_uses_basename_only(self):
        assert tagged_filename("/srv/static/app.js", "ab") == "app.ab.min.js"

    def test_empty_marker_keeps_name(self):
        assert tagged_filename("app.min.js", "ab", marker="") == "app.min.ab.min.js"


class TestForFile:
    def test_missing_path(self, tmp_dir):
        with pytest.raises(AssetNotFoundError, match="not found"):
            FileVersioner.for_file(tmp_dir / "missing.css")

    def test_directory_rejected(self, src_dir):
        with pytest.raises(AssetNotFoundError, match="not a regular file"):
            FileVersioner.for_file(src_dir)

    def test_unreadable_rejected(self, make_asset, monkeypatch):
        path = make_asset("locked.js")
        monkeypatch.setattr(os, "access", lambda p, mode: False)
        with pytest.raises(AssetNotFoundError, match="not readable"):
            FileVersioner.for_file(path)

    def test_builder_is_immutable(self, make_asset):
        base = FileVersioner.for_file(make_asset("app.js"))
        md5 = base.with_algorithm("md5")
        css = md5.with_suffix(".min.css")
        assert base.algorithm is HashAlgorithm.SHA256
        assert md5.algorithm is HashAlgorithm.MD5
        assert md5.suffix == ".min.js"
        assert css.suffix == ".min.css"
        assert css.path == base.path


class TestGenerateTaggedFile:
    def test_writes_exact_copy(self, make_asset, output_dir):
        data = b"body{color:red}\n\x00\xff"
        source = make_asset("site.css", data)
        tagged = FileVersioner.for_file(source).generate_tagged_file(output_dir)

        assert tagged == output_dir / f"site.{hashlib.sha256(data).hexdigest()}.min.js"
        assert tagged.read_bytes() == data
        assert source.read_bytes() == data

    def test_md5_reference_name(self, make_asset, output_dir):
        source = make_asset("site.css", "body{}")
        tagged = (
            FileVersioner.for_file(source)
            .with_algorithm(HashAlgorithm.MD5)
            .generate_tagged_file(output_dir)
        )
        assert tagged.name == f"site.{hashlib.md5(b'body{}').hexdigest()}.min.js"

    def test_creates_exactly_one_file(self, make_asset, output_dir):
        FileVersioner.for_file(make_asset("app.js")).generate_tagged_file(output_dir)
        assert len(list(output_dir.iterdir())) == 1

    def test_tag_describes_copy(self, make_asset, output_dir):
        source = make_asset("app.min.js", b"var a=1;")
        asset = (
            FileVersioner.for_file(source)
            .with_algorithm("sha1")
            .tag(output_dir, AssetKind.SCRIPT)
        )
        assert asset.source == source
        assert asset.digest == hashlib.sha1(b"var a=1;").hexdigest()
        assert asset.algorithm == "sha1"
        assert asset.size_bytes == 8
        assert asset.tagged_name == f"app.{asset.digest}.min.js"

    def test_identical_content_same_name(self, src_dir, output_dir):
        (src_dir / "a").mkdir()
        (src_dir / "b").mkdir()
        first = src_dir / "a" / "app.js"
        second = src_dir / "b" / "app.js"
        first.write_bytes(b"same")
        second.write_bytes(b"same")
        assert (
            FileVersioner.for_file(first).generate_tagged_file(output_dir)
            == FileVersioner.for_file(second).generate_tagged_file(output_dir)
        )

    def test_missing_output_dir(self, make_asset, tmp_dir):
        versioner = FileVersioner.for_file(make_asset("app.js"))
        with pytest.raises(AssetIOError) as excinfo:
            versioner.generate_tagged_file(tmp_dir / "no" / "such" / "dir")
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_source_removed_after_configure(self, make_asset, output_dir):
        source = make_asset("app.js")
        versioner = FileVersioner.for_file(source)
        source.unlink()
        with pytest.raises(AssetNotFoundError):
            versioner.generate_tagged_file(output_dir)

    def test_compute_digest_matches_tag(self, make_asset, output_dir):
        versioner = FileVersioner.for_file(make_asset("app.js", b"x" * 100_000)).with_chunk_size(1024)
        assert versioner.compute_digest() == versioner.tag(output_dir).digest

    def test_accepts_string_paths(self, make_asset, output_dir):
        source = make_asset("app.js")
        tagged = FileVersioner.for_file(str(source)).generate_tagged_file(str(output_dir))
        assert isinstance(tagged, Path)
        assert tagged.parent == output_dir
