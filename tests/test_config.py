"""
Tests for manifest loading — package.json parsing and graceful degradation.
"""

import json
from pathlib import Path

import pytest

from enginecheck.core.config.loader import MANIFEST_FILE, load_manifest, manifest_path
from enginecheck.core.models.manifest import Manifest


class TestLoadManifest:
    def test_full_manifest(self, tmp_path: Path, write_manifest):
        write_manifest({
            "name": "my-project",
            "version": "1.0.0",
            "engines": {"node": "^16", "npm": "^8"},
            "volta": {"yarn": "1.22.19"},
        })
        m = load_manifest(tmp_path)
        assert m.name == "my-project"
        assert m.version == "1.0.0"
        assert m.engines == {"node": "^16", "npm": "^8"}
        assert m.volta == {"yarn": "1.22.19"}

    def test_defaults_to_cwd(self, tmp_path: Path, write_manifest, monkeypatch):
        write_manifest({"name": "from-cwd"})
        monkeypatch.chdir(tmp_path)
        assert load_manifest().name == "from-cwd"

    def test_path(self, tmp_path: Path):
        assert manifest_path(tmp_path) == tmp_path / MANIFEST_FILE
        assert MANIFEST_FILE == "package.json"


class TestDegradation:
    """Every failure mode yields an empty manifest, never an exception."""

    def test_missing_file(self, tmp_path: Path):
        assert load_manifest(tmp_path) == Manifest()

    def test_missing_directory(self, tmp_path: Path):
        assert load_manifest(tmp_path / "nope") == Manifest()

    def test_manifest_is_directory(self, tmp_path: Path):
        (tmp_path / MANIFEST_FILE).mkdir()
        assert load_manifest(tmp_path) == Manifest()

    @pytest.mark.parametrize("content", [
        "",
        "{",
        "{'name': 'single-quotes'}",
        "name: yaml",
    ])
    def test_invalid_json(self, tmp_path: Path, content: str):
        (tmp_path / MANIFEST_FILE).write_text(content, encoding="utf-8")
        assert load_manifest(tmp_path) == Manifest()

    @pytest.mark.parametrize("data", [[], "string", 42, None])
    def test_not_an_object(self, tmp_path: Path, data):
        (tmp_path / MANIFEST_FILE).write_text(json.dumps(data), encoding="utf-8")
        assert load_manifest(tmp_path) == Manifest()

    def test_invalid_utf8(self, tmp_path: Path):
        (tmp_path / MANIFEST_FILE).write_bytes(b'{"name": "\xff\xfe"}')
        assert load_manifest(tmp_path) == Manifest()

    def test_empty_object(self, tmp_path: Path, write_manifest):
        write_manifest({})
        m = load_manifest(tmp_path)
        assert m == Manifest()
