from __future__ import annotations

import json

import pytest

from webpack_bootstrap.errors import ManifestError
from webpack_bootstrap.manifest import merge_scripts, patch_manifest_scripts, read_manifest


def test_merge_scripts_keeps_existing_and_adds_new():
    merged = merge_scripts({"lint": "eslint ."}, {"build": "webpack", "dev": "webpack serve"})
    assert merged == {"lint": "eslint .", "build": "webpack", "dev": "webpack serve"}
    assert list(merged) == ["lint", "build", "dev"]


def test_merge_scripts_new_value_wins_on_collision():
    merged = merge_scripts({"build": "old", "lint": "eslint ."}, {"build": "webpack --mode production"})
    assert merged == {"build": "webpack --mode production", "lint": "eslint ."}
    # colliding key keeps its original position
    assert list(merged) == ["build", "lint"]


def test_merge_scripts_does_not_mutate_inputs():
    existing = {"lint": "eslint ."}
    additions = {"build": "webpack"}
    merge_scripts(existing, additions)
    assert existing == {"lint": "eslint ."}
    assert additions == {"build": "webpack"}


def test_patch_manifest_preserves_other_keys(tmp_path):
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "app", "scripts": {"lint": "eslint ."}, "license": "ISC"}), encoding="utf-8")

    scripts = patch_manifest_scripts(path, {"build": "webpack"})

    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data) == ["name", "scripts", "license"]
    assert data["scripts"] == scripts == {"lint": "eslint .", "build": "webpack"}
    assert path.read_text(encoding="utf-8").startswith('{\n  "name": "app"')


def test_patch_manifest_adds_missing_script_table(tmp_path):
    path = tmp_path / "package.json"
    path.write_text('{"name": "app"}', encoding="utf-8")
    assert patch_manifest_scripts(path, {"dev": "webpack serve"}) == {"dev": "webpack serve"}


def test_read_manifest_rejects_invalid_json(tmp_path):
    path = tmp_path / "package.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ManifestError):
        read_manifest(path)


def test_read_manifest_rejects_non_object(tmp_path):
    path = tmp_path / "package.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ManifestError):
        read_manifest(path)


def test_read_manifest_rejects_non_string_scripts(tmp_path):
    path = tmp_path / "package.json"
    path.write_text('{"scripts": {"build": 3}}', encoding="utf-8")
    with pytest.raises(ManifestError):
        read_manifest(path)


def test_read_manifest_missing_file(tmp_path):
    with pytest.raises(ManifestError):
        read_manifest(tmp_path / "package.json")
