# File: tests/test_collector.py
"""
Collector tests against small extension trees built under tmp_path.
"""

from __future__ import annotations

import json
from pathlib import Path

from vsixpack.core.collector import collect
from vsixpack.manifest.reader import read_manifest


def _write(p: Path, content: str = "x") -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def _make_extension(root: Path, **manifest) -> None:
    data = {"name": "uuid", "publisher": "joaomoreno", "version": "1.0.0", "engines": {"vscode": "*"}}
    data.update(manifest)
    _write(root / "package.json", json.dumps(data))
    _write(root / "README.md", "# uuid")
    _write(root / "out" / "extension.js", "exports.activate = () => {};")


def _paths(root: Path):
    return [f.path for f in collect(read_manifest(root), root)]


def test_catches_all_files(tmp_path: Path):
    _make_extension(tmp_path)
    assert _paths(tmp_path) == [
        "extension/README.md",
        "extension/out/extension.js",
        "extension/package.json",
    ]


def test_records_point_at_disk(tmp_path: Path):
    _make_extension(tmp_path)
    files = collect(read_manifest(tmp_path), tmp_path)
    readme = next(f for f in files if f.path == "extension/README.md")
    assert Path(readme.local_path).read_text(encoding="utf-8") == "# uuid"


def test_ignores_git_and_vscode_dirs(tmp_path: Path):
    _make_extension(tmp_path)
    _write(tmp_path / ".git" / "hello", "world")
    _write(tmp_path / ".vscode" / "launch.json", "{}")
    assert len(_paths(tmp_path)) == 3


def test_ignores_dev_dependencies(tmp_path: Path):
    _make_extension(tmp_path, dependencies={"real": "1.0.0"}, devDependencies={"fake": "1.0.0", "@types/node": "*"})
    _write(tmp_path / "node_modules" / "real" / "dependency.js")
    _write(tmp_path / "node_modules" / "fake" / "dependency.js")
    _write(tmp_path / "node_modules" / "@types" / "node" / "index.d.ts")

    paths = _paths(tmp_path)
    assert "extension/node_modules/real/dependency.js" in paths
    assert not any("node_modules/fake" in p for p in paths)
    assert not any("@types/node" in p for p in paths)


def test_ignores_vsixmanifest_files(tmp_path: Path):
    _make_extension(tmp_path)
    _write(tmp_path / "extension.vsixmanifest", "<x/>")
    _write(tmp_path / "sub" / "old.vsixmanifest", "<x/>")
    _write(tmp_path / "old-1.0.0.vsix", "zip")
    assert not any(p.endswith((".vsixmanifest", ".vsix")) for p in _paths(tmp_path))


def test_honours_ignore_file(tmp_path: Path):
    _make_extension(tmp_path)
    _write(tmp_path / "src" / "extension.ts")
    _write(tmp_path / "out" / "extension.js.map")
    _write(tmp_path / "test" / "suite" / "a.test.js")
    _write(tmp_path / ".vscodeignore", "# sources\nsrc/**\n\n*.map\ntest/\n")

    assert _paths(tmp_path) == [
        "extension/README.md",
        "extension/out/extension.js",
        "extension/package.json",
    ]


def test_extra_ignore_globs(tmp_path: Path):
    _make_extension(tmp_path)
    paths = [f.path for f in collect(read_manifest(tmp_path), tmp_path, extra_ignore=["README.md"])]
    assert "extension/README.md" not in paths


def test_ignores_packager_config(tmp_path: Path):
    _make_extension(tmp_path)
    _write(tmp_path / "vsixpack.yml", "package:\n  strict: true\n")
    _write(tmp_path / "conf" / "release.yml", "package: {}\n")
    manifest = read_manifest(tmp_path)

    assert "extension/vsixpack.yml" not in _paths(tmp_path)
    paths = [f.path for f in collect(manifest, tmp_path, config_file=tmp_path / "conf" / "release.yml")]
    assert "extension/conf/release.yml" not in paths
    assert "extension/vsixpack.yml" not in paths
