# File: src/vsixpack/core/collector.py
from __future__ import annotations

"""
File collection for an extension directory.

Walks the tree deterministically and returns `FileRecord`s whose logical paths
are prefixed with `extension/`. Exclusions:
  - always: .git/, .vscode/, any *.vsixmanifest, *.vsix
  - the ignore file and the packager config file themselves
  - node_modules/<name>/ for every devDependency
  - user globs from the ignore file (default `.vscodeignore`) and config
"""

import fnmatch
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from vsixpack.config.loader import CONFIG_FILENAME
from vsixpack.core.files import FileRecord
from vsixpack.manifest.model import Manifest

IGNORE_FILENAME = ".vscodeignore"
ARCHIVE_ROOT = "extension"

_ALWAYS_EXCLUDE_DIRS = (".git", ".vscode")
_ALWAYS_EXCLUDE_GLOBS = ("*.vsixmanifest", "**/*.vsixmanifest", "*.vsix")

# Files we always ignore
_JUNK = {"Thumbs.db", ".DS_Store"}


def _norm_glob(pattern: str) -> str:
    """Normalize glob pattern separators to POSIX for cross-platform matching."""
    return pattern.strip().replace("\\", "/")


def _expand(pattern: str) -> Tuple[str, ...]:
    """
    Translate ignore-file globs to fnmatch patterns.

    - leading '/' anchors to the root (fnmatch already matches from the start)
    - trailing '/' means "this directory and everything below it"
    - '**/' prefix also matches at the root
    - a bare name without '/' matches at any depth
    """
    pat = _norm_glob(pattern)
    anchored = pat.startswith("/")
    pat = pat.lstrip("/")
    if pat.endswith("/"):
        pat = pat + "**"
    variants = [pat]
    if pat.startswith("**/"):
        variants.append(pat[3:])
    elif not anchored and "/" not in pat:
        variants.append("**/" + pat)
    if pat.endswith("/**"):
        variants.append(pat[:-3])
    return tuple(dict.fromkeys(variants))


def read_ignore_file(path: Path) -> List[str]:
    if not path.is_file():
        return []
    out: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        out.append(line)
    return out


@dataclass(frozen=True)
class CollectConfig:
    root: Path
    exclude_globs: Tuple[str, ...]
    exclude_dirs: Tuple[str, ...]
    follow_symlinks: bool = False


class FileCollector:
    """Deterministic tree walk with directory pruning and glob excludes."""

    def __init__(self, cfg: CollectConfig) -> None:
        self.cfg = cfg
        patterns: List[str] = []
        for g in cfg.exclude_globs:
            patterns.extend(_expand(g))
        self._patterns = tuple(patterns)

    def _excluded(self, rel_posix: str) -> bool:
        return any(fnmatch.fnmatchcase(rel_posix, p) for p in self._patterns)

    def _dir_excluded(self, rel_posix: str) -> bool:
        if rel_posix in self.cfg.exclude_dirs:
            return True
        return self._excluded(rel_posix) or self._excluded(rel_posix + "/")

    def collect(self) -> List[FileRecord]:
        root = self.cfg.root
        if not root.is_dir():
            raise FileNotFoundError(root)

        out: List[FileRecord] = []
        for cur, dirs, files in os.walk(root, followlinks=self.cfg.follow_symlinks):
            # Deterministic order
            dirs.sort()
            files.sort()

            cur_rel = Path(cur).relative_to(root).as_posix()
            prefix = "" if cur_rel == "." else cur_rel + "/"

            dirs[:] = [d for d in dirs if not self._dir_excluded(prefix + d)]

            for fn in files:
                if fn in _JUNK:
                    continue
                rel_posix = prefix + fn
                if self._excluded(rel_posix):
                    continue
                out.append(
                    FileRecord(
                        path=f"{ARCHIVE_ROOT}/{rel_posix}",
                        local_path=str(Path(cur) / fn),
                    )
                )

        # Stable sort by logical path
        out.sort(key=lambda f: f.path)
        return out


def _anchored(root: Path, path: Path) -> Optional[str]:
    """`/rel/path` glob for a file under `root`, None for files elsewhere."""
    try:
        return "/" + path.resolve().relative_to(root).as_posix()
    except ValueError:
        return None


def collect(
    manifest: Manifest,
    cwd: Path,
    ignore_file: Optional[Path] = None,
    extra_ignore: Sequence[str] = (),
    config_file: Optional[Path] = None,
) -> List[FileRecord]:
    """Resolve the files to package from `cwd`."""
    root = Path(cwd).resolve()
    ignore_path = Path(ignore_file) if ignore_file else root / IGNORE_FILENAME
    own_files = [ignore_path, root / CONFIG_FILENAME]
    if config_file:
        own_files.append(Path(config_file))

    excludes: List[str] = list(_ALWAYS_EXCLUDE_GLOBS)
    for own in own_files:
        anchored = _anchored(root, own)
        if anchored:
            excludes.append(anchored)
    excludes.extend(read_ignore_file(ignore_path))
    excludes.extend(extra_ignore)

    dev_dirs: Iterable[str] = (f"node_modules/{name}" for name in manifest.dev_dependencies)
    cfg = CollectConfig(
        root=root,
        exclude_globs=tuple(excludes),
        exclude_dirs=_ALWAYS_EXCLUDE_DIRS + tuple(dev_dirs),
    )
    return FileCollector(cfg).collect()


__all__ = ["ARCHIVE_ROOT", "CollectConfig", "FileCollector", "IGNORE_FILENAME", "collect", "read_ignore_file"]
