# File: src/vsixpack/core/files.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from vsixpack.errors import ProcessingError

Contents = Union[str, bytes]


def normalize_path(path: str) -> str:
    """Logical package paths always use forward slashes."""
    return path.replace("\\", "/")


@dataclass(frozen=True)
class FileRecord:
    """
    One file destined for the package.

    path:        logical path inside the archive (e.g. "extension/readme.md")
    local_path:  filesystem source, when the bytes live on disk
    contents:    in-memory text or bytes, used instead of `local_path`
    """
    path: str
    local_path: Optional[str] = None
    contents: Optional[Contents] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))

    def with_contents(self, contents: Contents) -> "FileRecord":
        """Replacement record for the same logical path, backed by memory."""
        return FileRecord(path=self.path, contents=contents)


def read(file: FileRecord) -> bytes:
    """Return the bytes of `file`, from memory or from disk."""
    if file.contents is not None:
        if isinstance(file.contents, bytes):
            return file.contents
        return file.contents.encode("utf-8")
    if file.local_path is None:
        raise ProcessingError(f"No content source for {file.path}")
    try:
        return Path(file.local_path).read_bytes()
    except OSError as e:
        raise ProcessingError(f"Failed to read {file.local_path} for {file.path}: {e}") from e


def read_text(file: FileRecord, encoding: str = "utf-8") -> str:
    data = read(file)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise ProcessingError(f"{file.path} is not valid {encoding} text: {e}") from e


__all__ = ["Contents", "FileRecord", "normalize_path", "read", "read_text"]
