from __future__ import annotations

import os
import zipfile
from pathlib import Path
from typing import Tuple

from vsixpack.core.files import read
from vsixpack.core.orchestrator import PackageResult

VSIX_MANIFEST_NAME = "extension.vsixmanifest"
CONTENT_TYPES_NAME = "[Content_Types].xml"

# Stable member timestamps so equal inputs give equal archives
_EPOCH: Tuple[int, int, int, int, int, int] = (1980, 1, 1, 0, 0, 0)


def _member(zf: zipfile.ZipFile, name: str, data: bytes) -> None:
    info = zipfile.ZipInfo(name, date_time=_EPOCH)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = 0o644 << 16
    zf.writestr(info, data)


def write_vsix(out_path: Path, result: PackageResult) -> Tuple[int, int]:
    """
    Write the archive:
      1) write to a temporary sibling file
      2) atomically replace `out_path`

    Returns (member_count, archive_bytes).
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    tmp = out_path.with_suffix(out_path.suffix + ".tmp")

    count = 0
    try:
        with zipfile.ZipFile(tmp, "w") as zf:
            _member(zf, VSIX_MANIFEST_NAME, result.vsix_manifest_xml.encode("utf-8"))
            _member(zf, CONTENT_TYPES_NAME, result.content_types_xml.encode("utf-8"))
            count = 2
            for f in result.files:
                _member(zf, f.path, read(f))
                count += 1
        os.replace(tmp, out_path)
    finally:
        if tmp.exists():
            tmp.unlink()

    return count, out_path.stat().st_size


__all__ = ["CONTENT_TYPES_NAME", "VSIX_MANIFEST_NAME", "write_vsix"]
