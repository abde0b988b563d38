from __future__ import annotations

import posixpath
from typing import Dict, Iterable, Mapping, Optional

from vsixpack.core.files import FileRecord

# Always declared, whatever the file set
FIXED_CONTENT_TYPES: Dict[str, str] = {
    ".vsixmanifest": "text/xml",
    ".json": "application/json",
}

DEFAULT_CONTENT_TYPES: Dict[str, str] = {
    ".txt": "text/plain",
    ".md": "text/x-markdown",
    ".markdown": "text/x-markdown",
    ".json": "application/json",
    ".xml": "text/xml",
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".cjs": "application/javascript",
    ".map": "application/json",
    ".yml": "text/yaml",
    ".yaml": "text/yaml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".ico": "image/x-icon",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".wasm": "application/wasm",
    ".zip": "application/zip",
    ".pdf": "application/pdf",
}


def extension_of(path: str) -> str:
    """'.ext' of the final path segment, lower-cased; '' when there is no dot."""
    name = posixpath.basename(path)
    i = name.rfind(".")
    return name[i:].lower() if i != -1 else ""


def build_content_types(
    files: Iterable[FileRecord],
    table: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Extension → MIME map for `[Content_Types].xml`.

    Fixed entries first, then each known extension in order of first
    appearance. Unknown extensions and extensionless files are left out.
    """
    lookup = dict(DEFAULT_CONTENT_TYPES)
    if table:
        lookup.update(table)

    out: Dict[str, str] = dict(FIXED_CONTENT_TYPES)
    for f in files:
        ext = extension_of(f.path)
        if not ext or ext in out:
            continue
        mime = lookup.get(ext)
        if mime:
            out[ext] = mime
    return out


__all__ = ["DEFAULT_CONTENT_TYPES", "FIXED_CONTENT_TYPES", "build_content_types", "extension_of"]
