from __future__ import annotations

"""
Field validators for the manifest identity block.

Each validator raises `ValidationError` naming the field; `validate_manifest`
runs all of them before a packaging run starts.
"""

import re
from typing import Any

from vsixpack.errors import ValidationError
from vsixpack.manifest.model import Manifest

_IDENTIFIER_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")
_VERSION_RE = re.compile(r"^\d+\.\d+\.\d+(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$")


def _require_identifier(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Missing {field} name")
    if not _IDENTIFIER_RE.match(value):
        raise ValidationError(
            f"Invalid {field} name '{value}'. Expected letters, digits and inner hyphens only."
        )
    return value


def validate_publisher(publisher: Any) -> str:
    return _require_identifier("publisher", publisher)


def validate_extension_name(name: Any) -> str:
    return _require_identifier("extension", name)


def validate_version(version: Any) -> str:
    if not isinstance(version, str) or not version:
        raise ValidationError("Missing extension version")
    if not _VERSION_RE.match(version):
        raise ValidationError(f"Invalid extension version '{version}'. Expected MAJOR.MINOR.PATCH[-tag].")
    return version


def validate_manifest(manifest: Manifest) -> Manifest:
    """
    Check the fields every package needs. Returns the manifest unchanged so
    callers can chain `validate_manifest(read_manifest(cwd))`.
    """
    validate_publisher(manifest.publisher)
    validate_extension_name(manifest.name)
    validate_version(manifest.version)

    if manifest.engines is None:
        raise ValidationError("Manifest missing field: engines")
    if not isinstance(manifest.engines.vscode, str):
        raise ValidationError("Manifest missing field: engines.vscode")
    return manifest


__all__ = ["validate_extension_name", "validate_manifest", "validate_publisher", "validate_version"]
