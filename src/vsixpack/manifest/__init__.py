from .model import Manifest, parse_manifest
from .reader import MANIFEST_FILENAME, read_manifest
from .validation import (
    validate_extension_name,
    validate_manifest,
    validate_publisher,
    validate_version,
)

__all__ = [
    "MANIFEST_FILENAME",
    "Manifest",
    "parse_manifest",
    "read_manifest",
    "validate_extension_name",
    "validate_manifest",
    "validate_publisher",
    "validate_version",
]
