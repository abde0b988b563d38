from __future__ import annotations

import logging
import posixpath
import re
from typing import Optional

from vsixpack.core.files import FileRecord
from vsixpack.core.vocabulary import MANIFEST_ASSET_PATH, AssetType, PropertyId
from vsixpack.errors import ConfigurationError
from vsixpack.manifest.model import Manifest
from vsixpack.processors.base import ContributionView, Contributions, ProcessorKind, ProcessorOptions

logger = logging.getLogger(__name__)

_SEE_LICENSE_RE = re.compile(r"^SEE LICENSE IN (?P<path>.+)$")


def _extension_path(rel: str) -> str:
    """Logical archive path for a manifest-relative file reference."""
    rel = rel.strip().replace("\\", "/")
    return posixpath.normpath(posixpath.join("extension", rel))


class ManifestProcessor(ContributionView):
    """Declares `extension/package.json` as the manifest asset."""

    kind = ProcessorKind.MANIFEST

    def __init__(self, manifest: Manifest, options: Optional[ProcessorOptions] = None) -> None:
        self.contributions = Contributions(self.kind)
        self.contributions.add_asset(AssetType.MANIFEST, MANIFEST_ASSET_PATH)

    def on_file(self, file: FileRecord) -> FileRecord:
        return file

    def on_end(self) -> None:
        self.contributions.finalize()


class _DeclaredFileProcessor(ContributionView):
    """
    Watches the stream for one file the manifest points at and, when it shows
    up, records it as an asset plus a descriptor property.
    """

    kind: ProcessorKind
    asset_type: str
    property_id: str
    field: str

    def __init__(self, target: Optional[str], options: Optional[ProcessorOptions]) -> None:
        self.contributions = Contributions(self.kind)
        self.options = options or ProcessorOptions()
        self.declared = target
        self.target = _extension_path(target) if target else None
        self.matched: Optional[str] = None

    def on_file(self, file: FileRecord) -> FileRecord:
        if self.target is None or self.matched is not None:
            return file
        if posixpath.normpath(file.path) == self.target:
            self.matched = file.path
            self.contributions.add_asset(self.asset_type, file.path)
            self.contributions.add_property(self.property_id, file.path)
        return file

    def on_end(self) -> None:
        if self.target is not None and self.matched is None:
            msg = f"{self.field} '{self.declared}' was declared but {self.target} is not in the package"
            if self.options.strict:
                raise ConfigurationError(msg)
            logger.warning(msg)
        self.contributions.finalize()


class LicenseProcessor(_DeclaredFileProcessor):
    """Handles `"license": "SEE LICENSE IN <path>"`."""

    kind = ProcessorKind.LICENSE
    asset_type = AssetType.LICENSE
    property_id = PropertyId.LICENSE
    field = "license"

    def __init__(self, manifest: Manifest, options: Optional[ProcessorOptions] = None) -> None:
        m = _SEE_LICENSE_RE.match((manifest.license or "").strip())
        super().__init__(m.group("path") if m else None, options)


class IconProcessor(_DeclaredFileProcessor):
    kind = ProcessorKind.ICON
    asset_type = AssetType.ICON
    property_id = PropertyId.ICON
    field = "icon"

    def __init__(self, manifest: Manifest, options: Optional[ProcessorOptions] = None) -> None:
        super().__init__(manifest.icon or None, options)


__all__ = ["IconProcessor", "LicenseProcessor", "ManifestProcessor"]
