from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from vsixpack.config.loader import PackagerConfig
from vsixpack.core.collector import collect
from vsixpack.core.content_types import build_content_types
from vsixpack.core.descriptor import PackageDescriptor, build_descriptor, collect_contributions
from vsixpack.core.files import FileRecord
from vsixpack.core.pipeline import process_files
from vsixpack.io.serializer import to_content_types_xml, to_vsix_manifest
from vsixpack.manifest.model import Manifest
from vsixpack.manifest.reader import read_manifest
from vsixpack.manifest.validation import validate_manifest
from vsixpack.processors.base import ProcessorOptions
from vsixpack.processors.registry import create_default_processors
from vsixpack.utils.console import ConsoleLog


@dataclass(frozen=True)
class PackageResult:
    """Terminal outputs of one run, ready for the archive writer."""
    manifest: Manifest
    descriptor: PackageDescriptor
    content_types: Dict[str, str]
    files: List[FileRecord]
    vsix_manifest_xml: str
    content_types_xml: str

    @property
    def package_name(self) -> str:
        return f"{self.manifest.name}-{self.manifest.version}.vsix"


class Packager:
    """
    Runs one packaging pass:
      validate manifest → stream files through processors → build descriptor
      → build content types → serialize.
    A fresh processor set is created per `run`.
    """

    def __init__(
        self,
        manifest: Manifest,
        cfg: Optional[PackagerConfig] = None,
        log: Optional[ConsoleLog] = None,
    ) -> None:
        self.manifest = manifest
        self.cfg = cfg or PackagerConfig()
        self.log = log

    def _options(self) -> ProcessorOptions:
        return ProcessorOptions(
            base_content_url=self.cfg.base_content_url,
            base_images_url=self.cfg.base_images_url,
            strict=self.cfg.strict,
        )

    def run(self, files: Sequence[FileRecord]) -> PackageResult:
        validate_manifest(self.manifest)

        processors = create_default_processors(self.manifest, self._options())
        processed = process_files(processors, files)
        assets, properties = collect_contributions(processors)

        descriptor = build_descriptor(self.manifest, assets, properties)
        content_types = build_content_types(processed, self.cfg.content_types)
        if self.log:
            self.log.stage("🧩", f"{len(processed)} files, {len(assets)} assets, {len(properties)} properties")

        return PackageResult(
            manifest=self.manifest,
            descriptor=descriptor,
            content_types=content_types,
            files=processed,
            vsix_manifest_xml=to_vsix_manifest(descriptor),
            content_types_xml=to_content_types_xml(content_types),
        )


def pack(cwd: Path, cfg: Optional[PackagerConfig] = None, log: Optional[ConsoleLog] = None) -> PackageResult:
    """Read, collect and process an extension directory (no archive is written)."""
    cfg = cfg or PackagerConfig()
    manifest = read_manifest(cwd)
    files = collect(manifest, cwd, extra_ignore=cfg.ignore, config_file=cfg.source)
    if log:
        log.info(f"collected {len(files)} files from {cwd}")
    return Packager(manifest, cfg, log).run(files)


__all__ = ["PackageResult", "Packager", "pack"]
