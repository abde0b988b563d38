from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from vsixpack.core.vocabulary import (
    DEFAULT_TAG,
    GALLERY_FLAGS,
    INSTALLATION_TARGET,
    Asset,
    DescriptorProperty,
)
from vsixpack.manifest.model import Manifest
from vsixpack.processors.base import Processor


@dataclass(frozen=True)
class PackageDescriptor:
    """
    Everything `extension.vsixmanifest` says about the package.
    Built once per run by `build_descriptor`; never mutated afterwards.
    """
    id: str
    publisher: str
    version: str
    display_name: str
    description: str
    tags: Tuple[str, ...]
    gallery_flags: Tuple[str, ...]
    installation_target: str
    dependencies: Tuple[str, ...]
    properties: Tuple[DescriptorProperty, ...]
    assets: Tuple[Asset, ...]
    language: str = "en-US"

    def property_value(self, id: str) -> Optional[str]:
        for p in self.properties:
            if p.id == id:
                return p.value
        return None


def _required(manifest: Manifest, field: str) -> str:
    value = getattr(manifest, field)
    if not value:
        # upstream validation guarantees these; reaching here is a caller bug
        raise ValueError(f"descriptor requires manifest.{field}")
    return value


def _tags(manifest: Manifest) -> Tuple[str, ...]:
    tags: List[str] = [DEFAULT_TAG]
    for kw in manifest.keywords:
        kw = (kw or "").strip()
        if kw and kw not in tags:
            tags.append(kw)
    return tuple(tags)


def build_descriptor(
    manifest: Manifest,
    assets: Sequence[Asset],
    properties: Sequence[DescriptorProperty],
) -> PackageDescriptor:
    name = _required(manifest, "name")
    return PackageDescriptor(
        id=name,
        publisher=_required(manifest, "publisher"),
        version=_required(manifest, "version"),
        display_name=manifest.display_name or name,
        description=manifest.description or "",
        tags=_tags(manifest),
        gallery_flags=GALLERY_FLAGS,
        installation_target=INSTALLATION_TARGET,
        dependencies=(),
        properties=tuple(properties),
        assets=tuple(assets),
    )


def collect_contributions(
    processors: Iterable[Processor],
) -> Tuple[Tuple[Asset, ...], Tuple[DescriptorProperty, ...]]:
    """Concatenate every processor's assets and properties, in processor order."""
    assets: List[Asset] = []
    properties: List[DescriptorProperty] = []
    for p in processors:
        assets.extend(p.assets)
        properties.extend(p.properties)
    return tuple(assets), tuple(properties)


__all__ = ["PackageDescriptor", "build_descriptor", "collect_contributions"]
