# File: src/vsixpack/processors/base.py
from __future__ import annotations

"""
Processor contract shared by every pipeline stage.

A processor:
  - sees each file once through `on_file` and may hand back a replacement
    record for the same logical path,
  - is told the stream is over through `on_end`,
  - exposes the assets and descriptor properties it accumulated.

Accumulation is phase-tagged: `Contributions` accepts writes only while
STREAMING and serves reads only once FINALIZED, so nobody observes a
half-built contribution list.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from vsixpack.core.files import FileRecord
from vsixpack.core.vocabulary import Asset, DescriptorProperty
from vsixpack.errors import ProcessingError


class ProcessorKind(str, Enum):
    MANIFEST = "manifest"
    LINKS = "links"
    BRANDING = "branding"
    CATEGORIES = "categories"
    README = "readme"
    CHANGELOG = "changelog"
    LICENSE = "license"
    ICON = "icon"


class Phase(str, Enum):
    STREAMING = "streaming"
    FINALIZED = "finalized"


class Contributions:
    """Assets and properties collected by one processor."""

    def __init__(self, owner: ProcessorKind) -> None:
        self.owner = owner
        self.phase = Phase.STREAMING
        self._assets: List[Asset] = []
        self._properties: List[DescriptorProperty] = []

    def _writable(self) -> None:
        if self.phase is not Phase.STREAMING:
            raise ProcessingError(f"{self.owner.value} processor is finalized; contributions are read-only")

    def _readable(self) -> None:
        if self.phase is not Phase.FINALIZED:
            raise ProcessingError(f"{self.owner.value} processor has not finished streaming")

    def add_asset(self, type: str, path: str) -> None:
        self._writable()
        self._assets.append(Asset(type=type, path=path))

    def add_property(self, id: str, value: str) -> None:
        self._writable()
        self._properties.append(DescriptorProperty(id=id, value=value))

    def finalize(self) -> None:
        self.phase = Phase.FINALIZED

    @property
    def assets(self) -> Tuple[Asset, ...]:
        self._readable()
        return tuple(self._assets)

    @property
    def properties(self) -> Tuple[DescriptorProperty, ...]:
        self._readable()
        return tuple(self._properties)


class ContributionView:
    """Read-only `assets` / `properties` projections over `self.contributions`."""

    contributions: Contributions

    @property
    def assets(self) -> Tuple[Asset, ...]:
        return self.contributions.assets

    @property
    def properties(self) -> Tuple[DescriptorProperty, ...]:
        return self.contributions.properties


@dataclass(frozen=True)
class ProcessorOptions:
    """
    Run-wide knobs handed to processors at construction.

    base_content_url / base_images_url: explicit prefixes for README/CHANGELOG links
    strict: raise ConfigurationError when a declared license/icon never shows up
    """
    base_content_url: Optional[str] = None
    base_images_url: Optional[str] = None
    strict: bool = False


@runtime_checkable
class Processor(Protocol):
    kind: ProcessorKind

    def on_file(self, file: FileRecord) -> FileRecord:
        """Return `file` or a replacement for the same logical path."""
        ...

    def on_end(self) -> None:
        """Called once after every file passed through every processor."""
        ...

    @property
    def assets(self) -> Tuple[Asset, ...]:
        ...

    @property
    def properties(self) -> Tuple[DescriptorProperty, ...]:
        ...


__all__ = ["ContributionView", "Contributions", "Phase", "Processor", "ProcessorKind", "ProcessorOptions"]
