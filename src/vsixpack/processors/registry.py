from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

from vsixpack.manifest.model import Manifest
from vsixpack.processors.assets import IconProcessor, LicenseProcessor, ManifestProcessor
from vsixpack.processors.base import Processor, ProcessorKind, ProcessorOptions
from vsixpack.processors.details import BrandingProcessor, CategoriesProcessor, LinksProcessor
from vsixpack.processors.documents import ChangelogProcessor, ReadmeProcessor

ProcessorFactory = Callable[[Manifest, Optional[ProcessorOptions]], Processor]

# Kind → factory (the closed set of processor variants)
PROCESSOR_FACTORIES: Dict[ProcessorKind, ProcessorFactory] = {
    ProcessorKind.MANIFEST: ManifestProcessor,
    ProcessorKind.LINKS: LinksProcessor,
    ProcessorKind.BRANDING: BrandingProcessor,
    ProcessorKind.CATEGORIES: CategoriesProcessor,
    ProcessorKind.README: ReadmeProcessor,
    ProcessorKind.CHANGELOG: ChangelogProcessor,
    ProcessorKind.LICENSE: LicenseProcessor,
    ProcessorKind.ICON: IconProcessor,
}

# Asset order in the descriptor follows this list
DEFAULT_ORDER: Sequence[ProcessorKind] = (
    ProcessorKind.MANIFEST,
    ProcessorKind.LINKS,
    ProcessorKind.BRANDING,
    ProcessorKind.CATEGORIES,
    ProcessorKind.README,
    ProcessorKind.CHANGELOG,
    ProcessorKind.LICENSE,
    ProcessorKind.ICON,
)


def create_processors(
    manifest: Manifest,
    kinds: Sequence[ProcessorKind],
    options: Optional[ProcessorOptions] = None,
) -> List[Processor]:
    return [PROCESSOR_FACTORIES[ProcessorKind(k)](manifest, options) for k in kinds]


def create_default_processors(manifest: Manifest, options: Optional[ProcessorOptions] = None) -> List[Processor]:
    """Fresh processor set for one packaging run."""
    return create_processors(manifest, DEFAULT_ORDER, options)


__all__ = ["DEFAULT_ORDER", "PROCESSOR_FACTORIES", "create_default_processors", "create_processors"]
