from .assets import IconProcessor, LicenseProcessor, ManifestProcessor
from .base import ContributionView, Contributions, Phase, Processor, ProcessorKind, ProcessorOptions
from .details import BrandingProcessor, CategoriesProcessor, LinksProcessor
from .documents import ChangelogProcessor, ReadmeProcessor
from .registry import DEFAULT_ORDER, PROCESSOR_FACTORIES, create_default_processors, create_processors

__all__ = [
    "BrandingProcessor",
    "CategoriesProcessor",
    "ChangelogProcessor",
    "ContributionView",
    "Contributions",
    "DEFAULT_ORDER",
    "IconProcessor",
    "LicenseProcessor",
    "LinksProcessor",
    "ManifestProcessor",
    "PROCESSOR_FACTORIES",
    "Phase",
    "Processor",
    "ProcessorKind",
    "ProcessorOptions",
    "ReadmeProcessor",
    "create_default_processors",
    "create_processors",
]
