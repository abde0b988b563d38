from __future__ import annotations

"""
Processors that turn manifest fields straight into descriptor properties.
None of them look at file contents.
"""

from typing import Optional

from vsixpack.core.files import FileRecord
from vsixpack.core.vocabulary import PropertyId
from vsixpack.manifest.model import Manifest
from vsixpack.processors.base import ContributionView, Contributions, ProcessorKind, ProcessorOptions


class LinksProcessor(ContributionView):
    """repository / bugs / homepage -> Links.* properties."""

    kind = ProcessorKind.LINKS

    def __init__(self, manifest: Manifest, options: Optional[ProcessorOptions] = None) -> None:
        self.contributions = Contributions(self.kind)
        repository = manifest.repository_url
        learn = manifest.homepage or repository

        if repository:
            self.contributions.add_property(PropertyId.LINKS_SOURCE, repository)
            self.contributions.add_property(PropertyId.LINKS_GETSTARTED, repository)
            self.contributions.add_property(PropertyId.LINKS_REPOSITORY, repository)
        if manifest.bugs_url:
            self.contributions.add_property(PropertyId.LINKS_SUPPORT, manifest.bugs_url)
        if learn:
            self.contributions.add_property(PropertyId.LINKS_LEARN, learn)

    def on_file(self, file: FileRecord) -> FileRecord:
        return file

    def on_end(self) -> None:
        self.contributions.finalize()


class BrandingProcessor(ContributionView):
    kind = ProcessorKind.BRANDING

    def __init__(self, manifest: Manifest, options: Optional[ProcessorOptions] = None) -> None:
        self.contributions = Contributions(self.kind)
        banner = manifest.gallery_banner
        if banner is not None:
            if banner.color:
                self.contributions.add_property(PropertyId.BRANDING_COLOR, banner.color)
            if banner.theme:
                self.contributions.add_property(PropertyId.BRANDING_THEME, banner.theme)

    def on_file(self, file: FileRecord) -> FileRecord:
        return file

    def on_end(self) -> None:
        self.contributions.finalize()


class CategoriesProcessor(ContributionView):
    kind = ProcessorKind.CATEGORIES

    def __init__(self, manifest: Manifest, options: Optional[ProcessorOptions] = None) -> None:
        self.contributions = Contributions(self.kind)
        if manifest.categories:
            self.contributions.add_property(PropertyId.CATEGORIES, ",".join(manifest.categories))

    def on_file(self, file: FileRecord) -> FileRecord:
        return file

    def on_end(self) -> None:
        self.contributions.finalize()


__all__ = ["BrandingProcessor", "CategoriesProcessor", "LinksProcessor"]
