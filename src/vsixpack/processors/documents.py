from __future__ import annotations

import logging
import re
from typing import Optional

from vsixpack.core.files import FileRecord, read_text
from vsixpack.core.vocabulary import AssetType
from vsixpack.manifest.model import Manifest
from vsixpack.processors.base import ContributionView, Contributions, ProcessorKind, ProcessorOptions
from vsixpack.processors.markdown import BaseUrls, resolve_base_urls, rewrite_relative_links

logger = logging.getLogger(__name__)


class _MarkdownDocumentProcessor(ContributionView):
    """
    Picks one Markdown document out of the stream, registers it as an asset
    and rewrites its relative links against the resolved base URLs.
    """

    kind: ProcessorKind
    asset_type: str
    pattern: "re.Pattern[str]"

    def __init__(self, manifest: Manifest, options: Optional[ProcessorOptions] = None) -> None:
        options = options or ProcessorOptions()
        self.contributions = Contributions(self.kind)
        self.bases: BaseUrls = resolve_base_urls(
            options.base_content_url,
            options.base_images_url,
            manifest.repository_url,
        )

    def on_file(self, file: FileRecord) -> FileRecord:
        if not self.pattern.match(file.path):
            return file

        self.contributions.add_asset(self.asset_type, file.path)
        if not self.bases:
            return file

        text = read_text(file)
        rewritten = rewrite_relative_links(text, self.bases)
        if rewritten == text:
            return file
        logger.debug("rewrote relative links in %s", file.path)
        return file.with_contents(rewritten)

    def on_end(self) -> None:
        self.contributions.finalize()


class ReadmeProcessor(_MarkdownDocumentProcessor):
    kind = ProcessorKind.README
    asset_type = AssetType.DETAILS
    pattern = re.compile(r"^extension/readme\.md$", re.IGNORECASE)


class ChangelogProcessor(_MarkdownDocumentProcessor):
    kind = ProcessorKind.CHANGELOG
    asset_type = AssetType.CHANGELOG
    pattern = re.compile(r"^extension/changelog\.md$", re.IGNORECASE)


__all__ = ["ChangelogProcessor", "ReadmeProcessor"]
