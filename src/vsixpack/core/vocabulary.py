from __future__ import annotations

"""
Fixed identifiers used in the package descriptor.
"""

from dataclasses import dataclass

INSTALLATION_TARGET = "Microsoft.VisualStudio.Code"
MANIFEST_ASSET_PATH = "extension/package.json"
DEFAULT_TAG = "vscode"
GALLERY_FLAGS = ("Public",)


class AssetType:
    MANIFEST = "Microsoft.VisualStudio.Code.Manifest"
    DETAILS = "Microsoft.VisualStudio.Services.Content.Details"
    CHANGELOG = "Microsoft.VisualStudio.Services.Content.Changelog"
    LICENSE = "Microsoft.VisualStudio.Services.Content.License"
    ICON = "Microsoft.VisualStudio.Services.Icons.Default"


class PropertyId:
    LINKS_SOURCE = "Microsoft.VisualStudio.Services.Links.Source"
    LINKS_GETSTARTED = "Microsoft.VisualStudio.Services.Links.Getstarted"
    LINKS_REPOSITORY = "Microsoft.VisualStudio.Services.Links.Repository"
    LINKS_SUPPORT = "Microsoft.VisualStudio.Services.Links.Support"
    LINKS_LEARN = "Microsoft.VisualStudio.Services.Links.Learn"
    BRANDING_COLOR = "Microsoft.VisualStudio.Services.Branding.Color"
    BRANDING_THEME = "Microsoft.VisualStudio.Services.Branding.Theme"

    # Rendered as dedicated <Metadata> children rather than <Property> rows
    LICENSE = "License"
    ICON = "Icon"
    CATEGORIES = "Categories"


METADATA_ELEMENT_IDS = (PropertyId.CATEGORIES, PropertyId.LICENSE, PropertyId.ICON)


@dataclass(frozen=True)
class Asset:
    type: str
    path: str


@dataclass(frozen=True)
class DescriptorProperty:
    id: str
    value: str


__all__ = [
    "Asset",
    "AssetType",
    "DEFAULT_TAG",
    "DescriptorProperty",
    "GALLERY_FLAGS",
    "INSTALLATION_TARGET",
    "MANIFEST_ASSET_PATH",
    "METADATA_ELEMENT_IDS",
    "PropertyId",
]
