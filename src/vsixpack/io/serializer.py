from __future__ import annotations

"""
XML renderings of the package descriptor (`extension.vsixmanifest`) and the
content-type map (`[Content_Types].xml`). Output is byte-stable for equal input.
"""

import xml.etree.ElementTree as ET
from typing import Mapping

from vsixpack.core.descriptor import PackageDescriptor
from vsixpack.core.vocabulary import METADATA_ELEMENT_IDS, PropertyId

VSX_NS = "http://schemas.microsoft.com/developer/vsx-schema/2011"
VSX_DESIGN_NS = "http://schemas.microsoft.com/developer/vsx-schema-design/2011"
CONTENT_TYPES_NS = "http://schemas.openxmlformats.org/package/2006/content-types"
MANIFEST_VERSION = "2.0.0"

_XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"
_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'


def _text(parent: ET.Element, tag: str, text: str, **attrib: str) -> ET.Element:
    el = ET.SubElement(parent, tag, attrib)
    el.text = text
    return el


def _render(root: ET.Element) -> str:
    ET.indent(root, space="\t")
    return _DECLARATION + ET.tostring(root, encoding="unicode") + "\n"


def to_vsix_manifest(descriptor: PackageDescriptor) -> str:
    root = ET.Element(
        "PackageManifest",
        {"Version": MANIFEST_VERSION, "xmlns": VSX_NS, "xmlns:d": VSX_DESIGN_NS},
    )

    metadata = ET.SubElement(root, "Metadata")
    ET.SubElement(
        metadata,
        "Identity",
        {
            "Language": descriptor.language,
            "Id": descriptor.id,
            "Version": descriptor.version,
            "Publisher": descriptor.publisher,
        },
    )
    _text(metadata, "DisplayName", descriptor.display_name)
    _text(metadata, "Description", descriptor.description, **{_XML_SPACE: "preserve"})
    _text(metadata, "Tags", ",".join(descriptor.tags))

    categories = descriptor.property_value(PropertyId.CATEGORIES)
    if categories:
        _text(metadata, "Categories", categories)

    _text(metadata, "GalleryFlags", " ".join(descriptor.gallery_flags))

    properties = ET.SubElement(metadata, "Properties")
    for prop in descriptor.properties:
        if prop.id in METADATA_ELEMENT_IDS:
            continue
        ET.SubElement(properties, "Property", {"Id": prop.id, "Value": prop.value})

    for element_id in (PropertyId.LICENSE, PropertyId.ICON):
        value = descriptor.property_value(element_id)
        if value:
            _text(metadata, element_id, value)

    installation = ET.SubElement(root, "Installation")
    ET.SubElement(installation, "InstallationTarget", {"Id": descriptor.installation_target})

    dependencies = ET.SubElement(root, "Dependencies")
    for dep in descriptor.dependencies:
        ET.SubElement(dependencies, "Dependency", {"Id": dep})

    assets = ET.SubElement(root, "Assets")
    for asset in descriptor.assets:
        ET.SubElement(assets, "Asset", {"Type": asset.type, "Path": asset.path, "Addressable": "true"})

    return _render(root)


def to_content_types_xml(content_types: Mapping[str, str]) -> str:
    root = ET.Element("Types", {"xmlns": CONTENT_TYPES_NS})
    for ext, mime in content_types.items():
        ET.SubElement(root, "Default", {"Extension": ext, "ContentType": mime})
    return _render(root)


__all__ = ["CONTENT_TYPES_NS", "MANIFEST_VERSION", "VSX_DESIGN_NS", "VSX_NS", "to_content_types_xml", "to_vsix_manifest"]
