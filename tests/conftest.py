from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Sequence

import pytest

from vsixpack.core.descriptor import build_descriptor, collect_contributions
from vsixpack.core.files import FileRecord
from vsixpack.core.pipeline import process_files
from vsixpack.io.serializer import VSX_NS, to_vsix_manifest
from vsixpack.manifest.model import Manifest, parse_manifest
from vsixpack.processors.registry import create_default_processors

NS = {"v": VSX_NS}


def make_manifest(**fields: Any) -> Manifest:
    data: Dict[str, Any] = {
        "name": "test",
        "publisher": "mocha",
        "version": "0.0.1",
        "description": "test extension",
        "engines": {},
    }
    data.update(fields)
    return parse_manifest(data)


def vsix_manifest_xml(manifest: Manifest, files: Sequence[FileRecord]) -> str:
    processors = create_default_processors(manifest)
    process_files(processors, files)
    assets, properties = collect_contributions(processors)
    return to_vsix_manifest(build_descriptor(manifest, assets, properties))


def parse_vsix(manifest: Manifest, files: Sequence[FileRecord]) -> ET.Element:
    return ET.fromstring(vsix_manifest_xml(manifest, files))


def properties_of(root: ET.Element) -> List[Dict[str, str]]:
    return [dict(p.attrib) for p in root.findall("v:Metadata/v:Properties/v:Property", NS)]


def assets_of(root: ET.Element) -> List[Dict[str, str]]:
    return [dict(a.attrib) for a in root.findall("v:Assets/v:Asset", NS)]


@pytest.fixture
def manifest() -> Manifest:
    return make_manifest()
