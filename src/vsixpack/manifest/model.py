# File: src/vsixpack/manifest/model.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


class RepositoryRef(_Frozen):
    type: Optional[str] = None
    url: Optional[str] = None


class BugsRef(_Frozen):
    url: Optional[str] = None
    email: Optional[str] = None


class GalleryBanner(_Frozen):
    color: Optional[str] = None
    theme: Optional[str] = None


class Engines(_Frozen):
    """Host compatibility ranges. Only `vscode` is read by the packager."""
    vscode: Optional[str] = None


class Manifest(_Frozen):
    """
    The extension's `package.json`, read-only once constructed.

    Identity fields are optional at the type level so that
    `validate_manifest` can report exactly which one is missing.
    """
    name: Optional[str] = None
    publisher: Optional[str] = None
    version: Optional[str] = None

    display_name: Optional[str] = Field(default=None, alias="displayName")
    description: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    icon: Optional[str] = None
    license: Optional[str] = None

    repository: Optional[Union[str, RepositoryRef]] = None
    bugs: Optional[Union[str, BugsRef]] = None
    homepage: Optional[str] = None
    gallery_banner: Optional[GalleryBanner] = Field(default=None, alias="galleryBanner")

    engines: Optional[Engines] = None

    dependencies: Dict[str, str] = Field(default_factory=dict)
    dev_dependencies: Dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    @field_validator("categories", "keywords", mode="before")
    @classmethod
    def _coerce_list(cls, v: Any):
        return v or []

    @field_validator("dependencies", "dev_dependencies", mode="before")
    @classmethod
    def _coerce_map(cls, v: Any):
        return v or {}

    # ------------- Convenience accessors --------------------

    @property
    def repository_url(self) -> Optional[str]:
        if isinstance(self.repository, RepositoryRef):
            return self.repository.url
        return self.repository

    @property
    def bugs_url(self) -> Optional[str]:
        if isinstance(self.bugs, BugsRef):
            return self.bugs.url
        return self.bugs

    @property
    def vscode_engine(self) -> Optional[str]:
        return self.engines.vscode if self.engines is not None else None


def parse_manifest(data: Dict[str, Any]) -> Manifest:
    """Build a `Manifest` from decoded `package.json` data."""
    return Manifest.model_validate(data)


__all__ = ["BugsRef", "Engines", "GalleryBanner", "Manifest", "RepositoryRef", "parse_manifest"]
