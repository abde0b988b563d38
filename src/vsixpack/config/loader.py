from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from vsixpack.errors import ConfigurationError

CONFIG_FILENAME = "vsixpack.yml"


@dataclass(frozen=True)
class PackagerConfig:
    base_content_url: Optional[str] = None
    base_images_url: Optional[str] = None
    strict: bool = False
    out: Optional[str] = None

    # Whole sections
    content_types: Dict[str, str] = field(default_factory=dict)
    ignore: Tuple[str, ...] = ()

    source: Optional[Path] = None

    def with_overrides(self, **overrides: Any) -> "PackagerConfig":
        """Return a copy where every non-None override replaces the file value."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values) if values else self


# ──────────────────────────────────────────────────────────────────────────────
# YAML helpers
# ──────────────────────────────────────────────────────────────────────────────

def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read YAML at {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must parse to a mapping at top level.")
    return data


def _section(data: Mapping[str, Any], key: str, path: Path) -> Dict[str, Any]:
    v = data.get(key) or {}
    if not isinstance(v, dict):
        raise ConfigurationError(f"'{key}' in {path} must be a mapping.")
    return v


def _opt_str(d: Mapping[str, Any], key: str, path: Path) -> Optional[str]:
    v = d.get(key)
    if v is None:
        return None
    if not isinstance(v, str) or not v.strip():
        raise ConfigurationError(f"'{key}' in {path} must be a non-empty string.")
    return v.strip()


def _content_types(raw: Mapping[str, Any], path: Path) -> Dict[str, str]:
    """Normalize extension keys to lower-case with a leading dot."""
    out: Dict[str, str] = {}
    for ext, mime in raw.items():
        if not isinstance(ext, str) or not isinstance(mime, str) or not ext.strip():
            raise ConfigurationError(f"content_types in {path} must map extensions to MIME strings.")
        ext = ext.strip().lower()
        if not ext.startswith("."):
            ext = "." + ext
        out[ext] = mime.strip()
    return out


def load_packager_config(cwd: Path, path: Optional[Path] = None) -> PackagerConfig:
    """
    Load the packager configuration.

    `path` wins when given (and must exist); otherwise `<cwd>/vsixpack.yml` is
    used if present. No file means defaults.
    """
    if path is not None:
        cfg_path = Path(path)
        if not cfg_path.exists():
            raise ConfigurationError(f"Config file not found: {cfg_path}")
    else:
        cfg_path = Path(cwd) / CONFIG_FILENAME
        if not cfg_path.exists():
            return PackagerConfig()

    raw = _read_yaml(cfg_path)
    package = _section(raw, "package", cfg_path)
    content_types = _section(raw, "content_types", cfg_path)

    ignore = raw.get("ignore") or []
    if not isinstance(ignore, list) or not all(isinstance(x, str) for x in ignore):
        raise ConfigurationError(f"'ignore' in {cfg_path} must be a list of glob strings.")

    return PackagerConfig(
        base_content_url=_opt_str(package, "base_content_url", cfg_path),
        base_images_url=_opt_str(package, "base_images_url", cfg_path),
        strict=bool(package.get("strict", False)),
        out=_opt_str(package, "out", cfg_path),
        content_types=_content_types(content_types, cfg_path),
        ignore=tuple(ignore),
        source=cfg_path,
    )
