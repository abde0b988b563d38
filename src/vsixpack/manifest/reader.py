from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError as ModelError

from vsixpack.errors import ValidationError
from vsixpack.manifest.model import Manifest, parse_manifest

MANIFEST_FILENAME = "package.json"


def read_manifest(cwd: Path) -> Manifest:
    """
    Load `<cwd>/package.json` into a `Manifest`.

    Field formats are not checked here; see `validate_manifest`.
    """
    path = Path(cwd) / MANIFEST_FILENAME
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ValidationError(f"Manifest not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Failed to read manifest {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValidationError(f"{path} must contain a JSON object.")

    try:
        return parse_manifest(data)
    except ModelError as e:
        raise ValidationError(f"Malformed manifest {path}: {e}") from e
