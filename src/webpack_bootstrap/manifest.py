from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from webpack_bootstrap.errors import ManifestError

logger = logging.getLogger(__name__)


class PackageManifest(BaseModel):
    """Shape check for package.json; only the scripts table is constrained."""

    model_config = ConfigDict(extra="allow")

    scripts: dict[str, str] = Field(default_factory=dict)


def merge_scripts(existing: Mapping[str, str], additions: Mapping[str, str]) -> dict[str, str]:
    """
    Merge run scripts the way an object spread does:
    existing keys keep their position, colliding keys take the new command,
    new keys are appended in the order given.
    """
    merged = dict(existing)
    merged.update(additions)
    return merged


def read_manifest(path: Path) -> dict[str, Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ManifestError(f"Manifest not found: {path}") from e
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ManifestError(f"Manifest {path} must hold a JSON object, got {type(raw).__name__}")

    # scripts may be null in hand-edited manifests; treat it as absent
    checked = {k: v for k, v in raw.items() if not (k == "scripts" and v is None)}
    try:
        PackageManifest.model_validate(checked)
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest {path}: {e}") from e

    return raw


def write_manifest(path: Path, data: Mapping[str, Any]) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def patch_manifest_scripts(path: Path, additions: Mapping[str, str]) -> dict[str, str]:
    """
    Merge `additions` into the manifest's script table and rewrite the file.
    Returns the merged script table.
    """
    data = read_manifest(path)
    scripts = merge_scripts(data.get("scripts") or {}, additions)
    data["scripts"] = scripts
    write_manifest(path, data)
    logger.info("Manifest %s now defines %d script(s)", path.name, len(scripts))
    return scripts
