from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from webpack_bootstrap.config import Variant

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


class WriteOutcome(StrEnum):
    WRITTEN = "written"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ProjectPaths:
    """Represents the canonical layout of a bootstrapped front-end project."""

    root: Path
    manifest: Path
    src: Path
    tests: Path
    dist: Path

    @classmethod
    def for_root(cls, root: Path) -> ProjectPaths:
        root = Path(root)
        return cls(
            root=root,
            manifest=root / MANIFEST_NAME,
            src=root / "src",
            tests=root / "tests",
            dist=root / "dist",
        )

    def directories(self, variant: Variant) -> Iterable[Path]:
        if variant is Variant.JEST:
            return (self.src, self.tests, self.dist)
        return (self.src, self.dist)


def ensure_directories(paths: ProjectPaths, variant: Variant) -> list[tuple[Path, bool]]:
    """
    Make sure the project skeleton exists.

    Returns a list of tuples: (path, created) for basic logging/diagnostics.
    """
    created_state: list[tuple[Path, bool]] = []

    for path in paths.directories(variant):
        existed_before = path.exists()
        path.mkdir(parents=True, exist_ok=True)
        created_state.append((path, not existed_before))

    return created_state


def write_if_absent(path: Path, content: str) -> WriteOutcome:
    # Existing paths are left untouched, whatever they contain.
    if path.exists():
        return WriteOutcome.SKIPPED
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return WriteOutcome.WRITTEN


def format_created_state(state: list[tuple[Path, bool]], root: Path) -> str:
    """Pretty-print the ensure_directories result."""
    lines = []
    for path, created in state:
        prefix = "created" if created else "ok"
        lines.append(f"{prefix:>7}  {path.relative_to(root).as_posix()}/")
    return "\n".join(lines)
