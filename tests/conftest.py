from __future__ import annotations

import json
from pathlib import Path

import pytest

from webpack_bootstrap.config import SetupConfig
from webpack_bootstrap.errors import CommandFailed


class FakeRunner:
    """Records commands; `npm init -y` writes a default package.json."""

    def __init__(self, fail_on: str | None = None):
        self.calls: list[list[str]] = []
        self.fail_on = fail_on

    def __call__(self, args, cwd: Path) -> None:
        args = list(args)
        self.calls.append(args)
        if self.fail_on and self.fail_on in args:
            raise CommandFailed("install failed", args, returncode=1)
        if args[1:] == ["init", "-y"]:
            manifest = {"name": cwd.name, "version": "1.0.0", "scripts": {"test": "echo \"Error: no test specified\" && exit 1"}}
            (cwd / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")

    @property
    def installs(self) -> list[list[str]]:
        return [c for c in self.calls if c[1] == "install"]


class CannedConfirmer:
    def __init__(self, answer: bool):
        self.answer = answer
        self.asked: list[str] = []

    def confirm(self, message: str) -> bool:
        self.asked.append(message)
        return self.answer


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def config():
    return SetupConfig(show_progress=False)
