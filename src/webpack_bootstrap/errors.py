from __future__ import annotations

from collections.abc import Sequence


class BootstrapError(Exception):
    """Base class for every failure that stops a setup run."""


class SetupCancelled(BootstrapError):
    pass


class ManifestError(BootstrapError):
    pass


class ConfigError(BootstrapError):
    pass


class CommandFailed(BootstrapError):
    def __init__(self, message: str, args: Sequence[str], returncode: int | None = None):
        super().__init__(message)
        self.command = list(args)
        self.returncode = returncode
