from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from webpack_bootstrap.errors import CommandFailed

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def __call__(self, args: Sequence[str], cwd: Path) -> None: ...


class SubprocessRunner:
    """
    Run external commands in the foreground.
    Output is not captured: the tool's own messages go straight to the terminal.
    """

    def __call__(self, args: Sequence[str], cwd: Path) -> None:
        args = list(args)
        # npm is npm.cmd on Windows; fall back to the bare name and let run() fail
        args[0] = shutil.which(args[0]) or args[0]
        logger.debug("Running %s in %s", args, cwd)
        try:
            subprocess.run(args, cwd=cwd, check=True)
        except subprocess.CalledProcessError as e:
            raise CommandFailed(
                f"Command {' '.join(args)!r} exited with status {e.returncode}",
                args,
                returncode=e.returncode,
            ) from e
        except OSError as e:
            raise CommandFailed(f"Cannot run {args[0]!r}: {e}", args) from e


class PackageManager:
    def __init__(self, runner: CommandRunner, cwd: Path, executable: str = "npm"):
        self.runner = runner
        self.cwd = Path(cwd)
        self.executable = executable

    def init(self) -> None:
        self.runner([self.executable, "init", "-y"], self.cwd)

    def install_dev(self, packages: Sequence[str]) -> None:
        if not packages:
            return
        self.runner([self.executable, "install", "--save-dev", *packages], self.cwd)
