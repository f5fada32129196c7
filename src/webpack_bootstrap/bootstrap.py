from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

from webpack_bootstrap.config import SetupConfig
from webpack_bootstrap.errors import ManifestError, SetupCancelled
from webpack_bootstrap.manifest import patch_manifest_scripts
from webpack_bootstrap.package_manager import CommandRunner, PackageManager
from webpack_bootstrap.prompts import Confirmer
from webpack_bootstrap.templates import dependency_groups, run_scripts, starter_files
from webpack_bootstrap.workspace import (
    ProjectPaths,
    WriteOutcome,
    ensure_directories,
    format_created_state,
    write_if_absent,
)

logger = logging.getLogger(__name__)


@dataclass
class SetupReport:
    root: Path
    manifest_created: bool = False
    installed_groups: list[str] = field(default_factory=list)
    directories: list[tuple[Path, bool]] = field(default_factory=list)
    files: dict[str, WriteOutcome] = field(default_factory=dict)
    scripts: dict[str, str] = field(default_factory=dict)


def run_setup(
    root: Path,
    *,
    runner: CommandRunner,
    confirmer: Confirmer,
    config: SetupConfig,
) -> SetupReport:
    """
    Bootstrap a webpack project in `root`.

    Steps run in order and the first failure propagates; nothing is rolled back.
      - confirm when package.json already exists (SetupCancelled on decline)
      - npm init -y when it does not
      - install dev dependency groups
      - create the directory skeleton
      - write starter files that are absent
      - merge run scripts into package.json
    """
    paths = ProjectPaths.for_root(root)
    variant = config.variant
    report = SetupReport(root=paths.root)
    npm = PackageManager(runner, paths.root, executable=config.npm)

    logger.info("Setting up webpack project in %s (variant=%s)", paths.root, variant)

    if paths.manifest.exists():
        if not confirmer.confirm(f"{paths.manifest.name} already exists. Do you want to continue?"):
            raise SetupCancelled("Setup cancelled.")
    else:
        logger.info("Initializing npm project")
        npm.init()
        if not paths.manifest.exists():
            raise ManifestError(f"{config.npm} init did not create {paths.manifest}")
        report.manifest_created = True
        logger.info("%s created", paths.manifest.name)

    groups = dependency_groups(variant)
    bar = tqdm(total=len(groups), desc="Installing dev dependencies", unit="group",
               disable=not config.show_progress)
    try:
        for group in groups:
            logger.info("Installing %s: %s", group.label, " ".join(group.packages))
            npm.install_dev(group.packages)
            report.installed_groups.append(group.label)
            bar.update(1)
    finally:
        bar.close()

    logger.info("Creating project structure")
    report.directories = ensure_directories(paths, variant)
    logger.info("Project structure:\n%s", format_created_state(report.directories, paths.root))

    for starter in starter_files(variant):
        outcome = write_if_absent(paths.root / starter.relative_path, starter.content)
        report.files[starter.relative_path] = outcome
        if outcome is WriteOutcome.WRITTEN:
            logger.info("Created %s", starter.relative_path)
        else:
            logger.info("Skipped %s (already exists)", starter.relative_path)

    logger.info("Adding npm scripts to %s", paths.manifest.name)
    report.scripts = patch_manifest_scripts(paths.manifest, run_scripts(variant))

    return report
