from __future__ import annotations

import logging
import sys
from pathlib import Path

from webpack_bootstrap.bootstrap import run_setup
from webpack_bootstrap.config import load_config
from webpack_bootstrap.errors import BootstrapError, SetupCancelled
from webpack_bootstrap.package_manager import SubprocessRunner
from webpack_bootstrap.prompts import StdinConfirmer
from webpack_bootstrap.summary import format_summary

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

USAGE = """\
Usage:
    webpack-bootstrap [TARGET_DIR]

TARGET_DIR defaults to the current working directory.
"""


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) > 1 or (argv and argv[0] in ("-h", "--help")):
        print(USAGE)
        return 0 if argv and argv[0] in ("-h", "--help") else 2

    try:
        config = load_config()
    except BootstrapError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("%s", e)
        return 1

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    root = Path(argv[0]) if argv else Path.cwd()
    if not root.is_dir():
        logger.error("Target directory does not exist: %s", root)
        return 1

    try:
        report = run_setup(
            root.resolve(),
            runner=SubprocessRunner(),
            confirmer=StdinConfirmer(),
            config=config,
        )
    except SetupCancelled as e:
        print(f"❌ {e}")
        return 1
    except (BootstrapError, OSError) as e:
        logger.error("Setup failed: %s", e)
        return 1

    print(format_summary(report, config.variant))
    return 0


if __name__ == "__main__":
    sys.exit(main())
