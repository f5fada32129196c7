"""
Bootstrap a webpack project (npm manifest, dev dependencies, starter files).

Usage:
    python scripts/setup_webpack.py [TARGET_DIR]
"""

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    # Allow running the script before installing the package in editable mode.
    sys.path.insert(0, str(SRC_DIR))

from webpack_bootstrap.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
