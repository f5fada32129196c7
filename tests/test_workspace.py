from __future__ import annotations

from webpack_bootstrap.config import Variant
from webpack_bootstrap.workspace import (
    ProjectPaths,
    WriteOutcome,
    ensure_directories,
    format_created_state,
    write_if_absent,
)


def test_ensure_directories_creates_then_is_idempotent(tmp_path):
    paths = ProjectPaths.for_root(tmp_path)

    # 1) First run: directories should be created
    state1 = ensure_directories(paths, Variant.JEST)
    assert [p.name for p, _ in state1] == ["src", "tests", "dist"]
    assert all(created for _, created in state1)

    # 2) Second run: nothing new should be created
    state2 = ensure_directories(paths, Variant.JEST)
    assert all(path.is_dir() for path, _ in state2)
    assert all(created is False for _, created in state2)


def test_basic_variant_has_no_tests_dir(tmp_path):
    paths = ProjectPaths.for_root(tmp_path)
    ensure_directories(paths, Variant.BASIC)
    assert paths.src.is_dir() and paths.dist.is_dir()
    assert not paths.tests.exists()


def test_write_if_absent_never_overwrites(tmp_path):
    target = tmp_path / "src" / "index.js"

    assert write_if_absent(target, "first\n") is WriteOutcome.WRITTEN
    assert write_if_absent(target, "second\n") is WriteOutcome.SKIPPED
    assert target.read_text(encoding="utf-8") == "first\n"


def test_format_created_state(tmp_path):
    paths = ProjectPaths.for_root(tmp_path)
    paths.src.mkdir()
    state = ensure_directories(paths, Variant.BASIC)
    assert format_created_state(state, tmp_path) == "     ok  src/\ncreated  dist/"
