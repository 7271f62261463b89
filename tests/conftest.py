"""Shared test fixtures."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pathkit.context import FsContext, create_context
from pathkit.path import FsPath


@pytest.fixture
def root(tmp_path: Path) -> FsPath:
    """Temporary directory as an FsPath."""
    return FsPath(str(tmp_path))


@pytest.fixture
def context() -> FsContext:
    """Fresh context backed by the real filesystem."""
    return create_context()


@pytest.fixture
def zero_umask() -> Iterator[None]:
    """Clear the process umask so created modes can be asserted exactly."""
    previous = os.umask(0)
    yield
    os.umask(previous)


# ============================================================================
# Tree Fixtures
# ============================================================================


def write_file(path: FsPath, content: str) -> None:
    """Create ``path`` (and its parents) holding ``content``."""
    with path.create() as handle:
        handle.write(content.encode())


@pytest.fixture
def log_tree(root: FsPath) -> FsPath:
    """Create a small tree.

    root
    ├── dir/
    └── log/
        ├── a.log
        ├── b.log
        └── c.log
    """
    root.join("dir").mkdir_all()
    for name in ("a.log", "b.log", "c.log"):
        write_file(root.join("log").join(name), name)
    return root


@pytest.fixture
def source_tree(root: FsPath) -> FsPath:
    """Create a mixed source tree under ``root/src`` and return it.

    src
    ├── another/txt.go
    ├── dir/log/{a.c,b.c,c.c}
    ├── dir1/text.txt
    └── empty/
    """
    src = root.join("src")
    log = src.join("dir").join("log")
    files = {
        src.join("dir1").join("text.txt"): "text",
        src.join("another").join("txt.go"): "package main",
        log.join("a.c"): "int a;",
        log.join("b.c"): "int b;",
        log.join("c.c"): "int c;",
    }
    for path, content in files.items():
        write_file(path, content)
    src.join("empty").mkdir_all()
    return src


def snapshot(top: FsPath) -> dict[str, str | None]:
    """Map every entry below ``top`` to its text, or None for directories."""
    result: dict[str, str | None] = {}
    for dirpath, dirnames, filenames in os.walk(str(top)):
        for name in dirnames:
            rel = os.path.relpath(os.path.join(dirpath, name), str(top))
            result[rel] = None
        for name in filenames:
            full = os.path.join(dirpath, name)
            with open(full, encoding="utf-8") as handle:
                result[os.path.relpath(full, str(top))] = handle.read()
    return result


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    Every stat fails by default, so nothing exists until a test says so.
    """
    fs = MagicMock()
    fs.stat.side_effect = FileNotFoundError
    fs.listdir.return_value = []
    return fs
