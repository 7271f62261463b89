"""Helpers that take plain strings instead of FsPath values."""

from __future__ import annotations

import os
from typing import BinaryIO

from pathkit.path import FsPath

__all__ = [
    "abs",
    "append",
    "basename",
    "clean",
    "create",
    "dir_exists",
    "dirname",
    "exists",
    "file_exists",
    "info",
    "mkdir_all",
    "open",
    "read_all",
    "remove_all",
]


def mkdir_all(path: str) -> None:
    """Create a directory and any missing ancestors."""
    FsPath(path).mkdir_all()


def info(path: str) -> os.stat_result | None:
    """Return the stat record of a path, or None."""
    return FsPath(path).info()


def file_exists(path: str) -> bool:
    """Return True if ``path`` exists and is a regular file."""
    return FsPath(path).is_file()


def dir_exists(path: str) -> bool:
    """Return True if ``path`` exists and is a directory."""
    return FsPath(path).is_dir()


def exists(path: str) -> bool:
    """Return True if ``path`` exists."""
    return FsPath(path).exists()


def open(path: str) -> BinaryIO:  # noqa: A001
    """Open an existing regular file for reading."""
    return FsPath(path).open()


def create(path: str) -> BinaryIO:
    """Open a file for writing, truncating or creating it."""
    return FsPath(path).create()


def append(path: str) -> BinaryIO:
    """Open a file for appending, creating it if needed."""
    return FsPath(path).append()


def remove_all(path: str) -> None:
    """Remove a file or directory tree."""
    FsPath(path).remove_all()


def read_all(path: str) -> bytes:
    """Return the whole content of a regular file."""
    return FsPath(path).read_all()


def abs(path: str) -> str:  # noqa: A001
    """Return an absolute form of ``path``, or ``path`` if that fails."""
    return FsPath(path).absolute().value


def basename(path: str) -> str:
    """Return the last element of ``path``."""
    return FsPath(path).basename()


def clean(path: str) -> str:
    """Return the shortest lexically equivalent path."""
    return FsPath(path).clean().value


def dirname(path: str) -> str:
    """Return all but the last element of ``path``."""
    return FsPath(path).parent().value
