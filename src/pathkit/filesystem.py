"""Native filesystem access.

This module provides the production implementation of the FileSystem
protocol. It wraps os and shutil calls and adds nothing on top of them, so
the interesting behaviour stays in the modules that use it and tests can
swap it for a double.
"""

from __future__ import annotations

import os
import shutil
import stat
from typing import TYPE_CHECKING, BinaryIO

if TYPE_CHECKING:
    from pathkit.protocols import FileSystem


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def stat(self, path: str) -> os.stat_result:
        """Return status of a path, following symlinks."""
        return os.stat(path)

    def lstat(self, path: str) -> os.stat_result:
        """Return status of a path without following a final symlink."""
        return os.lstat(path)

    def open(self, path: str, flags: int, mode: int) -> BinaryIO:
        """Open a file with raw open flags and creation mode."""
        fd = os.open(path, flags, mode)
        try:
            return os.fdopen(fd, _file_mode(flags))
        except BaseException:
            os.close(fd)
            raise

    def makedirs(self, path: str, mode: int) -> None:
        """Create a directory and any missing ancestors, all with ``mode``."""
        missing = []
        current = os.path.normpath(path)
        while not os.path.isdir(current):
            missing.append(current)
            head = os.path.dirname(current)
            if head == current or not head:
                break
            current = head
        for directory in reversed(missing):
            try:
                os.mkdir(directory, mode)
            except FileExistsError:
                if not os.path.isdir(directory):
                    raise

    def remove_all(self, path: str) -> None:
        """Remove a file or directory tree. Missing paths are ignored."""
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
            return
        try:
            os.remove(path)
        except FileNotFoundError:
            pass

    def listdir(self, path: str) -> list[str]:
        """List entry names of a directory in lexical order."""
        return sorted(os.listdir(path))

    def copy_stream(self, src: BinaryIO, dst: BinaryIO) -> None:
        """Copy all remaining bytes from one open file to another."""
        shutil.copyfileobj(src, dst)


def _file_mode(flags: int) -> str:
    """Map os.O_* flags to the matching binary file object mode."""
    if flags & os.O_APPEND:
        return "ab"
    if flags & os.O_RDWR:
        return "r+b"
    if flags & os.O_WRONLY:
        return "wb"
    return "rb"


def probe(fs: FileSystem, path: str) -> os.stat_result | None:
    """Stat a path through ``fs``, returning None instead of raising."""
    try:
        return fs.stat(path)
    except (OSError, ValueError):
        return None


def is_regular(info: os.stat_result | None) -> bool:
    """Return True if a stat record describes a regular file."""
    return info is not None and stat.S_ISREG(info.st_mode)


def is_directory(info: os.stat_result | None) -> bool:
    """Return True if a stat record describes a directory."""
    return info is not None and stat.S_ISDIR(info.st_mode)
