"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the services that
pathkit builds on. Designing to interfaces enables:
- Loose coupling between the path operations and the host filesystem
- Easy substitution of test doubles
- Clear contracts for visitor callbacks

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, BinaryIO, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathkit.path import FsPath


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the native filesystem primitives.

    Paths are plain strings at this boundary. Every method raises the
    native OSError subclass on failure; callers decide what to translate.
    """

    def stat(self, path: str) -> os.stat_result:
        """Return status of a path, following symlinks.

        Args:
            path: Path to query.

        Returns:
            Native stat record.

        Raises:
            OSError: If the path cannot be stat'd.
        """
        ...

    def lstat(self, path: str) -> os.stat_result:
        """Return status of a path without following a final symlink.

        Args:
            path: Path to query.

        Returns:
            Native stat record.
        """
        ...

    def open(self, path: str, flags: int, mode: int) -> BinaryIO:
        """Open a file with raw open flags and creation mode.

        Args:
            path: Path to the file.
            flags: Bitwise OR of os.O_* flags.
            mode: Permission bits used if the file is created.

        Returns:
            Binary file object owned by the caller.

        Raises:
            FileNotFoundError: If a path component does not exist.
        """
        ...

    def makedirs(self, path: str, mode: int) -> None:
        """Create a directory and any missing ancestors.

        Args:
            path: Directory to create.
            mode: Permission bits for created directories.
        """
        ...

    def remove_all(self, path: str) -> None:
        """Remove a file or directory tree. Missing paths are ignored.

        Args:
            path: Path to remove.
        """
        ...

    def listdir(self, path: str) -> list[str]:
        """List entry names of a directory in lexical order.

        Args:
            path: Directory to list.

        Returns:
            Sorted list of names (no path prefix).
        """
        ...

    def copy_stream(self, src: BinaryIO, dst: BinaryIO) -> None:
        """Copy all remaining bytes from one open file to another.

        Args:
            src: Readable binary file.
            dst: Writable binary file.
        """
        ...


@runtime_checkable
class Visitor(Protocol):
    """Callback invoked for every entry a walk delivers.

    Return None to continue the walk. Any other return value stops the walk
    immediately and is returned verbatim by ``walk()``. Exceptions raised by
    the visitor propagate to the caller unchanged.
    """

    def __call__(self, path: FsPath, is_directory: bool) -> Any:
        """Visit one entry.

        Args:
            path: Location of the entry.
            is_directory: True if the entry is a directory.

        Returns:
            None to continue, anything else to abort.
        """
        ...
