"""Opening files for read, create and append."""

from __future__ import annotations

import logging
from typing import BinaryIO

from pathkit.config import FsConfig
from pathkit.errors import DirDoesNotExist, FileDoesNotExist, PathIsDirectory, PathIsEmpty
from pathkit.filesystem import RealFileSystem, is_directory, is_regular, probe
from pathkit.path import FsPath
from pathkit.protocols import FileSystem

logger = logging.getLogger(__name__)


class FileAccess:
    """Opens files, creating missing parent directories on write.

    Handles returned by the open methods belong to the caller, who must
    close them on every exit path.
    """

    def __init__(self, filesystem: FileSystem, config: FsConfig) -> None:
        """Initialize file access with required dependencies.

        Args:
            filesystem: Native filesystem primitives (required).
            config: Modes and flags to apply (required).

        Note:
            Use factory method `create()` for production code.
        """
        self.fs = filesystem
        self.config = config

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        config: FsConfig | None = None,
    ) -> FileAccess:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem (RealFileSystem if not provided).
            config: Optional configuration (defaults if not provided).

        Returns:
            Configured FileAccess instance.
        """
        return cls(filesystem=filesystem or RealFileSystem(), config=config or FsConfig())

    def is_file(self, path: FsPath) -> bool:
        """Return True if ``path`` is currently a regular file."""
        return is_regular(probe(self.fs, str(path)))

    def is_dir(self, path: FsPath) -> bool:
        """Return True if ``path`` is currently a directory."""
        return is_directory(probe(self.fs, str(path)))

    def open_for_read(self, path: FsPath, mode: int | None = None) -> BinaryIO:
        """Open an existing regular file for reading.

        Reading never creates anything.

        Args:
            path: File to open.
            mode: Permission bits passed to the native open call.

        Returns:
            Readable binary file.

        Raises:
            FileDoesNotExist: If ``path`` is not a regular file.
        """
        if not self.is_file(path):
            raise FileDoesNotExist(path)
        return self.open(path, self.config.open_flags, mode)

    def open_for_write(self, path: FsPath, mode: int | None = None) -> BinaryIO:
        """Open a file for writing, truncating it or creating it.

        Args:
            path: File to open.
            mode: Permission bits for a newly created file.

        Returns:
            Writable binary file.
        """
        return self.open(path, self.config.create_flags, mode)

    def open_for_append(self, path: FsPath, mode: int | None = None) -> BinaryIO:
        """Open a file for appending, creating it if needed.

        Args:
            path: File to open.
            mode: Permission bits for a newly created file.

        Returns:
            Writable binary file positioned at the end.
        """
        return self.open(path, self.config.append_flags, mode)

    def open(self, path: FsPath, flags: int, mode: int | None = None) -> BinaryIO:
        """Open ``path`` with raw flags, creating missing ancestors once.

        If the native open fails because a path component is missing, the
        cleaned parent directory is created and the open is retried a single
        time. Any other error is raised as is.

        Args:
            path: File to open.
            flags: Bitwise OR of os.O_* flags.
            mode: Permission bits, defaulting to the configured file mode.

        Returns:
            Binary file object.

        Raises:
            PathIsEmpty: If ``path`` is blank.
            PathIsDirectory: If ``path`` is currently a directory.
            OSError: If the native open or the directory creation fails.
        """
        if path.is_empty():
            raise PathIsEmpty(path)
        if self.is_dir(path):
            raise PathIsDirectory(path)

        file_mode = self.config.file_mode if mode is None else mode
        try:
            return self.fs.open(str(path), flags, file_mode)
        except FileNotFoundError:
            parent = path.clean().parent()
            logger.debug("Creating missing parent '%s' for '%s'", parent, path)
            self.mkdir_all(parent)
            return self.fs.open(str(path), flags, file_mode)

    def read_all(self, path: FsPath) -> bytes:
        """Return the whole content of a regular file.

        Raises:
            FileDoesNotExist: If ``path`` is not a regular file.
        """
        with self.open_for_read(path) as handle:
            return handle.read()

    def read_dir(self, path: FsPath) -> list[FsPath]:
        """Return the entry names of a directory, sorted.

        Raises:
            DirDoesNotExist: If ``path`` is not a directory.
        """
        if not self.is_dir(path):
            raise DirDoesNotExist(path)
        return [FsPath(name) for name in self.fs.listdir(str(path))]

    def mkdir_all(self, path: FsPath) -> None:
        """Create a directory and its ancestors with the configured mode."""
        self.fs.makedirs(str(path), self.config.dir_mode)

    def remove_all(self, path: FsPath) -> None:
        """Remove a file or tree. Blank and missing paths are ignored."""
        if path.is_empty():
            return
        self.fs.remove_all(str(path))
