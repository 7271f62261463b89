"""Copying single files and whole directory trees."""

from __future__ import annotations

import logging
import stat

from pathkit.config import FsConfig
from pathkit.errors import FileDoesNotExist, NotFound, PathIsDirectoryDestFile
from pathkit.fileaccess import FileAccess
from pathkit.filesystem import RealFileSystem, is_regular, probe
from pathkit.path import FsPath
from pathkit.protocols import FileSystem
from pathkit.types import WalkFilter
from pathkit.walk import DirectoryWalker

logger = logging.getLogger(__name__)


class RecursiveCopier:
    """Copies a file or a directory tree onto a destination path.

    Nothing is rolled back on failure: files and directories written before
    the error stay on disk, and a destination file may be left truncated.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        file_access: FileAccess,
        walker: DirectoryWalker,
    ) -> None:
        """Initialize copier with required dependencies.

        Args:
            filesystem: Native filesystem primitives (required).
            file_access: Opens source and destination files (required).
            walker: Enumerates source trees (required).

        Note:
            Use factory method `create()` for production code.
        """
        self.fs = filesystem
        self.file_access = file_access
        self.walker = walker

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        config: FsConfig | None = None,
    ) -> RecursiveCopier:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem (RealFileSystem if not provided).
            config: Optional configuration (defaults if not provided).

        Returns:
            RecursiveCopier wired to a FileAccess and DirectoryWalker that
            share the same filesystem.
        """
        fs = filesystem or RealFileSystem()
        return cls(
            filesystem=fs,
            file_access=FileAccess.create(fs, config),
            walker=DirectoryWalker.create(fs),
        )

    @property
    def config(self) -> FsConfig:
        return self.file_access.config

    def copy_to(self, source: FsPath, destination: FsPath) -> None:
        """Copy ``source`` to ``destination``.

        A file copied onto an existing directory lands inside it under its
        own basename; otherwise it is written to ``destination`` exactly.
        A directory is copied recursively onto an absent or existing
        directory.

        Args:
            source: File or directory to copy.
            destination: Target path.

        Raises:
            NotFound: If ``source`` does not exist.
            PathIsDirectoryDestFile: If ``source`` is a directory and
                ``destination`` is a regular file.
            OSError: If a native operation fails part way.
        """
        info = probe(self.fs, str(source))
        if info is None:
            raise NotFound(source)

        if is_regular(info):
            if self.file_access.is_dir(destination):
                destination = destination.join(source.basename())
            self.copy_file(source, destination)
            return

        if self.file_access.is_file(destination):
            raise PathIsDirectoryDestFile(destination)

        self.copy_tree(source, destination)

    def copy_file(self, source: FsPath, destination: FsPath) -> None:
        """Stream one file's bytes to ``destination``.

        The source is opened with the configured read mode whatever its own
        permissions are; the destination is created with the source's mode.

        Raises:
            FileDoesNotExist: If ``source`` cannot be stat'd.
        """
        info = probe(self.fs, str(source))
        if info is None:
            raise FileDoesNotExist(source)

        logger.debug("Copying file '%s' -> '%s'", source, destination)
        with self.file_access.open(source, self.config.open_flags, self.config.read_mode) as reader:
            with self.file_access.open_for_write(destination, stat.S_IMODE(info.st_mode)) as writer:
                self.fs.copy_stream(reader, writer)

    def copy_tree(self, source: FsPath, destination: FsPath) -> None:
        """Recreate the tree under ``source`` below ``destination``.

        Each entry's target is its path relative to ``source`` joined onto
        ``destination``.
        """
        if not self.file_access.is_dir(destination):
            self.file_access.mkdir_all(destination)

        root = source.clean()

        def visit(path: FsPath, is_directory: bool) -> None:
            target = destination.join_path(path.relative_to(root))
            if is_directory:
                logger.debug("Creating directory '%s'", target)
                self.file_access.mkdir_all(target)
            else:
                self.copy_file(path, target)

        self.walker.walk(source, WalkFilter.BOTH, visit)
