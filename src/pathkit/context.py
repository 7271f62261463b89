"""Service context for dependency injection.

This module separates object creation from object use. FsPath methods use
the process-wide default context; code that needs a different filesystem
or configuration builds its own with ``create_context()`` and calls the
services directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pathkit.config import FsConfig
from pathkit.copier import RecursiveCopier
from pathkit.fileaccess import FileAccess
from pathkit.protocols import FileSystem
from pathkit.walk import DirectoryWalker


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from pathkit.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class FsContext:
    """Container for the services behind FsPath.

    All services in one context share the same filesystem and config.
    """

    file_access: FileAccess
    walker: DirectoryWalker
    copier: RecursiveCopier
    filesystem: FileSystem

    @property
    def config(self) -> FsConfig:
        return self.file_access.config


def create_context(
    filesystem: FileSystem | None = None,
    config: FsConfig | None = None,
) -> FsContext:
    """Factory for the service context.

    Args:
        filesystem: Override native filesystem (for testing).
        config: Override modes and flags.

    Returns:
        Configured FsContext with all services wired together.
    """
    fs = filesystem or _default_filesystem()
    file_access = FileAccess.create(fs, config)
    walker = DirectoryWalker.create(fs)
    copier = RecursiveCopier(filesystem=fs, file_access=file_access, walker=walker)

    return FsContext(
        file_access=file_access,
        walker=walker,
        copier=copier,
        filesystem=fs,
    )


@lru_cache(maxsize=1)
def default_context() -> FsContext:
    """Return the shared context used by FsPath methods."""
    return create_context()
