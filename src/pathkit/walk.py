"""Depth-first directory traversal with a type filter."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from typing import Any

from pathkit.errors import DirDoesNotExist
from pathkit.filesystem import RealFileSystem, is_directory, probe
from pathkit.path import FsPath
from pathkit.protocols import FileSystem, Visitor
from pathkit.types import Entry, WalkFilter

logger = logging.getLogger(__name__)


def _child(directory: FsPath, name: str) -> FsPath:
    """Join a listed name onto its directory.

    Under ``.`` a blank name keeps its ``./`` prefix, otherwise the joined
    path would read as the empty path.
    """
    path = directory.join(name)
    if path.is_empty():
        return FsPath(f".{os.sep}{name}")
    return path


class DirectoryWalker:
    """Walks a directory tree in pre-order, lexical order per level.

    The root itself is never delivered. Entries rejected by the filter are
    not delivered either; a rejected directory is still descended into when
    it sits directly under the root, and pruned otherwise.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> DirectoryWalker:
        """Factory method for production instantiation."""
        return cls(filesystem=filesystem or RealFileSystem())

    def entries(self, root: FsPath, walk_filter: WalkFilter = WalkFilter.BOTH) -> Iterator[Entry]:
        """Yield the entries below ``root`` that pass ``walk_filter``.

        Directories are listed lazily, after their own entry has been
        yielded, so a consumer may act on a directory before its children
        are read.

        Args:
            root: Directory to traverse.
            walk_filter: Which kinds of entries to yield.

        Yields:
            Entry for every delivered file or directory.

        Raises:
            DirDoesNotExist: If ``root`` is not a directory.
            OSError: If listing or stat'ing an entry fails.
        """
        if not is_directory(probe(self.fs, str(root))):
            raise DirDoesNotExist(root)

        top = root.clean()
        stack: list[tuple[FsPath, Iterator[str]]] = [(top, iter(self.fs.listdir(str(top))))]
        while stack:
            directory, names = stack[-1]
            name = next(names, None)
            if name is None:
                stack.pop()
                continue

            path = _child(directory, name)
            is_dir = stat.S_ISDIR(self.fs.lstat(str(path)).st_mode)

            if walk_filter.excludes(is_dir):
                # Only top-level directories are still entered.
                if not (is_dir and directory == top):
                    continue
            else:
                yield Entry(path, is_dir)

            if is_dir:
                stack.append((path, iter(self.fs.listdir(str(path)))))

    def walk(self, root: FsPath, walk_filter: WalkFilter, visitor: Visitor) -> Any:
        """Call ``visitor`` for every entry below ``root`` passing the filter.

        Args:
            root: Directory to traverse.
            walk_filter: Which kinds of entries to deliver.
            visitor: Called as ``visitor(path, is_directory)``. Returning
                anything other than None stops the walk.

        Returns:
            None after a complete traversal, otherwise the first non-None
            value returned by the visitor.

        Raises:
            DirDoesNotExist: If ``root`` is not a directory.
            OSError: If the native listing fails.
        """
        for entry in self.entries(root, walk_filter):
            result = visitor(entry.path, entry.is_directory)
            if result is not None:
                return result
        return None

    def count(self, root: FsPath, walk_filter: WalkFilter = WalkFilter.BOTH) -> int:
        """Count the entries a walk would deliver.

        Best effort: any failure, including a root that is not a directory
        or an error part way through, yields 0.
        """
        total = 0

        def visit(path: FsPath, is_directory: bool) -> None:
            nonlocal total
            total += 1

        try:
            self.walk(root, walk_filter, visit)
        except Exception as e:
            logger.debug("Count of '%s' failed: %s", root, e)
            return 0
        return total
