"""Path value type.

FsPath is an immutable, string-backed filesystem location. Accessors such as
``basename()`` or ``clean()`` work on the literal string and never touch the
filesystem. Predicates (``exists()``, ``is_file()``, ``is_dir()``) query the
filesystem and answer False instead of raising. File access, walking and
copying delegate to the services of the default context.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, BinaryIO

from pathkit.filesystem import is_directory, is_regular, probe
from pathkit.types import WalkFilter

if TYPE_CHECKING:
    from pathkit.context import FsContext
    from pathkit.protocols import Visitor

__all__ = ["FsPath"]


def _ctx() -> FsContext:
    from pathkit.context import default_context

    return default_context()


def _normalize(path: str) -> str:
    """Lexically clean a non-empty path, collapsing a leading ``//`` too."""
    cleaned = os.path.normpath(path)
    if cleaned.startswith(os.sep * 2):
        return cleaned[1:]
    return cleaned


def _segments(path: str) -> list[str]:
    """Split a cleaned path into elements. The root keeps a leading ''."""
    cleaned = _normalize(path) if path else "."
    if cleaned == ".":
        return []
    if cleaned == os.sep:
        return [""]
    return cleaned.split(os.sep)


@dataclass(frozen=True, order=True)
class FsPath:
    """A filesystem location, not necessarily normalized or existing.

    Two FsPath values are equal when their strings are equal. Every
    transformation returns a new value.

    Attributes:
        value: The literal path string.
    """

    value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            object.__setattr__(self, "value", os.fspath(self.value))

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value

    # ------------------------------------------------------------------
    # Lexical accessors
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        """Return True if the path is blank once whitespace is trimmed."""
        return not self.value.strip()

    def join(self, other: str | FsPath) -> FsPath:
        """Join a fragment onto this path and clean the result.

        Empty fragments are ignored. An absolute fragment is appended, not
        substituted: ``FsPath("/a").join("/b")`` is ``/a/b``.

        Args:
            other: Fragment to append.

        Returns:
            New cleaned path, or the empty path if both sides are empty.
        """
        parts = [part for part in (self.value, str(other)) if part]
        if not parts:
            return FsPath("")
        return FsPath(_normalize(os.sep.join(parts)))

    def join_path(self, other: FsPath) -> FsPath:
        """Join another FsPath onto this one."""
        return self.join(other.value)

    def basename(self) -> str:
        """Return the last element of the path, ignoring trailing separators.

        An empty path yields ``"."`` and a path made only of separators
        yields a single separator.
        """
        if not self.value:
            return "."
        stripped = self.value.rstrip(os.sep)
        if not stripped:
            return os.sep
        return os.path.basename(stripped)

    def extension(self) -> str:
        """Return the suffix of the last element, starting at its final dot."""
        tail = self.value[self.value.rfind(os.sep) + 1 :]
        dot = tail.rfind(".")
        return tail[dot:] if dot != -1 else ""

    def parent(self) -> FsPath:
        """Return all but the last element. The parent of ``""`` is ``"."``."""
        head = self.value[: self.value.rfind(os.sep) + 1]
        if not head:
            return FsPath(".")
        return FsPath(_normalize(head))

    def clean(self) -> FsPath:
        """Return the shortest lexically equivalent path."""
        return FsPath(_normalize(self.value) if self.value else ".")

    def absolute(self) -> FsPath:
        """Return an absolute form, or this path if it cannot be resolved."""
        try:
            return FsPath(_normalize(os.path.abspath(self.value)))
        except OSError:
            return self

    def relative_to(self, root: str | FsPath) -> FsPath:
        """Return this path expressed relative to ``root``, segment by segment.

        Raises:
            ValueError: If this path is not located under ``root``.
        """
        own = _segments(self.value)
        base = _segments(str(root))
        if own[: len(base)] != base:
            raise ValueError(f"'{self.value}' is not under '{root}'")
        rest = own[len(base) :]
        return FsPath(os.sep.join(rest) if rest else ".")

    # ------------------------------------------------------------------
    # Filesystem predicates
    # ------------------------------------------------------------------

    def info(self) -> os.stat_result | None:
        """Return the stat record of the path, or None if stat fails."""
        return probe(_ctx().filesystem, self.value)

    def exists(self) -> bool:
        """Return True if the path exists."""
        return self.info() is not None

    def is_file(self) -> bool:
        """Return True if the path exists and is a regular file."""
        return is_regular(self.info())

    def is_dir(self) -> bool:
        """Return True if the path exists and is a directory."""
        return is_directory(self.info())

    # ------------------------------------------------------------------
    # File access
    # ------------------------------------------------------------------

    def open(self) -> BinaryIO:
        """Open an existing regular file for reading."""
        return _ctx().file_access.open_for_read(self)

    def create(self) -> BinaryIO:
        """Open for writing, truncating or creating the file and its parents."""
        return _ctx().file_access.open_for_write(self)

    def append(self) -> BinaryIO:
        """Open for appending, creating the file and its parents if needed."""
        return _ctx().file_access.open_for_append(self)

    def read_all(self) -> bytes:
        """Return the whole content of a regular file."""
        return _ctx().file_access.read_all(self)

    def read_dir(self) -> list[FsPath]:
        """Return the names of the directory's entries in lexical order."""
        return _ctx().file_access.read_dir(self)

    def mkdir_all(self) -> None:
        """Create this directory and any missing ancestors."""
        _ctx().file_access.mkdir_all(self)

    def remove_all(self) -> None:
        """Remove the file or tree at this path, if any."""
        _ctx().file_access.remove_all(self)

    # ------------------------------------------------------------------
    # Traversal and copy
    # ------------------------------------------------------------------

    def walk(self, walk_filter: WalkFilter, visitor: Visitor) -> Any:
        """Walk the tree below this directory. See DirectoryWalker.walk."""
        return _ctx().walker.walk(self, walk_filter, visitor)

    def count(self, walk_filter: WalkFilter = WalkFilter.BOTH) -> int:
        """Count entries below this directory, or 0 on any failure."""
        return _ctx().walker.count(self, walk_filter)

    def copy_to(self, destination: str | FsPath) -> None:
        """Copy this file or tree to ``destination``. See RecursiveCopier."""
        _ctx().copier.copy_to(self, FsPath(str(destination)))
