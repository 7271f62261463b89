"""Shared data types for pathkit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathkit.path import FsPath

__all__ = ["Entry", "WalkFilter"]


class WalkFilter(Enum):
    """Which entries a walk delivers to its visitor."""

    BOTH = "both"
    FILES = "files"
    DIRS = "dirs"

    def excludes(self, is_directory: bool) -> bool:
        """Return True if an entry of this kind is withheld from the visitor."""
        if self is WalkFilter.FILES:
            return is_directory
        if self is WalkFilter.DIRS:
            return not is_directory
        return False


@dataclass(frozen=True)
class Entry:
    """One entry produced during a walk.

    Attributes:
        path: Location of the entry, joined onto the walk root.
        is_directory: True if the entry is a directory.
    """

    path: FsPath
    is_directory: bool
