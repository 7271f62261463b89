"""Filesystem path value type with walk and recursive copy."""

__version__ = "0.1.0"

from pathkit.errors import (
    DirDoesNotExist,
    FileDoesNotExist,
    NotFound,
    PathError,
    PathIsDirectory,
    PathIsDirectoryDestFile,
    PathIsEmpty,
)
from pathkit.path import FsPath
from pathkit.protocols import FileSystem, Visitor
from pathkit.types import Entry, WalkFilter

__all__ = [
    "__version__",
    "DirDoesNotExist",
    "Entry",
    "FileDoesNotExist",
    "FileSystem",
    "FsPath",
    "NotFound",
    "PathError",
    "PathIsDirectory",
    "PathIsDirectoryDestFile",
    "PathIsEmpty",
    "Visitor",
    "WalkFilter",
]
