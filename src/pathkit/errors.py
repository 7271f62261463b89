"""Error taxonomy shared by path, file access, walk and copy operations."""

from __future__ import annotations

__all__ = [
    "PathError",
    "DirDoesNotExist",
    "FileDoesNotExist",
    "NotFound",
    "PathIsEmpty",
    "PathIsDirectory",
    "PathIsDirectoryDestFile",
]


class PathError(Exception):
    """Base class for every failure raised by pathkit.

    Attributes:
        path: The path the failure refers to, when known.
    """

    default_message = "path error"

    def __init__(self, path: object | None = None, message: str | None = None) -> None:
        self.path = None if path is None else str(path)
        text = message or self.default_message
        if self.path is not None:
            text = f"{text}: '{self.path}'"
        super().__init__(text)


class DirDoesNotExist(PathError, FileNotFoundError):
    """A walk or directory listing targets something that is not a directory."""

    default_message = "directory does not exist"


class FileDoesNotExist(PathError, FileNotFoundError):
    """A read or copy source is not a regular file."""

    default_message = "file does not exist"


class NotFound(PathError, FileNotFoundError):
    """A copy source does not exist at all."""

    default_message = "path not found"


class PathIsEmpty(PathError, ValueError):
    """An I/O operation was attempted on an empty path."""

    default_message = "path is empty"


class PathIsDirectory(PathError, IsADirectoryError):
    """A file operation targets a path that is currently a directory."""

    default_message = "path is a directory"


class PathIsDirectoryDestFile(PathError):
    """A directory tree copy would overwrite a regular file."""

    default_message = "source is a directory and the destination is a file"
