"""Permission bits and open flags used when creating files and directories."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

# rw-r--r--
DEFAULT_FILE_MODE = 0o644
# rwxr-xr-x
DEFAULT_DIR_MODE = 0o755
# r--------
DEFAULT_READ_MODE = 0o400

OPEN_FILE_FLAGS = os.O_RDONLY
CREATE_FILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
APPEND_FILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_APPEND


class FsConfig(BaseModel):
    """Modes and flags applied by file access and copy operations."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_mode: int = Field(default=DEFAULT_FILE_MODE, alias="fileMode")
    dir_mode: int = Field(default=DEFAULT_DIR_MODE, alias="dirMode")
    read_mode: int = Field(default=DEFAULT_READ_MODE, alias="readMode")
    open_flags: int = Field(default=OPEN_FILE_FLAGS, alias="openFlags")
    create_flags: int = Field(default=CREATE_FILE_FLAGS, alias="createFlags")
    append_flags: int = Field(default=APPEND_FILE_FLAGS, alias="appendFlags")

    @field_validator("file_mode", "dir_mode", "read_mode")
    @classmethod
    def _check_mode(cls, value: int) -> int:
        if not 0 <= value <= 0o7777:
            raise ValueError(f"invalid permission bits: {value:#o}")
        return value

    @classmethod
    def from_file(cls, path: Path) -> FsConfig:
        """Load configuration from a JSON file.

        Keys may use either the field names or their camelCase aliases.
        Modes are given as integers (JSON has no octal literals).

        Args:
            path: Path to the JSON file.

        Returns:
            Parsed FsConfig.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If JSON is invalid or a mode is out of range.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = json.loads(path.read_text())
        return cls.model_validate(data)
