"""Tests for the native filesystem wrapper."""

from __future__ import annotations

import io
import os
import stat
from pathlib import Path

import pytest

from pathkit.filesystem import RealFileSystem, is_directory, is_regular, probe
from pathkit.protocols import FileSystem


class TestRealFileSystem:
    """Tests for RealFileSystem implementation."""

    def test_satisfies_protocol(self) -> None:
        """Test the implementation matches the FileSystem protocol."""
        assert isinstance(RealFileSystem(), FileSystem)

    def test_stat(self, tmp_path: Path) -> None:
        """Test stat of an existing file."""
        fs = RealFileSystem()
        test_file = tmp_path / "test.txt"
        test_file.write_text("Hello, World!")

        assert fs.stat(str(test_file)).st_size == 13

    def test_stat_not_found(self, tmp_path: Path) -> None:
        """Test stat of a missing file raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.stat(str(tmp_path / "missing.txt"))

    def test_lstat_does_not_follow_links(self, tmp_path: Path) -> None:
        """Test lstat reports the link itself."""
        fs = RealFileSystem()
        (tmp_path / "target").mkdir()
        link = tmp_path / "link"
        link.symlink_to(tmp_path / "target")

        assert stat.S_ISLNK(fs.lstat(str(link)).st_mode)
        assert stat.S_ISDIR(fs.stat(str(link)).st_mode)

    @pytest.mark.parametrize(
        ("flags", "mode"),
        [
            (os.O_RDONLY, "rb"),
            (os.O_WRONLY | os.O_CREAT | os.O_TRUNC, "wb"),
            (os.O_WRONLY | os.O_CREAT | os.O_APPEND, "ab"),
            (os.O_RDWR | os.O_CREAT, "rb+"),
        ],
    )
    def test_open_modes(self, tmp_path: Path, flags: int, mode: str) -> None:
        """Test raw flags map onto binary file object modes."""
        fs = RealFileSystem()
        test_file = tmp_path / "file.bin"
        test_file.write_bytes(b"")

        with fs.open(str(test_file), flags, 0o644) as handle:
            assert handle.mode == mode

    def test_open_missing_parent(self, tmp_path: Path) -> None:
        """Test open reports a missing parent as FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.open(str(tmp_path / "missing" / "file.txt"), os.O_WRONLY | os.O_CREAT, 0o644)

    def test_makedirs_parents(self, tmp_path: Path) -> None:
        """Test creating nested directories."""
        fs = RealFileSystem()
        nested_dir = tmp_path / "a" / "b" / "c"

        fs.makedirs(str(nested_dir), 0o755)

        assert nested_dir.is_dir()

    def test_makedirs_mode_on_every_level(self, tmp_path: Path) -> None:
        """Test every created ancestor gets the requested mode."""
        fs = RealFileSystem()
        previous = os.umask(0)
        try:
            fs.makedirs(str(tmp_path / "a" / "b"), 0o750)
        finally:
            os.umask(previous)

        assert stat.S_IMODE((tmp_path / "a").stat().st_mode) == 0o750
        assert stat.S_IMODE((tmp_path / "a" / "b").stat().st_mode) == 0o750

    def test_makedirs_exist_ok(self, tmp_path: Path) -> None:
        """Test makedirs doesn't raise for an existing dir."""
        fs = RealFileSystem()
        existing_dir = tmp_path / "existing"
        existing_dir.mkdir()

        fs.makedirs(str(existing_dir), 0o755)

        assert existing_dir.is_dir()

    def test_makedirs_through_file_raises(self, tmp_path: Path) -> None:
        """Test a file in the way is an error."""
        fs = RealFileSystem()
        (tmp_path / "file").write_text("x")

        with pytest.raises(OSError):
            fs.makedirs(str(tmp_path / "file" / "sub"), 0o755)

    def test_remove_all_tree(self, tmp_path: Path) -> None:
        """Test removing a directory tree."""
        fs = RealFileSystem()
        tree_dir = tmp_path / "tree"
        tree_dir.mkdir()
        (tree_dir / "file1.txt").touch()
        (tree_dir / "subdir").mkdir()
        (tree_dir / "subdir" / "file2.txt").touch()

        fs.remove_all(str(tree_dir))

        assert not tree_dir.exists()

    def test_remove_all_file_and_missing(self, tmp_path: Path) -> None:
        """Test removing a file, then removing it again."""
        fs = RealFileSystem()
        test_file = tmp_path / "to_delete.txt"
        test_file.touch()

        fs.remove_all(str(test_file))
        fs.remove_all(str(test_file))

        assert not test_file.exists()

    def test_remove_all_link_keeps_target(self, tmp_path: Path) -> None:
        """Test removing a link to a directory leaves the directory."""
        fs = RealFileSystem()
        (tmp_path / "target").mkdir()
        (tmp_path / "target" / "keep.txt").touch()
        link = tmp_path / "link"
        link.symlink_to(tmp_path / "target")

        fs.remove_all(str(link))

        assert not link.exists()
        assert (tmp_path / "target" / "keep.txt").exists()

    def test_listdir_sorted(self, tmp_path: Path) -> None:
        """Test names come back in lexical order."""
        fs = RealFileSystem()
        for name in ("b", "c", "a"):
            (tmp_path / name).touch()

        assert fs.listdir(str(tmp_path)) == ["a", "b", "c"]

    def test_copy_stream(self) -> None:
        """Test streaming bytes between file objects."""
        fs = RealFileSystem()
        src = io.BytesIO(b"0123456789" * 10_000)
        dst = io.BytesIO()

        fs.copy_stream(src, dst)

        assert dst.getvalue() == src.getvalue()


class TestProbe:
    """Tests for the stat helpers."""

    def test_probe_missing(self, tmp_path: Path) -> None:
        """Test a missing path probes as None."""
        assert probe(RealFileSystem(), str(tmp_path / "missing")) is None

    def test_probe_embedded_nul(self) -> None:
        """Test an invalid path probes as None instead of raising."""
        assert probe(RealFileSystem(), "bad\0path") is None

    def test_kinds(self, tmp_path: Path) -> None:
        """Test file and directory classification."""
        fs = RealFileSystem()
        (tmp_path / "f").touch()

        assert is_regular(probe(fs, str(tmp_path / "f")))
        assert not is_directory(probe(fs, str(tmp_path / "f")))
        assert is_directory(probe(fs, str(tmp_path)))
        assert not is_regular(None)
        assert not is_directory(None)
