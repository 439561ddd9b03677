"""
Tests for the local filesystem reader adapter.

Uses real temporary files. Handle release is checked both by counting
open descriptors and by observing the context manager on a mocked file.
"""

import errno
import os
from pathlib import Path
from unittest.mock import mock_open, patch

import pytest

from app.infrastructure.files.local_file_reader import LocalFileReader

FD_DIR = Path("/proc/self/fd")


def open_fd_count() -> int:
    return len(os.listdir(FD_DIR))


class TestLocalFileReader:
    """Tests for LocalFileReader.read."""

    def test_reads_whole_file(self, files_root: Path) -> None:
        reader = LocalFileReader(root=str(files_root))
        assert reader.read("hello.txt") == b"hi"
        assert reader.read("nested/data.bin") == bytes(range(256))

    def test_large_file_is_read_completely(self, tmp_path: Path) -> None:
        payload = os.urandom(3 * 1024 * 1024 + 17)
        (tmp_path / "big.bin").write_bytes(payload)

        assert LocalFileReader(root=str(tmp_path)).read("big.bin") == payload

    def test_missing_file(self, files_root: Path) -> None:
        reader = LocalFileReader(root=str(files_root))
        with pytest.raises(FileNotFoundError) as exc_info:
            reader.read("does-not-exist.txt")
        assert "does-not-exist.txt" in str(exc_info.value)

    def test_empty_path_is_not_found(self, files_root: Path) -> None:
        with pytest.raises(FileNotFoundError):
            LocalFileReader(root=str(files_root)).read("")

    def test_directory_cannot_be_read(self, files_root: Path) -> None:
        with pytest.raises(IsADirectoryError):
            LocalFileReader(root=str(files_root)).read("nested")

    def test_relative_to_working_directory_by_default(
        self, files_root: Path, monkeypatch
    ) -> None:
        monkeypatch.chdir(files_root)
        assert LocalFileReader().read("hello.txt") == b"hi"


class TestRootConfinement:
    """Tests for paths escaping the root directory."""

    def test_parent_traversal_is_denied(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        root.mkdir()
        (tmp_path / "outside.txt").write_bytes(b"secret")

        with pytest.raises(PermissionError) as exc_info:
            LocalFileReader(root=str(root)).read("../outside.txt")
        assert exc_info.value.errno == errno.EACCES

    def test_absolute_path_is_denied(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        root.mkdir()
        outside = tmp_path / "outside.txt"
        outside.write_bytes(b"secret")

        with pytest.raises(PermissionError):
            LocalFileReader(root=str(root)).read(str(outside))

    def test_confinement_can_be_disabled(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        root.mkdir()
        (tmp_path / "outside.txt").write_bytes(b"secret")

        reader = LocalFileReader(root=str(root), confine=False)
        assert reader.read("../outside.txt") == b"secret"


@pytest.mark.skipif(not FD_DIR.is_dir(), reason="needs /proc/self/fd")
class TestHandleRelease:
    """No file handle stays open after a read, whatever the outcome."""

    def test_after_success(self, files_root: Path) -> None:
        reader = LocalFileReader(root=str(files_root))
        before = open_fd_count()
        for _ in range(20):
            reader.read("hello.txt")
        assert open_fd_count() == before

    def test_after_failures(self, files_root: Path) -> None:
        reader = LocalFileReader(root=str(files_root))
        before = open_fd_count()
        for path in ("does-not-exist.txt", "nested", "../escape.txt"):
            with pytest.raises(OSError):
                reader.read(path)
        assert open_fd_count() == before


class TestReadFailure:
    """Tests for failures after the file was opened."""

    def test_handle_closed_when_read_fails(self, files_root: Path) -> None:
        opener = mock_open()
        opener.return_value.read.side_effect = OSError(errno.EIO, "Input/output error")

        with patch("builtins.open", opener):
            with pytest.raises(OSError) as exc_info:
                LocalFileReader(root=str(files_root)).read("hello.txt")

        assert exc_info.value.errno == errno.EIO
        opener.return_value.__exit__.assert_called_once()


class TestUnrepresentablePaths:
    """Paths the OS rejects are ordinary file errors, not crashes."""

    def test_embedded_nul_is_invalid_argument(self, files_root: Path) -> None:
        with pytest.raises(OSError) as exc_info:
            LocalFileReader(root=str(files_root)).read("a\x00b")
        assert exc_info.value.errno == errno.EINVAL
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_embedded_nul_without_confinement(self, files_root: Path) -> None:
        with pytest.raises(OSError) as exc_info:
            LocalFileReader(root=str(files_root), confine=False).read("a\x00b")
        assert exc_info.value.errno == errno.EINVAL
