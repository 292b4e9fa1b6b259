"""Tests for filesystem port protocols."""

from __future__ import annotations

from muxfs.drivers.backends import LocalFS, MemoryFile, MemoryFS
from muxfs.kernel.domain.fs import FileInfo
from muxfs.kernel.ports.fs import File, FileSystem, ReadDirFile, ReadDirFS, StatFS


class OpenOnlyFS:
    """Smallest possible backend: a single open method."""

    def open(self, name: str) -> File:
        raise FileNotFoundError(name)


class PlainHandle:
    def stat(self) -> FileInfo:
        return FileInfo(name="x")

    def read(self, size: int = -1) -> bytes:
        return b""

    def close(self) -> None:
        pass


class TestFileSystemProtocol:
    """Structural checks for backends."""

    def test_open_only_backend(self) -> None:
        fs = OpenOnlyFS()
        assert isinstance(fs, FileSystem)
        assert not isinstance(fs, StatFS)
        assert not isinstance(fs, ReadDirFS)

    def test_memory_backend(self) -> None:
        assert isinstance(MemoryFS(), FileSystem)

    def test_local_backend(self, tmp_path) -> None:
        assert isinstance(LocalFS(tmp_path), FileSystem)

    def test_non_filesystem(self) -> None:
        assert not isinstance(object(), FileSystem)


class TestFileProtocol:
    """Structural checks for open handles."""

    def test_plain_handle_is_not_directory(self) -> None:
        handle = PlainHandle()
        assert isinstance(handle, File)
        assert not isinstance(handle, ReadDirFile)

    def test_memory_handles(self) -> None:
        fs = MemoryFS({"d/a.txt": MemoryFile(data=b"a")})
        file_handle = fs.open("d/a.txt")
        dir_handle = fs.open("d")
        assert isinstance(file_handle, File)
        assert not isinstance(file_handle, ReadDirFile)
        assert isinstance(dir_handle, ReadDirFile)
