"""Tests for the in-memory backend."""

from __future__ import annotations

import io
import stat as statmod
from datetime import UTC, datetime

import pytest

from muxfs.drivers.backends import MemoryFile, MemoryFS
from muxfs.drivers.backends.memory import MemoryDirHandle, MemoryFileHandle
from muxfs.kernel.exceptions import EndOfDirectoryError, InvalidPathError, NotFoundError

MTIME = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def memfs() -> MemoryFS:
    return MemoryFS({
        "top.txt": MemoryFile(data=b"top", mod_time=MTIME),
        "dir/a.txt": MemoryFile(data=b"aaa", mode=0o644),
        "dir/sub/b.txt": MemoryFile(data=b"b"),
        "empty": MemoryFile(mode=statmod.S_IFDIR | 0o750),
    })


class TestMemoryFile:
    def test_info(self) -> None:
        info = MemoryFile(data=b"abc").info("x")
        assert info.name == "x"
        assert info.size == 3
        assert not info.is_dir

    def test_directory_record_has_no_size(self) -> None:
        info = MemoryFile(data=b"ignored", mode=statmod.S_IFDIR | 0o755).info("d")
        assert info.is_dir
        assert info.size == 0


class TestOpenFile:
    def test_read(self, memfs: MemoryFS) -> None:
        f = memfs.open("dir/a.txt")
        assert isinstance(f, MemoryFileHandle)
        assert f.read() == b"aaa"

    def test_partial_reads_and_seek(self, memfs: MemoryFS) -> None:
        f = memfs.open("dir/a.txt")
        assert f.read(1) == b"a"
        assert f.tell() == 1
        f.seek(0, io.SEEK_SET)
        assert f.read(-1) == b"aaa"

    def test_stat(self, memfs: MemoryFS) -> None:
        info = memfs.open("top.txt").stat()
        assert info.name == "top.txt"
        assert info.size == 3
        assert info.mod_time == MTIME

    def test_close(self, memfs: MemoryFS) -> None:
        f = memfs.open("top.txt")
        f.close()
        assert f.closed

    def test_handles_are_independent(self, memfs: MemoryFS) -> None:
        a = memfs.open("top.txt")
        b = memfs.open("top.txt")
        a.read()
        assert b.read() == b"top"


class TestOpenDirectory:
    def test_root(self, memfs: MemoryFS) -> None:
        d = memfs.open(".")
        assert isinstance(d, MemoryDirHandle)
        assert d.stat().name == "."
        assert [e.name for e in d.read_dir()] == ["dir", "empty", "top.txt"]

    def test_empty_filesystem_root(self) -> None:
        d = MemoryFS().open(".")
        assert d.read_dir() == []
        with pytest.raises(EndOfDirectoryError):
            d.read_dir(1)

    def test_implicit_directory(self, memfs: MemoryFS) -> None:
        d = memfs.open("dir")
        info = d.stat()
        assert info.name == "dir"
        assert info.is_dir
        assert [(e.name, e.is_dir) for e in d.read_dir()] == [("a.txt", False), ("sub", True)]

    def test_explicit_directory(self, memfs: MemoryFS) -> None:
        d = memfs.open("empty")
        assert d.stat().permissions == 0o750
        assert d.read_dir() == []

    def test_entry_metadata(self, memfs: MemoryFS) -> None:
        entries = {e.name: e for e in memfs.open("dir").read_dir()}
        assert entries["a.txt"].info().permissions == 0o644
        assert entries["a.txt"].info().size == 3

    def test_read_returns_nothing(self, memfs: MemoryFS) -> None:
        assert memfs.open("dir").read() == b""


class TestErrors:
    def test_missing(self, memfs: MemoryFS) -> None:
        with pytest.raises(NotFoundError):
            memfs.open("nope.txt")

    def test_missing_is_file_not_found(self, memfs: MemoryFS) -> None:
        with pytest.raises(FileNotFoundError):
            memfs.open("dir/nope")

    def test_prefix_is_not_a_directory(self, memfs: MemoryFS) -> None:
        with pytest.raises(NotFoundError):
            memfs.open("di")

    @pytest.mark.parametrize(
        "name", ["", "/top.txt", "dir/", "../x", "dir/../top.txt", "./top.txt"]
    )
    def test_invalid_names(self, memfs: MemoryFS, name: str) -> None:
        with pytest.raises(InvalidPathError):
            memfs.open(name)

    @pytest.mark.parametrize("name", [".", "", "/abs", "a//b", "a/../b"])
    def test_invalid_keys_rejected(self, name: str) -> None:
        with pytest.raises(InvalidPathError):
            MemoryFS({name: MemoryFile()})
