"""Configuration file for pytest containing fixtures shared across test modules.

- fs1 / fs2: small in-memory backends
- mux: a MultiFS with fs1 mounted as "one" and fs2 as "two"
- disk_tree: a populated directory on disk
"""

from pathlib import Path

import pytest

from muxfs.drivers.backends import MemoryFile, MemoryFS
from muxfs.drivers.multifs import MultiFS


@pytest.fixture
def fs1() -> MemoryFS:
    """In-memory backend with nested directories."""
    return MemoryFS({
        "foo.txt": MemoryFile(data=b"hello from fs1"),
        "dir1/bar.txt": MemoryFile(data=b"bar in fs1"),
        "dir1/subdir/baz.txt": MemoryFile(data=b"baz in fs1"),
    })


@pytest.fixture
def fs2() -> MemoryFS:
    """In-memory backend with a single file."""
    return MemoryFS({"qux.txt": MemoryFile(data=b"hello from fs2")})


@pytest.fixture
def mux(fs1: MemoryFS, fs2: MemoryFS) -> MultiFS:
    """MultiFS with fs1 mounted as "one" and fs2 as "two"."""
    m = MultiFS()
    m.mount("one", fs1)
    m.mount("two", fs2)
    return m


@pytest.fixture
def disk_tree(tmp_path: Path) -> Path:
    """Directory on disk with a file, a subdirectory and a nested file."""
    root = tmp_path / "tree"
    (root / "dir").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"alpha")
    (root / "dir" / "file.txt").write_bytes(b"nested")
    return root
