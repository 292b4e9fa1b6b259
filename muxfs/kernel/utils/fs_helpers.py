"""Generic operations over any :class:`~muxfs.kernel.ports.fs.FileSystem`.

These helpers only rely on ``open`` and the optional ``stat`` /
``read_dir`` fast paths, so they work the same on a single backend and on
a :class:`~muxfs.drivers.multifs.MultiFS`.
"""

from __future__ import annotations

import posixpath
from contextlib import closing
from typing import TYPE_CHECKING

from muxfs.kernel.exceptions import NotDirectoryError
from muxfs.kernel.ports.fs import ReadDirFile, ReadDirFS, StatFS

if TYPE_CHECKING:
    from collections.abc import Iterator

    from muxfs.kernel.domain.fs import DirEntry, FileInfo
    from muxfs.kernel.ports.fs import FileSystem


def read_file(fsys: FileSystem, name: str) -> bytes:
    """Read the whole content of the named file."""
    with closing(fsys.open(name)) as f:
        return f.read()


def read_dir(fsys: FileSystem, name: str) -> list[DirEntry]:
    """List the named directory, sorted by entry name.

    Raises
    ------
    NotDirectoryError
        If ``name`` opens to a handle that cannot enumerate entries.
    """
    if isinstance(fsys, ReadDirFS):
        entries = fsys.read_dir(name)
    else:
        with closing(fsys.open(name)) as f:
            if not isinstance(f, ReadDirFile):
                raise NotDirectoryError(name)
            entries = f.read_dir(-1)
    return sorted(entries, key=lambda e: e.name)


def stat(fsys: FileSystem, name: str) -> FileInfo:
    """Return metadata about the named file or directory."""
    if isinstance(fsys, StatFS):
        return fsys.stat(name)
    with closing(fsys.open(name)) as f:
        return f.stat()


def walk(fsys: FileSystem, top: str = ".") -> Iterator[tuple[str, list[str], list[str]]]:
    """Walk a directory tree top-down, like :func:`os.walk`.

    Yields ``(dirpath, dirnames, filenames)``. Pruning ``dirnames`` in
    place stops the walk from descending into the removed directories.
    """
    entries = read_dir(fsys, top)
    dirnames = [e.name for e in entries if e.is_dir]
    filenames = [e.name for e in entries if not e.is_dir]

    yield top, dirnames, filenames

    for dirname in dirnames:
        child = dirname if top == "." else posixpath.join(top, dirname)
        yield from walk(fsys, child)


__all__ = ["read_dir", "read_file", "stat", "walk"]
