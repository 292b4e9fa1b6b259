"""In-memory read-only filesystem.

A :class:`MemoryFS` is a mapping from slash-separated paths to
:class:`MemoryFile` records. Directories that are parents of a mapped path
exist implicitly; a record whose ``mode`` is a directory mode declares an
(otherwise empty) directory explicitly.

Example
-------
.. code-block:: python

    fs = MemoryFS({
        "foo.txt": MemoryFile(data=b"hello"),
        "dir1/bar.txt": MemoryFile(data=b"bar"),
        "empty": MemoryFile(mode=stat.S_IFDIR | 0o755),
    })
"""

from __future__ import annotations

import io
import posixpath
import stat as statmod
from collections.abc import Mapping
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from muxfs.kernel.domain.cursor import DirCursor
from muxfs.kernel.domain.fs import EPOCH, DirEntry, FileInfo, valid_path
from muxfs.kernel.exceptions import InvalidPathError, NotFoundError

_DEFAULT_DIR_MODE = statmod.S_IFDIR | 0o555


class MemoryFile(BaseModel):
    """Content and metadata of one entry of a :class:`MemoryFS`."""

    model_config = ConfigDict(frozen=True)

    data: bytes = b""
    mode: int = 0o444
    mod_time: datetime = EPOCH

    def info(self, name: str) -> FileInfo:
        size = 0 if statmod.S_ISDIR(self.mode) else len(self.data)
        return FileInfo(name=name, size=size, mode=self.mode, mod_time=self.mod_time)


class MemoryFileHandle:
    """Open regular file of a :class:`MemoryFS`."""

    def __init__(self, info: FileInfo, data: bytes) -> None:
        self._info = info
        self._buffer = io.BytesIO(data)

    def stat(self) -> FileInfo:
        return self._info

    def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._buffer.seek(offset, whence)

    def tell(self) -> int:
        return self._buffer.tell()

    def close(self) -> None:
        self._buffer.close()

    @property
    def closed(self) -> bool:
        return self._buffer.closed


class MemoryDirHandle:
    """Open directory of a :class:`MemoryFS`."""

    def __init__(self, info: FileInfo, entries: list[DirEntry]) -> None:
        self._info = info
        self._cursor = DirCursor(entries)

    def stat(self) -> FileInfo:
        return self._info

    def read(self, size: int = -1) -> bytes:
        return b""

    def close(self) -> None:
        pass

    def read_dir(self, n: int = -1) -> list[DirEntry]:
        return self._cursor.read(n)


class MemoryFS:
    """Read-only filesystem backed by a mapping of paths to file records."""

    def __init__(self, files: Mapping[str, MemoryFile] | None = None) -> None:
        self._files: dict[str, MemoryFile] = {}
        for name, record in (files or {}).items():
            if not valid_path(name) or name == ".":
                raise InvalidPathError(name)
            self._files[name] = record

    def __repr__(self) -> str:
        return f"MemoryFS(files={len(self._files)})"

    def open(self, name: str) -> MemoryFileHandle | MemoryDirHandle:
        """Open a file or directory.

        Raises
        ------
        InvalidPathError
            If ``name`` is not a canonical relative path.
        NotFoundError
            If ``name`` is neither mapped nor the parent of a mapped path.
        """
        if not valid_path(name):
            raise InvalidPathError(name)

        record = self._files.get(name)
        if record is not None and not statmod.S_ISDIR(record.mode):
            return MemoryFileHandle(record.info(posixpath.basename(name)), record.data)

        entries = self._children(name)
        if record is None and not entries and name != ".":
            raise NotFoundError(name)

        base = "." if name == "." else posixpath.basename(name)
        if record is not None:
            info = record.info(base)
        else:
            info = FileInfo(name=base, mode=_DEFAULT_DIR_MODE)
        return MemoryDirHandle(info, entries)

    def _children(self, name: str) -> list[DirEntry]:
        """Collect the direct children of directory ``name``, sorted by name."""
        prefix = "" if name == "." else name + "/"
        children: dict[str, DirEntry] = {}

        for path, record in self._files.items():
            if not path.startswith(prefix):
                continue
            child, sep, _ = path[len(prefix) :].partition("/")
            if sep:
                # Deeper path: child is an implicit directory unless declared
                declared = self._files.get(prefix + child)
                if declared is not None:
                    info = declared.info(child)
                else:
                    info = FileInfo(name=child, mode=_DEFAULT_DIR_MODE)
                children.setdefault(child, DirEntry.from_info(info))
            else:
                children[child] = DirEntry.from_info(record.info(child))

        return [children[key] for key in sorted(children)]


__all__ = ["MemoryDirHandle", "MemoryFS", "MemoryFile", "MemoryFileHandle"]
