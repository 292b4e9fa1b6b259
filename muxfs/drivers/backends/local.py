"""Read-only view of a directory on the local disk.

Names are validated before they touch the OS, so a :class:`LocalFS` never
opens anything outside its root through ``..`` or absolute paths.
Symbolic links inside the root are followed by the OS as usual.
"""

from __future__ import annotations

import io
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import BinaryIO

from muxfs.kernel.domain.cursor import DirCursor
from muxfs.kernel.domain.fs import DirEntry, FileInfo, valid_path
from muxfs.kernel.exceptions import InvalidPathError


def _info_from_stat(name: str, st: os.stat_result) -> FileInfo:
    return FileInfo(
        name=name,
        size=st.st_size,
        mode=st.st_mode,
        mod_time=datetime.fromtimestamp(st.st_mtime, tz=UTC),
    )


def _entry_stat(entry: os.DirEntry[str]) -> os.stat_result:
    try:
        return entry.stat()
    except OSError:
        # Dangling or unreadable link
        return entry.stat(follow_symlinks=False)


class LocalFileHandle:
    """Open regular file of a :class:`LocalFS`."""

    def __init__(self, name: str, raw: BinaryIO) -> None:
        self._name = name
        self._raw = raw

    def stat(self) -> FileInfo:
        return _info_from_stat(self._name, os.fstat(self._raw.fileno()))

    def read(self, size: int = -1) -> bytes:
        return self._raw.read(size)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._raw.seek(offset, whence)

    def tell(self) -> int:
        return self._raw.tell()

    def close(self) -> None:
        self._raw.close()

    @property
    def closed(self) -> bool:
        return self._raw.closed


class LocalDirHandle:
    """Open directory of a :class:`LocalFS`.

    The listing is taken when the handle is opened and sorted by name.
    Symbolic links are reported by their target; a link whose target is
    missing is reported as the link itself.
    """

    def __init__(self, name: str, path: Path) -> None:
        self._name = name
        self._path = path
        with os.scandir(path) as it:
            entries = [
                DirEntry.from_info(_info_from_stat(e.name, _entry_stat(e)))
                for e in sorted(it, key=lambda e: e.name)
            ]
        self._cursor = DirCursor(entries)

    def stat(self) -> FileInfo:
        return _info_from_stat(self._name, self._path.stat())

    def read(self, size: int = -1) -> bytes:
        return b""

    def close(self) -> None:
        pass

    def read_dir(self, n: int = -1) -> list[DirEntry]:
        return self._cursor.read(n)


class LocalFS:
    """Read-only filesystem rooted at a local directory.

    Parameters
    ----------
    root : str | Path
        Directory to expose. It is not required to exist at construction
        time; opening anything below a missing root raises
        :class:`FileNotFoundError`.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def __repr__(self) -> str:
        return f"LocalFS({str(self._root)!r})"

    @property
    def root(self) -> Path:
        return self._root

    def open(self, name: str) -> LocalFileHandle | LocalDirHandle:
        """Open a file or directory below the root.

        Raises
        ------
        InvalidPathError
            If ``name`` is not a canonical relative path.
        FileNotFoundError
            If the entry does not exist (raised by the OS, unchanged).
        """
        if not valid_path(name):
            raise InvalidPathError(name)

        path = self._root if name == "." else self._root / name
        base = "." if name == "." else path.name

        if path.is_dir():
            return LocalDirHandle(base, path)
        return LocalFileHandle(base, path.open("rb"))


__all__ = ["LocalDirHandle", "LocalFS", "LocalFileHandle"]
