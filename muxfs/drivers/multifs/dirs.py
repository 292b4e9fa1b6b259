"""Synthetic directory handles served by the multiplexer itself.

Neither directory exists in any backend: :class:`RootDir` lists the mounted
identifiers and :class:`MountRootDir` stands in for a mount's own root,
forwarding that backend's top-level listing unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from muxfs.kernel.domain.cursor import DirCursor
from muxfs.kernel.domain.fs import directory_entry, directory_info
from muxfs.kernel.utils.fs_helpers import read_dir

if TYPE_CHECKING:
    from collections.abc import Iterable

    from muxfs.kernel.domain.fs import DirEntry, FileInfo
    from muxfs.kernel.ports.fs import FileSystem


class RootDir:
    """Directory handle for the namespace root.

    Built from one snapshot of the mount table; mounts added or removed
    after :meth:`~muxfs.drivers.multifs.MultiFS.open` are not reflected.
    """

    def __init__(self, mount_ids: Iterable[str]) -> None:
        self._cursor = DirCursor(directory_entry(mount_id) for mount_id in sorted(mount_ids))

    def stat(self) -> FileInfo:
        return directory_info(".")

    def read(self, size: int = -1) -> bytes:
        return b""

    def close(self) -> None:
        pass

    def read_dir(self, n: int = -1) -> list[DirEntry]:
        return self._cursor.read(n)


class MountRootDir:
    """Directory handle for the root of one mounted filesystem.

    The backend is asked for its listing of ``"."`` on the first
    :meth:`read_dir` call and the result is kept for the life of this
    handle only. Like the namespace root, it stats as a directory named ``"."``.
    """

    def __init__(self, mount_id: str, backend: FileSystem) -> None:
        self._mount_id = mount_id
        self._backend = backend
        self._cursor: DirCursor | None = None

    @property
    def mount_id(self) -> str:
        return self._mount_id

    def stat(self) -> FileInfo:
        return directory_info(".")

    def read(self, size: int = -1) -> bytes:
        return b""

    def close(self) -> None:
        pass

    def read_dir(self, n: int = -1) -> list[DirEntry]:
        if self._cursor is None:
            self._cursor = DirCursor(read_dir(self._backend, "."))
        return self._cursor.read(n)


__all__ = ["MountRootDir", "RootDir"]
