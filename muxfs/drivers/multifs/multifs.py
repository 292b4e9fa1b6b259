"""Multiplexing filesystem driver.

Composes independently mounted filesystems into one namespace in which
the first path element selects the mount.

Example
-------
.. code-block:: python

    mux = MultiFS()
    mux.mount("one", LocalFS("/srv/snapshots/one"))
    mux.mount("two", MemoryFS({"qux.txt": MemoryFile(data=b"hello")}))

    read_file(mux, "one/dir/file.txt")
    [e.name for e in mux.read_dir(".")]  # ["one", "two"]
"""

from __future__ import annotations

from contextlib import closing
from typing import TYPE_CHECKING

from muxfs.core.logging import get_logger
from muxfs.drivers.multifs.dirs import MountRootDir, RootDir
from muxfs.drivers.multifs.mount_table import MountTable
from muxfs.drivers.multifs.resolver import ResolvedPath, resolve
from muxfs.kernel.exceptions import NotDirectoryError, NotFoundError
from muxfs.kernel.ports.fs import ReadDirFile

if TYPE_CHECKING:
    from muxfs.kernel.domain.fs import DirEntry, FileInfo
    from muxfs.kernel.ports.fs import File, FileSystem

logger = get_logger(__name__)


class MultiFS:
    """Read-only filesystem that routes paths to mounted filesystems.

    Every instance owns its own mount table, so independent multiplexers
    can coexist in one process. ``MultiFS`` is itself a
    :class:`~muxfs.kernel.ports.fs.FileSystem` and may be mounted inside
    another ``MultiFS``.
    """

    def __init__(self) -> None:
        self._table = MountTable()

    def __repr__(self) -> str:
        return f"MultiFS(mounts={sorted(self._table.snapshot())!r})"

    # Mount table

    def mount(self, mount_id: str, backend: FileSystem | None) -> None:
        """Mount ``backend`` under ``mount_id``.

        Surrounding slashes are stripped from ``mount_id``. Mounting an id
        that is already mounted replaces its filesystem.

        Raises
        ------
        InvalidIdentifierError
            If ``mount_id`` is empty or not a single path component.
        NilBackendError
            If ``backend`` is ``None``.
        """
        self._table.mount(mount_id, backend)

    def unmount(self, mount_id: str) -> None:
        """Unmount ``mount_id``.

        ``mount_id`` is matched exactly, without stripping slashes. Handles
        already opened from that filesystem stay usable.

        Raises
        ------
        NotFoundError
            If nothing is mounted under ``mount_id``.
        """
        self._table.unmount(mount_id)

    def lookup(self, mount_id: str) -> FileSystem | None:
        """Return the filesystem mounted under ``mount_id``, if any."""
        return self._table.lookup(mount_id)

    def snapshot(self) -> set[str]:
        """Return the currently mounted identifiers (unordered)."""
        return self._table.snapshot()

    def mounts(self) -> dict[str, FileSystem]:
        """Return a copy of the current mount table."""
        return self._table.items()

    # Filesystem

    def resolve(self, name: str) -> ResolvedPath:
        """Split ``name`` into mount identifier and backend subpath."""
        try:
            return resolve(name, self._table.lookup)
        except NotFoundError as e:
            logger.debug("Cannot resolve {name!r}: {reason}", name=name, reason=e.reason)
            raise

    def open(self, name: str) -> File:
        """Open a path in the multiplexed namespace.

        The namespace root and each mount's root are served as synthetic
        directories; every other path is opened by the mounted filesystem
        and its result, or error, is returned unchanged.
        """
        resolved = self.resolve(name)

        if resolved.mount_id is None:
            return RootDir(self._table.snapshot())

        backend = self._table.lookup(resolved.mount_id)
        if backend is None:
            # Unmounted between resolution and lookup
            raise NotFoundError(name, f"no filesystem mounted as {resolved.mount_id!r}")

        if resolved.is_mount_root:
            return MountRootDir(resolved.mount_id, backend)

        return backend.open(resolved.subpath)

    def stat(self, name: str) -> FileInfo:
        """Return metadata about a path (open, stat, close)."""
        with closing(self.open(name)) as f:
            return f.stat()

    def read_dir(self, name: str) -> list[DirEntry]:
        """List every entry of a directory (open, read all, close).

        Raises
        ------
        NotDirectoryError
            If the path opens to something that cannot be enumerated.
        """
        with closing(self.open(name)) as f:
            if not isinstance(f, ReadDirFile):
                raise NotDirectoryError(name)
            return f.read_dir(-1)


__all__ = ["MultiFS"]
