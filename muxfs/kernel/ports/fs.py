"""Filesystem port: the capability set a mountable backend must provide.

Any read-only hierarchical store can be mounted into a
:class:`~muxfs.drivers.multifs.MultiFS` as long as it structurally matches
:class:`FileSystem`. The protocols are ``runtime_checkable`` so the
multiplexer can ask an opened handle whether it enumerates
(:class:`ReadDirFile`) and a backend whether it answers ``stat`` or
``read_dir`` directly (:class:`StatFS`, :class:`ReadDirFS`).

Drivers
-------
- ``MemoryFS``: in-memory map of paths to file contents.
- ``LocalFS``: read-only view of an on-disk directory.
- ``MultiFS``: the multiplexer itself, so multiplexers nest.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from muxfs.kernel.domain.fs import DirEntry, FileInfo


@runtime_checkable
class File(Protocol):
    """An open file or directory handle."""

    @abstractmethod
    def stat(self) -> FileInfo:
        """Return metadata about the open entry."""
        ...

    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes (all remaining when negative).

        Directory handles return ``b""``.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the handle."""
        ...


@runtime_checkable
class ReadDirFile(File, Protocol):
    """A directory handle that can enumerate its entries."""

    @abstractmethod
    def read_dir(self, n: int = -1) -> list[DirEntry]:
        """Read the next batch of directory entries.

        Args
        ----
            n: ``n <= 0`` returns every remaining entry. ``n > 0`` returns
                up to ``n`` entries.

        Raises
        ------
        EndOfDirectoryError
            If ``n > 0`` and the directory is exhausted.
        """
        ...


@runtime_checkable
class FileSystem(Protocol):
    """A read-only hierarchical filesystem."""

    @abstractmethod
    def open(self, name: str) -> File:
        """Open the named file or directory.

        Args
        ----
            name: Slash-separated path relative to the filesystem root, with
                no ``.``/``..`` elements. ``"."`` is the root itself.

        Raises
        ------
        FileNotFoundError
            If the name does not exist.
        """
        ...


@runtime_checkable
class StatFS(FileSystem, Protocol):
    """A filesystem that answers ``stat`` without an explicit open."""

    @abstractmethod
    def stat(self, name: str) -> FileInfo:
        """Return metadata about the named entry."""
        ...


@runtime_checkable
class ReadDirFS(FileSystem, Protocol):
    """A filesystem that lists directories without an explicit open."""

    @abstractmethod
    def read_dir(self, name: str) -> list[DirEntry]:
        """Return every entry of the named directory."""
        ...


__all__ = ["File", "FileSystem", "ReadDirFS", "ReadDirFile", "StatFS"]
