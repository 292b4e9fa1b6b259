"""Domain models for filesystem metadata and directory listings.

These are the value types exchanged between the multiplexer and its
backends. ``mode`` carries both the file type and the permission bits in
the layout of :mod:`stat` (``stat.S_IFDIR | 0o555`` for a read-only
directory), so a :class:`FileInfo` built from :func:`os.stat` needs no
translation.
"""

from __future__ import annotations

import stat as statmod
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

#: Mode of every directory the multiplexer fabricates itself.
SYNTHETIC_DIR_MODE = statmod.S_IFDIR | 0o555


class EntryType(StrEnum):
    """Type of a filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"


class FileInfo(BaseModel):
    """Metadata about a file or directory.

    Attributes
    ----------
    name : str
        Base name of the entry (``"."`` for a root).
    size : int
        Length in bytes for regular files; 0 for directories.
    mode : int
        File type and permission bits, as in :attr:`os.stat_result.st_mode`.
    mod_time : datetime
        Last modification time (timezone-aware).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    size: int = 0
    mode: int = 0o444
    mod_time: datetime = EPOCH

    @property
    def is_dir(self) -> bool:
        return statmod.S_ISDIR(self.mode)

    @property
    def entry_type(self) -> EntryType:
        return EntryType.DIRECTORY if self.is_dir else EntryType.FILE

    @property
    def permissions(self) -> int:
        """Permission bits only (``mode`` without the file type)."""
        return statmod.S_IMODE(self.mode)


class DirEntry(BaseModel):
    """A single entry in a directory listing."""

    model_config = ConfigDict(frozen=True)

    name: str
    entry_type: EntryType
    file_info: FileInfo

    @property
    def is_dir(self) -> bool:
        return self.entry_type == EntryType.DIRECTORY

    def info(self) -> FileInfo:
        """Return the metadata of the entry."""
        return self.file_info

    @classmethod
    def from_info(cls, info: FileInfo) -> DirEntry:
        """Build a listing entry that describes ``info``."""
        return cls(name=info.name, entry_type=info.entry_type, file_info=info)


def directory_info(name: str) -> FileInfo:
    """Metadata for a directory that exists only in the multiplexer's view."""
    return FileInfo(name=name, size=0, mode=SYNTHETIC_DIR_MODE, mod_time=EPOCH)


def directory_entry(name: str) -> DirEntry:
    """Listing entry for a directory that exists only in the multiplexer's view."""
    return DirEntry.from_info(directory_info(name))


def valid_path(name: str) -> bool:
    """Report whether ``name`` is a canonical backend-relative path.

    Canonical names are unrooted, slash-separated sequences of elements with
    no empty, ``.`` or ``..`` elements. The single name ``"."`` denotes the
    root. Backends receive only names of this shape from the multiplexer.
    """
    if name == ".":
        return True
    if not name:
        return False
    return all(elem not in ("", ".", "..") for elem in name.split("/"))


__all__ = [
    "EPOCH",
    "SYNTHETIC_DIR_MODE",
    "DirEntry",
    "EntryType",
    "FileInfo",
    "directory_entry",
    "directory_info",
    "valid_path",
]
