"""Domain types shared by the multiplexer and its backends."""

from muxfs.kernel.domain.cursor import DirCursor
from muxfs.kernel.domain.fs import (
    EPOCH,
    SYNTHETIC_DIR_MODE,
    DirEntry,
    EntryType,
    FileInfo,
    directory_entry,
    directory_info,
    valid_path,
)

__all__ = [
    "EPOCH",
    "SYNTHETIC_DIR_MODE",
    "DirCursor",
    "DirEntry",
    "EntryType",
    "FileInfo",
    "directory_entry",
    "directory_info",
    "valid_path",
]
