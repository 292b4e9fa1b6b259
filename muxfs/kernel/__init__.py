"""muxfs kernel: domain types, port protocols and error codes.

User-space code (``muxfs.api``, ``muxfs.cli`` and embedding applications)
should import from ``muxfs.kernel`` rather than from its submodules.
"""

from muxfs.kernel.domain import (
    EPOCH,
    SYNTHETIC_DIR_MODE,
    DirCursor,
    DirEntry,
    EntryType,
    FileInfo,
    directory_entry,
    directory_info,
    valid_path,
)
from muxfs.kernel.exceptions import (
    ConfigurationError,
    EndOfDirectoryError,
    InvalidIdentifierError,
    InvalidPathError,
    MuxFSError,
    NilBackendError,
    NotDirectoryError,
    NotFoundError,
)
from muxfs.kernel.ports import File, FileSystem, ReadDirFile, ReadDirFS, StatFS
from muxfs.kernel.utils.fs_helpers import read_dir, read_file, stat, walk

__all__ = [
    # Domain types
    "EPOCH",
    "SYNTHETIC_DIR_MODE",
    "DirCursor",
    "DirEntry",
    "EntryType",
    "FileInfo",
    "directory_entry",
    "directory_info",
    "valid_path",
    # Ports
    "File",
    "FileSystem",
    "ReadDirFS",
    "ReadDirFile",
    "StatFS",
    # Helpers
    "read_dir",
    "read_file",
    "stat",
    "walk",
    # Exceptions
    "ConfigurationError",
    "EndOfDirectoryError",
    "InvalidIdentifierError",
    "InvalidPathError",
    "MuxFSError",
    "NilBackendError",
    "NotDirectoryError",
    "NotFoundError",
]
