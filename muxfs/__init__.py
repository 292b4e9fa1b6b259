"""muxfs: read-only virtual filesystem multiplexer.

Mount any number of independent filesystems under string identifiers and
browse them through one namespace, where ``"<mount-id>/<path>"`` addresses
``<path>`` inside the filesystem mounted as ``<mount-id>``.

>>> from muxfs import MemoryFile, MemoryFS, MultiFS, read_file
>>> mux = MultiFS()
>>> mux.mount("one", MemoryFS({"foo.txt": MemoryFile(data=b"hello")}))
>>> read_file(mux, "one/foo.txt")
b'hello'
"""

try:
    from importlib.metadata import version

    __version__ = version("muxfs")
except Exception:
    __version__ = "0.0.0.dev0"  # Fallback for source checkouts

from muxfs.drivers.backends import LocalFS, MemoryFile, MemoryFS
from muxfs.drivers.multifs import MultiFS
from muxfs.kernel import (
    DirEntry,
    EndOfDirectoryError,
    EntryType,
    File,
    FileInfo,
    FileSystem,
    InvalidIdentifierError,
    InvalidPathError,
    MuxFSError,
    NilBackendError,
    NotDirectoryError,
    NotFoundError,
    ReadDirFile,
    read_dir,
    read_file,
    stat,
    walk,
)

__all__ = [
    "__version__",
    # Multiplexer and backends
    "LocalFS",
    "MemoryFS",
    "MemoryFile",
    "MultiFS",
    # Domain and ports
    "DirEntry",
    "EntryType",
    "File",
    "FileInfo",
    "FileSystem",
    "ReadDirFile",
    # Helpers
    "read_dir",
    "read_file",
    "stat",
    "walk",
    # Exceptions
    "EndOfDirectoryError",
    "InvalidIdentifierError",
    "InvalidPathError",
    "MuxFSError",
    "NilBackendError",
    "NotDirectoryError",
    "NotFoundError",
]
