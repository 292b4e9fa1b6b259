"""Filesystem backends that can be mounted into a MultiFS."""

from muxfs.drivers.backends.local import LocalDirHandle, LocalFileHandle, LocalFS
from muxfs.drivers.backends.memory import MemoryDirHandle, MemoryFile, MemoryFileHandle, MemoryFS

__all__ = [
    "LocalDirHandle",
    "LocalFS",
    "LocalFileHandle",
    "MemoryDirHandle",
    "MemoryFS",
    "MemoryFile",
    "MemoryFileHandle",
]
