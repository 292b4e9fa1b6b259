"""Port protocols implemented by mountable filesystems."""

from muxfs.kernel.ports.fs import File, FileSystem, ReadDirFile, ReadDirFS, StatFS

__all__ = ["File", "FileSystem", "ReadDirFS", "ReadDirFile", "StatFS"]
