"""Multiplexing filesystem: many mounted filesystems under one namespace."""

from muxfs.drivers.multifs.dirs import MountRootDir, RootDir
from muxfs.drivers.multifs.mount_table import MountTable, normalize_identifier
from muxfs.drivers.multifs.multifs import MultiFS
from muxfs.drivers.multifs.resolver import ROOT, ResolvedPath, clean_path, resolve

__all__ = [
    "ROOT",
    "MountRootDir",
    "MountTable",
    "MultiFS",
    "ResolvedPath",
    "RootDir",
    "clean_path",
    "normalize_identifier",
    "resolve",
]
