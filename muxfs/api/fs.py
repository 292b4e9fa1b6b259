"""Filesystem API: path-based access returning plain data.

Functions here are what the CLI (and any other embedding surface) consume:
they build a :class:`~muxfs.drivers.multifs.MultiFS` from configuration
and answer read/list/stat requests with JSON-friendly dicts.

Usage::

    from muxfs.api import fs

    mux = fs.create_multifs({"snap1": "/srv/snapshots/one"})
    fs.list_path(mux, ".")          # [{"name": "snap1", "entry_type": "directory", ...}]
    fs.read_path(mux, "snap1/a.txt")
"""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING, Any

from muxfs.drivers.backends import LocalFS
from muxfs.drivers.multifs import MultiFS
from muxfs.kernel.utils.fs_helpers import read_dir, read_file, stat, walk

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from muxfs.kernel.config.models import MuxFSConfig
    from muxfs.kernel.domain.fs import FileInfo
    from muxfs.kernel.ports.fs import FileSystem


def create_multifs(mounts: Mapping[str, str | Path] | None = None) -> MultiFS:
    """Create a MultiFS with one :class:`LocalFS` mounted per entry.

    Parameters
    ----------
    mounts : Mapping[str, str | Path] | None
        Mount identifier to local directory.
    """
    mux = MultiFS()
    for mount_id, directory in (mounts or {}).items():
        mux.mount(mount_id, LocalFS(directory))
    return mux


def multifs_from_config(config: MuxFSConfig) -> MultiFS:
    """Create a MultiFS from the ``mounts`` section of a configuration."""
    return create_multifs(config.mounts)


def info_to_dict(info: FileInfo) -> dict[str, Any]:
    """Flatten file metadata into a JSON-friendly dict."""
    return {
        "name": info.name,
        "entry_type": info.entry_type.value,
        "size": info.size,
        "mode": oct(info.permissions),
        "mod_time": info.mod_time.isoformat(),
    }


def read_path(fsys: FileSystem, path: str) -> bytes:
    """Read the whole content of a file."""
    return read_file(fsys, path)


def list_path(fsys: FileSystem, path: str) -> list[dict[str, Any]]:
    """List a directory as entry dicts sorted by name.

    Each dict has ``name``, ``entry_type``, ``size``, ``mode`` and
    ``mod_time``.
    """
    return [info_to_dict(entry.info()) for entry in read_dir(fsys, path)]


def stat_path(fsys: FileSystem, path: str) -> dict[str, Any]:
    """Get metadata about a path as a dict."""
    return info_to_dict(stat(fsys, path))


def tree_path(fsys: FileSystem, path: str = ".") -> list[str]:
    """List every file and directory below ``path``, sorted.

    Directories carry a trailing ``/``.
    """
    paths: list[str] = []
    for dirpath, dirnames, filenames in walk(fsys, path):
        prefix = "" if dirpath == "." else dirpath
        paths.extend(posixpath.join(prefix, d) + "/" for d in dirnames)
        paths.extend(posixpath.join(prefix, f) for f in filenames)
    return sorted(paths)


__all__ = [
    "create_multifs",
    "info_to_dict",
    "list_path",
    "multifs_from_config",
    "read_path",
    "stat_path",
    "tree_path",
]
