"""Path resolution for the multiplexed namespace.

The first element of every path names a mount; the rest is handed to that
mount's filesystem. Resolution is purely lexical: no backend is touched,
only the mount table is consulted once for the identifier.

.. code-block:: text

    ""  "."  "/"          -> ROOT
    "one"  "/one/"        -> ("one", ".")
    "one/dir/file.txt"    -> ("one", "dir/file.txt")
    ".."  "../x"          -> NotFoundError
    "nope/x"              -> NotFoundError (nothing mounted as "nope")

Cleaning runs on the whole path before the identifier is split off, so
``..`` elements are resolved against the real elements in front of them:
``one/sub/../x`` becomes ``one/x`` and ``one/../other`` becomes ``other``.
Only a path that still climbs above the namespace root is rejected, and it
is rejected with the same error as a missing path.
"""

from __future__ import annotations

import posixpath
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from muxfs.kernel.exceptions import NotFoundError

Lookup = Callable[[str], Any]


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """Outcome of resolving a request path.

    Attributes
    ----------
    mount_id : str | None
        Identifier of the addressed mount; ``None`` for the namespace root.
    subpath : str
        Backend-relative path; ``"."`` addresses the mount's own root.
    """

    mount_id: str | None = None
    subpath: str = "."

    @property
    def is_root(self) -> bool:
        return self.mount_id is None

    @property
    def is_mount_root(self) -> bool:
        return self.mount_id is not None and self.subpath == "."


ROOT = ResolvedPath()


def clean_path(name: str) -> str:
    """Lexically normalize a slash-separated path.

    Collapses repeated separators and ``.`` elements and resolves ``..``
    against preceding elements. A rooted path keeps a single leading ``/``;
    the empty path cleans to ``"."``.
    """
    cleaned = posixpath.normpath(name)
    # POSIX keeps exactly two leading slashes as implementation-defined
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def resolve(name: str, lookup: Lookup) -> ResolvedPath:
    """Turn a request path into a mount identifier and backend subpath.

    Args
    ----
        name: Caller-supplied path. Leading separators are tolerated.
        lookup: Mount table point read, returning ``None`` for unknown ids.

    Raises
    ------
    NotFoundError
        If the path escapes the namespace root or names no mounted id.
    """
    cleaned = clean_path(name).lstrip("/")

    if cleaned in ("", "."):
        return ROOT

    if cleaned == ".." or cleaned.startswith("../"):
        raise NotFoundError(name, "path escapes the namespace root")

    mount_id, sep, rest = cleaned.partition("/")
    if lookup(mount_id) is None:
        raise NotFoundError(name, f"no filesystem mounted as {mount_id!r}")

    return ResolvedPath(mount_id=mount_id, subpath=rest if sep else ".")


__all__ = ["ROOT", "ResolvedPath", "clean_path", "resolve"]
