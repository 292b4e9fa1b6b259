"""Resumable enumeration over a buffered directory listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from muxfs.kernel.exceptions import EndOfDirectoryError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from muxfs.kernel.domain.fs import DirEntry


class DirCursor:
    """Read position over a fixed list of directory entries.

    Directory handles hand out their entries in batches through
    :meth:`read`. The cursor only moves forward; once exhausted it stays
    exhausted.

    Read contract
    -------------
    - ``n <= 0``: return every remaining entry (``[]`` when none remain).
    - ``n > 0``: return up to ``n`` entries and advance past them.
    - ``n > 0`` with nothing left: raise :class:`EndOfDirectoryError`.
    """

    __slots__ = ("_entries", "_pos")

    def __init__(self, entries: Iterable[DirEntry]) -> None:
        self._entries: list[DirEntry] = list(entries)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def remaining(self) -> int:
        return max(len(self._entries) - self._pos, 0)

    def read(self, n: int = -1) -> list[DirEntry]:
        """Return the next batch of entries."""
        if self._pos >= len(self._entries) and n > 0:
            raise EndOfDirectoryError()

        count = self.remaining
        if 0 < n < count:
            count = n

        batch = self._entries[self._pos : self._pos + count]
        self._pos += count
        return batch


__all__ = ["DirCursor"]
