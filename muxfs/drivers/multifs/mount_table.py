"""Mount table: identifier to backend mapping shared by all requests."""

from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING

from muxfs.core.logging import get_logger
from muxfs.kernel.exceptions import InvalidIdentifierError, NilBackendError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from muxfs.kernel.ports.fs import FileSystem

logger = get_logger(__name__)


class _TableLock:
    """Shared/exclusive gate guarding the mount table.

    Any number of lookups may hold the gate together; ``mount`` and
    ``unmount`` hold it alone. The first lookup in closes the gate to
    writers and the last one out reopens it. Those can be different
    threads, so the gate is a plain :class:`~threading.Lock`.
    """

    __slots__ = ("_gate", "_lookups", "_lookups_guard")

    def __init__(self) -> None:
        self._gate = Lock()
        self._lookups_guard = Lock()
        self._lookups = 0

    @contextmanager
    def shared(self) -> Iterator[None]:
        with self._lookups_guard:
            self._lookups += 1
            if self._lookups == 1:
                self._gate.acquire()
        try:
            yield
        finally:
            with self._lookups_guard:
                self._lookups -= 1
                if self._lookups == 0:
                    self._gate.release()

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        with self._gate:
            yield


def normalize_identifier(mount_id: str) -> str:
    """Strip surrounding slashes and check ``mount_id`` is one path component.

    Raises
    ------
    InvalidIdentifierError
        If nothing is left after stripping, or a ``/`` remains inside.
    """
    normalized = mount_id.strip("/")
    if not normalized:
        raise InvalidIdentifierError(mount_id, "must not be empty")
    if "/" in normalized:
        raise InvalidIdentifierError(mount_id, "must be a single path component")
    return normalized


class MountTable:
    """Concurrency-safe mapping from mount identifier to filesystem.

    Reads (``lookup``, ``snapshot``) share the table lock; ``mount`` and
    ``unmount`` hold it exclusively, so an identifier is always either
    absent or bound to exactly one backend.
    """

    def __init__(self) -> None:
        self._roots: dict[str, FileSystem] = {}
        self._lock = _TableLock()

    def mount(self, mount_id: str, backend: FileSystem | None) -> str:
        """Bind ``backend`` under ``mount_id``, replacing any previous binding.

        Returns
        -------
            The normalized identifier the backend was stored under.
        """
        mount_id = normalize_identifier(mount_id)
        if backend is None:
            raise NilBackendError(mount_id)

        with self._lock.exclusive():
            previous = self._roots.get(mount_id)
            self._roots[mount_id] = backend

        if previous is not None and previous is not backend:
            logger.info(
                "Replaced filesystem mounted at {mount_id}: {old} -> {new}",
                mount_id=mount_id,
                old=type(previous).__name__,
                new=type(backend).__name__,
            )
        else:
            logger.debug(
                "Mounted {backend} at {mount_id}",
                backend=type(backend).__name__,
                mount_id=mount_id,
            )
        return mount_id

    def unmount(self, mount_id: str) -> None:
        """Remove the binding for ``mount_id``.

        ``mount_id`` must be the stored identifier exactly; surrounding
        slashes are not stripped as they are by :meth:`mount`.

        Raises
        ------
        NotFoundError
            If nothing is mounted under ``mount_id``.
        """
        with self._lock.exclusive():
            if self._roots.pop(mount_id, None) is None:
                raise NotFoundError(mount_id, "not mounted")
        logger.debug("Unmounted {mount_id}", mount_id=mount_id)

    def lookup(self, mount_id: str) -> FileSystem | None:
        """Return the filesystem mounted under ``mount_id``, if any."""
        with self._lock.shared():
            return self._roots.get(mount_id)

    def snapshot(self) -> set[str]:
        """Return the identifiers mounted right now."""
        with self._lock.shared():
            return set(self._roots)

    def items(self) -> dict[str, FileSystem]:
        """Return a copy of the current mount table."""
        with self._lock.shared():
            return dict(self._roots)

    def __contains__(self, mount_id: object) -> bool:
        with self._lock.shared():
            return mount_id in self._roots

    def __len__(self) -> int:
        with self._lock.shared():
            return len(self._roots)


__all__ = ["MountTable", "normalize_identifier"]
