"""Core exception hierarchy for muxfs.

All muxfs exceptions inherit from :class:`MuxFSError` so callers can catch
every multiplexer error in one place. Each concrete error also inherits from
the builtin exception a generic filesystem consumer would expect (for
example :class:`NotFoundError` is a :class:`FileNotFoundError`), so code
written against plain Python file semantics keeps working when it is handed
a :class:`~muxfs.drivers.multifs.MultiFS`.
"""

from __future__ import annotations

# ============================================================================
# Base Exception
# ============================================================================


class MuxFSError(Exception):
    """Base exception for all muxfs errors.

    Catch this to handle all muxfs-specific errors.
    """

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(MuxFSError):
    """Raised when configuration is invalid or missing.

    Examples
    --------
    Example usage::

        raise ConfigurationError("mounts", "entry 'one' must map to a directory")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Name of the configuration section that is invalid
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


# ============================================================================
# Mount Table Errors
# ============================================================================


class InvalidIdentifierError(MuxFSError, ValueError):
    """Raised when a mount identifier is not a single path component.

    Examples
    --------
    Example usage::

        raise InvalidIdentifierError("a/b", "must not contain '/'")
    """

    def __init__(self, identifier: str, reason: str) -> None:
        """Initialize invalid identifier error.

        Args
        ----
            identifier: The rejected identifier, as supplied by the caller
            reason: Why it was rejected
        """
        super().__init__(f"Invalid mount identifier {identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason


class NilBackendError(MuxFSError, TypeError):
    """Raised when ``None`` is mounted in place of a filesystem."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Cannot mount {identifier!r}: backend filesystem is None")
        self.identifier = identifier


# ============================================================================
# Path Errors
# ============================================================================


class NotFoundError(MuxFSError, FileNotFoundError):
    """Raised when a path does not exist in the multiplexed namespace.

    Unknown mount identifiers, traversal attempts and unmounting an
    identifier that is not mounted all map to this one error.

    Examples
    --------
    Example usage::

        raise NotFoundError("two/file.txt", "no filesystem mounted as 'two'")
    """

    def __init__(self, path: str, reason: str = "no such file or directory") -> None:
        """Initialize not found error.

        Args
        ----
            path: The path (or identifier) that could not be found
            reason: Explanation of what went wrong
        """
        super().__init__(f"{path!r}: {reason}")
        self.path = path
        self.reason = reason


class NotDirectoryError(MuxFSError, NotADirectoryError):
    """Raised when a directory listing is requested for a plain file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path!r}: not a directory")
        self.path = path


class InvalidPathError(MuxFSError, ValueError):
    """Raised by backends for names that are not canonical relative paths."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path!r}: invalid path")
        self.path = path


# ============================================================================
# Directory Enumeration
# ============================================================================


class EndOfDirectoryError(MuxFSError, EOFError):
    """Raised when a directory handle has no more entries to return.

    Only raised for reads asking for a positive number of entries; asking
    for "all remaining" on an exhausted handle returns an empty list.
    """

    def __init__(self) -> None:
        super().__init__("end of directory")


__all__ = [
    # Base
    "MuxFSError",
    # Configuration
    "ConfigurationError",
    # Mount table
    "InvalidIdentifierError",
    "NilBackendError",
    # Paths
    "NotFoundError",
    "NotDirectoryError",
    "InvalidPathError",
    # Enumeration
    "EndOfDirectoryError",
]
