"""Custom exception hierarchy for lockgraph.

This module defines the exception classes raised by the lockfile layer:
- LockgraphError: Base exception for all lockgraph errors
- InvalidLockfileVersionError: Persisted schema version is not supported
- FailedToReadLockfileError: Lockfile text could not be parsed or validated
- DuplicatePackageError: Same package identity listed twice in a lockfile
- ManifestNotFoundError: Freshness check ran without a manifest

User-facing messages are safe to display. Technical details (parser
output, file paths) are logged internally via structlog.
"""

from __future__ import annotations

from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class LockgraphError(Exception):
    """Base exception for lockgraph.

    Args:
        user_message: Message safe to display to the user.
        internal_details: Optional technical details. Logged internally,
            never part of the exception message.

    Example:
        >>> raise LockgraphError(
        ...     "Lockfile unusable",
        ...     internal_details="truncated write at /project/lockgraph.lock"
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "lockgraph_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class InvalidLockfileVersionError(LockgraphError):
    """Raised when the lockfile schema version is not the supported one.

    There is no migration path between lockfile versions. Callers must
    discard the lockfile and fall back to full resolution.

    Attributes:
        found: Version number read from the lockfile.
        supported: The only version this library reads and writes.

    Example:
        >>> err = InvalidLockfileVersionError(2, supported=1)
        >>> str(err)
        'invalid lockfile version found: 2'
    """

    def __init__(
        self,
        found: int,
        *,
        supported: int,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(
            f"invalid lockfile version found: {found}",
            internal_details=internal_details,
        )
        self.found = found
        self.supported = supported


class FailedToReadLockfileError(LockgraphError):
    """Raised when lockfile text cannot be turned into a valid document.

    Covers malformed YAML, field type mismatches and missing required
    fields. The diagnostic is part of the message so it can be shown to
    the user as-is.

    Attributes:
        diagnostic: Human-readable description of what went wrong.
        path: Lockfile path, when the text came from disk.
    """

    def __init__(
        self,
        diagnostic: str,
        *,
        path: Path | None = None,
        internal_details: str | None = None,
    ) -> None:
        diagnostic = diagnostic.strip() or "unknown parse failure"
        super().__init__(
            f"failed to read lockfile:\n{diagnostic}",
            internal_details=internal_details,
        )
        self.diagnostic = diagnostic
        self.path = path


class DuplicatePackageError(FailedToReadLockfileError):
    """Raised when one package identity appears more than once in a lockfile.

    Attributes:
        name: Package name of the duplicated entry.
        version: Package version of the duplicated entry.
    """

    def __init__(
        self,
        name: str,
        version: str,
        *,
        path: Path | None = None,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(
            f"duplicate package entry: {name} {version}",
            path=path,
            internal_details=internal_details,
        )
        self.name = name
        self.version = version


class ManifestNotFoundError(LockgraphError):
    """Raised when lockfile freshness is queried for a project without a manifest.

    Attributes:
        path: Expected manifest location.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(f"Manifest not found: {path.name}", internal_details=str(path))
        self.path = path
