"""Lockfile freshness check against the manifest."""

from __future__ import annotations

from pathlib import Path

import structlog

from lockgraph.config import LockfileConfig
from lockgraph.errors import ManifestNotFoundError

logger = structlog.get_logger(__name__)


def lockfile_last_modified(project_dir: Path | str, config: LockfileConfig) -> int:
    """Return the lockfile modification time in nanoseconds."""
    return config.lockfile_path(project_dir).stat().st_mtime_ns


def manifest_last_modified(project_dir: Path | str, config: LockfileConfig) -> int:
    """Return the manifest modification time in nanoseconds.

    Raises:
        ManifestNotFoundError: If the project has no manifest.
    """
    manifest_path = config.manifest_path(project_dir)
    try:
        return manifest_path.stat().st_mtime_ns
    except FileNotFoundError:
        raise ManifestNotFoundError(manifest_path) from None


def is_outdated(project_dir: Path | str, config: LockfileConfig | None = None) -> bool:
    """Decide whether the lockfile must be regenerated before it can be trusted.

    Args:
        project_dir: Project directory holding the lockfile and manifest.
        config: File name configuration. Defaults to LockfileConfig.from_env().

    Returns:
        True if the lockfile is missing or older than the manifest.
        False if it is as new as or newer than the manifest.

    Raises:
        ManifestNotFoundError: If the lockfile exists but the manifest does not.
    """
    config = config or LockfileConfig.from_env()
    lockfile_path = config.lockfile_path(project_dir)
    if not lockfile_path.exists():
        logger.debug("lockfile_missing", path=str(lockfile_path))
        return True

    lock_mtime = lockfile_last_modified(project_dir, config)
    manifest_mtime = manifest_last_modified(project_dir, config)
    outdated = lock_mtime < manifest_mtime
    logger.debug(
        "lockfile_freshness_checked",
        path=str(lockfile_path),
        outdated=outdated,
    )
    return outdated
