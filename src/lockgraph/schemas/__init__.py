"""Pydantic models of the persisted lockfile document."""

from __future__ import annotations

from lockgraph.schemas.lockfile import LOCKFILE_VERSION, LockfileDocument, PackageEntry

__all__: list[str] = [
    "LOCKFILE_VERSION",
    "LockfileDocument",
    "PackageEntry",
]
