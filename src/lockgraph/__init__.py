"""lockgraph: Lockfile persistence for resolved dependency graphs.

This package provides:
- LockfileManager: Read, write and refresh a project's lockfile
- is_outdated: Lockfile freshness check against the manifest
- encode/decode: ResolvedGraph <-> LockfileDocument conversion
- PackageId, DependencyEdge, ResolvedGraph: Resolver graph types
"""

from __future__ import annotations

__version__ = "0.1.0"

# Configuration
from lockgraph.config import (
    DEFAULT_LOCKFILE_NAME,
    DEFAULT_MANIFEST_NAME,
    LockfileConfig,
)

# Error types
from lockgraph.errors import (
    DuplicatePackageError,
    FailedToReadLockfileError,
    InvalidLockfileVersionError,
    LockgraphError,
    ManifestNotFoundError,
)

# Graph types
from lockgraph.graph import (
    UNKNOWN_VERSION,
    DependencyEdge,
    PackageId,
    ResolvedGraph,
)

# Lockfile operations
from lockgraph.lockfile import (
    LockfileManager,
    decode,
    dumps,
    encode,
    generate,
    is_outdated,
    loads,
    overwrite,
    read,
)

# Persisted document models
from lockgraph.schemas import LOCKFILE_VERSION, LockfileDocument, PackageEntry

__all__ = [
    "__version__",
    # Configuration
    "LockfileConfig",
    "DEFAULT_LOCKFILE_NAME",
    "DEFAULT_MANIFEST_NAME",
    # Errors
    "LockgraphError",
    "InvalidLockfileVersionError",
    "FailedToReadLockfileError",
    "DuplicatePackageError",
    "ManifestNotFoundError",
    # Graph types
    "PackageId",
    "DependencyEdge",
    "ResolvedGraph",
    "UNKNOWN_VERSION",
    # Lockfile operations
    "LockfileManager",
    "generate",
    "overwrite",
    "read",
    "is_outdated",
    "encode",
    "decode",
    "dumps",
    "loads",
    # Document models
    "LOCKFILE_VERSION",
    "LockfileDocument",
    "PackageEntry",
]
