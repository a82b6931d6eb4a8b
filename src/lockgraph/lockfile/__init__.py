"""Lockfile module for lockgraph.

This module exports the lockfile operations and their building blocks:
- LockfileManager: generate/overwrite/read for one configuration
- generate, overwrite, read: module-level shortcuts
- is_outdated: freshness check against the manifest
- encode, decode: graph <-> document conversion
- dumps, loads: document serialization
"""

from __future__ import annotations

from lockgraph.lockfile.codec import decode, encode
from lockgraph.lockfile.freshness import (
    is_outdated,
    lockfile_last_modified,
    manifest_last_modified,
)
from lockgraph.lockfile.gateway import (
    LOCKFILE_HEADER,
    LockfileManager,
    dumps,
    format_validation_error,
    generate,
    loads,
    overwrite,
    read,
)

__all__: list[str] = [
    # Persistence
    "LockfileManager",
    "generate",
    "overwrite",
    "read",
    "dumps",
    "loads",
    "format_validation_error",
    "LOCKFILE_HEADER",
    # Freshness
    "is_outdated",
    "lockfile_last_modified",
    "manifest_last_modified",
    # Conversion
    "encode",
    "decode",
]
