"""Persisted lockfile document models.

Version History:
- v1: Package entries with name, version and dependency names.
  Dependency versions are not persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

LOCKFILE_VERSION = 1
"""The only lockfile schema version read and written."""


class PackageEntry(BaseModel):
    """One resolved package as written to the lockfile.

    Attributes:
        name: Package name, verbatim.
        version: Resolved package version, verbatim.
        dependencies: Names of direct dependencies, in resolver order.

    Example:
        >>> PackageEntry(name="P2", version="2.0.0", dependencies=["P1"])
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr = Field(..., description="Package name")
    version: StrictStr = Field(..., description="Resolved package version")
    dependencies: list[StrictStr] = Field(
        ...,
        description="Names of direct dependencies (versions are not recorded)",
    )


class LockfileDocument(BaseModel):
    """Top-level lockfile document.

    Attributes:
        version: Lockfile schema version.
        package: Resolved packages in deterministic order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: StrictInt = Field(
        default=LOCKFILE_VERSION,
        description="Lockfile schema version",
    )
    package: list[PackageEntry] = Field(
        ...,
        description="Resolved packages",
    )
