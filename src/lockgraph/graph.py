"""In-memory resolved dependency graph types.

The resolver produces and consumes a ResolvedGraph: a mapping from each
resolved package to its dependency edges. A value of None means the
dependency information was not computed for that package; an empty list
means it was computed and the package has no dependencies.
"""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_VERSION = ""
"""Edge version restored for dependencies read back from a lockfile."""


class PackageId(BaseModel):
    """Identity of a resolved package.

    Name and version are opaque strings, stored and compared verbatim.
    Instances are hashable and order by (name, version).

    Example:
        >>> PackageId(name="fmt", version="9.1.0")
        PackageId(name='fmt', version='9.1.0')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Package name")
    version: str = Field(..., description="Resolved package version")

    def __init__(self, name: str, version: str) -> None:
        super().__init__(name=name, version=version)

    def sort_key(self) -> tuple[str, str]:
        """Return the (name, version) tuple used for ordering."""
        return (self.name, self.version)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PackageId):
            return NotImplemented
        return self.sort_key() < other.sort_key()


class DependencyEdge(BaseModel):
    """Reference from one package to another.

    Edges read back from a lockfile carry UNKNOWN_VERSION, since the
    lockfile only records dependency names.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Dependency package name")
    version: str = Field(
        default=UNKNOWN_VERSION,
        description="Dependency version, empty when not recorded",
    )

    def __init__(self, name: str, version: str = UNKNOWN_VERSION) -> None:
        super().__init__(name=name, version=version)

    @property
    def has_known_version(self) -> bool:
        """Whether this edge carries a real version rather than the placeholder."""
        return self.version != UNKNOWN_VERSION


ResolvedGraph: TypeAlias = dict[PackageId, list[DependencyEdge] | None]
