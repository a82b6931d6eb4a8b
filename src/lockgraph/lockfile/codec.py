"""Conversion between a ResolvedGraph and a LockfileDocument.

Both directions are lossy by construction:

- Dependency versions are dropped on encode. Decoded edges carry
  UNKNOWN_VERSION, so callers can tell them apart from resolver edges.
- The lockfile does not record whether dependencies were computed. A
  package whose edges are None encodes exactly like one with no
  dependencies, and an empty dependency list always decodes to None.
  Callers that need "computed, zero dependencies" must re-resolve.
"""

from __future__ import annotations

from lockgraph.errors import DuplicatePackageError
from lockgraph.graph import UNKNOWN_VERSION, DependencyEdge, PackageId, ResolvedGraph
from lockgraph.schemas.lockfile import LOCKFILE_VERSION, LockfileDocument, PackageEntry


def encode(graph: ResolvedGraph) -> LockfileDocument:
    """Build the lockfile document for a resolved graph.

    Packages are written in (name, version) order so that encoding the
    same graph always produces the same document, whatever the insertion
    order of the mapping. Dependency names keep the resolver's order.

    Args:
        graph: Resolved graph from the resolver.

    Returns:
        LockfileDocument at the current schema version.

    Example:
        >>> doc = encode({PackageId("P1", "1.0.0"): None})
        >>> doc.package[0].dependencies
        []
    """
    packages = [
        PackageEntry(
            name=package.name,
            version=package.version,
            dependencies=[edge.name for edge in edges or ()],
        )
        for package, edges in sorted(graph.items(), key=lambda item: item[0].sort_key())
    ]
    return LockfileDocument(version=LOCKFILE_VERSION, package=packages)


def decode(document: LockfileDocument) -> ResolvedGraph:
    """Rebuild a resolved graph from a lockfile document.

    Args:
        document: Parsed and version-checked lockfile document.

    Returns:
        ResolvedGraph in document order. Edges carry UNKNOWN_VERSION;
        packages without dependencies map to None.

    Raises:
        DuplicatePackageError: If the same (name, version) is listed twice.
    """
    graph: ResolvedGraph = {}
    for entry in document.package:
        package = PackageId(entry.name, entry.version)
        if package in graph:
            raise DuplicatePackageError(entry.name, entry.version)

        edges: list[DependencyEdge] | None = None
        if entry.dependencies:
            edges = [DependencyEdge(name, UNKNOWN_VERSION) for name in entry.dependencies]
        graph[package] = edges
    return graph
