"""Contract tests for the on-disk lockfile format.

Lockfiles are shared between runs and between versions of lockgraph.
Any change to these expectations requires a LOCKFILE_VERSION bump.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lockgraph import (
    LOCKFILE_VERSION,
    DependencyEdge,
    LockfileConfig,
    LockfileManager,
    PackageId,
    ResolvedGraph,
    dumps,
)

EXPECTED_P1_P2_LOCKFILE = """\
# This file is automatically generated by lockgraph.
# It is not intended for manual editing.
version: 1
package:
- name: P1
  version: 1.0.0
  dependencies: []
- name: P2
  version: 2.0.0
  dependencies:
  - P1
"""


class TestLockfileFormatContract:
    """Tests pinning the persisted lockfile shape."""

    def test_supported_version(self) -> None:
        """The only supported schema version is 1."""
        assert LOCKFILE_VERSION == 1

    @pytest.mark.requirement("LOCK-FR-010")
    def test_p1_p2_text(self, p1_p2_graph: ResolvedGraph) -> None:
        """P1/P2 graph serializes to the pinned text."""
        assert dumps(p1_p2_graph) == EXPECTED_P1_P2_LOCKFILE

    def test_default_file_names(self) -> None:
        """Default file names are part of the contract."""
        config = LockfileConfig()
        assert config.lockfile_name == "lockgraph.lock"
        assert config.manifest_name == "lockgraph.yaml"

    def test_reads_pinned_text(self, project_dir: Path) -> None:
        """A lockfile in the pinned format reads back."""
        (project_dir / "lockgraph.lock").write_text(EXPECTED_P1_P2_LOCKFILE)

        graph = LockfileManager(LockfileConfig()).read(project_dir)

        assert graph == {
            PackageId("P1", "1.0.0"): None,
            PackageId("P2", "2.0.0"): [DependencyEdge("P1", "")],
        }

