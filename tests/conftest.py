"""Shared pytest fixtures for lockgraph tests.

This module provides common fixtures used across unit and contract tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import structlog

from lockgraph import LockfileConfig, PackageId, ResolvedGraph
from lockgraph.graph import DependencyEdge


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for lockgraph tests."""
    config.addinivalue_line(
        "markers",
        "requirement(id): link test to a lockfile requirement",
    )


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture(autouse=True)
def clear_lockgraph_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep file name overrides from the environment out of tests."""
    monkeypatch.delenv("LOCKGRAPH_LOCKFILE_NAME", raising=False)
    monkeypatch.delenv("LOCKGRAPH_MANIFEST_NAME", raising=False)


@pytest.fixture
def lockfile_config() -> LockfileConfig:
    """Return the default lockfile configuration."""
    return LockfileConfig()


@pytest.fixture
def project_dir(tmp_path: Path, lockfile_config: LockfileConfig) -> Path:
    """Return a project directory containing only a manifest."""
    lockfile_config.manifest_path(tmp_path).write_text("name: demo\n")
    return tmp_path


@pytest.fixture
def p1_p2_graph() -> ResolvedGraph:
    """Return P1 (dependencies not computed) and P2 depending on P1."""
    return {
        PackageId("P1", "1.0.0"): None,
        PackageId("P2", "2.0.0"): [DependencyEdge("P1", "1.0.0")],
    }


@pytest.fixture
def sample_graph() -> ResolvedGraph:
    """Return a small graph with shared and versioned dependencies."""
    return {
        PackageId("toml11", "3.7.1"): [],
        PackageId("fmt", "9.1.0"): None,
        PackageId("spdlog", "1.11.0"): [DependencyEdge("fmt", "9.1.0")],
        PackageId("app", "0.1.0"): [
            DependencyEdge("spdlog", "1.11.0"),
            DependencyEdge("fmt", "9.1.0"),
            DependencyEdge("toml11", "3.7.1"),
        ],
    }

