"""Lockfile persistence for resolved dependency graphs.

This module owns every file operation on the lockfile:
- LockfileManager: generate/overwrite/read bound to one LockfileConfig
- dumps/loads: YAML serialization with schema-version gating
- Module-level generate/overwrite/read shortcuts using LockfileConfig.from_env()

Typical workflow:
    read(project_dir) before resolving, to reuse a previous resolution;
    generate(graph, project_dir) after resolving, to refresh a stale lockfile.

Nothing here serializes access across processes. Callers running several
workflows against one project directory must hold their own lock.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog
import yaml
from pydantic import ValidationError as PydanticValidationError

from lockgraph.config import LockfileConfig
from lockgraph.errors import FailedToReadLockfileError, InvalidLockfileVersionError
from lockgraph.lockfile.codec import decode, encode
from lockgraph.lockfile.freshness import is_outdated
from lockgraph.schemas.lockfile import LOCKFILE_VERSION, LockfileDocument

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

    from lockgraph.graph import ResolvedGraph

logger = structlog.get_logger(__name__)

LOCKFILE_HEADER = (
    "# This file is automatically generated by lockgraph.\n"
    "# It is not intended for manual editing.\n"
)


def dumps(graph: ResolvedGraph) -> str:
    """Serialize a resolved graph to lockfile text.

    The header is regenerated on every call. Output contains no volatile
    fields, so the same graph always serializes to the same text.

    Args:
        graph: Resolved graph from the resolver.

    Returns:
        Lockfile text (header followed by the YAML document).
    """
    document = encode(graph)
    body = yaml.safe_dump(
        document.model_dump(mode="python"),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    return LOCKFILE_HEADER + body


def loads(text: str, source: Path | None = None) -> LockfileDocument:
    """Parse lockfile text into a validated document.

    The schema version is checked before the rest of the document, so a
    lockfile written by another schema revision is reported as a version
    mismatch rather than a structural error.

    Args:
        text: Lockfile text.
        source: Path the text was read from, for error reporting.

    Returns:
        Validated LockfileDocument at LOCKFILE_VERSION.

    Raises:
        InvalidLockfileVersionError: If the integer version is not LOCKFILE_VERSION.
        FailedToReadLockfileError: If the text is not a well-formed lockfile.
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise FailedToReadLockfileError(
            _format_yaml_error(e),
            path=source,
            internal_details=str(e),
        ) from e

    if raw is None:
        raise FailedToReadLockfileError("lockfile is empty", path=source)
    if not isinstance(raw, dict):
        raise FailedToReadLockfileError(
            f"expected a mapping at the top level, got {type(raw).__name__}",
            path=source,
        )

    found = raw.get("version")
    if found is None:
        raise FailedToReadLockfileError("missing required field 'version'", path=source)
    if isinstance(found, bool) or not isinstance(found, int):
        raise FailedToReadLockfileError(
            f"field 'version' must be an integer, got {found!r}",
            path=source,
        )
    if found != LOCKFILE_VERSION:
        logger.warning(
            "lockfile_version_mismatch",
            found=found,
            supported=LOCKFILE_VERSION,
            path=str(source) if source else None,
        )
        raise InvalidLockfileVersionError(found, supported=LOCKFILE_VERSION)

    try:
        return LockfileDocument.model_validate(raw)
    except PydanticValidationError as e:
        raise FailedToReadLockfileError(
            format_validation_error(e),
            path=source,
            internal_details=str(e),
        ) from e


def format_validation_error(err: PydanticValidationError) -> str:
    """Format a pydantic validation error as one line per failing field.

    Example:
        >>> format_validation_error(err)
        "invalid lockfile document:\\n  - package.0.version: Input should be a valid string"
    """
    errors: list[ErrorDetails] = err.errors()
    lines = ["invalid lockfile document:"]
    for e in errors:
        loc = ".".join(str(x) for x in e["loc"]) or "<root>"
        lines.append(f"  - {loc}: {e['msg']}")
    return "\n".join(lines)


def _format_yaml_error(err: yaml.YAMLError) -> str:
    mark = getattr(err, "problem_mark", None)
    problem = getattr(err, "problem", None)
    if mark is not None and problem:
        return f"YAML syntax error at line {mark.line + 1}, column {mark.column + 1}: {problem}"
    return f"YAML syntax error: {err}"


class LockfileManager:
    """Read and write the lockfile of a project directory.

    The project directory is passed to every operation; the manager only
    holds the file name configuration.

    Attributes:
        config: File names and encoding used for every operation.

    Example:
        >>> manager = LockfileManager()
        >>> graph = manager.read(project_dir)
        >>> if graph is None:
        ...     graph = resolver.resolve(manifest)
        ...     manager.generate(graph, project_dir)
    """

    def __init__(self, config: LockfileConfig | None = None) -> None:
        """Initialize the LockfileManager.

        Args:
            config: File name configuration. Defaults to LockfileConfig.from_env().
        """
        self.config = config or LockfileConfig.from_env()

    def lockfile_path(self, project_dir: Path | str) -> Path:
        return self.config.lockfile_path(project_dir)

    def is_outdated(self, project_dir: Path | str) -> bool:
        """Whether the lockfile is missing or older than the manifest."""
        return is_outdated(project_dir, self.config)

    def generate(self, graph: ResolvedGraph, project_dir: Path | str) -> bool:
        """Write the lockfile if it is outdated.

        Args:
            graph: Resolved graph from the resolver run that just finished.
            project_dir: Project directory.

        Returns:
            True if the lockfile was written, False if it was already fresh.

        Raises:
            ManifestNotFoundError: If a lockfile exists but the manifest does not.
            OSError: If the lockfile cannot be written.
        """
        if not self.is_outdated(project_dir):
            logger.debug("lockfile_up_to_date", path=str(self.lockfile_path(project_dir)))
            return False
        self.overwrite(graph, project_dir)
        return True

    def overwrite(self, graph: ResolvedGraph, project_dir: Path | str) -> Path:
        """Write the lockfile unconditionally, replacing any previous content.

        The write is not atomic: an interrupted write can leave a truncated
        file, which a later read reports as FailedToReadLockfileError.

        Args:
            graph: Resolved graph to persist.
            project_dir: Project directory.

        Returns:
            Path of the written lockfile.

        Raises:
            OSError: If the lockfile cannot be written.
        """
        path = self.lockfile_path(project_dir)
        path.write_text(dumps(graph), encoding=self.config.encoding)
        logger.info("lockfile_written", path=str(path), packages=len(graph))
        return path

    def read(self, project_dir: Path | str) -> ResolvedGraph | None:
        """Load the resolved graph recorded in the lockfile.

        Args:
            project_dir: Project directory.

        Returns:
            The decoded graph, or None if the project has no lockfile.

        Raises:
            InvalidLockfileVersionError: If the lockfile has another schema version.
            FailedToReadLockfileError: If the lockfile is malformed, contains
                duplicate packages, or is not valid text in the configured encoding.
        """
        path = self.lockfile_path(project_dir)
        if not path.exists():
            logger.info("lockfile_not_found", path=str(path))
            return None

        try:
            text = path.read_text(encoding=self.config.encoding)
        except UnicodeDecodeError as e:
            raise FailedToReadLockfileError(
                f"lockfile is not valid {self.config.encoding} text",
                path=path,
                internal_details=str(e),
            ) from e

        try:
            graph = decode(loads(text, source=path))
        except FailedToReadLockfileError as e:
            if e.path is None:
                e.path = path
            logger.warning("lockfile_parse_failed", path=str(path), diagnostic=e.diagnostic)
            raise

        logger.info("lockfile_read", path=str(path), packages=len(graph))
        return graph


def generate(
    graph: ResolvedGraph,
    project_dir: Path | str,
    config: LockfileConfig | None = None,
) -> bool:
    """Write the project's lockfile if it is outdated. See LockfileManager.generate."""
    return LockfileManager(config).generate(graph, project_dir)


def overwrite(
    graph: ResolvedGraph,
    project_dir: Path | str,
    config: LockfileConfig | None = None,
) -> Path:
    """Write the project's lockfile unconditionally. See LockfileManager.overwrite."""
    return LockfileManager(config).overwrite(graph, project_dir)


def read(
    project_dir: Path | str,
    config: LockfileConfig | None = None,
) -> ResolvedGraph | None:
    """Read the project's lockfile. See LockfileManager.read."""
    return LockfileManager(config).read(project_dir)
