"""Lockfile location configuration.

File names default to ``lockgraph.lock`` and ``lockgraph.yaml`` and can be
overridden through environment variables. The project directory is never
part of the configuration; every lockfile operation receives it explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Environment variables for file name overrides
LOCKFILE_NAME_ENV_VAR = "LOCKGRAPH_LOCKFILE_NAME"
MANIFEST_NAME_ENV_VAR = "LOCKGRAPH_MANIFEST_NAME"

DEFAULT_LOCKFILE_NAME = "lockgraph.lock"
DEFAULT_MANIFEST_NAME = "lockgraph.yaml"


class LockfileConfig(BaseModel):
    """Names of the files the lockfile layer reads and writes.

    Attributes:
        lockfile_name: File name of the lockfile inside the project directory.
        manifest_name: File name of the manifest whose mtime gates freshness.
        encoding: Text encoding used to read and write the lockfile.

    Example:
        >>> config = LockfileConfig(lockfile_name="deps.lock")
        >>> config.lockfile_path(Path("/srv/app"))
        PosixPath('/srv/app/deps.lock')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    lockfile_name: str = Field(
        default=DEFAULT_LOCKFILE_NAME,
        min_length=1,
        description="Lockfile name relative to the project directory",
    )
    manifest_name: str = Field(
        default=DEFAULT_MANIFEST_NAME,
        min_length=1,
        description="Manifest name relative to the project directory",
    )
    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Lockfile text encoding",
    )

    @field_validator("lockfile_name", "manifest_name")
    @classmethod
    def _plain_file_name(cls, value: str) -> str:
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"must be a plain file name, got '{value}'")
        return value

    @classmethod
    def from_env(cls) -> LockfileConfig:
        """Build a config, applying overrides from the environment.

        Returns:
            LockfileConfig with LOCKGRAPH_LOCKFILE_NAME and
            LOCKGRAPH_MANIFEST_NAME applied when set.
        """
        overrides: dict[str, str] = {}
        lockfile_name = os.environ.get(LOCKFILE_NAME_ENV_VAR)
        if lockfile_name:
            overrides["lockfile_name"] = lockfile_name
        manifest_name = os.environ.get(MANIFEST_NAME_ENV_VAR)
        if manifest_name:
            overrides["manifest_name"] = manifest_name
        return cls(**overrides)

    def lockfile_path(self, project_dir: Path | str) -> Path:
        """Return the lockfile path for a project directory."""
        return Path(project_dir) / self.lockfile_name

    def manifest_path(self, project_dir: Path | str) -> Path:
        """Return the manifest path for a project directory."""
        return Path(project_dir) / self.manifest_name
