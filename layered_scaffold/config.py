"""Scaffold generator configuration.

A single pydantic model holding the project root and the few knobs the
generator exposes.  The generated directory layout itself is fixed: entities
always land in ``src/entities/<name>/`` and route modules in
``src/routes/<name>/``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

SOURCE_DIR = "src"
ENTITIES_DIR = "entities"
ROUTES_DIR = "routes"
MIGRATIONS_DIR = "database/migrations"

_TRUTHY = {"1", "true", "yes", "on"}


class ScaffoldConfig(BaseModel):
    """Settings for one generator invocation.

    Instances are built by the CLI from environment variables and command
    line options, then handed to the generators and the migration runner.
    """

    project_root: Path = Field(default=Path("."), description="Root of the Express project")
    pascal_case: bool = Field(
        default=False,
        description="Fold hyphens/underscores into PascalCase identifiers",
    )
    knexfile: str = Field(
        default="src/config/knexfile.js",
        min_length=1,
        description="knexfile path passed to the migration generator",
    )
    npx: str = Field(default="npx", min_length=1, description="npx executable")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def source_path(self) -> Path:
        """The project's ``src/`` directory."""
        return self.project_root / SOURCE_DIR

    @property
    def entities_path(self) -> Path:
        return self.source_path / ENTITIES_DIR

    @property
    def routes_path(self) -> Path:
        return self.source_path / ROUTES_DIR

    @property
    def migrations_path(self) -> Path:
        """Where knex writes new migration files."""
        return self.source_path / MIGRATIONS_DIR

    def entity_dir(self, entity_name: str) -> Path:
        return self.entities_path / entity_name

    def module_dir(self, module_name: str) -> Path:
        return self.routes_path / module_name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_ROOT, SCAFFOLD_PASCAL_CASE, SCAFFOLD_KNEXFILE, SCAFFOLD_NPX.

        Keyword arguments whose value is not ``None`` take precedence over
        the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_ROOT"):
            kwargs["project_root"] = Path(os.environ["SCAFFOLD_ROOT"])
        if os.environ.get("SCAFFOLD_PASCAL_CASE"):
            kwargs["pascal_case"] = os.environ["SCAFFOLD_PASCAL_CASE"].strip().lower() in _TRUTHY
        if os.environ.get("SCAFFOLD_KNEXFILE"):
            kwargs["knexfile"] = os.environ["SCAFFOLD_KNEXFILE"]
        if os.environ.get("SCAFFOLD_NPX"):
            kwargs["npx"] = os.environ["SCAFFOLD_NPX"]

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
