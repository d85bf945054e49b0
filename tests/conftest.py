"""Shared pytest fixtures for the layered-scaffold test suite.

Provides reusable fixtures for:
- A temporary Express project root
- Scaffold configuration pointing at it
- Click's CliRunner
- Isolation from SCAFFOLD_* environment variables
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from layered_scaffold.config import ScaffoldConfig
from layered_scaffold.models import GenerationRequest


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure a developer's SCAFFOLD_* variables never leak into tests."""
    for var in ("SCAFFOLD_ROOT", "SCAFFOLD_PASCAL_CASE", "SCAFFOLD_KNEXFILE", "SCAFFOLD_NPX"):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary Express project directory (auto-cleanup)."""
    root = tmp_path / "my-api"
    root.mkdir()
    yield root


@pytest.fixture
def config(project_root: Path) -> ScaffoldConfig:
    """Literal-mode configuration rooted at ``project_root``."""
    return ScaffoldConfig(project_root=project_root)


@pytest.fixture
def pascal_config(project_root: Path) -> ScaffoldConfig:
    """PascalCase-mode configuration rooted at ``project_root``."""
    return ScaffoldConfig(project_root=project_root, pascal_case=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@pytest.fixture
def subscribers_request() -> GenerationRequest:
    return GenerationRequest(module_name="subscribers")


@pytest.fixture
def categories_request() -> GenerationRequest:
    """Module and entity with different names."""
    return GenerationRequest(module_name="categories", entity_name="job-categories")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def read_tree(directory: Path) -> dict[str, bytes]:
    """Snapshot every file below *directory* as ``{relative_path: bytes}``."""
    return {
        p.relative_to(directory).as_posix(): p.read_bytes()
        for p in sorted(directory.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def snapshot():
    """Expose :func:`read_tree` to tests without importing conftest."""
    return read_tree
