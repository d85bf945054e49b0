"""Unit tests for ScaffoldConfig (layered_scaffold.config).

Tests cover:
- Defaults and derived paths
- from_env with and without overrides
- Validation of string settings
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from layered_scaffold.config import ScaffoldConfig


pytestmark = pytest.mark.unit


class TestDefaults:
    def test_default_values(self):
        config = ScaffoldConfig()
        assert config.project_root == Path(".")
        assert config.pascal_case is False
        assert config.knexfile == "src/config/knexfile.js"
        assert config.npx == "npx"

    def test_relative_layout(self):
        config = ScaffoldConfig()
        assert config.source_path == Path("src")
        assert config.entities_path == Path("src/entities")
        assert config.routes_path == Path("src/routes")
        assert config.migrations_path == Path("src/database/migrations")

    def test_entity_and_module_dirs(self, tmp_path: Path):
        config = ScaffoldConfig(project_root=tmp_path)
        assert config.entity_dir("subscribers") == tmp_path / "src" / "entities" / "subscribers"
        assert config.module_dir("categories") == tmp_path / "src" / "routes" / "categories"

    def test_empty_knexfile_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(knexfile="")

    def test_empty_npx_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(npx="")


class TestFromEnv:
    def test_no_env_gives_defaults(self):
        assert ScaffoldConfig.from_env() == ScaffoldConfig()

    def test_reads_all_variables(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SCAFFOLD_ROOT", str(tmp_path))
        monkeypatch.setenv("SCAFFOLD_PASCAL_CASE", "true")
        monkeypatch.setenv("SCAFFOLD_KNEXFILE", "knexfile.js")
        monkeypatch.setenv("SCAFFOLD_NPX", "/usr/local/bin/npx")

        config = ScaffoldConfig.from_env()
        assert config.project_root == tmp_path
        assert config.pascal_case is True
        assert config.knexfile == "knexfile.js"
        assert config.npx == "/usr/local/bin/npx"

    @pytest.mark.parametrize("value", ["0", "false", "no", "off"])
    def test_falsy_pascal_case(self, monkeypatch, value):
        monkeypatch.setenv("SCAFFOLD_PASCAL_CASE", value)
        assert ScaffoldConfig.from_env().pascal_case is False

    def test_overrides_beat_environment(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SCAFFOLD_ROOT", "/somewhere/else")
        config = ScaffoldConfig.from_env(project_root=tmp_path)
        assert config.project_root == tmp_path

    def test_none_overrides_ignored(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SCAFFOLD_ROOT", str(tmp_path))
        config = ScaffoldConfig.from_env(project_root=None, pascal_case=None)
        assert config.project_root == tmp_path
        assert config.pascal_case is False
