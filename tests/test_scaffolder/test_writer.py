"""Tests for the scaffold file writer (layered_scaffold.writer)."""

from __future__ import annotations

from pathlib import Path

import pytest

from layered_scaffold.errors import ConflictError
from layered_scaffold.models import RenderedFile
from layered_scaffold.writer import FileWriter


pytestmark = pytest.mark.unit


@pytest.fixture
def files() -> list[RenderedFile]:
    return [
        RenderedFile(path="orders.controller.js", content="controller\n"),
        RenderedFile(path="orders.routes.js", content="routes\n"),
    ]


class TestWrite:
    def test_creates_directory_recursively(self, tmp_path: Path, files):
        target = tmp_path / "src" / "routes" / "orders"
        written = FileWriter().write(target, files)
        assert target.is_dir()
        assert written == [target / "orders.controller.js", target / "orders.routes.js"]

    def test_content_written_verbatim(self, tmp_path: Path):
        target = tmp_path / "out"
        FileWriter().write(target, [RenderedFile(path="a.js", content="a\r\nb\n")])
        assert (target / "a.js").read_bytes() == b"a\r\nb\n"

    def test_nested_file_path(self, tmp_path: Path):
        target = tmp_path / "out"
        FileWriter().write(target, [RenderedFile(path="nested/a.js", content="x")])
        assert (target / "nested" / "a.js").read_text(encoding="utf-8") == "x"

    def test_empty_file_list_creates_directory(self, tmp_path: Path):
        target = tmp_path / "empty"
        assert FileWriter().write(target, []) == []
        assert target.is_dir()


class TestConflict:
    def test_existing_directory_rejected(self, tmp_path: Path, files):
        target = tmp_path / "orders"
        target.mkdir()
        with pytest.raises(ConflictError) as exc_info:
            FileWriter().write(target, files, kind="Module", name="orders")
        assert exc_info.value.path == target
        assert 'Module "orders" already exists' in str(exc_info.value)
        assert list(target.iterdir()) == []

    def test_existing_files_untouched(self, tmp_path: Path, files):
        target = tmp_path / "orders"
        target.mkdir()
        existing = target / "orders.controller.js"
        existing.write_text("hand edited\n", encoding="utf-8")

        with pytest.raises(ConflictError):
            FileWriter().write(target, files)

        assert existing.read_text(encoding="utf-8") == "hand edited\n"
        assert not (target / "orders.routes.js").exists()

    def test_existing_regular_file_rejected(self, tmp_path: Path, files):
        target = tmp_path / "orders"
        target.write_text("not a dir", encoding="utf-8")
        with pytest.raises(ConflictError):
            FileWriter().write(target, files)

    def test_default_message(self, tmp_path: Path):
        with pytest.raises(ConflictError, match="Directory already exists"):
            FileWriter().ensure_absent(tmp_path)
