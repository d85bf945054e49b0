"""Write rendered scaffold files into a fresh directory.

The writer refuses to touch a directory that already exists, so re-running a
generator never overwrites earlier (possibly hand-edited) output.  Writes are
sequential and there is no rollback: if a later write fails, files written
before it stay on disk.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import ConflictError
from .models import RenderedFile


class FileWriter:
    """Creates a target directory and writes :class:`RenderedFile` values into it."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def ensure_absent(self, directory: Path, *, kind: str = "Directory", name: str = "") -> None:
        """Raise :class:`ConflictError` if *directory* already exists."""
        if directory.exists():
            raise ConflictError(directory, kind=kind, name=name)

    def write(
        self,
        directory: str | Path,
        files: Iterable[RenderedFile],
        *,
        kind: str = "Directory",
        name: str = "",
    ) -> list[Path]:
        """Create *directory* and write every file into it.

        Args:
            directory: Target directory.  Must not exist yet.
            files: Rendered files; each ``path`` is relative to *directory*.
            kind: Label used in the conflict message (``"Entity"``, ``"Module"``).
            name: Name used in the conflict message.

        Returns:
            The written file paths, in order.

        Raises:
            ConflictError: If *directory* already exists.  Nothing is written.
        """
        target = Path(directory)
        self.ensure_absent(target, kind=kind, name=name)
        target.mkdir(parents=True)

        written: list[Path] = []
        for rendered in files:
            out = target / rendered.path
            _write_file(out, rendered.content, self.encoding)
            written.append(out)
        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str, encoding: str) -> None:
    """Create parent dirs and write content verbatim (no newline translation)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=encoding, newline="") as fh:
        fh.write(content)
