"""Exceptions raised by the scaffold generator.

Library code raises these; the CLI catches :class:`ScaffoldError` once,
prints the message to stderr and exits with :attr:`ScaffoldError.exit_code`.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure that aborts a generator run."""

    exit_code: int = 1

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UsageError(ScaffoldError):
    """A required command-line argument is missing."""

    def __init__(self, message: str, usage: str = "", examples: list[str] | None = None) -> None:
        self.usage = usage
        self.examples = examples or []
        super().__init__(message)


class ConflictError(ScaffoldError):
    """The target directory already exists, so nothing was written."""

    def __init__(self, path: Path, kind: str = "Directory", name: str = "") -> None:
        self.path = Path(path)
        self.kind = kind
        self.name = name
        label = f'{kind} "{name}"' if name else kind
        super().__init__(f"{label} already exists at {self.path}")


class MigrationError(ScaffoldError):
    """The external migration generator could not be run or failed."""

    def __init__(self, message: str, command: str = "", returncode: int | None = None) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(message)
