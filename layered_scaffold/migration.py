"""Knex migration generation.

Migrations are not templated here: the runner shells out to
``npx knex migrate:make`` and lets knex create the timestamped file.
"""

from __future__ import annotations

import shlex
import subprocess

from rich.console import Console
from rich.markup import escape

from .config import ScaffoldConfig
from .errors import MigrationError

console = Console(soft_wrap=True, emoji=False, highlight=False)


class MigrationRunner:
    """Runs the external knex migration generator in the project root."""

    def __init__(self, config: ScaffoldConfig | None = None) -> None:
        self.config = config or ScaffoldConfig()

    def build_command(self, migration_name: str) -> list[str]:
        """Return the argv used to create *migration_name*."""
        return [
            self.config.npx,
            "knex",
            "migrate:make",
            migration_name,
            "--knexfile",
            self.config.knexfile,
        ]

    def run(self, migration_name: str) -> list[str]:
        """Create a migration named *migration_name*.

        The child inherits stdin/stdout/stderr so knex's own output reaches
        the terminal unchanged.

        Returns:
            The argv that was executed.

        Raises:
            MigrationError: If the executable is missing or exits non-zero.
        """
        cmd = self.build_command(migration_name)
        cmd_str = shlex.join(cmd)
        console.print(f"Running: [bold]{escape(cmd_str)}[/bold]")

        try:
            completed = subprocess.run(cmd, cwd=str(self.config.project_root), check=False)
        except OSError as exc:
            raise MigrationError(
                f"Could not run {cmd[0]}: {exc}",
                command=cmd_str,
            ) from exc

        if completed.returncode != 0:
            raise MigrationError(
                f"Command failed (exit {completed.returncode}): {cmd_str}",
                command=cmd_str,
                returncode=completed.returncode,
            )
        return cmd
