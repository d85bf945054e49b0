"""
layered-scaffold: CLI entrypoint.

Usage:
    layered-scaffold generate-entity subscribers
    layered-scaffold generate-module categories job-categories
    layered-scaffold generate-migration create_subscribers_table
"""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import ScaffoldConfig
from .errors import ScaffoldError, UsageError
from .generator import API_PREFIX, EntityGenerator, ModuleGenerator
from .migration import MigrationRunner
from .models import GenerationRequest, GenerationResult
from .naming import NameSet
from .templates import TemplateRenderer

PROG_NAME = "layered-scaffold"

console = Console(soft_wrap=True, emoji=False, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)


def _handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Print a :class:`ScaffoldError` to stderr and exit with its code."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except UsageError as exc:
            err_console.print(f"[red]Error: {escape(exc.message)}[/red]")
            if exc.usage:
                err_console.print(f"Usage: {escape(exc.usage)}")
            for example in exc.examples:
                err_console.print(f"Example: {escape(example)}")
            sys.exit(exc.exit_code)
        except ScaffoldError as exc:
            err_console.print(f"[red]Error: {escape(exc.message)}[/red]")
            sys.exit(exc.exit_code)

    return wrapper


@click.group()
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.option(
    "--root",
    "-C",
    "project_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Express project root (default: $SCAFFOLD_ROOT or the current directory).",
)
@click.option(
    "--pascal-case",
    is_flag=True,
    help="Fold hyphenated names into camelCase/PascalCase identifiers.",
)
@click.option("--quiet", "-q", is_flag=True, help="Suppress next-step hints.")
@click.pass_context
def cli(ctx: click.Context, project_root: Path | None, pascal_case: bool, quiet: bool) -> None:
    """Scaffold entities, route modules and migrations for a layered Express API."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = ScaffoldConfig.from_env(
        project_root=project_root,
        pascal_case=True if pascal_case else None,
    )
    ctx.obj["quiet"] = quiet


# ---------------------------------------------------------------------------
# generate-entity
# ---------------------------------------------------------------------------


@cli.command("generate-entity")
@click.argument("entity_name", required=False)
@click.option("--dry-run", is_flag=True, help="Show the files without writing them.")
@click.pass_context
@_handle_errors
def generate_entity(ctx: click.Context, entity_name: str | None, dry_run: bool) -> None:
    """Create src/entities/<entity-name>/ with repository, DTOs, validators and service."""
    if not entity_name:
        raise UsageError(
            "Entity name is required",
            usage=f"{PROG_NAME} generate-entity <entity-name>",
            examples=[f"{PROG_NAME} generate-entity subscribers"],
        )

    config: ScaffoldConfig = ctx.obj["config"]
    result = EntityGenerator(config).generate(
        GenerationRequest(module_name=entity_name, entity_name=entity_name),
        dry_run=dry_run,
    )
    _report_files(result)
    if not ctx.obj["quiet"] and not dry_run:
        name = result.name
        _print_next_steps([
            f"Create a migration: {PROG_NAME} generate-migration create_{name}_table",
            f"Update the DTO mapping in {name}.dtos.js",
            f"Add validation rules in {name}.validators.js",
            f"Implement business logic in {name}.service.js",
            f"Create routes module: {PROG_NAME} generate-module {name}",
        ])


# ---------------------------------------------------------------------------
# generate-module
# ---------------------------------------------------------------------------


@cli.command("generate-module")
@click.argument("module_name", required=False)
@click.argument("entity_name", required=False)
@click.option("--dry-run", is_flag=True, help="Show the files without writing them.")
@click.pass_context
@_handle_errors
def generate_module(
    ctx: click.Context,
    module_name: str | None,
    entity_name: str | None,
    dry_run: bool,
) -> None:
    """Create src/routes/<module-name>/ with a controller and router.

    ENTITY_NAME defaults to MODULE_NAME.
    """
    if not module_name:
        raise UsageError(
            "Module name is required",
            usage=f"{PROG_NAME} generate-module <module-name> [entity-name]",
            examples=[
                f"{PROG_NAME} generate-module subscribers",
                f"{PROG_NAME} generate-module categories job-categories",
            ],
        )

    config: ScaffoldConfig = ctx.obj["config"]
    result = ModuleGenerator(config).generate(
        GenerationRequest(module_name=module_name, entity_name=entity_name or module_name),
        dry_run=dry_run,
    )
    _report_files(result)
    if not ctx.obj["quiet"] and not dry_run:
        names = NameSet.from_name(result.name, pascal=config.pascal_case)
        _print_next_steps([
            "Register routes in src/app.js:\n"
            f"     const {names.ident}Routes = require('./routes/{names.name}/{names.name}.routes');\n"
            f"     app.use('{API_PREFIX}/{names.name}', {names.ident}Routes);",
            "Test your endpoints",
        ])


# ---------------------------------------------------------------------------
# generate-migration
# ---------------------------------------------------------------------------


@cli.command("generate-migration")
@click.argument("migration_name", required=False)
@click.pass_context
@_handle_errors
def generate_migration(ctx: click.Context, migration_name: str | None) -> None:
    """Create a knex migration file via `npx knex migrate:make`."""
    if not migration_name:
        raise UsageError(
            "Migration name is required",
            usage=f"{PROG_NAME} generate-migration <migration-name>",
            examples=[f"{PROG_NAME} generate-migration create_users_table"],
        )

    config: ScaffoldConfig = ctx.obj["config"]
    MigrationRunner(config).run(migration_name)

    console.print("\n[green]Migration created successfully[/green]")
    if not ctx.obj["quiet"]:
        _print_next_steps([
            f"Edit the migration file in {config.migrations_path.as_posix()}/",
            "Run migrations: npm run db:migrate",
        ])


# ---------------------------------------------------------------------------
# templates
# ---------------------------------------------------------------------------


@cli.command("templates")
def list_templates() -> None:
    """List the bundled template files."""
    for template in TemplateRenderer().list_templates():
        click.echo(template)


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _report_files(result: GenerationResult) -> None:
    label = result.kind.label
    name = escape(result.name)
    directory = escape(str(result.directory))
    if result.dry_run:
        console.print(f'[yellow]Dry run:[/yellow] {label} "{name}" would be created at {directory}')
        console.print("\nFiles to create:")
    else:
        console.print(f'[green]{label} "{name}" created successfully[/green] at {directory}')
        console.print("\nFiles created:")
    for file_name in result.file_names:
        console.print(f"  - {escape(file_name)}")


def _print_next_steps(steps: list[str]) -> None:
    console.print("\n[bold]Next steps:[/bold]")
    for index, step in enumerate(steps, start=1):
        console.print(f"  {index}. {escape(step)}")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
