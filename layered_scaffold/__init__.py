"""layered-scaffold: boilerplate generator for layered Express.js APIs.

Stamps out entity modules (repository, DTOs, validators, service) and route
modules (controller, router) from a name, and delegates migrations to knex.

Quick usage::

    from layered_scaffold import EntityGenerator, GenerationRequest, ScaffoldConfig

    config = ScaffoldConfig(project_root=Path("my-api"))
    result = EntityGenerator(config).generate(GenerationRequest(module_name="subscribers"))
"""

__version__ = "0.1.0"

from layered_scaffold.config import ScaffoldConfig
from layered_scaffold.errors import ConflictError, MigrationError, ScaffoldError, UsageError
from layered_scaffold.generator import EntityGenerator, ModuleGenerator
from layered_scaffold.migration import MigrationRunner
from layered_scaffold.models import GenerationRequest, GenerationResult, RenderedFile
from layered_scaffold.templates import TemplateRenderer

__all__ = [
    "ConflictError",
    "EntityGenerator",
    "GenerationRequest",
    "GenerationResult",
    "MigrationError",
    "MigrationRunner",
    "ModuleGenerator",
    "RenderedFile",
    "ScaffoldConfig",
    "ScaffoldError",
    "TemplateRenderer",
    "UsageError",
    "__version__",
]
