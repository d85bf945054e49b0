"""Entity and route-module scaffold generators.

Each generator turns a :class:`GenerationRequest` into a fixed set of
:class:`RenderedFile` values by rendering its template set, then hands them
to the :class:`FileWriter`::

    from layered_scaffold.config import ScaffoldConfig
    from layered_scaffold.generator import EntityGenerator
    from layered_scaffold.models import GenerationRequest

    gen = EntityGenerator(ScaffoldConfig(project_root=Path("my-api")))
    result = gen.generate(GenerationRequest(module_name="subscribers"))
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .config import ScaffoldConfig
from .models import GenerationRequest, GenerationResult, RenderedFile, ScaffoldKind
from .naming import NameSet
from .templates import TemplateRenderer
from .writer import FileWriter

API_PREFIX = "/api/v1"
ID_PREFIX_LENGTH = 3


class ScaffoldGenerator:
    """Shared render-then-write flow for one template set.

    Subclasses set :attr:`kind` and :attr:`TEMPLATES` (template path to
    output file suffix) and implement :meth:`target_name` and
    :meth:`build_context`.
    """

    kind: ScaffoldKind
    TEMPLATES: dict[str, str] = {}

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        renderer: TemplateRenderer | None = None,
        writer: FileWriter | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = renderer or TemplateRenderer()
        self.writer = writer or FileWriter()

    # -- Hooks -------------------------------------------------------------

    def target_name(self, request: GenerationRequest) -> str:
        raise NotImplementedError

    def target_dir(self, request: GenerationRequest) -> Path:
        raise NotImplementedError

    def build_context(self, request: GenerationRequest) -> dict[str, Any]:
        raise NotImplementedError

    # -- Public API --------------------------------------------------------

    def render(self, request: GenerationRequest) -> list[RenderedFile]:
        """Render every template of the set in memory, in a fixed order."""
        context = self.build_context(request)
        name = self.target_name(request)
        return [
            RenderedFile(
                path=f"{name}.{suffix}",
                content=self.renderer.render(template, context),
            )
            for template, suffix in self.TEMPLATES.items()
        ]

    def generate(self, request: GenerationRequest, *, dry_run: bool = False) -> GenerationResult:
        """Render the template set and write it into a new directory.

        With ``dry_run=True`` the conflict check still runs but nothing is
        created on disk.

        Raises:
            ConflictError: If the target directory already exists.
        """
        directory = self.target_dir(request)
        name = self.target_name(request)
        files = self.render(request)

        if dry_run:
            self.writer.ensure_absent(directory, kind=self.kind.label, name=name)
        else:
            self.writer.write(directory, files, kind=self.kind.label, name=name)

        return GenerationResult(
            kind=self.kind,
            name=name,
            directory=directory,
            files=files,
            dry_run=dry_run,
        )

    # -- Helpers -----------------------------------------------------------

    def _names(self, name: str) -> NameSet:
        return NameSet.from_name(name, pascal=self.config.pascal_case)


class EntityGenerator(ScaffoldGenerator):
    """Generates ``src/entities/<entity>/`` with repository, DTOs, validators and service."""

    kind = ScaffoldKind.ENTITY
    TEMPLATES = {
        "entity/repository.js.j2": "repository.js",
        "entity/dtos.js.j2": "dtos.js",
        "entity/validators.js.j2": "validators.js",
        "entity/service.js.j2": "service.js",
    }

    def target_name(self, request: GenerationRequest) -> str:
        return request.entity_name

    def target_dir(self, request: GenerationRequest) -> Path:
        return self.config.entity_dir(request.entity_name)

    def build_context(self, request: GenerationRequest) -> dict[str, Any]:
        entity = self._names(request.entity_name)
        return {
            "entity": entity,
            "table_name": entity.name,
            "id_prefix": entity.name[:ID_PREFIX_LENGTH],
        }


class ModuleGenerator(ScaffoldGenerator):
    """Generates ``src/routes/<module>/`` with a controller and an Express router.

    The module and the entity it wires to may have different names, e.g.
    module ``categories`` backed by entity ``job-categories``.
    """

    kind = ScaffoldKind.MODULE
    TEMPLATES = {
        "module/controller.js.j2": "controller.js",
        "module/routes.js.j2": "routes.js",
    }

    def target_name(self, request: GenerationRequest) -> str:
        return request.module_name

    def target_dir(self, request: GenerationRequest) -> Path:
        return self.config.module_dir(request.module_name)

    def build_context(self, request: GenerationRequest) -> dict[str, Any]:
        return {
            "module": self._names(request.module_name),
            "entity": self._names(request.entity_name),
            "api_prefix": API_PREFIX,
        }
