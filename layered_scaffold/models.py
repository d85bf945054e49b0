"""Pydantic v2 models passed between the generator stages."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ScaffoldKind(str, Enum):
    """Which template set a generation run uses."""

    ENTITY = "entity"
    MODULE = "module"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class GenerationRequest(BaseModel):
    """Names for one generation run.

    ``entity_name`` falls back to ``module_name`` when it is not supplied, so
    ``GenerationRequest(module_name="subscribers")`` describes both the
    ``subscribers`` route module and the ``subscribers`` entity.
    """

    model_config = {"frozen": True}

    module_name: str = Field(..., min_length=1)
    entity_name: str = Field(default="", description="Defaults to module_name")

    @model_validator(mode="before")
    @classmethod
    def _default_entity_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("entity_name"):
            data = {**data, "entity_name": data.get("module_name", "")}
        return data


class RenderedFile(BaseModel):
    """One rendered template, ready to be written below a target directory."""

    path: str = Field(..., min_length=1, description="File name relative to the target directory")
    content: str


class GenerationResult(BaseModel):
    """What a successful generation run wrote (or would write, on dry runs)."""

    kind: ScaffoldKind
    name: str
    directory: Path
    files: list[RenderedFile] = Field(default_factory=list)
    dry_run: bool = False

    @property
    def file_names(self) -> list[str]:
        return [f.path for f in self.files]

    @property
    def paths(self) -> list[Path]:
        return [self.directory / f.path for f in self.files]
