"""Name transformations used by the scaffold templates.

Entity and module names arrive as raw CLI strings such as ``subscribers`` or
``job-categories``.  The raw name is always kept for file paths, table names
and string literals; the helpers here derive the JavaScript identifier stems
that get spliced into function and variable names.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Case helpers
# ---------------------------------------------------------------------------


def capitalize(value: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    Unlike :meth:`str.capitalize` the remainder is not lowercased, and
    separators are kept as-is: ``job-categories`` becomes ``Job-categories``.
    """
    if not value:
        return ""
    return value[0].upper() + value[1:]


def pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(capitalize(word) for word in parts if word)


def camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


# ---------------------------------------------------------------------------
# NameSet
# ---------------------------------------------------------------------------


class NameSet(BaseModel):
    """The three spellings of a name that the templates need."""

    model_config = {"frozen": True}

    name: str = Field(..., min_length=1, description="Raw name used for paths and literals")
    ident: str = Field(..., min_length=1, description="Lower-first JS identifier stem")
    capitalized: str = Field(..., min_length=1, description="Upper-first JS identifier stem")

    @classmethod
    def from_name(cls, name: str, *, pascal: bool = False) -> "NameSet":
        """Derive identifier stems from *name*.

        In the default literal mode the raw name is used verbatim as the
        identifier stem and only its first letter is uppercased.  With
        ``pascal=True`` separators are folded away instead, so
        ``job-categories`` yields ``jobCategories`` / ``JobCategories``.
        A name made only of separators has nothing to fold and keeps the
        literal stems.
        """
        if pascal and camel_case(name):
            return cls(name=name, ident=camel_case(name), capitalized=pascal_case(name))
        return cls(name=name, ident=name, capitalized=capitalize(name))
