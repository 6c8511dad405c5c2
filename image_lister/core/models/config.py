"""
Images config model — what goes into the generated Elm module.

Loaded from images.yml when one exists.  The defaults describe the
project's own asset layout, so running without a config file produces
``src/Images.elm`` with the ``enteriorok`` and ``latvanytervek`` lists.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

_MODULE_NAME_RE = re.compile(r"^[A-Z][A-Za-z0-9_]*(\.[A-Z][A-Za-z0-9_]*)*$")
_VALUE_NAME_RE = re.compile(r"^[a-z][A-Za-z0-9_]*$")

# Reserved words the Elm parser refuses as value names
_ELM_KEYWORDS = frozenset({
    "if", "then", "else", "case", "of", "let", "in", "type", "module",
    "where", "import", "exposing", "as", "port",
})


class ImageBinding(BaseModel):
    """One top-level list in the generated module.

    ``pattern`` is a glob relative to the base directory; every match
    becomes one string in the list bound to ``name``.
    """

    name: str
    pattern: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not _VALUE_NAME_RE.match(value):
            raise ValueError(f"not a valid Elm value name: {value!r}")
        if value in _ELM_KEYWORDS:
            raise ValueError(f"Elm keyword cannot be a binding name: {value!r}")
        return value


def _default_bindings() -> list[ImageBinding]:
    return [
        ImageBinding(name="enteriorok", pattern="assets/enteriorok/*"),
        ImageBinding(name="latvanytervek", pattern="assets/latvanytervek/*"),
    ]


class ImagesConfig(BaseModel):
    """Root generator config."""

    module: str = "Images"
    output: str = "src/Images.elm"
    bindings: list[ImageBinding] = Field(default_factory=_default_bindings)

    @field_validator("module")
    @classmethod
    def _check_module(cls, value: str) -> str:
        if not _MODULE_NAME_RE.match(value):
            raise ValueError(f"not a valid Elm module name: {value!r}")
        return value

    @field_validator("bindings", mode="before")
    @classmethod
    def _bindings_from_mapping(cls, value: Any) -> Any:
        # name: pattern shorthand, insertion order kept
        if isinstance(value, dict):
            return [{"name": k, "pattern": v} for k, v in value.items()]
        return value

    @model_validator(mode="after")
    def _check_bindings(self) -> ImagesConfig:
        if not self.bindings:
            raise ValueError("at least one binding is required")
        names = [b.name for b in self.bindings]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"duplicate binding names: {', '.join(dupes)}")
        return self
