"""
Elm images generator — list asset files as Elm list literals.

Produces a module of the form::

    module Images exposing (..)

    enteriorok =
        [ "assets/enteriorok/a.jpg"
        , "assets/enteriorok/b.jpg"
        ]

Paths are quoted verbatim; nothing is escaped.
"""

from __future__ import annotations

import glob
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from image_lister.core.models.config import ImagesConfig
from image_lister.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)

_INDENT = "    "
_OPEN = _INDENT + "[ "
_SEPARATOR = "\n" + _INDENT + ", "
_CLOSE = "\n" + _INDENT + "]"

# Rendering of a pattern with no matches
EMPTY_LIST = _INDENT + "[]"


def format_list(paths: Iterable[str]) -> str:
    """Render paths as an Elm list literal, one element per line.

    An empty input gives ``EMPTY_LIST``.
    """
    literals = []
    for path in paths:
        if '"' in path or "\\" in path:
            logger.warning("Path needs escaping, generated Elm will not compile: %s", path)
        literals.append(f'"{path}"')

    if not literals:
        return EMPTY_LIST
    return _OPEN + _SEPARATOR.join(literals) + _CLOSE


def list_matches(pattern: str, base_dir: Path | None = None) -> list[str]:
    """Expand a glob pattern relative to ``base_dir`` (cwd if None).

    Returned paths keep the pattern's own prefix, e.g.
    ``assets/enteriorok/*`` gives ``assets/enteriorok/a.jpg``, with
    ``/`` separators on every platform.  A missing directory yields no
    matches.
    """
    root_dir = str(base_dir) if base_dir is not None else None
    found = glob.glob(pattern, root_dir=root_dir, recursive=True)
    matches = sorted(Path(m).as_posix() for m in found)
    logger.debug("%s: %d matches", pattern, len(matches))
    return matches


def render_list(pattern: str, base_dir: Path | None = None) -> str:
    """Glob ``pattern`` and render the matches as an Elm list literal."""
    return format_list(list_matches(pattern, base_dir))


def render_module(module_name: str, bindings: Sequence[tuple[str, str]]) -> str:
    """Compose the module header and ``(name, rendered_list)`` bindings."""
    parts = [f"module {module_name} exposing (..)\n\n"]
    for name, rendered in bindings:
        parts.append(f"{name} =\n{rendered}\n\n")
    return "".join(parts)


def build_images_module(config: ImagesConfig, base_dir: Path | None = None) -> GeneratedFile:
    """Render the whole images module described by ``config``.

    Args:
        config: Module name, output path and bindings.
        base_dir: Directory the binding patterns are relative to.

    Returns:
        GeneratedFile targeting ``config.output``.
    """
    rendered = [(b.name, render_list(b.pattern, base_dir)) for b in config.bindings]
    return GeneratedFile(
        path=config.output,
        content=render_module(config.module, rendered),
        reason=f"Image lists for {', '.join(b.name for b in config.bindings)}",
    )
