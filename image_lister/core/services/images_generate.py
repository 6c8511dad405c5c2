"""
Images generation — render the images module and write it to disk.

The write always replaces the existing file.  Write failures are not
handled here; a missing output directory or a permission problem
surfaces as the underlying ``OSError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from image_lister.core.models.config import ImagesConfig
from image_lister.core.models.template import GeneratedFile
from image_lister.core.services.generators.elm_images import build_images_module

logger = logging.getLogger(__name__)


def write_generated_file(base_dir: Path, file: GeneratedFile) -> Path:
    """Write a GeneratedFile, truncating whatever was there.

    Relative paths resolve against ``base_dir``.  Parent directories
    are not created.  File names that are not valid UTF-8 reach here as
    surrogate escapes and are written back as their original bytes.

    Returns:
        The path written.
    """
    target = base_dir / file.path
    target.write_text(file.content, encoding="utf-8", errors="surrogateescape")
    logger.info("Wrote generated file: %s (%s)", target, file.reason)
    return target


def generate(
    output_path: Path | str | None = None,
    *,
    base_dir: Path | None = None,
    config: ImagesConfig | None = None,
) -> Path:
    """Generate the images module and write it.

    Args:
        output_path: Where to write; overrides ``config.output``.
        base_dir: Directory patterns and relative output paths resolve
            against (default: cwd).
        config: Generator config (default: built-in defaults).

    Returns:
        The path written.
    """
    if config is None:
        config = ImagesConfig()
    if base_dir is None:
        base_dir = Path.cwd()

    file = build_images_module(config, base_dir)
    if output_path is not None:
        file.path = str(output_path)

    return write_generated_file(base_dir, file)
