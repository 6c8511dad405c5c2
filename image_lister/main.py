"""
Elm image module generator — CLI entrypoint.

Usage:
    image-lister
    python -m image_lister.main --verbose
    python -m image_lister.main --config path/to/images.yml
    python -m image_lister.main --log-file images.log
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from image_lister import __version__
from image_lister.core.observability.logging_config import setup_logging


@click.command()
@click.version_option(version=__version__, prog_name="image-lister")
@click.option("--verbose", "-v", is_flag=True, help="Log what gets written.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to images.yml (default: auto-detect).",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write a full debug log to this file.",
)
def cli(verbose: bool, debug: bool, config_path: str | None, log_file: str | None) -> None:
    """Write the Elm module listing the project's image assets."""
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"
    setup_logging(level=level, log_file=log_file, log_file_level="DEBUG")

    from image_lister.core.config.loader import (
        ConfigError,
        config_root,
        find_config_file,
        load_config,
    )
    from image_lister.core.services.images_generate import generate

    cfg_file = Path(config_path) if config_path else find_config_file()
    try:
        config = load_config(cfg_file)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    base_dir = config_root(cfg_file) if cfg_file else Path.cwd()
    generate(base_dir=base_dir, config=config)


if __name__ == "__main__":
    cli()
