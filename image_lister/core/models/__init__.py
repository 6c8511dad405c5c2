"""
Domain models — Pydantic types for the generator.

    from image_lister.core.models import ImagesConfig, ImageBinding, GeneratedFile
"""

from image_lister.core.models.config import ImageBinding, ImagesConfig
from image_lister.core.models.template import GeneratedFile

__all__ = [
    # template.py
    "GeneratedFile",
    # config.py
    "ImageBinding",
    "ImagesConfig",
]
