"""Configuration management for the example catalog."""

from example_catalog.config.loader import load_config
from example_catalog.config.models import (
    CatalogConfig,
    DefaultFilesConfig,
    OutputConfig,
)

__all__ = [
    "CatalogConfig",
    "DefaultFilesConfig",
    "OutputConfig",
    "load_config",
]
