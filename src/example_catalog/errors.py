"""Exceptions raised while building the example catalog."""

from pathlib import Path
from typing import Optional


class CatalogError(Exception):
    """Base class for catalog errors."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message


class ManifestReadError(CatalogError):
    """A manifest is missing, unreadable or malformed."""


class FileReadError(CatalogError):
    """A declared, referenced or default file could not be read."""


class CatalogConfigurationError(CatalogError):
    """The catalog cannot be built at all (bad root directory or root manifest)."""
