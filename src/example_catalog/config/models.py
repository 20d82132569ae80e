"""Pydantic configuration models for the example catalog."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from example_catalog.config.defaults import (
    HELP_FILENAME,
    HIGHLIGHT_LANGUAGES,
    MANIFEST_FILENAMES,
    MAX_FOLDER_DEPTH,
    SOURCE_EXTENSION,
)


class DefaultFilesConfig(BaseModel):
    """Stems of the conventionally named files injected into examples."""

    test: str = "Test"
    solution: str = "Solution"
    task: str = "Task"


class OutputConfig(BaseModel):
    """Output configuration."""

    verbosity: int = Field(default=1, ge=0, le=3)
    log_file: Optional[Path] = None


class CatalogConfig(BaseModel):
    """Root configuration model for the example catalog."""

    examples_path: Optional[Path] = None
    load_test_version: bool = False

    manifest_filenames: list[str] = Field(default_factory=lambda: list(MANIFEST_FILENAMES))
    help_filename: str = HELP_FILENAME
    source_extension: str = SOURCE_EXTENSION
    default_files: DefaultFilesConfig = Field(default_factory=DefaultFilesConfig)
    highlight_languages: dict[str, str] = Field(
        default_factory=lambda: dict(HIGHLIGHT_LANGUAGES)
    )
    max_depth: int = Field(default=MAX_FOLDER_DEPTH, ge=1)

    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields in config file

    def default_filename(self, stem: str) -> str:
        """Full file name of a conventional default file."""
        return f"{stem}{self.source_extension}"
