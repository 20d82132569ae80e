"""Read folder and project manifests from disk."""

import json
import logging
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import ValidationError

from example_catalog.errors import ManifestReadError
from example_catalog.models.manifest import (
    FolderManifest,
    ManifestModel,
    ProjectManifest,
)
from example_catalog.utils.file_utils import find_first_existing, read_file

logger = logging.getLogger("example_catalog.loading.manifest_reader")

M = TypeVar("M", bound=ManifestModel)


class ManifestReader:
    """Locates and parses manifests in folder and project directories."""

    def __init__(self, manifest_filenames: list[str]):
        """Initialize the reader.

        Args:
            manifest_filenames: Accepted manifest names, in order of preference.
        """
        self.manifest_filenames = manifest_filenames

    def find_manifest(self, directory: Path) -> Path:
        """Locate the manifest of a directory.

        Raises:
            ManifestReadError: If the directory has no manifest.
        """
        manifest_path = find_first_existing(directory, self.manifest_filenames)
        if manifest_path is None:
            raise ManifestReadError(
                f"No manifest found (looked for {', '.join(self.manifest_filenames)})",
                directory,
            )
        return manifest_path

    def read_folder(self, directory: Path) -> FolderManifest:
        """Read a folder manifest."""
        return self._read(directory, FolderManifest)

    def read_project(self, directory: Path) -> ProjectManifest:
        """Read a project manifest."""
        return self._read(directory, ProjectManifest)

    def _read(self, directory: Path, model: type[M]) -> M:
        """Read and validate the manifest of ``directory``.

        Raises:
            ManifestReadError: If the manifest is missing, unreadable or invalid.
        """
        manifest_path = self.find_manifest(directory)

        try:
            content = read_file(manifest_path)
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestReadError(f"Can't read manifest: {e}", manifest_path) from e

        try:
            data = self._parse(manifest_path, content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ManifestReadError(f"Malformed manifest: {e}", manifest_path) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ManifestReadError("Manifest must be a mapping", manifest_path)

        try:
            manifest = model.model_validate(data)
        except ValidationError as e:
            raise ManifestReadError(
                f"Invalid manifest: {e.error_count()} error(s): {e.errors()[0]['msg']}",
                manifest_path,
            ) from e

        logger.debug(f"Read {model.__name__} from {manifest_path}")
        return manifest

    @staticmethod
    def _parse(manifest_path: Path, content: str) -> object:
        if manifest_path.suffix.lower() in (".yml", ".yaml"):
            return yaml.safe_load(content)
        return json.loads(content)
