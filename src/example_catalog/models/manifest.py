"""Pydantic models for folder and project manifests.

Manifests use camelCase keys on disk (``taskFolder``, ``skipInTestVersion``);
the models expose snake_case attributes and accept either spelling.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ManifestModel(BaseModel):
    """Base for all manifest models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class FileDescriptor(ManifestModel):
    """One entry of a manifest's ``files`` list."""

    filename: str
    modifiable: bool
    hidden: bool = False
    type_name: Optional[str] = Field(default=None, alias="type")
    conf_type: Optional[str] = None
    skip_in_test_version: bool = False

    # Resolved on-disk location, set for files declared by a folder
    path: Optional[Path] = Field(default=None, exclude=True)

    def resolve_path(self, project_dir: Path) -> Path:
        """Get the file's on-disk location.

        Args:
            project_dir: Directory of the project using this descriptor.

        Returns:
            The folder-resolved path if one was set (absolute paths are kept
            as they are), otherwise the filename relative to ``project_dir``.
        """
        if self.path is not None:
            return project_dir / self.path
        return project_dir / self.filename

    def anchored_at(self, folder_dir: Path) -> "FileDescriptor":
        """Return a copy whose path is fixed relative to a declaring folder."""
        return self.model_copy(update={"path": folder_dir / self.filename})


class TaskWindow(ManifestModel):
    """An annotated region of a task file."""

    line: int
    start: int
    end: int


class FolderManifest(ManifestModel):
    """Manifest of a folder: shared files, child folders and examples."""

    task_folder: bool = False
    files: list[FileDescriptor] = Field(default_factory=list)
    folders: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)


class ProjectManifest(ManifestModel):
    """Manifest of a single example project."""

    conf_type: str
    args: str = ""
    files: list[FileDescriptor] = Field(default_factory=list)
    expected_output: Optional[str] = None
    expected_output_file: Optional[str] = None
    task_windows: Optional[list[TaskWindow]] = None
