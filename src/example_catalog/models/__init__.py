"""Domain models for the example catalog."""

from example_catalog.models.catalog import (
    Catalog,
    Example,
    Folder,
    LoadIssue,
    ProjectFile,
)
from example_catalog.models.enums import FileType, IssueKind, ResolutionStatus
from example_catalog.models.manifest import (
    FileDescriptor,
    FolderManifest,
    ProjectManifest,
    TaskWindow,
)
from example_catalog.models.results import Resolution

__all__ = [
    "Catalog",
    "Example",
    "FileDescriptor",
    "FileType",
    "Folder",
    "FolderManifest",
    "IssueKind",
    "LoadIssue",
    "ProjectFile",
    "ProjectManifest",
    "Resolution",
    "ResolutionStatus",
    "TaskWindow",
]
