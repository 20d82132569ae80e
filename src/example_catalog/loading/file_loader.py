"""Load individual example files."""

import logging
from pathlib import Path
from typing import Optional

from example_catalog.errors import FileReadError
from example_catalog.models.catalog import ProjectFile
from example_catalog.models.enums import FileType
from example_catalog.models.manifest import FileDescriptor
from example_catalog.utils.file_utils import (
    encode_spaces,
    normalize_newlines,
    read_file,
)

logger = logging.getLogger("example_catalog.loading.file_loader")


def make_public_id(project_id: str, filename: str) -> str:
    """Build the public identifier of a file within a project."""
    return encode_spaces(f"{project_id}/{filename}")


def resolve_file_type(descriptor: FileDescriptor) -> FileType:
    """Resolve the FileType declared by a descriptor.

    Returns:
        The declared type; SOURCE when omitted or unrecognized.
    """
    file_type = FileType.from_manifest(descriptor.type_name)
    if file_type is None:
        logger.warning(
            f"Unknown file type '{descriptor.type_name}' for {descriptor.filename}, "
            "treating it as a source file"
        )
        return FileType.SOURCE
    return file_type


class FileLoader:
    """Reads example files and turns them into ProjectFile objects."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read_content(self, path: Path) -> str:
        """Read a file with normalized line endings.

        Raises:
            FileReadError: If the file can't be read or decoded.
        """
        try:
            return normalize_newlines(read_file(path, encoding=self.encoding))
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(f"Can't load file: {e}", path) from e

    def load(
        self,
        path: Path,
        project_id: str,
        descriptor: FileDescriptor,
        file_type: Optional[FileType] = None,
    ) -> ProjectFile:
        """Load a file declared in a manifest.

        Args:
            path: Location of the file on disk.
            project_id: Public id of the owning project.
            descriptor: The manifest entry declaring the file.
            file_type: Already resolved type, if the caller has one.

        Returns:
            The loaded ProjectFile.

        Raises:
            FileReadError: If the file can't be read.
        """
        content = self.read_content(path)
        return ProjectFile(
            name=descriptor.filename,
            content=content,
            public_id=make_public_id(project_id, descriptor.filename),
            type=file_type or resolve_file_type(descriptor),
            conf_type=descriptor.conf_type,
            modifiable=descriptor.modifiable,
            hidden=descriptor.hidden,
        )

    def load_default(
        self,
        path: Path,
        project_id: str,
        file_type: FileType,
        modifiable: bool = True,
    ) -> ProjectFile:
        """Load a conventionally named file (Test, Solution, Task).

        Raises:
            FileReadError: If the file can't be read.
        """
        content = self.read_content(path)
        return ProjectFile(
            name=path.name,
            content=content,
            public_id=make_public_id(project_id, path.name),
            type=file_type,
            modifiable=modifiable,
        )
