"""Enumerations for the example catalog."""

from enum import Enum
from typing import Optional


class FileType(str, Enum):
    """Kinds of files an example can expose."""

    SOURCE = "source"
    TEST = "test"
    SOLUTION = "solution"
    TASK = "task"
    OTHER_LANGUAGE = "other-language"

    @classmethod
    def from_manifest(cls, type_name: Optional[str]) -> Optional["FileType"]:
        """Convert a manifest ``type`` string to a FileType.

        Args:
            type_name: The declared type string, or None when the manifest
                omits it.

        Returns:
            The matching FileType. SOURCE when the type is omitted, None when
            the string is not recognized.
        """
        if type_name is None:
            return cls.SOURCE
        return MANIFEST_TYPE_NAMES.get(type_name.strip().lower())


# Type strings used in manifest file descriptors
MANIFEST_TYPE_NAMES = {
    "kotlin": FileType.SOURCE,
    "kotlin-test": FileType.TEST,
    "solution": FileType.SOLUTION,
    "task": FileType.TASK,
    "java": FileType.OTHER_LANGUAGE,
}


class IssueKind(str, Enum):
    """Categories of recoverable problems found while building a catalog."""

    MANIFEST_READ = "manifest_read"
    FILE_READ = "file_read"
    FOLDER_CYCLE = "folder_cycle"
    DEPTH_LIMIT = "depth_limit"


class ResolutionStatus(str, Enum):
    """Outcome of resolving one folder or example."""

    OK = "ok"
    ABSENT = "absent"
