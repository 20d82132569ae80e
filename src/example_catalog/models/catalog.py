"""Catalog models: folders, examples and their files.

All models are frozen. Sequences are tuples, name sets are frozensets and
folder mappings are read-only proxies, so a built catalog can be shared
between readers without locking.
"""

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from example_catalog.models.enums import FileType, IssueKind
from example_catalog.models.manifest import TaskWindow


class CatalogModel(BaseModel):
    """Base for immutable catalog models."""

    model_config = ConfigDict(frozen=True)


class ProjectFile(CatalogModel):
    """A file exposed by an example."""

    name: str
    content: str
    public_id: str
    type: FileType = FileType.SOURCE
    conf_type: Optional[str] = None
    modifiable: bool = True
    hidden: bool = False

    @property
    def line_count(self) -> int:
        """Number of lines in the file."""
        return len(self.content.splitlines()) if self.content else 0


class Example(CatalogModel):
    """A single exercise project."""

    id: str
    name: str
    args: str = ""
    run_configuration_kind: str
    expected_output: Optional[str] = None
    files: tuple[ProjectFile, ...] = ()
    hidden_files: tuple[ProjectFile, ...] = ()
    read_only_file_names: frozenset[str] = frozenset()
    task_windows: Optional[tuple[TaskWindow, ...]] = None
    previous_index: Optional[int] = Field(
        default=None,
        description="Index of the preceding sibling in the parent folder's examples",
    )
    help_html: Optional[str] = None

    @property
    def all_files(self) -> tuple[ProjectFile, ...]:
        """Visible files followed by hidden files."""
        return self.files + self.hidden_files

    @property
    def file_names(self) -> list[str]:
        """Names of all files, visible first."""
        return [f.name for f in self.all_files]

    def get_file(self, name: str) -> Optional[ProjectFile]:
        """Get a visible or hidden file by name."""
        for project_file in self.all_files:
            if project_file.name == name:
                return project_file
        return None


class Folder(CatalogModel):
    """A node of the catalog tree."""

    name: str
    url: str
    task_folder: bool = False
    examples: Mapping[str, Example] = Field(default_factory=dict, validate_default=True)
    subfolders: Mapping[str, "Folder"] = Field(default_factory=dict, validate_default=True)

    @field_validator("examples", "subfolders", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        # Copied so the caller's dict can't change the node afterwards
        return MappingProxyType(dict(value))

    @field_serializer("examples", "subfolders")
    def _serialize_mapping(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def example_at(self, index: int) -> Example:
        """Get an example by its position in declaration order."""
        return list(self.examples.values())[index]

    def previous_example(self, name: str) -> Optional[Example]:
        """Get the example preceding ``name`` in this folder, if any."""
        example = self.examples[name]
        if example.previous_index is None:
            return None
        return self.example_at(example.previous_index)

    def next_example(self, name: str) -> Optional[Example]:
        """Get the example following ``name`` in this folder, if any."""
        names = list(self.examples)
        position = names.index(name)
        if position + 1 >= len(names):
            return None
        return self.examples[names[position + 1]]

    def walk_examples(self) -> Iterator[tuple["Folder", Example]]:
        """Yield (folder, example) pairs depth-first, subfolders first.

        Uses an explicit stack so deep trees do not hit the recursion limit.
        """
        stack: list[Folder] = [self]
        while stack:
            folder = stack.pop()
            for subfolder in reversed(list(folder.subfolders.values())):
                stack.append(subfolder)
            for example in folder.examples.values():
                yield folder, example

    def find_folder(self, url: str) -> Optional["Folder"]:
        """Find a descendant folder (or this one) by url."""
        stack: list[Folder] = [self]
        while stack:
            folder = stack.pop()
            if folder.url == url:
                return folder
            stack.extend(folder.subfolders.values())
        return None


class LoadIssue(CatalogModel):
    """A recoverable problem encountered while building the catalog."""

    kind: IssueKind
    path: str
    message: str
    url: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.path}: {self.message}"


class Catalog(CatalogModel):
    """A fully built example catalog."""

    root: Folder
    test_mode: bool = False
    issues: tuple[LoadIssue, ...] = ()

    @property
    def is_complete(self) -> bool:
        """Whether every folder, example and file loaded without problems."""
        return not self.issues

    def iter_examples(self) -> Iterator[Example]:
        """Yield every example in the catalog."""
        for _, example in self.root.walk_examples():
            yield example

    def get_example(self, example_id: str) -> Optional[Example]:
        """Find an example by id."""
        for example in self.iter_examples():
            if example.id == example_id:
                return example
        return None

    def folder_of(self, example_id: str) -> Optional[Folder]:
        """Find the folder directly containing an example."""
        for folder, example in self.root.walk_examples():
            if example.id == example_id:
                return folder
        return None

    def issues_of(self, kind: IssueKind) -> list[LoadIssue]:
        """Get the recorded issues of one kind."""
        return [issue for issue in self.issues if issue.kind == kind]
