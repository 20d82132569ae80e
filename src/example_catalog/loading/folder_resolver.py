"""Resolve a folder tree of manifests into Folder nodes."""

import logging
from pathlib import Path
from typing import Optional, Sequence

from example_catalog.config.models import CatalogConfig
from example_catalog.errors import ManifestReadError
from example_catalog.loading.example_resolver import ExampleResolver
from example_catalog.loading.manifest_reader import ManifestReader
from example_catalog.loading.report import LoadReport
from example_catalog.models.catalog import Example, Folder
from example_catalog.models.enums import IssueKind
from example_catalog.models.manifest import FileDescriptor, FolderManifest
from example_catalog.models.results import Resolution

logger = logging.getLogger("example_catalog.loading.folder_resolver")


class _FolderFrame:
    """A folder whose manifest has been read but whose node isn't built yet."""

    __slots__ = (
        "path",
        "name",
        "url",
        "depth",
        "lineage",
        "manifest",
        "common_files",
        "examples",
        "children",
    )

    def __init__(
        self,
        path: Path,
        name: str,
        url: str,
        depth: int,
        lineage: frozenset[Path],
        manifest: FolderManifest,
        inherited: Sequence[FileDescriptor],
    ):
        self.path = path
        self.name = name
        self.url = url
        self.depth = depth
        # Resolved directories of this folder and all of its ancestors
        self.lineage = lineage
        self.manifest = manifest
        self.common_files: tuple[FileDescriptor, ...] = tuple(inherited) + tuple(
            descriptor.anchored_at(path) for descriptor in manifest.files
        )
        self.examples: dict[str, Example] = {}
        self.children: list[tuple[str, int]] = []


class FolderResolver:
    """Walks a directory tree of manifests and builds the Folder hierarchy.

    The walk uses an explicit stack instead of recursion. Folder frames are
    stored in pre-order in an arena, so every child sits after its parent;
    nodes are then assembled from the end of the arena backwards, children
    before parents.
    """

    def __init__(
        self,
        config: CatalogConfig,
        report: LoadReport,
        example_resolver: Optional[ExampleResolver] = None,
        manifest_reader: Optional[ManifestReader] = None,
        test_mode: Optional[bool] = None,
    ):
        """Initialize the resolver.

        Args:
            config: Catalog configuration.
            report: Collector for recoverable problems.
            example_resolver: Resolver for leaf projects (built if omitted).
            manifest_reader: Manifest reader (built from config if omitted).
            test_mode: Overrides ``config.load_test_version`` when given.
        """
        self.config = config
        self.report = report
        self.manifest_reader = manifest_reader or ManifestReader(config.manifest_filenames)
        self.example_resolver = example_resolver or ExampleResolver(
            config, report, manifest_reader=self.manifest_reader
        )
        self.test_mode = config.load_test_version if test_mode is None else test_mode

    def resolve(
        self,
        path: Path,
        url: str = "/",
        inherited: Sequence[FileDescriptor] = (),
    ) -> Resolution[Folder]:
        """Resolve a folder and everything beneath it.

        Args:
            path: The folder directory.
            url: Url of the folder (ends with "/").
            inherited: Common file descriptors declared by ancestor folders.

        Returns:
            OK with the Folder, or ABSENT when the folder's own manifest
            can't be read. Broken descendants are left out of the tree and
            recorded in the report.
        """
        opened = self._open(path, url, inherited, depth=0, lineage=frozenset())
        if not opened.is_ok:
            return Resolution.absent(opened.issue)

        arena: list[_FolderFrame] = [opened.value]
        stack: list[int] = [0]

        while stack:
            frame = arena[stack.pop()]

            seen: set[str] = set()
            for folder_name in frame.manifest.folders:
                # Subfolders are keyed by directory name, as examples are
                key = (frame.path / folder_name).name
                if key in seen:
                    logger.warning(f"{frame.url}: folder '{folder_name}' is declared twice")
                    continue
                seen.add(key)

                child = self._open(
                    frame.path / folder_name,
                    frame.url + key + "/",
                    frame.common_files,
                    depth=frame.depth + 1,
                    lineage=frame.lineage,
                )
                if not child.is_ok:
                    continue
                arena.append(child.value)
                frame.children.append((key, len(arena) - 1))

            # Push in reverse so folders are visited in declaration order
            stack.extend(index for _, index in reversed(frame.children))

            self._resolve_examples(frame)

        built: dict[int, Folder] = {}
        for index in range(len(arena) - 1, -1, -1):
            frame = arena[index]
            built[index] = Folder(
                name=frame.name,
                url=frame.url,
                task_folder=frame.manifest.task_folder,
                examples=frame.examples,
                subfolders={name: built.pop(child) for name, child in frame.children},
            )

        logger.debug(f"Resolved {len(arena)} folder(s) under {path}")
        return Resolution.ok(built[0])

    def _open(
        self,
        path: Path,
        url: str,
        inherited: Sequence[FileDescriptor],
        depth: int,
        lineage: frozenset[Path],
    ) -> Resolution[_FolderFrame]:
        """Read a folder's manifest and prepare its frame."""
        real_path = path.resolve()

        if real_path in lineage:
            issue = self.report.record(
                IssueKind.FOLDER_CYCLE,
                path,
                "Folder is its own ancestor, skipping it",
                url=url,
                level=logging.ERROR,
            )
            return Resolution.absent(issue)

        if depth > self.config.max_depth:
            issue = self.report.record(
                IssueKind.DEPTH_LIMIT,
                path,
                f"Folder is nested deeper than {self.config.max_depth} levels, skipping it",
                url=url,
                level=logging.ERROR,
            )
            return Resolution.absent(issue)

        try:
            manifest = self.manifest_reader.read_folder(path)
        except ManifestReadError as e:
            issue = self.report.record_error(IssueKind.MANIFEST_READ, e, path, url=url)
            return Resolution.absent(issue)

        return Resolution.ok(
            _FolderFrame(
                path=real_path,
                name=path.name or real_path.name,
                url=url,
                depth=depth,
                lineage=lineage | {real_path},
                manifest=manifest,
                inherited=inherited,
            )
        )

    def _resolve_examples(self, frame: _FolderFrame) -> None:
        """Resolve a folder's examples in manifest order, chaining siblings."""
        previous_index: Optional[int] = None

        for project_name in frame.manifest.examples:
            project_path = frame.path / project_name
            # Same key as Example.name, so "A/" and "A" are one example
            key = project_path.name
            if key in frame.examples:
                logger.warning(f"{frame.url}: example '{project_name}' is declared twice")
                continue

            resolution = self.example_resolver.resolve(
                project_path,
                frame.url,
                self.test_mode,
                frame.common_files,
                previous_index,
            )
            if not resolution.is_ok:
                continue

            frame.examples[key] = resolution.value
            previous_index = len(frame.examples) - 1
