"""Resolve one example project directory into an Example."""

import logging
from pathlib import Path
from typing import Optional, Sequence

from example_catalog.config.models import CatalogConfig
from example_catalog.errors import FileReadError, ManifestReadError
from example_catalog.loading.file_loader import FileLoader, resolve_file_type
from example_catalog.loading.manifest_reader import ManifestReader
from example_catalog.loading.markdown import MarkdownRenderer
from example_catalog.loading.report import LoadReport
from example_catalog.models.catalog import Example, ProjectFile
from example_catalog.models.enums import FileType, IssueKind
from example_catalog.models.manifest import FileDescriptor, ProjectManifest
from example_catalog.models.results import Resolution
from example_catalog.utils.file_utils import encode_spaces, read_file

logger = logging.getLogger("example_catalog.loading.example_resolver")


class _FileSet:
    """Files collected for one example while it is being resolved."""

    def __init__(self):
        self.visible: list[ProjectFile] = []
        self.hidden: list[ProjectFile] = []
        self.read_only: set[str] = set()
        self.names: set[str] = set()

    def __contains__(self, name: str) -> bool:
        return name in self.names

    def add(self, project_file: ProjectFile) -> None:
        self.names.add(project_file.name)
        if not project_file.modifiable:
            self.read_only.add(project_file.name)
        if project_file.hidden:
            self.hidden.append(project_file)
        else:
            self.visible.append(project_file)

    def prepend(self, project_file: ProjectFile) -> None:
        self.names.add(project_file.name)
        if not project_file.modifiable:
            self.read_only.add(project_file.name)
        self.visible.insert(0, project_file)


class ExampleResolver:
    """Builds Example objects from project directories."""

    def __init__(
        self,
        config: CatalogConfig,
        report: LoadReport,
        manifest_reader: Optional[ManifestReader] = None,
        file_loader: Optional[FileLoader] = None,
        renderer: Optional[MarkdownRenderer] = None,
    ):
        """Initialize the resolver.

        Args:
            config: Catalog configuration.
            report: Collector for recoverable problems.
            manifest_reader: Manifest reader (built from config if omitted).
            file_loader: File loader (default if omitted).
            renderer: Help document renderer (built from config if omitted).
        """
        self.config = config
        self.report = report
        self.manifest_reader = manifest_reader or ManifestReader(config.manifest_filenames)
        self.file_loader = file_loader or FileLoader()
        self.renderer = renderer or MarkdownRenderer(config.highlight_languages)

    def resolve(
        self,
        path: Path,
        parent_url: str,
        test_mode: bool,
        inherited: Sequence[FileDescriptor] = (),
        previous_index: Optional[int] = None,
    ) -> Resolution[Example]:
        """Resolve a project directory.

        Args:
            path: The project directory.
            parent_url: Url of the containing folder (ends with "/").
            test_mode: Resolve the test (solution) view instead of the task view.
            inherited: Common file descriptors declared by ancestor folders.
            previous_index: Position of the preceding sibling example, if any.

        Returns:
            OK with the Example, or ABSENT when the manifest, expected output
            or help document can't be read.
        """
        example_id = encode_spaces(parent_url + path.name)

        try:
            manifest = self.manifest_reader.read_project(path)
            expected_output = self._read_expected_output(path, manifest)
            help_html = self._render_help(path)
        except ManifestReadError as e:
            issue = self.report.record_error(IssueKind.MANIFEST_READ, e, path, url=example_id)
            return Resolution.absent(issue)
        except FileReadError as e:
            issue = self.report.record_error(IssueKind.FILE_READ, e, path, url=example_id)
            return Resolution.absent(issue)

        file_set = self._load_declared_files(
            path, example_id, test_mode, list(manifest.files) + list(inherited)
        )
        self._inject_default_files(path, example_id, test_mode, file_set)

        example = Example(
            id=example_id,
            name=path.name,
            args=manifest.args,
            run_configuration_kind=manifest.conf_type,
            expected_output=expected_output,
            files=file_set.visible,
            hidden_files=file_set.hidden,
            read_only_file_names=frozenset(file_set.read_only),
            task_windows=manifest.task_windows,
            previous_index=previous_index,
            help_html=help_html,
        )
        logger.debug(
            f"Resolved example {example_id}: "
            f"{len(example.files)} visible, {len(example.hidden_files)} hidden"
        )
        return Resolution.ok(example)

    def _read_expected_output(self, path: Path, manifest: ProjectManifest) -> Optional[str]:
        if manifest.expected_output is not None:
            return manifest.expected_output
        if manifest.expected_output_file is not None:
            output_path = path / manifest.expected_output_file
            try:
                return read_file(output_path)
            except (OSError, UnicodeDecodeError) as e:
                raise FileReadError(f"Can't read expected output: {e}", output_path) from e
        return None

    def _render_help(self, path: Path) -> Optional[str]:
        help_path = path / self.config.help_filename
        if not help_path.is_file():
            return None
        return self.renderer.render(self.file_loader.read_content(help_path))

    def _load_declared_files(
        self,
        path: Path,
        example_id: str,
        test_mode: bool,
        descriptors: list[FileDescriptor],
    ) -> _FileSet:
        """Load local descriptors, then inherited ones, in order.

        A file whose name was already loaded is skipped, so a project can
        shadow a common file by declaring its own file of the same name.
        """
        file_set = _FileSet()

        for descriptor in descriptors:
            if test_mode and descriptor.skip_in_test_version:
                continue

            file_type = resolve_file_type(descriptor)
            # The task view never exposes solutions
            if not test_mode and file_type == FileType.SOLUTION:
                continue

            if descriptor.filename in file_set:
                logger.debug(
                    f"{example_id}: '{descriptor.filename}' already loaded, "
                    "skipping later declaration"
                )
                continue

            file_path = descriptor.resolve_path(path)
            try:
                project_file = self.file_loader.load(file_path, example_id, descriptor, file_type)
            except FileReadError as e:
                self.report.record_error(IssueKind.FILE_READ, e, file_path, url=example_id)
                continue

            file_set.add(project_file)

        return file_set

    def _inject_default_files(
        self,
        path: Path,
        example_id: str,
        test_mode: bool,
        file_set: _FileSet,
    ) -> None:
        """Prepend the conventional Test and Solution/Task files.

        The mode file is prepended last so it ends up first, ahead of Test.
        """
        stems = self.config.default_files

        self._prepend_default(
            path / self.config.default_filename(stems.test),
            example_id,
            FileType.TEST,
            file_set,
            modifiable=False,
        )
        if test_mode:
            self._prepend_default(
                path / self.config.default_filename(stems.solution),
                example_id,
                FileType.SOLUTION,
                file_set,
            )
        else:
            self._prepend_default(
                path / self.config.default_filename(stems.task),
                example_id,
                FileType.TASK,
                file_set,
            )

    def _prepend_default(
        self,
        file_path: Path,
        example_id: str,
        file_type: FileType,
        file_set: _FileSet,
        modifiable: bool = True,
    ) -> None:
        if not file_path.is_file() or file_path.name in file_set:
            return
        try:
            project_file = self.file_loader.load_default(
                file_path, example_id, file_type, modifiable=modifiable
            )
        except FileReadError as e:
            self.report.record_error(IssueKind.FILE_READ, e, file_path, url=example_id)
            return
        file_set.prepend(project_file)
