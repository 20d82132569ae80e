"""Loading layer: manifests, files, help pages and the folder tree."""

from example_catalog.loading.catalog_builder import build_catalog, load_catalog
from example_catalog.loading.example_resolver import ExampleResolver
from example_catalog.loading.file_loader import FileLoader
from example_catalog.loading.folder_resolver import FolderResolver
from example_catalog.loading.manifest_reader import ManifestReader
from example_catalog.loading.markdown import MarkdownRenderer
from example_catalog.loading.report import LoadReport

__all__ = [
    "ExampleResolver",
    "FileLoader",
    "FolderResolver",
    "LoadReport",
    "ManifestReader",
    "MarkdownRenderer",
    "build_catalog",
    "load_catalog",
]
