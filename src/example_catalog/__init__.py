"""Example Catalog.

Builds an in-memory, read-only catalog of instructional coding exercises
from a directory tree of manifests. Folders share common files with every
example beneath them; each example resolves its own file set, default
convention files and rendered help page.
"""

__version__ = "0.1.0"

from example_catalog.loading.catalog_builder import build_catalog, load_catalog
from example_catalog.models.catalog import Catalog, Example, Folder, ProjectFile
from example_catalog.models.enums import FileType

__all__ = [
    "__version__",
    "Catalog",
    "Example",
    "FileType",
    "Folder",
    "ProjectFile",
    "build_catalog",
    "load_catalog",
]
