"""Build the example catalog from a configured root directory."""

import logging
from pathlib import Path
from typing import Optional

from example_catalog.config.models import CatalogConfig
from example_catalog.errors import CatalogConfigurationError
from example_catalog.loading.folder_resolver import FolderResolver
from example_catalog.loading.report import LoadReport
from example_catalog.models.catalog import Catalog

logger = logging.getLogger("example_catalog.loading.catalog_builder")


def build_catalog(config: CatalogConfig) -> Catalog:
    """Build the whole catalog once from ``config.examples_path``.

    Broken folders, examples and files are left out and listed in
    ``Catalog.issues``; only a problem with the root itself is fatal.

    Args:
        config: Catalog configuration.

    Returns:
        The built catalog.

    Raises:
        CatalogConfigurationError: If no root is configured, the root isn't a
            directory, or the root manifest can't be read.
    """
    if config.examples_path is None:
        raise CatalogConfigurationError("No examples directory configured")

    root = Path(config.examples_path)
    if not root.is_dir():
        raise CatalogConfigurationError("Examples directory does not exist", root)

    mode = "test" if config.load_test_version else "task"
    logger.info(f"Loading examples from {root} ({mode} version)")

    report = LoadReport()
    resolver = FolderResolver(config, report)
    resolution = resolver.resolve(root, url="/")

    if not resolution.is_ok:
        raise CatalogConfigurationError(
            f"Can't load root folder: {resolution.issue.message}", root
        )

    catalog = Catalog(
        root=resolution.value,
        test_mode=config.load_test_version,
        issues=report.issues,
    )

    example_count = sum(1 for _ in catalog.iter_examples())
    if catalog.is_complete:
        logger.info(f"Loaded {example_count} example(s)")
    else:
        logger.warning(
            f"Loaded {example_count} example(s) with {len(catalog.issues)} problem(s)"
        )
    return catalog


def load_catalog(
    root: Path,
    test_mode: bool = False,
    config: Optional[CatalogConfig] = None,
) -> Catalog:
    """Build a catalog from a root directory.

    Args:
        root: Root directory of the examples tree.
        test_mode: Resolve the test (solution) view instead of the task view.
        config: Base configuration for everything else (defaults if omitted).

    Returns:
        The built catalog.
    """
    base = config or CatalogConfig()
    return build_catalog(
        base.model_copy(update={"examples_path": root, "load_test_version": test_mode})
    )
