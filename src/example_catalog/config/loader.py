"""Configuration loading and merging logic."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from example_catalog.config.defaults import (
    CONFIG_SEARCH_PATHS,
    ENV_EXAMPLES_ROOT,
    ENV_TEST_MODE,
)
from example_catalog.config.models import CatalogConfig

TRUTHY_VALUES = ("1", "true", "yes", "on")


def find_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file.

    Args:
        explicit_path: Explicitly specified config file path (from CLI).

    Returns:
        Path to config file if found, None otherwise.
    """
    if explicit_path is not None:
        if explicit_path.exists():
            return explicit_path
        raise FileNotFoundError(f"Config file not found: {explicit_path}")

    # Search default locations
    for search_path in CONFIG_SEARCH_PATHS:
        if search_path.exists():
            return search_path

    return None


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed configuration dictionary.
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def read_env_overrides() -> dict[str, Any]:
    """Collect configuration values from environment variables."""
    overrides: dict[str, Any] = {}

    if root := os.environ.get(ENV_EXAMPLES_ROOT):
        overrides["examples_path"] = Path(root)

    if (test_mode := os.environ.get(ENV_TEST_MODE)) is not None:
        overrides["load_test_version"] = test_mode.strip().lower() in TRUTHY_VALUES

    return overrides


def merge_cli_overrides(
    config: CatalogConfig,
    examples_path: Optional[Path] = None,
    load_test_version: Optional[bool] = None,
    verbose: Optional[int] = None,
    log_file: Optional[Path] = None,
) -> CatalogConfig:
    """Merge CLI overrides into the configuration.

    CLI arguments take precedence over config file values.

    Args:
        config: Base configuration from file.
        examples_path: Root directory of the examples tree.
        load_test_version: Whether to resolve the test (solution) view.
        verbose: Verbosity level override.
        log_file: Log file override.

    Returns:
        Configuration with CLI overrides applied.
    """
    # Create a copy to avoid mutating the original
    data = config.model_dump()

    if examples_path is not None:
        data["examples_path"] = examples_path
    if load_test_version is not None:
        data["load_test_version"] = load_test_version

    if verbose is not None:
        data["output"]["verbosity"] = verbose
    if log_file is not None:
        data["output"]["log_file"] = log_file

    return CatalogConfig.model_validate(data)


def load_config(
    config_path: Optional[Path] = None,
    **cli_overrides: Any,
) -> CatalogConfig:
    """Load configuration with CLI overrides.

    Configuration is loaded from the following sources (in order of priority):
    1. CLI arguments (highest priority)
    2. Config file (if found)
    3. Environment variables
    4. Default values (lowest priority)

    Args:
        config_path: Explicit config file path (from --config CLI option).
        **cli_overrides: CLI argument overrides.

    Returns:
        Merged configuration object.
    """
    data: dict[str, Any] = read_env_overrides()

    found_config = find_config_file(config_path)
    if found_config is not None:
        data.update(load_config_file(found_config))

    config = CatalogConfig.model_validate(data)

    return merge_cli_overrides(config, **cli_overrides)
