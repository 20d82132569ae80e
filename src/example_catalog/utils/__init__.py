"""Shared utilities for the example catalog."""

from example_catalog.utils.file_utils import (
    encode_spaces,
    find_first_existing,
    normalize_newlines,
    read_file,
)
from example_catalog.utils.logging import setup_logging

__all__ = [
    "encode_spaces",
    "find_first_existing",
    "normalize_newlines",
    "read_file",
    "setup_logging",
]
