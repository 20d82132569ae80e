"""Logging setup for catalog builds.

Package modules log through ``logging.getLogger("example_catalog....")``;
this module only attaches handlers to the package logger.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "example_catalog"

# Verbosity 3 is DEBUG plus tracebacks with locals
VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
    3: logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbosity: int = 1,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Send catalog log records to stderr through Rich, and optionally to a file.

    Calling it again replaces the previous handlers.

    Args:
        verbosity: 0=warnings only, 1=info, 2=debug, 3=debug with locals.
        log_file: File that receives every record at DEBUG level.

    Returns:
        The package logger.
    """
    level = VERBOSITY_LEVELS.get(verbosity, logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if log_file else level)
    logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbosity >= 2,
        show_path=verbosity >= 2,
        rich_tracebacks=True,
        tracebacks_show_locals=verbosity >= 3,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    # markdown-it logs every rule at DEBUG
    if verbosity < 3:
        logging.getLogger("markdown_it").setLevel(logging.WARNING)

    return logger
