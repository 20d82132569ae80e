"""File system utilities for the example catalog."""

from pathlib import Path


def read_file(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file synchronously.

    Args:
        path: Path to the file.
        encoding: File encoding.

    Returns:
        File contents as string.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OSError: If the file can't be read.
        UnicodeDecodeError: If the file isn't valid text in ``encoding``.
    """
    return path.read_text(encoding=encoding)


def normalize_newlines(text: str) -> str:
    """Collapse Windows line endings to ``\\n``."""
    return text.replace("\r\n", "\n")


def encode_spaces(identifier: str) -> str:
    """Percent-encode spaces in a path-like identifier."""
    return identifier.replace(" ", "%20")


def find_first_existing(directory: Path, filenames: list[str]) -> Path | None:
    """Get the first of ``filenames`` that exists as a file in ``directory``.

    Args:
        directory: Directory to look in.
        filenames: Candidate names, in order of preference.

    Returns:
        Path of the first existing file, or None.
    """
    for filename in filenames:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None
