"""Default configuration values for the example catalog."""

from pathlib import Path

# Default configuration file name
DEFAULT_CONFIG_FILENAME = "example-catalog.config.json"

# Search paths for configuration file (in order of priority)
CONFIG_SEARCH_PATHS = [
    Path.cwd() / DEFAULT_CONFIG_FILENAME,
    Path.home() / ".config" / "example-catalog" / "config.json",
]

# Environment variables
ENV_EXAMPLES_ROOT = "EXAMPLE_CATALOG_ROOT"
ENV_TEST_MODE = "EXAMPLE_CATALOG_TEST_MODE"

# Manifest file names, first existing one wins
MANIFEST_FILENAMES = ["manifest.json", "manifest.yml", "manifest.yaml"]

# Help document rendered into an example's help page
HELP_FILENAME = "task.md"

# Extension of the conventional default files (Test.kt, Solution.kt, Task.kt)
SOURCE_EXTENSION = ".kt"

# Fenced code languages understood by the client-side highlighter
HIGHLIGHT_LANGUAGES = {
    "kotlin": "kotlin",
    "java": "text/x-java",
}

# Folders nested deeper than this are left out of the catalog
MAX_FOLDER_DEPTH = 64
