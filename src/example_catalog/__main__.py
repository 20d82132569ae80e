"""Entry point for running example-catalog as a module.

Usage:
    python -m example_catalog [command] [options]
"""

from example_catalog.cli.main import app

if __name__ == "__main__":
    app()
