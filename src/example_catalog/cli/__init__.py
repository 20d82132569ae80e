"""Command-line interface for the example catalog."""
