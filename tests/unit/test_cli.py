"""Tests for the command-line interface."""

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from example_catalog import __version__
from example_catalog.cli.main import app
from example_catalog.config import loader

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    monkeypatch.setattr(loader, "CONFIG_SEARCH_PATHS", [])
    monkeypatch.delenv("EXAMPLE_CATALOG_ROOT", raising=False)
    monkeypatch.delenv("EXAMPLE_CATALOG_TEST_MODE", raising=False)


class TestCLI:
    """Tests for example-catalog commands."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_tree(self, examples_root: Path):
        """Test printing the catalog hierarchy."""
        result = runner.invoke(app, ["tree", "--root", str(examples_root)])

        assert result.exit_code == 0
        assert "Hello/" in result.output
        assert "Simplest version" in result.output
        assert "Koans/" in result.output
        assert "task version" in result.output

    def test_check_clean(self, examples_root: Path):
        """Test check on a tree without problems."""
        result = runner.invoke(app, ["check", "--root", str(examples_root)])

        assert result.exit_code == 0
        assert "3 example(s)" in result.output

    def test_check_with_problems(self, examples_root: Path):
        """Test that check fails when something didn't load."""
        (examples_root / "Koans" / "manifest.json").unlink()

        result = runner.invoke(app, ["check", "--root", str(examples_root)])

        assert result.exit_code == 1
        assert "1 problem(s)" in result.output

    def test_missing_root(self, tmp_path: Path):
        """Test that an unusable root exits with status 2."""
        result = runner.invoke(app, ["tree", "--root", str(tmp_path / "missing")])

        assert result.exit_code == 2
        assert "Error" in result.output

    def test_show_test_mode(self, examples_root: Path):
        """Test showing an example in the test view."""
        result = runner.invoke(
            app, ["show", "/Koans/Intro", "--root", str(examples_root), "--test-mode"]
        )

        assert result.exit_code == 0
        assert "Solution.kt" in result.output
        assert "Task.kt" not in result.output

    def test_show_navigation(self, examples_root: Path):
        """Test that show prints sibling links."""
        result = runner.invoke(
            app, ["show", "/Hello/Reading%20input", "--root", str(examples_root)]
        )

        assert result.exit_code == 0
        assert "Previous: Simplest version" in result.output
        assert "Alice" in result.output

    def test_show_unknown_example(self, examples_root: Path):
        result = runner.invoke(app, ["show", "/Nope", "--root", str(examples_root)])

        assert result.exit_code == 1
        assert "No example" in result.output

    def test_show_name_with_trailing_slash(self, tmp_path: Path, write_manifest):
        """Test showing an example declared as "A/" in its folder manifest."""
        root = tmp_path / "root"
        write_manifest(root, examples=["A/", "B"])
        write_manifest(root / "A", confType="java")
        write_manifest(root / "B", confType="java")

        result = runner.invoke(app, ["show", "/A", "--root", str(root)])

        assert result.exit_code == 0
        assert "Previous: -" in result.output
        assert "Next: B" in result.output

    @pytest.mark.parametrize(
        "flags, level",
        [
            (["-q"], logging.WARNING),
            ([], logging.INFO),
            (["-v"], logging.DEBUG),
            (["-vv"], logging.DEBUG),
        ],
    )
    def test_verbosity_flags(self, examples_root: Path, flags: list[str], level: int):
        """Test that -q and -v set the console log level."""
        result = runner.invoke(app, ["check", "--root", str(examples_root), *flags])

        assert result.exit_code == 0
        assert logging.getLogger("example_catalog").handlers[0].level == level
