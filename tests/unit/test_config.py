"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from example_catalog.config import loader
from example_catalog.config.loader import load_config, merge_cli_overrides
from example_catalog.config.models import CatalogConfig


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep the developer's own config files and environment out of tests."""
    monkeypatch.setattr(loader, "CONFIG_SEARCH_PATHS", [])
    monkeypatch.delenv("EXAMPLE_CATALOG_ROOT", raising=False)
    monkeypatch.delenv("EXAMPLE_CATALOG_TEST_MODE", raising=False)


class TestCatalogConfig:
    """Tests for CatalogConfig defaults."""

    def test_defaults(self):
        config = CatalogConfig()

        assert config.examples_path is None
        assert config.load_test_version is False
        assert config.manifest_filenames[0] == "manifest.json"
        assert config.help_filename == "task.md"
        assert config.default_filename(config.default_files.test) == "Test.kt"
        assert config.highlight_languages["java"] == "text/x-java"
        assert config.output.verbosity == 1


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults_without_sources(self):
        """Test loading with no file, environment or overrides."""
        config = load_config()

        assert config.examples_path is None
        assert config.load_test_version is False

    def test_environment(self, monkeypatch, tmp_path: Path):
        """Test environment variables."""
        monkeypatch.setenv("EXAMPLE_CATALOG_ROOT", str(tmp_path))
        monkeypatch.setenv("EXAMPLE_CATALOG_TEST_MODE", "true")

        config = load_config()

        assert config.examples_path == tmp_path
        assert config.load_test_version is True

    def test_file_overrides_environment(self, monkeypatch, tmp_path: Path):
        """Test that the config file wins over the environment."""
        monkeypatch.setenv("EXAMPLE_CATALOG_TEST_MODE", "1")
        config_path = tmp_path / "config.json"
        config_path.write_text(
            json.dumps({"load_test_version": False, "help_filename": "README.md"}),
            encoding="utf-8",
        )

        config = load_config(config_path)

        assert config.load_test_version is False
        assert config.help_filename == "README.md"

    def test_cli_overrides_file(self, tmp_path: Path):
        """Test that CLI values win over the config file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(
            json.dumps({"examples_path": "/from/file", "output": {"verbosity": 0}}),
            encoding="utf-8",
        )

        config = load_config(config_path, examples_path=tmp_path, verbose=2)

        assert config.examples_path == tmp_path
        assert config.output.verbosity == 2

    def test_missing_explicit_file(self, tmp_path: Path):
        """Test that an explicit config path must exist."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_search_paths(self, monkeypatch, tmp_path: Path):
        """Test discovery of a config file in the search paths."""
        config_path = tmp_path / "example-catalog.config.json"
        config_path.write_text(json.dumps({"max_depth": 5}), encoding="utf-8")
        monkeypatch.setattr(loader, "CONFIG_SEARCH_PATHS", [tmp_path / "nope.json", config_path])

        assert load_config().max_depth == 5

    def test_merge_does_not_mutate(self):
        """Test that merging returns a new configuration."""
        base = CatalogConfig()
        merged = merge_cli_overrides(base, load_test_version=True)

        assert merged.load_test_version is True
        assert base.load_test_version is False
