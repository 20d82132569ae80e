"""Pytest configuration and fixtures."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from example_catalog.config.models import CatalogConfig
from example_catalog.loading.report import LoadReport


def _write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps "\r\n" in test content as written
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    return path


@pytest.fixture
def write_text() -> Callable[[Path, str], Path]:
    """Write a text file, creating parent directories."""
    return _write_text


@pytest.fixture
def write_manifest() -> Callable[..., Path]:
    """Write a manifest.json into a directory."""

    def _write(directory: Path, **fields: Any) -> Path:
        return _write_text(directory / "manifest.json", json.dumps(fields, indent=2))

    return _write


@pytest.fixture
def config() -> CatalogConfig:
    """Default catalog configuration."""
    return CatalogConfig()


@pytest.fixture
def report() -> LoadReport:
    """An empty load report."""
    return LoadReport()


@pytest.fixture
def examples_root(tmp_path: Path, write_manifest, write_text) -> Path:
    """Build a small examples tree.

    examples/
        Util.kt                      common, read-only
        Hello/
            Helpers.kt               common, hidden
            Simplest version/        Main.kt, task.md, inline expected output
            Reading input/           Main.kt, output.txt
        Koans/                       task folder
            Intro/                   Task.kt, Solution.kt, Test.kt on disk only
    """
    root = tmp_path / "examples"

    write_manifest(
        root,
        folders=["Hello", "Koans"],
        files=[{"filename": "Util.kt", "modifiable": False}],
    )
    write_text(root / "Util.kt", "fun util() = 42\r\n")

    hello = root / "Hello"
    write_manifest(
        hello,
        examples=["Simplest version", "Reading input"],
        files=[{"filename": "Helpers.kt", "modifiable": True, "hidden": True}],
    )
    write_text(hello / "Helpers.kt", "fun greet(name: String) = \"Hello, $name!\"\n")

    simplest = hello / "Simplest version"
    write_manifest(
        simplest,
        confType="java",
        expectedOutput="Hello, world!\n",
        files=[{"filename": "Main.kt", "modifiable": True}],
    )
    write_text(simplest / "Main.kt", "fun main() {\r\n    println(\"Hello, world!\")\r\n}\r\n")
    write_text(
        simplest / "task.md",
        "# Hello\n\nPrint a greeting.\n\n```kotlin\nfun main() {}\n```\n",
    )

    reading = hello / "Reading input"
    write_manifest(
        reading,
        confType="java",
        args="Alice",
        expectedOutputFile="output.txt",
        files=[{"filename": "Main.kt", "modifiable": True}],
    )
    write_text(reading / "Main.kt", "fun main(args: Array<String>) = println(args[0])\n")
    write_text(reading / "output.txt", "Alice\n")

    koans = root / "Koans"
    write_manifest(koans, taskFolder=True, examples=["Intro"])

    intro = koans / "Intro"
    write_manifest(
        intro,
        confType="junit",
        taskWindows=[{"line": 1, "start": 4, "end": 10}],
    )
    write_text(intro / "Task.kt", "fun start(): String = TODO()\n")
    write_text(intro / "Solution.kt", "fun start(): String = \"OK\"\n")
    write_text(intro / "Test.kt", "class Test { fun ok() = assert(start() == \"OK\") }\n")

    return root
