"""Main CLI entry point for example-catalog."""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from example_catalog import __version__
from example_catalog.config import load_config
from example_catalog.errors import CatalogConfigurationError
from example_catalog.loading.catalog_builder import build_catalog
from example_catalog.models.catalog import Catalog, Folder
from example_catalog.utils.logging import setup_logging

# Create the main Typer app
app = typer.Typer(
    name="example-catalog",
    help="Inspect a catalog of coding exercises built from a tree of manifests.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Console for rich output
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"example-catalog version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Example Catalog.

    Build the example catalog from a directory of manifests and inspect it.
    """
    pass


# Common options used across commands
ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]

RootOption = Annotated[
    Optional[Path],
    typer.Option(
        "--root",
        "-r",
        help="Root directory of the examples tree.",
        file_okay=False,
        dir_okay=True,
    ),
]

TestModeOption = Annotated[
    Optional[bool],
    typer.Option(
        "--test-mode/--task-mode",
        help="Resolve the test (solution) view or the learner (task) view.",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        help="Increase verbosity (-v debug, -vv debug with locals in tracebacks).",
        min=0,
        count=True,
    ),
]

QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Only log warnings and errors.",
    ),
]


def _verbosity(verbose: int, quiet: bool) -> Optional[int]:
    """Map -v and --quiet to a verbosity level (None keeps the configured one)."""
    if quiet:
        return 0
    if verbose:
        return min(verbose + 1, 3)
    return None


def _load(
    root: Optional[Path],
    test_mode: Optional[bool],
    config: Optional[Path],
    verbosity: Optional[int],
) -> Catalog:
    """Load configuration, set up logging and build the catalog."""
    cfg = load_config(
        config_path=config,
        examples_path=root,
        load_test_version=test_mode,
        verbose=verbosity,
    )
    setup_logging(verbosity=cfg.output.verbosity, log_file=cfg.output.log_file)

    try:
        return build_catalog(cfg)
    except CatalogConfigurationError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(2)


def _add_folder(tree: Tree, folder: Folder) -> None:
    """Add a folder's examples and subfolders to a Rich tree.

    Uses an explicit stack so deep catalogs don't hit the recursion limit.
    """
    stack: list[tuple[Tree, Folder]] = [(tree, folder)]
    while stack:
        node, current = stack.pop()
        for example in current.examples.values():
            node.add(
                f"[green]{example.name}[/green] "
                f"[dim]({len(example.files)} files, {len(example.hidden_files)} hidden)[/dim]"
            )
        for subfolder in reversed(list(current.subfolders.values())):
            label = f"[bold]{subfolder.name}/[/bold]"
            if subfolder.task_folder:
                label += " [cyan]tasks[/cyan]"
            stack.append((node.add(label), subfolder))


def _print_issues(catalog: Catalog) -> None:
    """Print a table of load problems."""
    table = Table(title="Load Problems")
    table.add_column("Kind", style="red")
    table.add_column("Url", style="cyan")
    table.add_column("Path")
    table.add_column("Message")

    for issue in catalog.issues:
        table.add_row(issue.kind.value, issue.url or "", issue.path, issue.message)

    console.print(table)


@app.command()
def tree(
    root: RootOption = None,
    test_mode: TestModeOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    quiet: QuietOption = False,
) -> None:
    """Print the folder and example hierarchy.

    Example:
        example-catalog tree --root ./examples --test-mode
    """
    catalog = _load(root, test_mode, config, _verbosity(verbose, quiet))

    mode = "test" if catalog.test_mode else "task"
    rich_tree = Tree(f"[bold]{catalog.root.url}[/bold] [dim]({mode} version)[/dim]")
    _add_folder(rich_tree, catalog.root)
    console.print(rich_tree)

    if not catalog.is_complete:
        console.print(
            f"[yellow]{len(catalog.issues)} problem(s) while loading, "
            "run 'example-catalog check' for details[/yellow]"
        )


@app.command()
def check(
    root: RootOption = None,
    test_mode: TestModeOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    quiet: QuietOption = False,
) -> None:
    """Build the catalog and report every folder, example or file that failed to load.

    Exits with status 1 when problems were found.

    Example:
        example-catalog check --root ./examples
    """
    catalog = _load(root, test_mode, config, _verbosity(verbose, quiet))
    example_count = sum(1 for _ in catalog.iter_examples())

    if catalog.is_complete:
        console.print(f"[green]All {example_count} example(s) loaded without problems[/green]")
        return

    _print_issues(catalog)
    console.print(
        f"[bold red]{len(catalog.issues)} problem(s)[/bold red], "
        f"{example_count} example(s) loaded"
    )
    sys.exit(1)


@app.command()
def show(
    example_id: Annotated[
        str,
        typer.Argument(help="Example id, e.g. '/Hello, world!/Simplest version'."),
    ],
    root: RootOption = None,
    test_mode: TestModeOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    quiet: QuietOption = False,
) -> None:
    """Show one example's files and its place in the sibling chain.

    Example:
        example-catalog show "/Getting%20started/Hello" --root ./examples
    """
    catalog = _load(root, test_mode, config, _verbosity(verbose, quiet))

    example = catalog.get_example(example_id)
    if example is None:
        console.print(f"[bold red]Error:[/bold red] No example with id '{example_id}'")
        sys.exit(1)

    folder = catalog.folder_of(example_id)
    previous = folder.previous_example(example.name)
    following = folder.next_example(example.name)

    console.print(f"[bold]{example.name}[/bold] [dim]{example.id}[/dim]")
    console.print(f"  Run configuration: {example.run_configuration_kind}")
    if example.args:
        console.print(f"  Args: {example.args}")
    console.print(f"  Previous: {previous.name if previous else '-'}")
    console.print(f"  Next: {following.name if following else '-'}")
    console.print(f"  Help page: {'yes' if example.help_html else 'no'}")

    table = Table(title="Files")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Visibility")
    table.add_column("Read-only")
    table.add_column("Lines", justify="right")

    for project_file in example.all_files:
        table.add_row(
            project_file.name,
            project_file.type.value,
            "hidden" if project_file.hidden else "visible",
            "yes" if project_file.name in example.read_only_file_names else "no",
            str(project_file.line_count),
        )
    console.print(table)

    if example.expected_output is not None:
        console.print("[bold]Expected output:[/bold]")
        console.print(example.expected_output, markup=False, highlight=False)
