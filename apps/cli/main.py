"""CLI application for nodemanifest."""

import logging
from collections.abc import Mapping
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from core.errors import ManifestError
from core.fs import LocalFileSystem
from core.models import PackageJson
from core.parse_node import PACKAGE_JSON, deserialize_package_json

console = Console()


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def format_section(title: str, values: Mapping[str, str]) -> Table:
    """Render a name -> value section as a two column table."""
    table = Table(title=title, title_justify="left")
    table.add_column("Name")
    table.add_column("Value")
    for name, value in sorted(values.items()):
        table.add_row(Text(name), Text(value))
    return table


def load_manifest(project_dir: Path, manifest: str) -> PackageJson:
    """Load the manifest, turning load failures into exit code 1."""
    try:
        return deserialize_package_json(LocalFileSystem(project_dir), manifest)
    except ManifestError as e:
        console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(1)


app = typer.Typer(
    name="nodemanifest",
    help="nodemanifest - Inspect a project's package.json without running it",
    add_completion=False,
)

ProjectDir = typer.Argument(Path("."), help="Directory containing the manifest")
ManifestName = typer.Option(
    PACKAGE_JSON,
    "--manifest",
    "-m",
    envvar="NODEMANIFEST_FILE",
    help="Manifest filename relative to the project directory",
)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="NODEMANIFEST_LOG_LEVEL", help="Log level"
    ),
) -> None:
    """nodemanifest - Inspect a project's package.json without running it."""
    configure_logging(log_level)


@app.command()
def show(project_dir: Path = ProjectDir, manifest: str = ManifestName) -> None:
    """Show what the manifest declares."""
    package_json = load_manifest(project_dir, manifest)

    console.print(f"main: {package_json.main or '-'}", markup=False)
    console.print(f"engines.node: {package_json.engines.node or '-'}", markup=False)
    if package_json.package_manager is None:
        console.print("packageManager: (not declared)", markup=False)
    else:
        console.print(f"packageManager: {package_json.package_manager}", markup=False)

    sections = [
        ("dependencies", package_json.dependencies),
        ("devDependencies", package_json.dev_dependencies),
        ("scripts", package_json.scripts),
    ]
    for title, values in sections:
        if values:
            console.print(format_section(title, values))
        else:
            console.print(f"{title}: (none)", markup=False)


@app.command()
def dep(
    name: str = typer.Argument(help="Package name to look up"),
    project_dir: Path = ProjectDir,
    manifest: str = ManifestName,
) -> None:
    """Print the declared version of a dependency."""
    package_json = load_manifest(project_dir, manifest)

    version = package_json.find_dependency(name)
    if version is None:
        console.print(f"{name} is not declared", markup=False)
        raise typer.Exit(2)  # Not declared exit code

    console.print(version, markup=False)


if __name__ == "__main__":
    app()
