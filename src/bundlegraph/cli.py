"""CLI interface for bundlegraph using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bundlegraph import __description__, __version__
from bundlegraph.config import BundlegraphConfig, ReportFormat, load_config
from bundlegraph.graph import MermaidRenderer, build_module_graph
from bundlegraph.loader import ModuleRecordError, load_modules
from bundlegraph.validation import ModuleDependencyValidator, ValidationResult

app = typer.Typer(
    name="bundlegraph",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"bundlegraph version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """bundlegraph - Module dependency validation for app bundles."""


def _load_command_config(config: Optional[Path], verbose: bool) -> BundlegraphConfig:
    """Load configuration and set up logging for a command."""
    try:
        bundlegraph_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    level = logging.DEBUG if verbose else bundlegraph_config.logging.level.to_logging_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("bundlegraph").setLevel(level)
    return bundlegraph_config


def _load_modules_or_exit(path: Path):
    try:
        return load_modules(path)
    except (FileNotFoundError, ModuleRecordError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def validate(
    path: Annotated[
        Path,
        typer.Argument(help="Path to the JSON module records file")
    ],
    format: Annotated[
        Optional[ReportFormat],
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .bundlegraph.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Validate the module dependency graph of a bundle."""
    bundlegraph_config = _load_command_config(config, verbose)
    modules = _load_modules_or_exit(path)

    validator = ModuleDependencyValidator()
    validator.create_default_rules()
    result = validator.run(modules)

    output_format = format or bundlegraph_config.output.format
    if output_format == ReportFormat.JSON:
        # Plain print so JSON is not wrapped or highlighted
        typer.echo(jsonlib.dumps(result.to_dict(), indent=2))
    elif output_format == ReportFormat.MARKDOWN:
        _output_markdown(result)
    else:
        _output_table(result)

    raise typer.Exit(result.exit_code)


def _output_markdown(result: ValidationResult) -> None:
    typer.echo("# Module Dependency Validation")
    typer.echo(f"**Status:** {result.status.value}")
    typer.echo(f"**Exit Code:** {result.exit_code}")
    typer.echo("")

    if result.counters:
        typer.echo("## Counters")
        for key, value in result.counters.items():
            typer.echo(f"- {key}: {value}")
        typer.echo("")

    if result.issues:
        typer.echo("## Issues")
        for issue in result.issues:
            typer.echo(f"- **{issue.kind}** {issue.rule}: {issue.message}")


def _output_table(result: ValidationResult) -> None:
    status_color = "green" if result.exit_code == 0 else "red"
    console.print(f"[{status_color}]Validation Status: {result.status.value.upper()}[/{status_color}]")

    if result.counters:
        console.print("\n[blue]Counters:[/blue]")
        counter_table = Table()
        counter_table.add_column("Metric", style="cyan")
        counter_table.add_column("Count", style="white", justify="right")

        for key, value in sorted(result.counters.items()):
            counter_table.add_row(key.replace("_", " ").title(), str(value))

        console.print(counter_table)

    if result.issues:
        console.print("\n[blue]Issues Found:[/blue]")
        issues_table = Table()
        issues_table.add_column("Rule", style="cyan")
        issues_table.add_column("Kind", style="red")
        issues_table.add_column("Message", style="white", overflow="fold")

        for issue in result.issues:
            issues_table.add_row(issue.rule, issue.kind, escape(issue.message))

        console.print(issues_table)
    else:
        console.print("\n[green]No issues found![/green]")


@app.command()
def graph(
    path: Annotated[
        Path,
        typer.Argument(help="Path to the JSON module records file")
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the diagram to this file instead of stdout")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .bundlegraph.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Render the module dependency graph as a Mermaid diagram."""
    bundlegraph_config = _load_command_config(config, verbose)
    modules = _load_modules_or_exit(path)

    renderer = MermaidRenderer(
        show_implicit_edges=bundlegraph_config.graph.show_implicit_edges,
        show_versions=bundlegraph_config.graph.show_versions,
    )
    diagram = renderer.render(build_module_graph(modules), title=path.stem)

    if output is None:
        typer.echo(diagram)
        return

    if output.suffix == "":
        output = output.with_suffix(renderer.get_file_extension())
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(diagram, encoding="utf-8")
    console.print(f"[green]Diagram written:[/green] {output}")


if __name__ == "__main__":
    app()
