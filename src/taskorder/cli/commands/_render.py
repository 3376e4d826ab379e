"""
Shared output helpers for CLI commands
"""

import json
from typing import Iterable, List, NoReturn, Optional

import click
import typer
from rich.console import Console
from rich.table import Table

from taskorder.cli.cli_config import get_config_value
from taskorder.core.config_manager import OUTPUT_FORMATS, get_config_manager
from taskorder.core.dependency import DependencyGraph
from taskorder.core.errors import ConfigurationError, TaskorderError

console = Console()


def resolve_output_format(requested: Optional[str]) -> str:
    """
    Pick the output format: --format, then config.json, then the environment.

    Raises:
        ConfigurationError: If the chosen format is unknown
    """
    fmt = requested or get_config_value("output_format") or get_config_manager().get_default_output_format()
    fmt = str(fmt).lower()
    if fmt not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"Unknown output format '{fmt}'. Choose one of: {', '.join(OUTPUT_FORMATS)}"
        )
    return fmt


def render_order(graph: DependencyGraph, order: List[str], fmt: str) -> None:
    if fmt == "json":
        typer.echo(json.dumps(order))
    elif fmt == "plain":
        typer.echo("Execution Order: " + ", ".join(order))
    else:
        table = Table(title=f"Execution Order ({len(order)} tasks)")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Task", style="green")
        table.add_column("Depends on", style="white")
        for index, name in enumerate(order, start=1):
            deps = list(dict.fromkeys(graph.dependencies_of(name)))
            table.add_row(str(index), name, ", ".join(deps) or "-")
        console.print(table)


def fail(error: TaskorderError) -> NoReturn:
    """Print a taskorder error to stderr and exit with status 1."""
    typer.echo(f"❌ Error: {error}", err=True)
    raise click.exceptions.Exit(1)


def restrict_order(graph: DependencyGraph, order: List[str], targets: Iterable[str]) -> List[str]:
    """Keep only the targets and their transitive dependencies, in global order."""
    wanted = set()
    pending = [graph.get_task(name).name for name in targets]
    while pending:
        name = pending.pop()
        if name in wanted:
            continue
        wanted.add(name)
        pending.extend(graph.dependencies_of(name))
    return [name for name in order if name in wanted]
