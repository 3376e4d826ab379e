"""
CLI configuration management command.

Provides set, get, unset, list and path for the persistent CLI config.
"""

import json

import click
import typer
from rich.console import Console
from rich.table import Table

from taskorder.cli.cli_config import (
    get_config_file_path,
    get_config_value,
    list_config_values,
    set_config_value,
)
from taskorder.core.config_manager import OUTPUT_FORMATS
from taskorder.logger import get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="config",
    help="Manage CLI configuration",
    no_args_is_help=True,
)

# Aliases accepted on the command line
ALIAS_MAP = {
    "format": "output_format",
    "output-format": "output_format",
}


def _resolve_key(key: str) -> str:
    return ALIAS_MAP.get(key, key)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Configuration value"),
):
    """
    Set a configuration value.

    Examples:
        taskorder config set output_format json
        taskorder config set format plain
    """
    actual_key = _resolve_key(key)
    if actual_key == "output_format" and value.lower() not in OUTPUT_FORMATS:
        typer.echo(
            f"❌ Invalid output_format '{value}'. Choose one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise click.exceptions.Exit(1)

    try:
        set_config_value(actual_key, value)
    except OSError as e:
        typer.echo(f"❌ Error setting configuration: {e}", err=True)
        raise click.exceptions.Exit(1)

    typer.echo(f"✅ Configuration '{actual_key}' set successfully")
    typer.echo(f"   Value: {value}")
    typer.echo(f"   Location: {get_config_file_path()}")


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key"),
):
    """Get a configuration value."""
    actual_key = _resolve_key(key)
    value = get_config_value(actual_key)

    if value is None:
        typer.echo(f"⚠️  Configuration '{actual_key}' not found")
        raise click.exceptions.Exit(1)

    typer.echo(f"{actual_key}={value}")


@app.command("list")
def list_config(
    format: str = typer.Option(
        "table", "--format", "-f",
        help="Output format: table or json"
    ),
):
    """
    List all configuration values.

    Examples:
        taskorder config list
        taskorder config list -f json
    """
    config = list_config_values()

    if not config:
        typer.echo("No configuration found.")
        typer.echo(f"Configuration file: {get_config_file_path()}")
        return

    if format == "json":
        typer.echo(json.dumps(config, indent=2))
        return

    console = Console()
    table = Table(title="CLI Configuration")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    for key, value in sorted(config.items()):
        table.add_row(key, str(value))

    console.print(table)
    console.print(f"\n📁 Location: {get_config_file_path()}")


@app.command("unset")
def unset_config(
    key: str = typer.Argument(..., help="Configuration key to delete"),
    confirm: bool = typer.Option(
        False, "--yes", "-y", help="Skip confirmation"
    ),
):
    """Delete a configuration value."""
    actual_key = _resolve_key(key)

    if get_config_value(actual_key) is None:
        typer.echo(f"⚠️  Configuration '{actual_key}' not found")
        raise click.exceptions.Exit(1)

    if not confirm and not typer.confirm(f"Delete '{actual_key}'?"):
        typer.echo("Cancelled")
        return

    try:
        set_config_value(actual_key, None)
    except OSError as e:
        typer.echo(f"❌ Error deleting configuration: {e}", err=True)
        raise click.exceptions.Exit(1)

    typer.echo(f"✅ Configuration '{actual_key}' deleted successfully")


@app.command("path")
def config_path():
    """Show where the configuration file lives."""
    typer.echo(str(get_config_file_path()))
