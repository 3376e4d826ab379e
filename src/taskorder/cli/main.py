"""
CLI main entry point for taskorder
"""

import importlib
import sys
from pathlib import Path
from typing import Any, Optional

import click
import typer.main

from taskorder.core.config_manager import get_config_manager
from taskorder.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _load_env_file() -> None:
    """
    Load .env file from appropriate location using ConfigManager.
    """
    possible_paths = [Path.cwd() / ".env"]
    if sys.argv:
        main_script = Path(sys.argv[0]).resolve()
        if main_script.is_file():
            possible_paths.append(main_script.parent / ".env")

    get_config_manager().load_env_files(possible_paths, override=False)


class LazyGroup(click.Group):
    """A Click Group that lazy-loads command modules."""

    def __init__(
        self,
        name: Optional[str] = None,
        commands: Optional[dict[str, click.Command]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name=name, commands=commands or {}, **kwargs)
        self._lazy_commands = {
            "run": ("taskorder.cli.commands.run", "app", "Resolve a task file into an execution order"),
            "validate": ("taskorder.cli.commands.validate", "app", "Check a task file for circular dependencies"),
            "demo": ("taskorder.cli.commands.demo", "app", "Order the built-in Compile/Test/Deploy pipeline"),
            "config": ("taskorder.cli.commands.config", "app", "Manage CLI configuration"),
        }

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(set(list(self.commands) + list(self._lazy_commands)))

    def format_commands(
        self, ctx: click.Context, formatter: click.HelpFormatter
    ) -> None:
        """Format commands for help without loading them."""
        commands = []
        for cmd_name in self.list_commands(ctx):
            if cmd_name in self._lazy_commands:
                _, _, help_text = self._lazy_commands[cmd_name]
                commands.append((cmd_name, help_text))
            elif cmd_name in self.commands:
                cmd = self.commands[cmd_name]
                commands.append((cmd_name, cmd.get_short_help_str(formatter.width)))

        if commands:
            with formatter.section("Commands"):
                formatter.write_dl(commands)

    def get_command(self, ctx: click.Context, name: str) -> Optional[click.Command]:
        """Get command, lazily loading if needed."""
        if name in self.commands:
            return self.commands[name]

        if name not in self._lazy_commands:
            return None

        module_path, attr_name, _ = self._lazy_commands[name]
        try:
            module = importlib.import_module(module_path)
            typer_app = getattr(module, attr_name)
        except (ImportError, AttributeError) as e:
            logger.error(f"Failed to load command {name}: {e}")
            return None

        click_cmd = typer.main.get_command(typer_app)
        self.commands[name] = click_cmd
        return click_cmd


@click.group(
    cls=LazyGroup,
    name="taskorder",
    help="Resolve task dependencies into a single execution order",
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override TASKORDER_LOG_LEVEL for this invocation",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Main CLI entry point."""
    _load_env_file()
    if log_level:
        configure_logging(log_level)


@cli.command()
def version() -> None:
    """Show version information."""
    from taskorder import __version__

    click.echo(f"taskorder version {__version__}")


def main() -> None:
    """Entry point for console script."""
    cli()


app = cli

if __name__ == "__main__":
    main()
