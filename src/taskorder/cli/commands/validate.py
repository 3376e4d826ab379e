"""
Validate command: report circular dependencies without ordering
"""

from pathlib import Path

import typer

from taskorder.cli.commands._render import fail
from taskorder.cli.task_file import load_task_file
from taskorder.core.dependency import detect_circular_dependencies
from taskorder.core.errors import TaskorderError

app = typer.Typer(name="validate", help="Check a task file for circular dependencies")


@app.command("validate")
def validate_command(
    task_file: Path = typer.Argument(..., help="JSON task file"),
):
    """Check TASK_FILE and print the full cycle path if there is one."""
    try:
        graph = load_task_file(task_file)
        detect_circular_dependencies(graph)
    except TaskorderError as e:
        fail(e)

    edges = sum(len(node.dependencies) for node in graph)
    typer.echo(f"✅ {task_file}: {len(graph)} tasks, {edges} dependencies, no cycles")
