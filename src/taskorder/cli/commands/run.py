"""
Run command: resolve a task file into an execution order
"""

from pathlib import Path
from typing import List, Optional

import typer

from taskorder.cli.commands._render import fail, render_order, resolve_output_format, restrict_order
from taskorder.cli.task_file import load_task_file
from taskorder.core.errors import TaskorderError
from taskorder.logger import get_logger

logger = get_logger(__name__)

app = typer.Typer(name="run", help="Resolve a task file into an execution order")


@app.command("run")
def run_command(
    task_file: Path = typer.Argument(..., help="JSON task file"),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: table, json or plain"
    ),
    tasks: Optional[List[str]] = typer.Option(
        None, "--task", "-t", help="Only show these tasks and what they depend on"
    ),
):
    """
    Resolve every task in TASK_FILE into one execution order.

    Examples:
        taskorder run pipeline.json
        taskorder run pipeline.json -f json
        taskorder run pipeline.json --task Deploy
    """
    try:
        fmt = resolve_output_format(output_format)
        graph = load_task_file(task_file)
        order = graph.execute_all()
        if tasks:
            order = restrict_order(graph, order, tasks)
    except TaskorderError as e:
        logger.debug("run failed for %s: %s", task_file, e)
        fail(e)

    render_order(graph, order, fmt)
