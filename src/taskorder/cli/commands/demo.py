"""
Demo command: the Compile -> Test -> Deploy pipeline
"""

from typing import Optional

import typer

from taskorder.cli.commands._render import fail, render_order, resolve_output_format
from taskorder.core.dependency import DependencyGraph
from taskorder.core.errors import TaskorderError

app = typer.Typer(name="demo", help="Order the built-in Compile/Test/Deploy pipeline")


def build_demo_graph() -> DependencyGraph:
    graph = DependencyGraph()
    graph.add_tasks(["Compile", "Test", "Deploy"])
    graph.add_dependency("Test", "Compile")
    graph.add_dependency("Deploy", "Test")
    return graph


@app.command("demo")
def demo_command(
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: table, json or plain"
    ),
):
    """Register Compile, Test and Deploy, link them, and print the order."""
    try:
        fmt = resolve_output_format(output_format)
        graph = build_demo_graph()
        order = graph.execute_all()
    except TaskorderError as e:
        fail(e)

    render_order(graph, order, fmt)
