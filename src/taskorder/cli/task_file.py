"""
Task definition files for the CLI.

A task file is a JSON object:

    {
        "tasks": ["Compile", "Test", "Deploy"],
        "dependencies": {
            "Test": ["Compile"],
            "Deploy": "Test"
        }
    }

"tasks" is optional. Names that only appear under "dependencies" are
registered after the listed tasks, in the order they are first seen.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from taskorder.core.dependency import DependencyGraph
from taskorder.core.errors import TaskFileError
from taskorder.logger import get_logger

logger = get_logger(__name__)


def _as_name_list(value: Any, where: str) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise TaskFileError(f"{where} must be a task name or a list of task names")


def build_graph(data: Dict[str, Any]) -> DependencyGraph:
    """
    Build a DependencyGraph from a parsed task definition.

    Raises:
        TaskFileError: If the definition has the wrong shape
        InvalidArgumentError: If a task name is empty or blank
    """
    if not isinstance(data, dict):
        raise TaskFileError("Task file must contain a JSON object")

    unknown = set(data) - {"tasks", "dependencies"}
    if unknown:
        raise TaskFileError(f"Unknown keys in task file: {', '.join(sorted(unknown))}")

    tasks = _as_name_list(data.get("tasks", []), "'tasks'")
    dependencies = data.get("dependencies", {})
    if not isinstance(dependencies, dict):
        raise TaskFileError("'dependencies' must be an object mapping task names to dependencies")

    edges = {
        task: _as_name_list(deps, f"dependencies of '{task}'")
        for task, deps in dependencies.items()
    }

    graph = DependencyGraph()
    graph.add_tasks(tasks)
    for task, deps in edges.items():
        graph.add_task(task)
        graph.add_tasks(deps)

    for task, deps in edges.items():
        graph.add_dependencies(task, deps)

    logger.debug("Built graph with %d tasks from task definition", len(graph))
    return graph


def load_task_file(path: Path) -> DependencyGraph:
    """
    Read a JSON task file into a DependencyGraph.

    Raises:
        TaskFileError: If the file cannot be read, is not UTF-8 JSON, or has the wrong shape
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise TaskFileError(
            f"Task file not found: {path}",
            what=f"Task file not found: {path}",
            how_to_fix="Check the path passed to the command",
        )
    except UnicodeDecodeError as e:
        raise TaskFileError(
            f"Task file is not valid UTF-8: {path}",
            what=f"Task file is not valid UTF-8: {path}",
            why=str(e),
            how_to_fix="Save the task file with UTF-8 encoding",
        ) from e
    except OSError as e:
        raise TaskFileError(
            f"Cannot read task file {path}: {e}",
            what=f"Cannot read task file {path}",
            why=e.strerror or str(e),
            how_to_fix="Pass the path of a readable JSON file",
        ) from e
    except json.JSONDecodeError as e:
        raise TaskFileError(
            f"Invalid JSON in {path}: {e}",
            what=f"Invalid JSON in {path}",
            why=str(e),
            context={"line": e.lineno, "column": e.colno},
        ) from e

    return build_graph(data)
