"""
Task node model

A TaskNode is a vertex in the dependency graph. It holds non-owning
references to the nodes it depends on; the DependencyGraph owns every node.
"""

from enum import StrEnum
from typing import List, Tuple

from taskorder.core.errors import InvalidArgumentError


class TaskStatus(StrEnum):
    """Per-node ordering state."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"


def require_name(name: str, field_name: str = "name") -> str:
    """Return name unchanged, or raise InvalidArgumentError if it is empty or blank."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(
            f"{field_name} cannot be empty or whitespace.",
            context={field_name: repr(name)},
        )
    return name


class TaskNode:
    """
    A named task with an ordered list of dependencies.

    Dependencies keep insertion order; that order breaks ties during
    traversal. Adding the same dependency twice is allowed and produces a
    redundant edge.
    """

    __slots__ = ("_name", "_dependencies", "_status")

    def __init__(self, name: str):
        self._name = require_name(name)
        self._dependencies: List["TaskNode"] = []
        self._status = TaskStatus.PENDING

    @property
    def name(self) -> str:
        return self._name

    @property
    def dependencies(self) -> Tuple["TaskNode", ...]:
        return tuple(self._dependencies)

    @property
    def status(self) -> TaskStatus:
        return self._status

    @property
    def executed(self) -> bool:
        return self._status is TaskStatus.DONE

    def add_dependency(self, dependency: "TaskNode") -> None:
        """
        Append a dependency edge.

        Args:
            dependency: Node that must run before this one

        Raises:
            InvalidArgumentError: If dependency is None or not a TaskNode
        """
        if dependency is None:
            raise InvalidArgumentError("dependency cannot be None.")
        if not isinstance(dependency, TaskNode):
            raise InvalidArgumentError(
                f"dependency must be a TaskNode, got {type(dependency).__name__}."
            )
        self._dependencies.append(dependency)

    def mark_executed(self) -> None:
        """Flip the node to DONE. The flag is never cleared."""
        self._status = TaskStatus.DONE

    def __repr__(self) -> str:
        deps = ", ".join(d.name for d in self._dependencies)
        return f"TaskNode(name={self._name!r}, status={self._status.value}, dependencies=[{deps}])"
